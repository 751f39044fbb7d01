# chwire

Constants, exception types and test helpers for working with the ClickHouse
native protocol from Python. The package has no dependencies outside the
standard library.

## Modules

- `chwire.error_codes`: `ErrorCode`, an `IntEnum` of the numeric error codes
  a server reports in its exceptions (for example `ErrorCode.TABLE_ALREADY_EXISTS == 57`).
- `chwire.exceptions`: the exception hierarchy. `Error` derives from
  `RuntimeError`; `ValidationError`, `ProtocolError`, `UnimplementedError`,
  `InternalAssertionError`, `OpenSSLError` and `CompressionError` derive from
  `Error`. `ServerErrorInfo` is a dataclass holding `code`, `name`,
  `display_text`, `stack_trace` and an optional `nested` info.
  `ServerException` wraps a `ServerErrorInfo`; it exposes `code` and
  `exception`, and its string form is the display text. `ServerError` is an
  alias of `ServerException`.
- `chwire.protocol`: packet type codes `ServerCode` and `ClientCode`, plus
  `CompressionState` and `Stage`, all as `IntEnum`s.
- `chwire.version`: `MAJOR`, `MINOR`, `PATCH`, `BUILD`, `VERSION`,
  `version_string()` (`"2.5.1"`) and `version_code(major, minor, patch, build)`,
  which packs the components two decimal digits each.
- `chwire.comparison`: `compare_recursive(left, right)` deep-compares values
  and nested containers (strings are compared as values) and treats NaN as
  equal to NaN. It returns a `ComparisonResult` that is truthy on success and
  carries a `message` explaining a mismatch. `compare_containers_recursive`
  and `is_container` are also available.
- `chwire.utils`: `get_env_or_default(name, default, convert)`,
  `version_number(major, minor, patch, revision)`, `uuid_to_string(uuid)` for a
  UUID given as two unsigned 64-bit halves, and the formatting helpers
  `format_container`, `format_optional`, `format_pair` and `format_duration`.
- `chwire.generators`: deterministic sample values for tests
  (`make_numbers`, `make_int_numbers`, `make_float_numbers`, `make_bools`,
  `make_strings`, `make_fixed_strings`, `make_uuids`, `make_datetime64s`,
  `make_dates`, `make_dates32`, `make_datetimes`, `make_int128s`,
  `make_decimals`, `make_ipv4`, `make_ipv6`, `make_ipv4s`, `make_ipv6s`,
  `make_arrays`, `foo_bar`) and generator combinators (`generate_vector`,
  `same_value_generator`, `alternate_generators`, `concat_sequences`,
  `RandomGenerator`, `FromVectorGenerator`).
- `chwire.tcp_server`: `LocalTcpServer`, a listener on `127.0.0.1` that
  accepts connections into its backlog but never serves them. It works as a
  context manager; with port `0` the assigned port is stored in `port`.

## Examples

```python
from chwire.error_codes import ErrorCode
from chwire.exceptions import ServerErrorInfo, ServerException

info = ServerErrorInfo(
    code=ErrorCode.TABLE_ALREADY_EXISTS,
    name="DB::Exception",
    display_text="Table already exists",
)
try:
    raise ServerException(info)
except ServerException as exc:
    assert exc.code == ErrorCode.TABLE_ALREADY_EXISTS
    print(exc)  # Table already exists
```

```python
from chwire.comparison import compare_recursive

result = compare_recursive([[1, 2], [3]], [[1, 2], [4]])
if not result:
    print(result.message)
```

```python
from chwire.utils import uuid_to_string

uuid_to_string((0x0102030405060708, 0x090A0B0C0D0E0F10))
# '01020304-0506-0708-090a-0b0c0d0e0f10'
```

```python
from chwire.tcp_server import LocalTcpServer

with LocalTcpServer(0) as server:
    print(server.port)  # connect to 127.0.0.1 on this port
```

## What the package does not do

There is no client here: the package does not open connections to a server,
send queries, encode or decode data blocks, compress data or speak TLS. It
provides the protocol's constants, its error types and helpers for writing
tests around such a client.

## Tests

The test suite uses pytest, which the `test` extra installs.