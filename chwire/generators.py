"""Sample value sets and value generators for exercising columns and round trips."""

from __future__ import annotations

import random
import struct
import sys
from ipaddress import IPv4Address, IPv6Address
from typing import Any, Callable, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

_UINT64_MOD = 1 << 64
_SIZE_MAX = _UINT64_MOD - 1

_LONG_STRING = "long string to test how those are handled. Here goes more text. " * 19

_DATES = [
    0, 1, 2, 4, 8, 16, 32, 64, 128, 256, 512, 1024, 2048, 4096, 8192, 16384, 32768, 65536 - 1,
]

_DECIMAL_BASES = [
    0, 1, 2, 4, 8, 16, 32, 64, 128, 256, 512, 1024, 2048, 4096, 8192, 16384, 32768, 65536 - 1,
]


def _to_int64(value: int) -> int:
    value %= _UINT64_MOD
    return value - _UINT64_MOD if value >= 1 << 63 else value


def _make_int128(high: int, low: int) -> int:
    """Build a signed 128-bit value from its high and low 64-bit halves."""
    raw = ((high % _UINT64_MOD) << 64) | (low % _UINT64_MOD)
    return raw - (1 << 128) if raw >= 1 << 127 else raw


def make_numbers() -> List[int]:
    """A short list of small unsigned numbers."""
    return [1, 2, 3, 7, 11, 13, 17, 19, 23, 29, 31]


def make_int_numbers(bits: int, is_signed: bool) -> List[int]:
    """Values spanning the whole range of an integer type in 32 steps."""
    if bits < 8:
        raise ValueError("integer width must be at least 8 bits")
    if is_signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    step = 1 << (bits - 5)
    result = list(range(low, high - step + 1, step))
    result.append(high)
    return result


_FLOAT_LIMITS = {
    # kind: (min normal, max, epsilon, max_exponent, min_exponent, min_exponent10)
    "float32": (1.1754943508222875e-38, 3.4028234663852886e38, 1.1920928955078125e-07, 128, -125, -37),
    "float64": (
        sys.float_info.min,
        sys.float_info.max,
        sys.float_info.epsilon,
        sys.float_info.max_exp,
        sys.float_info.min_exp,
        sys.float_info.min_10_exp,
    ),
}


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def make_float_numbers(kind: str = "float64") -> List[float]:
    """Special and boundary values plus values covering most of the exponent range."""
    try:
        min_normal, max_value, epsilon, max_exp, min_exp, min_exp10 = _FLOAT_LIMITS[kind]
    except KeyError:
        raise ValueError(f"unknown floating point kind: {kind!r}") from None
    narrow: Callable[[float], float] = _to_float32 if kind == "float32" else float

    result = [
        min_normal,
        max_value,
        float("nan"),
        float("inf"),
        float("-inf"),
        0.0,
        0.0 + epsilon,
        0.0 - epsilon,
    ]

    total_steps = 100
    step = 10.0 ** ((max_exp - min_exp) // total_steps)
    min_value = 10.0 ** min_exp10

    current = max_value
    while current >= min_value * step:
        result.append(current)
        result.append(narrow(-1 * current))
        current = narrow(current / step)
    result.append(narrow(min_value))
    result.append(narrow(-min_value))
    return result


def make_bools() -> List[int]:
    """A mix of zeros and ones."""
    return [1, 0, 0, 0, 1, 1, 0, 1, 1, 1, 0]


def make_strings() -> List[str]:
    """Short strings and one long one."""
    return ["a", "ab", "abc", "abcd", _LONG_STRING]


def make_fixed_strings(size: int) -> List[str]:
    """The strings of :func:`make_strings` cut or NUL-padded to ``size``."""
    return [value[:size].ljust(size, "\0") for value in make_strings()]


def make_uuids() -> List[Tuple[int, int]]:
    """UUIDs as pairs of unsigned 64-bit halves."""
    return [
        (0, 0),
        (0xBB6A8C699AB2414C, 0x86697B7FD27F0825),
        (0x84B9F24BC26B49C6, 0xA03B4AB723341951),
        (0x3507213C178649F9, 0x9FAF035D662F60AE),
    ]


def make_datetime64s(scale: int, count: int = 200) -> List[int]:
    """Ticks roughly two hundred years either side of the epoch at the given scale."""
    multiplier = 10 ** scale
    year = 86400 * 365 * multiplier
    return generate_vector(
        count,
        lambda i: _to_int64((i - 100) * year * 2 + (i * 10) * multiplier + i),
    )


def make_dates(seconds: bool = False) -> List[int]:
    """Day numbers, or the same days as seconds since the epoch."""
    if seconds:
        return [day * 86400 for day in _DATES]
    return list(_DATES)


def make_dates32() -> List[int]:
    """Day numbers followed by their negations, for dates before the epoch."""
    days = make_dates()
    return days + [-day for day in days]


def make_datetimes() -> List[int]:
    """Powers of two covering the 32-bit DateTime range."""
    return [0] + [1 << power for power in range(32)] + [4294967296 - 1]


def make_int128s() -> List[int]:
    """Signed 128-bit values at the boundaries of the halves."""
    return [
        _make_int128(0xFFFFFFFFFFFFFFFF, 0xFFFFFFFFFFFFFFFF),
        _make_int128(0, 0xFFFFFFFFFFFFFFFF),
        _make_int128(0xFFFFFFFFFFFFFFFF, 0),
        _make_int128(0x8000000000000000, 0),
        0,
    ]


def make_decimals(precision: int, scale: int) -> List[int]:
    """Raw decimal values with a non-zero fractional part at the given scale."""
    del precision  # the value set does not depend on it
    multiplier = 10 ** scale
    fraction = 12345678910 % multiplier
    return [(value * multiplier + fraction) % _UINT64_MOD for value in _DECIMAL_BASES]


def foo_bar(index: int) -> str:
    """``Foo`` for multiples of 3, ``Bar`` for multiples of 5, else the number."""
    result = ""
    if index % 3 == 0:
        result += "Foo"
    if index % 5 == 0:
        result += "Bar"
    return result or str(index)


def make_ipv4(value: int) -> IPv4Address:
    """An address whose in-memory bytes are those of ``value`` in little-endian order."""
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"IPv4 value out of range: {value}")
    return IPv4Address(value.to_bytes(4, "little"))


def make_ipv6(*args: int) -> IPv6Address:
    """An address from all 16 bytes, or from its last 6 bytes with the rest zero."""
    if len(args) == 16:
        octets = args
    elif len(args) == 6:
        octets = (0,) * 10 + args
    else:
        raise ValueError(f"expected 16 or 6 bytes, got {len(args)}")
    if any(not 0 <= octet <= 0xFF for octet in octets):
        raise ValueError("IPv6 bytes must be in range 0..255")
    return IPv6Address(bytes(octets))


def make_ipv4s() -> List[IPv4Address]:
    """A handful of IPv4 addresses."""
    return [
        make_ipv4(0x12345678),
        make_ipv4(0x0100007F),
        make_ipv4(3585395774),
        make_ipv4(0),
        make_ipv4(0x12345678),
    ]


def make_ipv6s() -> List[IPv6Address]:
    """A handful of IPv6 addresses."""
    return [
        make_ipv6(0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
        make_ipv6(0, 0, 0, 0, 0, 1),
        make_ipv6(0, 0, 0, 0, 0, 0),
        make_ipv6(0xFF, 0xFF, 204, 152, 189, 116),
    ]


def make_arrays(generator: Callable[[], Sequence[T]]) -> List[List[T]]:
    """Prefixes of the generated values, of length 0 up to one less than their count."""
    values = list(generator())
    return [values[:length] for length in range(len(values))]


def generate_vector(count: int, generator: Callable[[int], T]) -> List[T]:
    """Call ``generator`` with 0 .. count-1 and collect the results."""
    return [generator(index) for index in range(count)]


def same_value_generator(value: T) -> Callable[[int], T]:
    """A generator that always returns ``value``."""
    return lambda _index: value


def alternate_generators(
    first: Callable[[int], Any], second: Callable[[int], Any]
) -> Callable[[int], Any]:
    """Interleave two generators: even positions from ``first``, odd from ``second``."""

    def generate(index: int) -> Any:
        half = index // 2
        return first(half) if index % 2 == 0 else second(half)

    return generate


def concat_sequences(first: Sequence[T], second: Sequence[T]) -> List[T]:
    """One list holding the items of both sequences in order."""
    return [*first, *second]


class RandomGenerator:
    """Seeded uniform random values in ``[low, high]``; floats when a bound is a float."""

    def __init__(self, seed: Any = 0, low: Optional[float] = None, high: Optional[float] = None) -> None:
        self._low = 0 if low is None else low
        self._high = _SIZE_MAX if high is None else high
        if self._low > self._high:
            raise ValueError("lower bound exceeds upper bound")
        self._real = any(isinstance(bound, float) for bound in (seed, self._low, self._high))
        self._random = random.Random(seed)

    def __call__(self, position: Any = None) -> Any:
        if self._real:
            return self._random.uniform(self._low, self._high)
        return self._random.randint(int(self._low), int(self._high))


class FromVectorGenerator:
    """Picks items from a fixed sequence at random, with a fixed seed."""

    def __init__(self, data: Sequence[T]) -> None:
        self.data = list(data)
        if not self.data:
            raise ValueError("can't generate values from empty vector")
        self._random = RandomGenerator(0, 0, len(self.data) - 1)

    def __call__(self, position: int) -> Any:
        return self.data[self._random(position)]