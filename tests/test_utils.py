import uuid as std_uuid
from fractions import Fraction

import pytest

from chwire.utils import (
    format_container,
    format_duration,
    format_optional,
    format_pair,
    get_env_or_default,
    uuid_to_string,
    version_number,
)


def test_uuid_to_string_source_case():
    value = (0x0102030405060708, 0x090A0B0C0D0E0F10)
    assert uuid_to_string(value) == "01020304-0506-0708-090a-0b0c0d0e0f10"


@pytest.mark.parametrize(
    "value",
    [
        (0, 0),
        (0xBB6A8C699AB2414C, 0x86697B7FD27F0825),
        (0x84B9F24BC26B49C6, 0xA03B4AB723341951),
        ((1 << 64) - 1, (1 << 64) - 1),
    ],
)
def test_uuid_to_string_matches_standard_form(value):
    first, second = value
    expected = str(std_uuid.UUID(int=(first << 64) | second))
    assert uuid_to_string(value) == expected
    assert len(uuid_to_string(value)) == 36


@pytest.mark.parametrize("value", [(-1, 0), (0, 1 << 64)])
def test_uuid_to_string_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        uuid_to_string(value)


def test_version_number_defaults():
    assert version_number(21, 3) == version_number(21, 3, 0, 0)


def test_version_number_ordering():
    assert version_number(1, 2) < version_number(1, 3) < version_number(2, 0)
    assert version_number(0, 0, 1, 0) > version_number(0, 0, 0, 99999999)
    assert version_number(0, 1, 0, 0) > version_number(0, 0, 9999, 99999999)


def test_version_number_revision_is_additive():
    assert version_number(1, 2, 3, 4) - version_number(1, 2, 3, 0) == 4


def test_get_env_or_default_reads_variable(monkeypatch):
    monkeypatch.setenv("CHWIRE_TEST_HOST", "example.com")
    assert get_env_or_default("CHWIRE_TEST_HOST", "localhost") == "example.com"


def test_get_env_or_default_uses_default(monkeypatch):
    monkeypatch.delenv("CHWIRE_TEST_HOST", raising=False)
    assert get_env_or_default("CHWIRE_TEST_HOST", "localhost") == "localhost"


def test_get_env_or_default_converts(monkeypatch):
    monkeypatch.delenv("CHWIRE_TEST_PORT", raising=False)
    assert get_env_or_default("CHWIRE_TEST_PORT", "9000", int) == 9000
    monkeypatch.setenv("CHWIRE_TEST_PORT", "9440")
    assert get_env_or_default("CHWIRE_TEST_PORT", "9000", int) == 9440


def test_get_env_or_default_missing_raises(monkeypatch):
    monkeypatch.delenv("CHWIRE_TEST_MISSING", raising=False)
    with pytest.raises(RuntimeError, match="Environment var 'CHWIRE_TEST_MISSING'"):
        get_env_or_default("CHWIRE_TEST_MISSING")


def test_format_container_simple():
    assert format_container([1, 2, 3]) == "[1, 2, 3] (3 items)"


def test_format_container_quotes_strings():
    text = format_container(["a", "ab"])
    assert '"a"' in text and '"ab"' in text
    assert text.endswith(f"({len(['a', 'ab'])} items)")


def test_format_container_nested():
    inner = [4, 5]
    text = format_container([inner])
    assert format_container(inner) in text
    assert text.startswith("[[")


def test_format_container_empty_has_count():
    assert format_container([]).startswith("[]")
    assert format_container([]).endswith(f"({len([])} items)")


def test_format_optional():
    assert format_optional(None) == "NULL"
    assert format_optional(7) == "7"


def test_format_pair():
    assert format_pair((1, 2)) == "{ 1, 2 }"


def test_format_duration_millis():
    assert format_duration(5, Fraction(1, 1000)) == "5ms"


@pytest.mark.parametrize(
    "unit, prefix",
    [
        (Fraction(1, 1_000_000_000), "n"),
        (Fraction(1, 1_000_000), "u"),
        (Fraction(1, 100), "c"),
        (Fraction(1, 10), "d"),
        (1, ""),
        (0.001, "m"),
        (Fraction(60), "?"),
    ],
)
def test_format_duration_prefixes(unit, prefix):
    assert format_duration(3, unit) == f"3{prefix}s"