import math
import struct
from ipaddress import IPv4Address, IPv6Address

import pytest

from chwire.generators import (
    FromVectorGenerator,
    RandomGenerator,
    alternate_generators,
    concat_sequences,
    foo_bar,
    generate_vector,
    make_arrays,
    make_bools,
    make_dates,
    make_dates32,
    make_datetime64s,
    make_datetimes,
    make_decimals,
    make_fixed_strings,
    make_float_numbers,
    make_int128s,
    make_int_numbers,
    make_ipv4,
    make_ipv4s,
    make_ipv6,
    make_ipv6s,
    make_numbers,
    make_strings,
    make_uuids,
    same_value_generator,
)


def test_make_numbers():
    assert make_numbers() == [1, 2, 3, 7, 11, 13, 17, 19, 23, 29, 31]


def test_make_bools():
    assert make_bools() == [1, 0, 0, 0, 1, 1, 0, 1, 1, 1, 0]


@pytest.mark.parametrize("bits", [8, 16, 32, 64])
@pytest.mark.parametrize("is_signed", [True, False])
def test_make_int_numbers_spans_range(bits, is_signed):
    values = make_int_numbers(bits, is_signed)
    low = -(1 << (bits - 1)) if is_signed else 0
    high = (1 << (bits - 1)) - 1 if is_signed else (1 << bits) - 1
    assert values[0] == low
    assert values[-1] == high
    assert len(values) == 32
    assert values == sorted(set(values))


def test_make_float64_specials():
    values = make_float_numbers("float64")
    assert values[1] == pytest.approx(1.7976931348623157e308)
    assert math.isnan(values[2])
    assert values[3] == math.inf
    assert values[4] == -math.inf
    assert values[5] == 0.0
    assert values[6] == -values[7]


def test_make_float32_values_are_representable():
    for value in make_float_numbers("float32"):
        if math.isnan(value):
            continue
        assert struct.unpack("<f", struct.pack("<f", value))[0] == value


def test_make_float_numbers_has_negated_pairs():
    values = make_float_numbers("float64")
    assert values[-2] == -values[-1]
    assert values[-2] > 0


def test_make_float_numbers_unknown_kind():
    with pytest.raises(ValueError):
        make_float_numbers("float16")


def test_make_strings():
    values = make_strings()
    assert values[:4] == ["a", "ab", "abc", "abcd"]
    assert values[4].startswith("long string to test how those are handled. Here goes more text. ")
    assert len(values) == 5


@pytest.mark.parametrize("size", [0, 2, 10])
def test_make_fixed_strings(size):
    fixed = make_fixed_strings(size)
    assert all(len(value) == size for value in fixed)
    for original, value in zip(make_strings(), fixed):
        assert value.rstrip("\0") == original[:size].rstrip("\0")


def test_make_uuids():
    assert make_uuids()[1] == (0xBB6A8C699AB2414C, 0x86697B7FD27F0825)
    assert make_uuids()[0] == (0, 0)


def test_make_datetime64s():
    values = make_datetime64s(3)
    assert len(values) == 200
    assert values[0] < 0 < values[150]
    assert values == sorted(values)
    assert len(make_datetime64s(0, 10)) == 10


def test_make_dates():
    days = make_dates()
    assert days[-1] == 65536 - 1
    assert make_dates(True) == [day * 86400 for day in days]


def test_make_dates32():
    values = make_dates32()
    half = len(make_dates())
    assert len(values) == 2 * half
    assert values[half:] == [-day for day in values[:half]]


def test_make_datetimes():
    values = make_datetimes()
    assert values[-1] == 4294967296 - 1
    assert values[0] == 0
    assert values == sorted(values)


def test_make_int128s():
    values = make_int128s()
    assert values[0] == -1
    assert values[1] == 0xFFFFFFFFFFFFFFFF
    assert -(1 << 127) in values
    assert all(-(1 << 127) <= v < (1 << 127) for v in values)


def test_make_decimals_scale_zero():
    assert make_decimals(9, 0) == [
        0, 1, 2, 4, 8, 16, 32, 64, 128, 256, 512, 1024, 2048, 4096, 8192, 16384, 32768, 65536 - 1,
    ]


def test_make_decimals_fraction():
    values = make_decimals(18, 3)
    assert all(value % 1000 == 12345678910 % 1000 for value in values)
    assert len(values) == len(make_decimals(9, 0))


@pytest.mark.parametrize(
    "index, expected", [(0, "FooBar"), (3, "Foo"), (5, "Bar"), (15, "FooBar")]
)
def test_foo_bar(index, expected):
    assert foo_bar(index) == expected


def test_foo_bar_plain_number():
    assert foo_bar(7) == str(7)


def test_make_ipv4_native_order():
    assert make_ipv4(0x0100007F) == IPv4Address("127.0.0.1")
    assert make_ipv4(0) == IPv4Address("0.0.0.0")
    with pytest.raises(ValueError):
        make_ipv4(1 << 32)


def test_make_ipv6():
    assert make_ipv6(0, 0, 0, 0, 0, 1) == IPv6Address("::1")
    assert make_ipv6(0xFF, 0xFF, 204, 152, 189, 116) == IPv6Address("::ffff:204.152.189.116")
    assert make_ipv6(*range(16)) == IPv6Address("1:203:405:607:809:a0b:c0d:e0f")


def test_make_ipv6_errors():
    with pytest.raises(ValueError):
        make_ipv6(1, 2, 3)
    with pytest.raises(ValueError):
        make_ipv6(0, 0, 0, 0, 0, 256)


def test_address_lists():
    assert make_ipv4s()[1] == IPv4Address("127.0.0.1")
    assert make_ipv6s()[1] == IPv6Address("::1")
    assert make_ipv6s()[2] == IPv6Address("::")


def test_make_arrays():
    arrays = make_arrays(make_strings)
    strings = make_strings()
    assert 0 < len(arrays)
    assert len(arrays) == len(strings)
    for length, array in enumerate(arrays):
        assert array == strings[:length]


def test_generate_vector():
    assert generate_vector(4, foo_bar) == [foo_bar(i) for i in range(4)]
    assert generate_vector(0, foo_bar) == []


def test_same_value_generator():
    gen = same_value_generator("x")
    assert generate_vector(3, gen) == ["x", "x", "x"]


def test_alternate_generators():
    gen = alternate_generators(lambda i: ("a", i), lambda i: ("b", i))
    assert generate_vector(4, gen) == [("a", 0), ("b", 0), ("a", 1), ("b", 1)]


def test_concat_sequences():
    assert concat_sequences([1, 2], [3]) == [1, 2, 3]
    assert concat_sequences([], []) == []


def test_random_generator_repeatable_and_bounded():
    first = generate_vector(50, RandomGenerator(1, 10, 20))
    second = generate_vector(50, RandomGenerator(1, 10, 20))
    assert first == second
    assert all(10 <= value <= 20 for value in first)


def test_random_generator_floats():
    values = generate_vector(50, RandomGenerator(0, 0.5, 1.5))
    assert all(isinstance(v, float) and 0.5 <= v <= 1.5 for v in values)


def test_random_generator_bad_bounds():
    with pytest.raises(ValueError):
        RandomGenerator(0, 5, 1)


def test_from_vector_generator():
    data = ["a", "b", "c"]
    gen = FromVectorGenerator(data)
    assert all(gen(i) in data for i in range(30))
    assert generate_vector(5, FromVectorGenerator(["only"])) == ["only"] * 5


def test_from_vector_generator_empty():
    with pytest.raises(ValueError):
        FromVectorGenerator([])