from ipaddress import IPv4Address, IPv6Address

import pytest

from chtestkit.generators import (
    FromVectorGenerator,
    RandomGenerator,
    alternate_generators,
    concat_sequences,
    foo_bar_generator,
    generate_vector,
    make_bools,
    make_date_time64s,
    make_date_times,
    make_dates,
    make_dates32,
    make_decimals,
    make_fixed_strings,
    make_int128s,
    make_ipv4,
    make_ipv4s,
    make_ipv6,
    make_ipv6s,
    make_numbers,
    make_strings,
    make_uuids,
    same_value_generator,
)

DAYS = [0, 1, 2, 4, 8, 16, 32, 64, 128, 256, 512, 1024, 2048, 4096,
        8192, 16384, 32768, 65536 - 1]


def test_make_ipv4_loopback():
    assert make_ipv4(0x0100007F) == IPv4Address("127.0.0.1")


def test_make_ipv4_out_of_range():
    with pytest.raises(ValueError):
        make_ipv4(1 << 32)
    with pytest.raises(ValueError):
        make_ipv4(-1)


def test_make_ipv6_full_and_short():
    assert make_ipv6(0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15) == IPv6Address(
        "1:203:405:607:809:a0b:c0d:e0f"
    )
    assert make_ipv6(0, 0, 0, 0, 0, 1) == IPv6Address("::1")
    assert make_ipv6(0xFF, 0xFF, 204, 152, 189, 116) == IPv6Address("::ffff:204.152.189.116")


def test_make_ipv6_errors():
    with pytest.raises(ValueError):
        make_ipv6(1, 2, 3)
    with pytest.raises(ValueError):
        make_ipv6(0, 0, 0, 0, 0, 256)


def test_fixed_lists():
    assert make_numbers() == [1, 2, 3, 7, 11, 13, 17, 19, 23, 29, 31]
    assert make_bools() == [1, 0, 0, 0, 1, 1, 0, 1, 1, 1, 0]
    assert make_strings() == ["a", "ab", "abc", "abcd"]


@pytest.mark.parametrize("size", [0, 1, 3, 8])
def test_make_fixed_strings_sizes(size):
    values = make_fixed_strings(size)
    assert len(values) == 4
    assert all(len(value) == size for value in values)
    for value, letter in zip(values, "abcd"):
        assert value.rstrip("\0") == (letter * 3)[:size]


def test_make_fixed_strings_negative():
    with pytest.raises(ValueError):
        make_fixed_strings(-1)


def test_make_uuids():
    uuids = make_uuids()
    assert len(uuids) == 4
    assert uuids[0] == (0, 0)
    assert uuids[1] == (0xBB6A8C699AB2414C, 0x86697B7FD27F0825)
    assert all(0 <= half < (1 << 64) for pair in uuids for half in pair)


def test_make_dates():
    dates = make_dates()
    assert all(value % 86400 == 0 for value in dates)
    assert [value // 86400 for value in dates] == DAYS


def test_make_dates32():
    dates = make_dates()
    dates32 = make_dates32()
    assert len(dates32) == 2 * len(dates)
    assert dates32[: len(dates)] == dates
    assert dates32[len(dates):] == [-value for value in dates]


def test_make_date_times():
    values = make_date_times()
    assert values[0] == 0
    assert values[-1] == 4294967296 - 1
    assert values == sorted(values)


@pytest.mark.parametrize("scale", [0, 3, 6])
def test_make_date_time64s(scale):
    values = make_date_time64s(scale)
    assert len(values) == 200
    assert values == sorted(values)
    assert values[0] < 0 < values[-1]
    assert all(-(1 << 63) <= value < (1 << 63) for value in values)


def test_make_date_time64s_size():
    assert len(make_date_time64s(2, 10)) == 10


def test_make_int128s():
    values = make_int128s()
    assert len(values) == 5
    assert values[0] == -1
    assert values[3] == -(2 ** 127)
    assert values[-1] == 0
    assert all(-(2 ** 127) <= value < 2 ** 127 for value in values)


def test_make_decimals_scale_zero():
    assert make_decimals(10, 0) == DAYS


def test_make_decimals_fractional_part():
    values = make_decimals(12, 3)
    fractions = {value % 1000 for value in values}
    assert len(fractions) == 1
    assert [value // 1000 for value in values] == DAYS


def test_make_ipv4s():
    values = make_ipv4s()
    assert len(values) == 5
    assert values[1] == IPv4Address("127.0.0.1")
    assert values[3] == IPv4Address("0.0.0.0")
    assert values[0] == values[-1]


def test_make_ipv6s():
    values = make_ipv6s()
    assert values[1] == IPv6Address("::1")
    assert values[2] == IPv6Address("::")


@pytest.mark.parametrize(
    "i, expected",
    [(0, "FooBar"), (3, "Foo"), (5, "Bar"), (15, "FooBar"), (7, "7")],
)
def test_foo_bar_generator(i, expected):
    assert foo_bar_generator(i) == expected


def test_generate_vector():
    assert generate_vector(4, lambda i: i * i) == [0, 1, 4, 9]
    assert generate_vector(0, foo_bar_generator) == []


def test_same_value_generator():
    assert generate_vector(3, same_value_generator("x")) == ["x", "x", "x"]


def test_alternate_generators():
    gen = alternate_generators(lambda i: i, lambda i: -i)
    assert generate_vector(6, gen) == [0, 0, 1, -1, 2, -2]


def test_concat_sequences():
    assert concat_sequences([1, 2], [3]) == [1, 2, 3]
    assert concat_sequences([], []) == []


def test_random_generator_deterministic_and_bounded():
    first = RandomGenerator(7, 10, 20)
    second = RandomGenerator(7, 10, 20)
    a = [first(i) for i in range(50)]
    b = [second(i) for i in range(50)]
    assert a == b
    assert all(10 <= value <= 20 for value in a)
    assert all(isinstance(value, int) for value in a)


def test_random_generator_floats():
    gen = RandomGenerator(1, 0.5, 1.5)
    values = [gen(i) for i in range(20)]
    assert all(0.5 <= value <= 1.5 for value in values)


def test_random_generator_bad_range():
    with pytest.raises(ValueError):
        RandomGenerator(0, 5, 1)


def test_from_vector_generator():
    data = ["a", "b", "c"]
    gen = FromVectorGenerator(data)
    values = generate_vector(30, gen)
    assert set(values) <= set(data)
    assert values == generate_vector(30, FromVectorGenerator(data))


def test_from_vector_generator_empty():
    with pytest.raises(ValueError):
        FromVectorGenerator([])