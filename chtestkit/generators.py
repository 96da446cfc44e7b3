"""Deterministic sample values and value generators for column tests."""

from __future__ import annotations

import random
from ipaddress import IPv4Address, IPv6Address
from typing import Callable, List, Sequence, Tuple, TypeVar, Union

T = TypeVar("T")

Number = Union[int, float]

_UINT32_MAX = (1 << 32) - 1
_UINT64_MAX = (1 << 64) - 1


def _wrap_int64(value: int) -> int:
    return ((value + (1 << 63)) % (1 << 64)) - (1 << 63)


def _make_int128(high: int, low: int) -> int:
    """Build a signed 128-bit value from a signed high half and an unsigned low half."""
    return _wrap_int64(high) * (1 << 64) + (low & _UINT64_MAX)


def make_ipv4(ip: int) -> IPv4Address:
    """Address whose in-memory bytes are ``ip`` stored little-endian."""
    if not 0 <= ip <= _UINT32_MAX:
        raise ValueError("IPv4 value must be an unsigned 32-bit integer")
    return IPv4Address(ip.to_bytes(4, "little"))


def make_ipv6(*args: int) -> IPv6Address:
    """Address from all 16 bytes, or from its last 6 bytes with the rest zero."""
    if len(args) not in (6, 16):
        raise ValueError("make_ipv6 takes either 16 or 6 byte values")
    if any(not 0 <= octet <= 0xFF for octet in args):
        raise ValueError("IPv6 byte values must be in range 0..255")
    return IPv6Address(bytes(16 - len(args)) + bytes(args))


def make_numbers() -> List[int]:
    return [1, 2, 3, 7, 11, 13, 17, 19, 23, 29, 31]


def make_bools() -> List[int]:
    return [1, 0, 0, 0, 1, 1, 0, 1, 1, 1, 0]


def make_fixed_strings(string_size: int) -> List[str]:
    """Short strings cut or NUL-padded to exactly ``string_size`` characters."""
    if string_size < 0:
        raise ValueError("string_size must be non-negative")
    return [value[:string_size].ljust(string_size, "\0") for value in ("aaa", "bbb", "ccc", "ddd")]


def make_strings() -> List[str]:
    return ["a", "ab", "abc", "abcd"]


def make_uuids() -> List[Tuple[int, int]]:
    """UUIDs as pairs of unsigned 64-bit halves."""
    return [
        (0, 0),
        (0xBB6A8C699AB2414C, 0x86697B7FD27F0825),
        (0x84B9F24BC26B49C6, 0xA03B4AB723341951),
        (0x3507213C178649F9, 0x9FAF035D662F60AE),
    ]


def make_date_time64s(scale: int, values_size: int = 200) -> List[int]:
    """Ticks roughly two hundred years either side of the epoch, with sub-second parts."""
    seconds_multiplier = 10 ** scale
    year = 86400 * 365 * seconds_multiplier
    return generate_vector(
        values_size,
        lambda i: _wrap_int64((i - 100) * year * 2 + (i * 10) * seconds_multiplier + i),
    )


def make_dates() -> List[int]:
    """Day numbers expressed in seconds."""
    days = [0, 1, 2, 4, 8, 16, 32, 64, 128, 256, 512, 1024, 2048, 4096,
            8192, 16384, 32768, 65536 - 1]
    return [day * 86400 for day in days]


def make_dates32() -> List[int]:
    """The dates of :func:`make_dates` followed by their negations."""
    dates = make_dates()
    return dates + [-value for value in dates]


def make_date_times() -> List[int]:
    return [
        0, 1, 2, 4, 8, 16, 32, 64, 128, 256, 512, 1024, 2048, 4096, 8192, 16384, 32768, 65536,
        131072, 262144, 524288, 1048576, 2097152, 4194304, 8388608, 16777216, 33554432, 67108864,
        134217728, 268435456, 536870912, 1073741824, 2147483648, 4294967296 - 1,
    ]


def make_int128s() -> List[int]:
    return [
        _make_int128(0xFFFFFFFFFFFFFFFF, 0xFFFFFFFFFFFFFFFF),
        _make_int128(0, 0xFFFFFFFFFFFFFFFF),
        _make_int128(0xFFFFFFFFFFFFFFFF, 0),
        _make_int128(0x8000000000000000, 0),
        0,
    ]


def make_decimals(precision: int, scale: int) -> List[int]:
    """Scaled decimal values with a fixed fractional part; ``precision`` is unused."""
    del precision
    scale_multiplier = 10 ** scale
    rhs_value = 12345678910
    values = [0, 1, 2, 4, 8, 16, 32, 64, 128, 256, 512, 1024, 2048, 4096,
              8192, 16384, 32768, 65536 - 1]
    return [value * scale_multiplier + rhs_value % scale_multiplier for value in values]


def make_ipv4s() -> List[IPv4Address]:
    return [
        make_ipv4(0x12345678),
        make_ipv4(0x0100007F),
        make_ipv4(3585395774),
        make_ipv4(0),
        make_ipv4(0x12345678),
    ]


def make_ipv6s() -> List[IPv6Address]:
    return [
        make_ipv6(0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
        make_ipv6(0, 0, 0, 0, 0, 1),
        make_ipv6(0, 0, 0, 0, 0, 0),
        make_ipv6(0xFF, 0xFF, 204, 152, 189, 116),
    ]


def foo_bar_generator(i: int) -> str:
    """``Foo`` for multiples of 3, ``Bar`` for multiples of 5, otherwise the number."""
    result = ("Foo" if i % 3 == 0 else "") + ("Bar" if i % 5 == 0 else "")
    return result or str(i)


def generate_vector(items: int, generator: Callable[[int], T]) -> List[T]:
    """Call ``generator`` with 0 .. items-1 and collect the results."""
    return [generator(i) for i in range(items)]


def same_value_generator(value: T) -> Callable[[int], T]:
    """Generator that always yields ``value``."""
    return lambda _position: value


def alternate_generators(
    first: Callable[[int], T], second: Callable[[int], T]
) -> Callable[[int], T]:
    """Generator taking even positions from ``first`` and odd ones from ``second``."""
    def generate(i: int) -> T:
        return first(i // 2) if i % 2 == 0 else second(i // 2)

    return generate


def concat_sequences(first: Sequence[T], second: Sequence[T]) -> List[T]:
    return [*first, *second]


class RandomGenerator:
    """Seeded uniform generator over ``[value_min, value_max]``.

    Integers are drawn when both bounds are integers, floats otherwise.
    """

    def __init__(self, seed: int = 0, value_min: Number = 0, value_max: Number = _UINT64_MAX) -> None:
        if value_min > value_max:
            raise ValueError("value_min must not exceed value_max")
        self._random = random.Random(seed)
        self._min = value_min
        self._max = value_max
        self._integral = isinstance(value_min, int) and isinstance(value_max, int)

    def __call__(self, position: object = None) -> Number:
        if self._integral:
            return self._random.randint(self._min, self._max)
        return self._random.uniform(self._min, self._max)


class FromVectorGenerator:
    """Generator that picks items from ``data`` at seeded random positions."""

    def __init__(self, data: Sequence[T]) -> None:
        self.data = list(data)
        if not self.data:
            raise ValueError("can't generate values from empty vector")
        self._random_generator = RandomGenerator(0, 0, len(self.data) - 1)

    def __call__(self, position: int) -> T:
        return self.data[self._random_generator(position)]