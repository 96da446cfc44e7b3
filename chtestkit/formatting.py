"""Text helpers for values, containers, versions, UUIDs and the environment."""

from __future__ import annotations

import os
from fractions import Fraction
from typing import Any, Callable, Optional, TypeVar, Union

from chtestkit.compare import is_container

T = TypeVar("T")

_UINT64_MAX = (1 << 64) - 1

_REVISION_DECIMAL_PLACES = 8
_PATCH_DECIMAL_PLACES = 4
_MINOR_DECIMAL_PLACES = 4

_UNIT_PREFIXES = {
    Fraction(1, 1_000_000_000): "n",
    Fraction(1, 1_000_000): "u",
    Fraction(1, 1_000): "m",
    Fraction(1, 100): "c",
    Fraction(1, 10): "d",
    Fraction(1, 1): "",
}


def uuid_to_string(first: int, second: int) -> str:
    """Render a UUID given as two 64-bit halves in canonical 8-4-4-4-12 form."""
    for half in (first, second):
        if not 0 <= half <= _UINT64_MAX:
            raise ValueError("UUID halves must be unsigned 64-bit integers")
    return "{:08x}-{:04x}-{:04x}-{:04x}-{:012x}".format(
        first >> 32,
        (first >> 16) & 0xFFFF,
        first & 0xFFFF,
        second >> 48,
        second & 0xFFFFFFFFFFFF,
    )


def version_number(
    version_major: int,
    version_minor: int,
    version_patch: int = 0,
    revision: int = 0,
) -> int:
    """Combine version parts into a single number that orders like the version."""
    return (
        version_major * 10 ** (_MINOR_DECIMAL_PLACES + _PATCH_DECIMAL_PLACES + _REVISION_DECIMAL_PLACES)
        + version_minor * 10 ** (_PATCH_DECIMAL_PLACES + _REVISION_DECIMAL_PLACES)
        + version_patch * 10 ** _REVISION_DECIMAL_PLACES
        + revision
    )


def format_container(container: Any) -> str:
    """Render a container as ``[a, b, ...]``, descending into nested containers."""
    parts = (
        format_container(item) if is_container(item) else str(item)
        for item in container
    )
    return "[" + ", ".join(parts) + "]"


def format_optional(value: Optional[Any]) -> str:
    """Render a value, or ``NULL`` when it is absent."""
    return "NULL" if value is None else str(value)


def format_pair(first: Any, second: Any) -> str:
    """Render a pair as ``{ first, second }``."""
    return f"{{ {first}, {second} }}"


def _unit_fraction(unit: Union[int, float, Fraction]) -> Fraction:
    if isinstance(unit, float):
        return Fraction(repr(unit))
    return Fraction(unit)


def format_duration(count: Any, unit: Union[int, float, Fraction] = 1) -> str:
    """Render a duration of ``count`` ticks, each ``unit`` seconds long, e.g. ``5ms``."""
    prefix = _UNIT_PREFIXES.get(_unit_fraction(unit), "?")
    return f"{count}{prefix}s"


def get_env_or_default(
    env: str,
    default: Optional[str] = None,
    result_type: Callable[[str], T] = str,
) -> T:
    """Read an environment variable, falling back to ``default``, converted by ``result_type``."""
    value = os.environ.get(env)
    if value is None:
        if default is None:
            raise LookupError(f"Environment var '{env}' is not set.")
        value = default
    if result_type is str:
        return value  # type: ignore[return-value]
    return result_type(value)