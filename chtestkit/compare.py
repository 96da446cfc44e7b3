"""Deep, element-wise comparison of values and nested containers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ComparisonResult:
    """Outcome of a comparison, with a description of any mismatch."""

    success: bool
    message: str = ""

    def __bool__(self) -> bool:
        return self.success

    def _append(self, text: str) -> "ComparisonResult":
        self.message += text
        return self


def is_container(value: Any) -> bool:
    """Whether ``value`` is sized and iterable; text and bytes count as plain values."""
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return hasattr(value, "__len__") and hasattr(value, "__iter__")


def _format(value: Any) -> str:
    if is_container(value):
        return "[" + ", ".join(_format(item) for item in value) + "]"
    return str(value)


def compare_containers_recursive(left: Any, right: Any) -> ComparisonResult:
    """Compare two containers element by element, descending into nested containers."""
    if len(left) != len(right):
        return ComparisonResult(
            False,
            f"\nMismatching containers size, expected: {len(left)} actual: {len(right)}",
        )
    for position, (l_item, r_item) in enumerate(zip(left, right), start=1):
        result = compare_recursive(l_item, r_item)
        if not result:
            return result._append(f"\n\nMismatch at pos: {position}")
    return ComparisonResult(True)


def compare_recursive(left: Any, right: Any) -> ComparisonResult:
    """Compare two values; containers are compared deeply."""
    if is_container(left) and is_container(right):
        result = compare_containers_recursive(left, right)
        if result:
            return result
        return result._append(
            f"\nExpected container: {_format(left)}\nActual container  : {_format(right)}"
        )
    if left != right:
        return ComparisonResult(False, f"\nExpected value: {left}\nActual value  : {right}")
    return ComparisonResult(True)