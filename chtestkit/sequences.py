"""Helpers for working with plain sequences."""

from __future__ import annotations

from typing import List, Sequence, TypeVar

T = TypeVar("T")


def slice_vector(sequence: Sequence[T], begin: int, length: int) -> List[T]:
    """Return up to ``length`` items starting at ``begin``; empty if ``begin`` is past the end."""
    if begin < 0 or length < 0:
        raise ValueError("begin and length must be non-negative")
    if begin >= len(sequence):
        return []
    length = min(length, len(sequence) - begin)
    return list(sequence[begin:begin + length])