"""Simple wall-clock timing and collection of named measurements."""

from __future__ import annotations

import time
from datetime import timedelta
from typing import Callable, Generic, List, Tuple, TypeVar

R = TypeVar("R")


class Timer:
    """Measures time elapsed since it was created or last restarted."""

    def __init__(self) -> None:
        self._started_at = time.perf_counter_ns()

    def restart(self) -> None:
        self._started_at = time.perf_counter_ns()

    def start(self) -> None:
        self.restart()

    def elapsed(self) -> timedelta:
        """Time since the last (re)start, at microsecond resolution."""
        elapsed_ns = time.perf_counter_ns() - self._started_at
        return timedelta(microseconds=elapsed_ns // 1000)


class MeasuresCollector(Generic[R]):
    """Calls a measuring function and records its results under names."""

    def __init__(self, measure: Callable[[], R]) -> None:
        self._measure = measure
        self._results: List[Tuple[str, R]] = []

    def add(self, name: str) -> None:
        self._results.append((str(name), self._measure()))

    @property
    def results(self) -> List[Tuple[str, R]]:
        """The recorded (name, measurement) pairs, in order of recording."""
        return list(self._results)


def collect(measure: Callable[[], R]) -> MeasuresCollector[R]:
    """Create a collector around ``measure``."""
    return MeasuresCollector(measure)