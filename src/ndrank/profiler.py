"""Operator profiler for development debugging.

Example:
    >>> from ndrank.profiler import profile
    >>> with profile():
    ...     buckets = discretize_axis(values, axis=0, method="minimum", buckets=5)
    # Prints profiling summary on exit
"""

from __future__ import annotations

import functools
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Generator, TypeVar

_local = threading.local()

F = TypeVar("F", bound=Callable[..., Any])


@dataclass
class ProfileRecord:
    """Single profiling record for one operator call."""

    operator: str
    duration: float  # seconds
    input_shape: tuple[int, ...] | None = None


@dataclass
class Profiler:
    """Collects profiling records during a profiling session."""

    records: list[ProfileRecord] = field(default_factory=list)

    def record(
        self,
        operator: str,
        duration: float,
        input_shape: tuple[int, ...] | None = None,
    ) -> None:
        """Record an operator call."""
        self.records.append(ProfileRecord(operator, duration, input_shape))

    @property
    def total_time(self) -> float:
        """Total time across all recorded operators."""
        return sum(r.duration for r in self.records)

    def summary(self) -> None:
        """Print profiling summary table to stdout."""
        if not self.records:
            print("No profiling records.")
            return

        # Aggregate by operator
        from collections import defaultdict

        agg: dict[str, dict] = defaultdict(lambda: {"calls": 0, "total": 0.0, "shape": None})
        for r in self.records:
            agg[r.operator]["calls"] += 1
            agg[r.operator]["total"] += r.duration
            if r.input_shape:
                agg[r.operator]["shape"] = r.input_shape

        total = self.total_time

        print("┌" + "─" * 24 + "┬" + "─" * 7 + "┬" + "─" * 10 + "┬" + "─" * 9 + "┬" + "─" * 15 + "┐")
        print(f"│ {'Operator':<22} │ {'Calls':>5} │ {'Total(s)':>8} │ {'%Total':>7} │ {'Input Shape':>13} │")
        print("├" + "─" * 24 + "┼" + "─" * 7 + "┼" + "─" * 10 + "┼" + "─" * 9 + "┼" + "─" * 15 + "┤")

        # Sort by total time descending
        for op, data in sorted(agg.items(), key=lambda x: -x[1]["total"]):
            pct = (data["total"] / total * 100) if total > 0 else 0
            shape_str = "×".join(str(d) for d in data["shape"]) if data["shape"] else ""
            print(f"│ {op:<22} │ {data['calls']:>5} │ {data['total']:>8.3f} │ {pct:>6.1f}% │ {shape_str:>13} │")

        print("├" + "─" * 24 + "┼" + "─" * 7 + "┼" + "─" * 10 + "┼" + "─" * 9 + "┼" + "─" * 15 + "┤")
        print(f"│ {'TOTAL':<22} │ {len(self.records):>5} │ {total:>8.3f} │ {'100.0%':>7} │ {'':<13} │")
        print("└" + "─" * 24 + "┴" + "─" * 7 + "┴" + "─" * 10 + "┴" + "─" * 9 + "┴" + "─" * 15 + "┘")


def _get_profiler() -> Profiler | None:
    """Get the active profiler for this thread, if any."""
    return getattr(_local, "profiler", None)


def _shape_of(value: Any) -> tuple[int, ...] | None:
    shape = getattr(value, "shape", None)
    if shape is None:
        return None
    return tuple(int(d) for d in shape)


def profiled(func: F) -> F:
    """Wrap an operator so its calls are recorded while a profile is active.

    The input shape is taken from the first positional argument.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        p = _get_profiler()
        if p is None:
            return func(*args, **kwargs)
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            p.record(func.__name__, time.perf_counter() - start, _shape_of(args[0]) if args else None)

    return wrapper  # type: ignore[return-value]


@contextmanager
def profile() -> Generator[Profiler, None, None]:
    """Context manager to enable operator profiling.

    Example:
        >>> with profile() as p:
        ...     ranks = rank_axis(values, axis=0, method="average")
        # Prints summary on exit
    """
    p = Profiler()
    _local.profiler = p
    try:
        yield p
    finally:
        _local.profiler = None
        p.summary()
