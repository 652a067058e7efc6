"""
Timing of generation stages.

`measure` wraps a function and `measure_block` wraps a `with` block; both
record wall-clock time under a dotted name such as "dungeon.walls". Stats
accumulate per name until reset. Tracking is off by default and then costs a
single flag check per call.

Usage Examples:
    enable_performance_tracking()

    @measure("dungeon.plan")
    def plan(self, start, end):
        ...

    with measure_block("dungeon.walls"):
        synthesize_walls(grid, floor, wall)

    print(get_performance_report(filter_prefix="dungeon."))
"""

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass


@dataclass
class PerformanceStats:
    """Accumulated timings for one name, in seconds."""

    name: str
    call_count: int = 0
    total_time: float = 0.0
    min_time: float = float("inf")
    max_time: float = 0.0

    def add_measurement(self, duration: float) -> None:
        self.call_count += 1
        self.total_time += duration
        if duration < self.min_time:
            self.min_time = duration
        if duration > self.max_time:
            self.max_time = duration

    @property
    def avg_time(self) -> float:
        if not self.call_count:
            return 0.0
        return self.total_time / self.call_count


_REPORT_SORT_KEYS: dict[str, Callable[[PerformanceStats], object]] = {
    "name": lambda s: s.name,
    "call_count": lambda s: -s.call_count,
    "total_time": lambda s: -s.total_time,
    "avg_time": lambda s: -s.avg_time,
    "max_time": lambda s: -s.max_time,
}


class PerformanceTracker:
    """Per-name timing statistics, switched on and off as a whole."""

    def __init__(self) -> None:
        self.stats: dict[str, PerformanceStats] = {}
        self.enabled = False

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def reset(self) -> None:
        self.stats.clear()

    def _record(self, name: str, started: float) -> None:
        stats = self.stats.get(name)
        if stats is None:
            stats = self.stats[name] = PerformanceStats(name)
        stats.add_measurement(time.perf_counter() - started)

    def measure(self, name: str):
        """Decorator timing every call of the wrapped function as `name`.

        Whether tracking is on is checked per call, so module-level
        decoration is fine.
        """

        def decorator(func: Callable) -> Callable:
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                if not self.enabled:
                    return func(*args, **kwargs)
                started = time.perf_counter()
                try:
                    return func(*args, **kwargs)
                finally:
                    self._record(name, started)

            return wrapper

        return decorator

    @contextmanager
    def measure_block(self, name: str) -> Iterator[None]:
        """Time the enclosed block as `name`, including when it raises."""
        if not self.enabled:
            yield
            return
        started = time.perf_counter()
        try:
            yield
        finally:
            self._record(name, started)

    def get_stats(self, name: str) -> PerformanceStats | None:
        return self.stats.get(name)

    def get_report(self, sort_by: str = "total_time", filter_prefix: str = "") -> str:
        """Text table of the recorded stats, in milliseconds.

        Args:
            sort_by: 'total_time', 'avg_time', 'max_time', 'call_count' or
                'name'. Unknown keys fall back to 'total_time'.
            filter_prefix: Only names starting with this prefix are listed.
        """
        selected = [s for n, s in self.stats.items() if n.startswith(filter_prefix)]
        if not selected:
            if filter_prefix:
                return f"No performance data found for prefix '{filter_prefix}'."
            return "No performance data collected."

        key = _REPORT_SORT_KEYS.get(sort_by, _REPORT_SORT_KEYS["total_time"])
        selected.sort(key=key)

        title = "Performance Report"
        if filter_prefix:
            title = f"{title} ({filter_prefix}*)"
        header = (
            f"{'Name':<22} {'Calls':>6} {'Total(ms)':>10} "
            f"{'Avg(ms)':>9} {'Min(ms)':>9} {'Max(ms)':>9}"
        )
        lines = [title, "=" * len(title), header, "-" * len(header)]
        for s in selected:
            lines.append(
                f"{s.name:<22} {s.call_count:>6} {s.total_time * 1e3:>10.2f} "
                f"{s.avg_time * 1e3:>9.3f} {s.min_time * 1e3:>9.3f} "
                f"{s.max_time * 1e3:>9.3f}"
            )
        return "\n".join(lines)


perf_tracker = PerformanceTracker()


def enable_performance_tracking() -> None:
    perf_tracker.enable()


def reset_performance_data() -> None:
    perf_tracker.reset()


def measure(name: str):
    """Decorator form of the global tracker; see PerformanceTracker.measure()."""
    return perf_tracker.measure(name)


def measure_block(name: str):
    return perf_tracker.measure_block(name)


def get_performance_report(sort_by: str = "total_time", filter_prefix: str = "") -> str:
    return perf_tracker.get_report(sort_by=sort_by, filter_prefix=filter_prefix)
