from __future__ import generator_stop

import tracemalloc
from typing import Optional


class MeasureMemory:

    """Context manager which measures the memory allocated within its block using `tracemalloc`.
    `peak` is the highest amount of traced memory while the block was running.
    Tracing is stopped again on exit, unless it was already running when the object was created.
    """

    __slots__ = ("total", "peak", "snapshot", "started")

    def __init__(self) -> None:

        self.started = not tracemalloc.is_tracing()
        if self.started:
            tracemalloc.start()

        self.total: Optional[int] = None
        self.peak: Optional[int] = None

    def _comp(self) -> int:

        snapshot_now = tracemalloc.take_snapshot()
        stats = snapshot_now.compare_to(self.snapshot, "lineno")
        return sum(stat.size_diff for stat in stats)

    def __enter__(self) -> "MeasureMemory":

        self.snapshot = tracemalloc.take_snapshot()
        tracemalloc.reset_peak()
        return self

    def __exit__(self, type, value, traceback):
        _, self.peak = tracemalloc.get_traced_memory()
        self.total = self._comp()
        if self.started:
            tracemalloc.stop()

    def get(self) -> int:

        if self.total is not None:
            return self.total
        else:
            return self._comp()

    def print(self, name: str) -> None:

        total = self.get()
        print(f"{name} uses {total / 1024 / 1024:.3f} MiB of memory")
        if self.peak is not None:
            print(f"{name} peaks at {self.peak / 1024 / 1024:.3f} MiB of memory")
