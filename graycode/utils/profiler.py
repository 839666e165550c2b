"""Lightweight wall-clock profiling.

Provides:
    - timer(): context manager reporting wall-clock time to a sink
    - TimingReport: collects named timings from several timer() blocks

Used by the CLI to time table generation and serialization separately.
Uses time.perf_counter(); no profiler hooks, no overhead inside the
timed block.
"""

import time
from contextlib import contextmanager
from typing import Callable, Dict


@contextmanager
def timer(name: str, sink: Callable[[str, float], None]):
    """Context manager for wall-clock timing.

    Parameters
    ----------
    name : str
        Timer name (for logging/display)
    sink : Callable[[str, float], None]
        Callback(name, elapsed_seconds)

    Yields
    ------
    None

    Notes
    -----
    The sink is called even if the block raises.

    Examples
    --------
    >>> report = TimingReport()
    >>> with timer("write", sink=report.record):
    ...     write_table(table, "gray.txt")
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        sink(name, time.perf_counter() - start)


class TimingReport:
    """Named wall-clock timings collected from timer() sinks.

    Repeated measurements under the same name accumulate.

    Examples
    --------
    >>> report = TimingReport()
    >>> with timer("compute", sink=report.record):
    ...     ...
    >>> report["compute"]
    0.0001
    """

    def __init__(self):
        self._elapsed: Dict[str, float] = {}

    def record(self, name: str, elapsed: float) -> None:
        """Sink for timer(): add ``elapsed`` seconds under ``name``."""
        self._elapsed[name] = self._elapsed.get(name, 0.0) + elapsed

    def __getitem__(self, name: str) -> float:
        return self._elapsed.get(name, 0.0)

    def __contains__(self, name: str) -> bool:
        return name in self._elapsed

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v:.3f}s" for k, v in self._elapsed.items())
        return f"TimingReport({fields})"
