#!/usr/bin/env python3

"""
Load monitoring for GTF files.

Times a load, samples resident memory through psutil at a fixed line
interval, and stops the load when the configured limit is exceeded.
"""

import time
import logging
import psutil
from dataclasses import dataclass
from typing import Optional
from contextlib import contextmanager

from ..core.exceptions import MemoryLimitError


@dataclass
class LoadStats:
    """Timing and memory figures for one load."""
    started: float
    finished: Optional[float] = None
    lines: int = 0
    peak_rss_mb: float = 0.0

    @property
    def seconds(self) -> float:
        end = self.finished if self.finished is not None else time.time()
        return end - self.started


class LoadMonitor:
    """Memory guard and stopwatch for GTFFile.load."""

    def __init__(self, memory_limit_mb: int = 4096, enabled: bool = True):
        self.memory_limit_mb = memory_limit_mb
        self.enabled = enabled
        self.process = psutil.Process() if enabled else None
        self.last_load: Optional[LoadStats] = None

    def rss_mb(self) -> float:
        """Resident memory of this process in MB (0.0 when disabled)."""
        if self.process is None:
            return 0.0
        rss = self.process.memory_info().rss / 1024 / 1024
        if self.last_load is not None and self.last_load.finished is None:
            self.last_load.peak_rss_mb = max(self.last_load.peak_rss_mb, rss)
        return rss

    def check_memory_limit(self, line_num: int = 0) -> None:
        """Raise MemoryLimitError if resident memory is above the limit."""
        rss = self.rss_mb()
        if rss > self.memory_limit_mb:
            logging.warning(f"Memory limit reached at line {line_num}: "
                            f"{rss:.1f}MB > {self.memory_limit_mb}MB")
            raise MemoryLimitError("Memory usage exceeded limit", rss, self.memory_limit_mb)

    @contextmanager
    def timed_load(self):
        """Track one load; the caller fills in the line count."""
        self.last_load = LoadStats(started=time.time())
        self.rss_mb()
        try:
            yield self.last_load
        finally:
            self.rss_mb()
            self.last_load.finished = time.time()

    def report(self) -> str:
        """One-line summary of the last load."""
        stats = self.last_load
        if stats is None:
            return "No load recorded"
        summary = f"Read {stats.lines} lines in {stats.seconds:.2f}s"
        if self.enabled:
            summary += f", peak memory {stats.peak_rss_mb:.1f}MB of {self.memory_limit_mb}MB"
        return summary

    def log_report(self) -> None:
        logging.info(self.report())
