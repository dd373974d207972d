#!/usr/bin/env python3

"""
GTF file reader.

Owns the file handle, drives sanitize -> decode over every line, and keeps
the decoded records for filtering and region queries.
"""

import logging
from collections import defaultdict
from typing import Callable, Dict, Iterator, List, Optional

from intervaltree import IntervalTree

from .config import ReaderConfig
from .data_structures import GTFRecord
from .decoder import decode_line
from .exceptions import FileOpenError, EncodingError
from .sanitize import sanitize_line
from ..utils.performance_monitor import LoadMonitor


class GTFFile:
    """
    Load and query a GTF file.

    General usage:
        gtf = GTFFile("annotation.gtf")   # raises FileOpenError if unreadable
        gtf.load()
        for record in gtf:
            ...
        exons = gtf.filter(lambda r: r.feature == 'exon')

    Blank, comment-only and invalid lines are skipped without error. The
    counters lines_read, blank_lines and invalid_lines describe the most
    recently finished pass over the file. Each iter_records() generator
    counts on its own and publishes its totals when it finishes or is
    closed, so interleaved passes do not mix their counts.
    """

    def __init__(self, file_path: str, config: Optional[ReaderConfig] = None):
        self.file_path = str(file_path)
        self.config = config or ReaderConfig()
        self.monitor = LoadMonitor(
            memory_limit_mb=self.config.memory_limit_mb,
            enabled=self.config.enable_memory_monitoring,
        )
        self.records: List[GTFRecord] = []
        self._trees: Optional[Dict[str, IntervalTree]] = None
        self.lines_read = 0
        self.blank_lines = 0
        self.invalid_lines = 0

        # Fail before anything is read
        with self._open():
            pass

    def _open(self):
        try:
            return open(self.file_path, 'r',
                        encoding=self.config.encoding,
                        errors=self.config.encoding_errors)
        except OSError as e:
            raise FileOpenError(e.strerror or str(e), self.file_path) from e

    @property
    def discarded_lines(self) -> int:
        """Lines that produced no record in the last pass."""
        return self.blank_lines + self.invalid_lines

    def iter_records(self) -> Iterator[GTFRecord]:
        """
        Yield decoded records straight from the file, in file order.

        The handle is closed when iteration finishes or the generator is
        closed early. Undecodable bytes follow config.encoding_errors; only
        'strict' can stop the pass, with EncodingError.
        """
        check_interval = self.config.memory_check_interval
        lines_read = blank_lines = invalid_lines = 0

        try:
            with self._open() as handle:
                try:
                    for raw_line in handle:
                        lines_read += 1
                        if self.monitor.enabled and lines_read % check_interval == 0:
                            self.monitor.check_memory_limit(lines_read)

                        line = sanitize_line(raw_line.rstrip('\r\n'))
                        if not line:
                            blank_lines += 1
                            continue

                        record = decode_line(line)
                        if record is None:
                            invalid_lines += 1
                            if self.config.log_invalid_lines:
                                logging.debug(f"Skipping invalid line {lines_read} in {self.file_path}: {line!r}")
                            continue

                        yield record
                except UnicodeDecodeError as e:
                    raise EncodingError(e.reason, self.file_path, lines_read) from e
        finally:
            self.lines_read = lines_read
            self.blank_lines = blank_lines
            self.invalid_lines = invalid_lines

    def load(self) -> int:
        """
        Read the whole file into memory, replacing any previous contents.

        Returns:
            Number of records loaded
        """
        logging.info(f"Loading GTF file: {self.file_path}")

        with self.monitor.timed_load() as stats:
            self.records = list(self.iter_records())
            self._trees = None
            stats.lines = self.lines_read

        logging.info(f"Loaded {len(self.records)} records "
                     f"({self.invalid_lines} invalid, {self.blank_lines} blank lines skipped)")
        return len(self.records)

    def count(self) -> int:
        """Get the number of loaded records."""
        return len(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[GTFRecord]:
        return iter(self.records)

    def filter(self, predicate: Callable[[GTFRecord], bool]) -> List[GTFRecord]:
        """Return the loaded records satisfying predicate, in file order."""
        return [record for record in self.records if predicate(record)]

    def _build_trees(self) -> Dict[str, IntervalTree]:
        """Index loaded records by sequence name for region queries."""
        trees: Dict[str, IntervalTree] = defaultdict(IntervalTree)
        for index, record in enumerate(self.records):
            low, high = sorted((record.start, record.end))
            # IntervalTree intervals are half-open
            trees[record.seqname].addi(low, high + 1, index)
        return dict(trees)

    def overlapping(self, seqname: str, start: int, end: int) -> List[GTFRecord]:
        """
        Get loaded records on seqname overlapping the closed range start..end.

        Reversed coordinates are accepted both in the query and in records.
        """
        if self._trees is None:
            self._trees = self._build_trees()

        tree = self._trees.get(seqname)
        if tree is None:
            return []

        low, high = sorted((start, end))
        hits = sorted(interval.data for interval in tree.overlap(low, high + 1))
        return [self.records[index] for index in hits]


def read_gtf(file_path: str, config: Optional[ReaderConfig] = None) -> List[GTFRecord]:
    """Load a GTF file and return its records."""
    gtf = GTFFile(file_path, config)
    gtf.load()
    return gtf.records
