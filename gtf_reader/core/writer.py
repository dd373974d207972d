#!/usr/bin/env python3

"""
Serialization of records back to GTF lines.

Fixed columns are tab-joined, attributes are written as key "value"; and
separated by single spaces. Lines written here decode to equal records as
long as no attribute value contains ';', '#' or '"'.
"""

import logging
import math
from pathlib import Path
from typing import Iterable

from .data_structures import GTFRecord, NO_FRAME


def format_score(score: float) -> str:
    """Render the score column ('.' for NO_SCORE or any other infinity)."""
    if math.isinf(score):
        return '.'
    return repr(float(score))


def format_frame(frame) -> str:
    """Render the frame column ('.' for NO_FRAME)."""
    if frame is NO_FRAME:
        return '.'
    return str(frame)


def format_attributes(record: GTFRecord) -> str:
    """Render the attribute groups of a record."""
    return ' '.join(f'{key} "{value}";' for key, value in record.attributes.items())


def format_record(record: GTFRecord) -> str:
    """Render a record as one GTF line without the newline."""
    columns = [
        record.seqname,
        record.source,
        record.feature,
        str(record.start),
        str(record.end),
        format_score(record.score),
        record.strand,
        format_frame(record.frame),
    ]
    line = '\t'.join(columns)
    if record.attributes:
        line += '\t' + format_attributes(record)
    return line


def write_gtf(records: Iterable[GTFRecord], path: str, encoding: str = 'utf-8',
              errors: str = 'strict') -> int:
    """
    Write records to a GTF file.

    Args:
        records: Records to write, in output order
        path: Output file path (parent directories are created)
        encoding: Output text encoding
        errors: Encoding error policy, matching the one used for reading

    Returns:
        Number of records written
    """
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    written = 0
    with out_path.open('w', encoding=encoding, errors=errors) as handle:
        for record in records:
            handle.write(format_record(record) + '\n')
            written += 1

    logging.info(f"Wrote {written} records to {out_path}")
    return written
