#!/usr/bin/env python3

"""
Validation and decoding of sanitized GTF lines.

A line is accepted only if the whole of it matches VALID_GTF_LINE_RE:

    seqname  source  feature  start  end  score  strand  frame  [key value;]...

with the eight fixed columns separated by single tabs, start and end made
of digits, strand a single character and frame one of 0, 1, 2 or '.'.
Attribute groups are whitespace separated and each must end with ';'.
Anything after the last ';' rejects the line.
"""

import math
import re
from typing import Dict, Optional

from .data_structures import GTFRecord, NO_SCORE, NO_FRAME
from .sanitize import sanitize_line, sanitize_attr_value

VALID_GTF_LINE_RE = re.compile(
    r"\S+\t\S+\t\S+\t\d+\t\d+\t\S+\t\S\t[012.]"
    r"(?:\s+[^\s;]+\s+[^\s;][^;]*;)*"
)

_ATTRIBUTE_RE = re.compile(r"\s*([^\s;]+)\s+([^;]*);")

# Longest numeric prefix accepted for the score column. Infinity and NaN
# spellings do not match, so NO_SCORE stays unique.
_SCORE_PREFIX_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

FIXED_COLUMNS = 8


def is_valid_line(line: str) -> bool:
    """Check a sanitized line against the GTF line grammar."""
    return VALID_GTF_LINE_RE.fullmatch(line) is not None


def parse_score(token: str) -> float:
    """
    Parse the score column leniently.

    '.' gives NO_SCORE. Otherwise the longest leading numeric part is used,
    so "3.5x" gives 3.5 and "abc" gives 0.0. Only decimal and exponent
    forms are read: "inf", "nan" and values too large for a float give 0.0,
    and hex floats stop at the leading digit ("0x1A" gives 0.0, not 26.0).
    Malformed scores never reject the line.
    """
    if token == '.':
        return NO_SCORE
    match = _SCORE_PREFIX_RE.match(token)
    if match is None:
        return 0.0
    score = float(match.group())
    if math.isinf(score):
        return 0.0
    return score


def parse_frame(token: str) -> Optional[int]:
    """Parse the frame column ('.' gives NO_FRAME)."""
    if token == '.':
        return NO_FRAME
    return int(token)


def parse_attributes(text: str) -> Dict[str, str]:
    """
    Parse the attribute groups following the fixed columns.

    Each group is a key, whitespace, then everything up to the next ';'.
    Values are sanitized. A repeated key keeps the last value.
    """
    attributes: Dict[str, str] = {}
    for match in _ATTRIBUTE_RE.finditer(text):
        key, value = match.groups()
        attributes[key] = sanitize_attr_value(value)
    return attributes


def decode_line(line: str) -> Optional[GTFRecord]:
    """
    Decode a sanitized line into a new GTFRecord.

    Args:
        line: Line already passed through sanitize_line

    Returns:
        The decoded record, or None if the line is empty or invalid
    """
    if not line or not is_valid_line(line):
        return None

    columns = line.split('\t', FIXED_COLUMNS - 1)
    seqname, source, feature, start, end, score, strand = columns[:7]

    # The frame is one character; whatever follows is the attribute text
    rest = columns[7]
    frame, attribute_text = rest[0], rest[1:]

    return GTFRecord(
        seqname=seqname,
        source=source,
        feature=feature,
        start=int(start),
        end=int(end),
        score=parse_score(score),
        strand=strand,
        frame=parse_frame(frame),
        attributes=parse_attributes(attribute_text),
    )


def parse_line(raw_line: str) -> Optional[GTFRecord]:
    """Sanitize and decode a raw line in one step."""
    return decode_line(sanitize_line(raw_line))
