#!/usr/bin/env python3

"""
Core data structures for the GTF reader.

Defines the record produced for every valid annotation line and the
sentinel values used for the optional score and frame columns.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Optional

# Score column was '.'. The score parser never yields an infinite value,
# so this cannot collide with a real score.
NO_SCORE = math.inf

# Frame column was '.'.
NO_FRAME = None


@dataclass
class GTFRecord:
    """Represents one line of a GTF file."""
    seqname: str
    source: str
    feature: str
    start: int
    end: int
    score: float = NO_SCORE
    strand: str = '.'
    frame: Optional[int] = NO_FRAME
    attributes: Dict[str, str] = field(default_factory=dict)

    @property
    def has_score(self) -> bool:
        """True unless the score column was '.'."""
        return not math.isinf(self.score)

    @property
    def length(self) -> int:
        """Get feature length (not meaningful when start > end)."""
        return self.end - self.start + 1

    def has_attribute(self, name: str) -> bool:
        """Check whether the attribute was present on the line."""
        return name in self.attributes

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get an attribute value, or default if absent."""
        return self.attributes.get(name, default)

    def to_line(self) -> str:
        """Serialize back to a GTF line."""
        from .writer import format_record
        return format_record(self)
