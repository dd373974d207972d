#!/usr/bin/env python3

"""
GTF Reader

Reads gene annotations in GTF format into typed records.

Every line is sanitized (comment and surrounding whitespace removed),
validated against a single anchored line grammar, and decoded into a
GTFRecord with its attribute groups. Blank, comment and invalid lines are
skipped silently; only a file that cannot be opened raises.

Modules:
- core: Sanitizer, decoder, record type, file reader and writer, exceptions,
  and configuration
- utils: Performance and memory monitoring
- tests: Unit test suite
"""

__version__ = "1.0.0"

from .core.data_structures import GTFRecord, NO_SCORE, NO_FRAME
from .core.exceptions import GTFError, FileOpenError, ConfigurationError, MemoryLimitError, EncodingError
from .core.config import ReaderConfig, load_config
from .core.decoder import decode_line, parse_line, is_valid_line
from .core.sanitize import sanitize_line, sanitize_attr_value
from .core.parsers import GTFFile, read_gtf
from .core.writer import format_record, write_gtf

__all__ = [
    # Reader
    'GTFFile', 'read_gtf',
    # Records
    'GTFRecord', 'NO_SCORE', 'NO_FRAME',
    # Line processing
    'sanitize_line', 'sanitize_attr_value', 'is_valid_line', 'decode_line', 'parse_line',
    # Output
    'format_record', 'write_gtf',
    # Exceptions
    'GTFError', 'FileOpenError', 'ConfigurationError', 'MemoryLimitError', 'EncodingError',
    # Configuration
    'ReaderConfig', 'load_config'
]
