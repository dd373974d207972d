#!/usr/bin/env python3

"""
Core module for the GTF reader.

Contains the line sanitizer and decoder, the record type, the file reader
and writer, exception types, and configuration management.
"""

from .data_structures import GTFRecord, NO_SCORE, NO_FRAME
from .exceptions import GTFError, FileOpenError, ConfigurationError, MemoryLimitError, EncodingError
from .config import ReaderConfig, load_config
from .sanitize import sanitize_line, sanitize_attr_value
from .decoder import is_valid_line, decode_line, parse_line
from .parsers import GTFFile, read_gtf
from .writer import format_record, write_gtf

__all__ = [
    'GTFRecord', 'NO_SCORE', 'NO_FRAME',
    'GTFError', 'FileOpenError', 'ConfigurationError', 'MemoryLimitError', 'EncodingError',
    'ReaderConfig', 'load_config',
    'sanitize_line', 'sanitize_attr_value',
    'is_valid_line', 'decode_line', 'parse_line',
    'GTFFile', 'read_gtf',
    'format_record', 'write_gtf'
]
