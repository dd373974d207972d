#!/usr/bin/env python3

"""
Custom exceptions for the GTF reader.

Only failures that stop a read are exceptions. Lines that fail validation
are skipped and counted by the reader, never raised.
"""

class GTFError(Exception):
    """Base exception for all GTF reader errors."""
    pass


class FileOpenError(GTFError):
    """The annotation file could not be opened for reading."""

    def __init__(self, message: str, filename: str = ""):
        super().__init__(message)
        self.filename = filename

    def __str__(self):
        if self.filename:
            return f"Error opening GTF file {self.filename}: {super().__str__()}"
        return super().__str__()


class ConfigurationError(GTFError):
    """Error in reader configuration."""
    pass


class MemoryLimitError(GTFError):
    """Memory usage exceeded the configured limit while loading."""

    def __init__(self, message: str, current_usage: float, limit: float):
        super().__init__(message)
        self.current_usage = current_usage
        self.limit = limit

    def __str__(self):
        return f"Memory error: {super().__str__()} (current: {self.current_usage:.1f}MB, limit: {self.limit:.1f}MB)"


class EncodingError(GTFError):
    """Undecodable bytes met with encoding_errors='strict'.

    Text is decoded in chunks, so lines_read is the number of lines
    returned before the failure, not the number of the bad line.
    """

    def __init__(self, message: str, filename: str = "", lines_read: int = 0):
        super().__init__(message)
        self.filename = filename
        self.lines_read = lines_read

    def __str__(self):
        return f"Cannot decode {self.filename} after line {self.lines_read}: {super().__str__()}"
