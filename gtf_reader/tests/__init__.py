#!/usr/bin/env python3

"""
Test suite for the GTF reader.

Unit tests covering:
- Line sanitization and attribute value quote stripping
- Line grammar validation and record decoding
- File loading, filtering, region queries and error handling
- Record serialization and round trips
- Configuration management and validation
"""
