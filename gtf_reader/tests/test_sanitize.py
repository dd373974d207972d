#!/usr/bin/env python3

"""
Unit tests for line and attribute value sanitization.
"""

import unittest
import sys
import os

# Add the parent directory to the path to import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from gtf_reader.core.sanitize import trim, sanitize_line, sanitize_attr_value


class TestTrim(unittest.TestCase):
    """Test whitespace trimming."""

    def test_trims_spaces_and_tabs(self):
        self.assertEqual(trim(" \t chr1\tsrc \t"), "chr1\tsrc")

    def test_empty_and_blank(self):
        self.assertEqual(trim(""), "")
        self.assertEqual(trim(" \t  "), "")

    def test_other_whitespace_is_kept(self):
        """Only space and tab are trimmed."""
        self.assertEqual(trim("\nabc\r"), "\nabc\r")


class TestSanitizeLine(unittest.TestCase):
    """Test comment removal and trimming of raw lines."""

    def test_comment_only_line_becomes_empty(self):
        self.assertEqual(sanitize_line("# this is a comment"), "")

    def test_trailing_comment_removed(self):
        line = "chr1\tsrc\tgene\t1\t10\t.\t+\t0\tid x; # trailing note"
        self.assertEqual(sanitize_line(line), "chr1\tsrc\tgene\t1\t10\t.\t+\t0\tid x;")

    def test_blank_line(self):
        self.assertEqual(sanitize_line(""), "")
        self.assertEqual(sanitize_line("   \t "), "")

    def test_line_without_comment_only_trimmed(self):
        self.assertEqual(sanitize_line("  chr1\tsrc  "), "chr1\tsrc")

    def test_hash_inside_quoted_value_truncates(self):
        """Comment removal is not quote aware."""
        line = 'chr1\tsrc\tgene\t1\t10\t.\t+\t0\tnote "a#b";'
        self.assertEqual(sanitize_line(line), 'chr1\tsrc\tgene\t1\t10\t.\t+\t0\tnote "a')


class TestSanitizeAttrValue(unittest.TestCase):
    """Test attribute value quote stripping."""

    def test_quoted_value(self):
        self.assertEqual(sanitize_attr_value('"ABC"'), "ABC")

    def test_unquoted_value_unchanged(self):
        self.assertEqual(sanitize_attr_value("test"), "test")

    def test_leading_quote_only(self):
        self.assertEqual(sanitize_attr_value('"ABC'), "ABC")

    def test_trailing_quote_only(self):
        self.assertEqual(sanitize_attr_value('ABC"'), "ABC")

    def test_whitespace_trimmed_before_quotes(self):
        self.assertEqual(sanitize_attr_value(' \t"ABC" '), "ABC")

    def test_only_one_quote_stripped_per_side(self):
        self.assertEqual(sanitize_attr_value('""ABC""'), '"ABC"')

    def test_inner_spaces_kept(self):
        self.assertEqual(sanitize_attr_value('"protein coding"'), "protein coding")

    def test_degenerate_values(self):
        self.assertEqual(sanitize_attr_value(""), "")
        self.assertEqual(sanitize_attr_value('"'), "")
        self.assertEqual(sanitize_attr_value('""'), "")


if __name__ == '__main__':
    unittest.main()
