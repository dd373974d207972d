#!/usr/bin/env python3

"""
Unit tests for line validation and record decoding.

Covers the line grammar, score and frame handling, attribute parsing and
the silent rejection of invalid lines.
"""

import math
import unittest
import sys
import os

# Add the parent directory to the path to import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from gtf_reader.core.data_structures import NO_SCORE, NO_FRAME
from gtf_reader.core.decoder import (
    is_valid_line, decode_line, parse_line, parse_score, parse_frame, parse_attributes
)

EXON_LINE = 'chr1\tEnsembl\texon\t100\t200\t.\t+\t0\tgene_id "ABC"; note test;'


class TestLineGrammar(unittest.TestCase):
    """Test acceptance and rejection of sanitized lines."""

    def test_accepts_line_with_attributes(self):
        self.assertTrue(is_valid_line(EXON_LINE))

    def test_accepts_line_without_attributes(self):
        self.assertTrue(is_valid_line("chr1\tsrc\tgene\t1\t10\t.\t+\t."))

    def test_accepts_value_with_spaces(self):
        self.assertTrue(is_valid_line('chr1\tsrc\tgene\t1\t10\t.\t+\t0\tgene_name "two words";'))

    def test_accepts_tab_separated_groups(self):
        self.assertTrue(is_valid_line("chr1\tsrc\tgene\t1\t10\t.\t+\t0\tid\tx;\tname\ty;"))

    def test_rejects_empty_line(self):
        self.assertFalse(is_valid_line(""))

    def test_rejects_non_numeric_coordinates(self):
        self.assertFalse(is_valid_line("chr1\tsrc\tgene\tone\t10\t.\t+\t0"))
        self.assertFalse(is_valid_line("chr1\tsrc\tgene\t1\t10x\t.\t+\t0"))

    def test_rejects_missing_feature_column(self):
        self.assertFalse(is_valid_line("chr1\tsrc\t1\t10\t.\t+\t0"))

    def test_rejects_space_separated_fixed_columns(self):
        self.assertFalse(is_valid_line("chr1 src gene 1 10 . + 0"))

    def test_rejects_bad_frame(self):
        self.assertFalse(is_valid_line("chr1\tsrc\tgene\t1\t10\t.\t+\t3"))
        self.assertFalse(is_valid_line("chr1\tsrc\tgene\t1\t10\t.\t+\t01"))

    def test_rejects_multi_character_strand(self):
        self.assertFalse(is_valid_line("chr1\tsrc\tgene\t1\t10\t.\t++\t0"))

    def test_rejects_trailing_garbage(self):
        self.assertFalse(is_valid_line("chr1\tsrc\tgene\t1\t10\t.\t+\t0\tid x; junk"))

    def test_rejects_unterminated_attribute(self):
        self.assertFalse(is_valid_line('chr1\tsrc\tgene\t1\t10\t.\t+\t0\tgene_id "x"'))

    def test_rejects_key_without_value(self):
        self.assertFalse(is_valid_line("chr1\tsrc\tgene\t1\t10\t.\t+\t0\tid;"))

    def test_rejects_leading_content(self):
        """The grammar is anchored at the start of the line."""
        self.assertFalse(is_valid_line("x " + EXON_LINE))


class TestParseScore(unittest.TestCase):
    """Test score column parsing."""

    def test_dot_gives_sentinel(self):
        self.assertEqual(parse_score("."), NO_SCORE)
        self.assertTrue(math.isinf(parse_score(".")))

    def test_numeric_values(self):
        self.assertEqual(parse_score("3.5"), 3.5)
        self.assertEqual(parse_score("0"), 0.0)
        self.assertEqual(parse_score("-2"), -2.0)
        self.assertEqual(parse_score("1e-05"), 1e-05)
        self.assertEqual(parse_score(".5"), 0.5)

    def test_lenient_prefix(self):
        self.assertEqual(parse_score("3.5abc"), 3.5)
        self.assertEqual(parse_score("12e"), 12.0)

    def test_unparseable_gives_zero(self):
        self.assertEqual(parse_score("abc"), 0.0)
        self.assertEqual(parse_score(".."), 0.0)

    def test_never_collides_with_sentinel(self):
        for token in ("inf", "Infinity", "-inf", "nan", "1e999"):
            self.assertFalse(math.isinf(parse_score(token)))

    def test_hex_stops_at_leading_digit(self):
        self.assertEqual(parse_score("0x1A"), 0.0)
        self.assertEqual(parse_score("7x"), 7.0)


class TestParseFrame(unittest.TestCase):
    """Test frame column parsing."""

    def test_digits(self):
        self.assertEqual(parse_frame("0"), 0)
        self.assertEqual(parse_frame("2"), 2)

    def test_dot(self):
        self.assertIs(parse_frame("."), NO_FRAME)


class TestParseAttributes(unittest.TestCase):
    """Test attribute group parsing."""

    def test_quoted_and_unquoted(self):
        attrs = parse_attributes(' gene_id "ABC"; note test;')
        self.assertEqual(attrs, {"gene_id": "ABC", "note": "test"})

    def test_duplicate_key_last_wins(self):
        attrs = parse_attributes(' tag "first"; tag "second";')
        self.assertEqual(attrs, {"tag": "second"})

    def test_one_sided_quotes(self):
        attrs = parse_attributes(' a "left; b right";')
        self.assertEqual(attrs, {"a": "left", "b": "right"})

    def test_empty(self):
        self.assertEqual(parse_attributes(""), {})

    def test_many_attributes(self):
        text = "".join(f' key{i} "v{i}";' for i in range(500))
        attrs = parse_attributes(text)
        self.assertEqual(len(attrs), 500)
        self.assertEqual(attrs["key499"], "v499")


class TestDecodeLine(unittest.TestCase):
    """Test decoding of complete lines."""

    def test_exon_line(self):
        record = decode_line(EXON_LINE)
        self.assertIsNotNone(record)
        self.assertEqual(record.seqname, "chr1")
        self.assertEqual(record.source, "Ensembl")
        self.assertEqual(record.feature, "exon")
        self.assertEqual(record.start, 100)
        self.assertEqual(record.end, 200)
        self.assertEqual(record.score, NO_SCORE)
        self.assertFalse(record.has_score)
        self.assertEqual(record.strand, "+")
        self.assertEqual(record.frame, 0)
        self.assertEqual(record.attributes, {"gene_id": "ABC", "note": "test"})

    def test_start_after_end_is_accepted(self):
        record = decode_line("chr2\tsrcB\tgene\t50\t10\t3.5\t-\t1\tid x;")
        self.assertIsNotNone(record)
        self.assertEqual(record.start, 50)
        self.assertEqual(record.end, 10)
        self.assertEqual(record.score, 3.5)
        self.assertTrue(record.has_score)
        self.assertEqual(record.strand, "-")
        self.assertEqual(record.frame, 1)
        self.assertEqual(record.attributes, {"id": "x"})

    def test_no_attributes_gives_empty_mapping(self):
        record = decode_line("chr1\tsrc\tgene\t1\t10\t.\t+\t.")
        self.assertEqual(record.attributes, {})
        self.assertIs(record.frame, NO_FRAME)

    def test_malformed_score_does_not_reject(self):
        record = decode_line("chr1\tsrc\tgene\t1\t10\tabc\t+\t0")
        self.assertIsNotNone(record)
        self.assertEqual(record.score, 0.0)

    def test_invalid_and_empty_lines_give_none(self):
        self.assertIsNone(decode_line(""))
        self.assertIsNone(decode_line("not a gtf line"))
        self.assertIsNone(decode_line("chr1\tsrc\tgene\t1\t10\t.\t+\t0\tid x; junk"))

    def test_each_call_returns_new_record(self):
        first = decode_line(EXON_LINE)
        second = decode_line(EXON_LINE)
        self.assertEqual(first, second)
        self.assertIsNot(first, second)
        self.assertIsNot(first.attributes, second.attributes)


class TestParseLine(unittest.TestCase):
    """Test sanitize-then-decode of raw lines."""

    def test_comment_line(self):
        self.assertIsNone(parse_line("# this is a comment"))

    def test_whitespace_line(self):
        self.assertIsNone(parse_line(" \t "))

    def test_raw_line_with_comment_and_padding(self):
        record = parse_line("  " + EXON_LINE + "  # from Ensembl ")
        self.assertIsNotNone(record)
        self.assertEqual(record.attributes["note"], "test")


if __name__ == '__main__':
    unittest.main()
