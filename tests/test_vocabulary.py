"""
Tests for vocabulary.py - vocabulary source parsing.
"""

import io

import pytest

from chissor.errors import LoadError, ParseError
from chissor.vocabulary import VocabularyEntry, parse_frequency, parse_vocabulary


class TestParseFrequency:
    """Tests for frequency fields."""

    def test_digits(self):
        assert parse_frequency("0") == 0
        assert parse_frequency("1234") == 1234

    @pytest.mark.parametrize("text", ["not a frequency", "-1", "+5", "1.5", "1_000", "٣", ""])
    def test_rejected(self, text):
        with pytest.raises(ParseError) as exc_info:
            parse_frequency(text)
        assert exc_info.value.field == "frequency"


class TestParseVocabulary:
    """Tests for whole vocabulary sources."""

    def test_optional_fields(self):
        entries = parse_vocabulary("分词 100 n\n测试 50\n案例\n")
        assert entries == [
            VocabularyEntry("分词", 100, "n"),
            VocabularyEntry("测试", 50, None),
            VocabularyEntry("案例", None, None),
        ]

    def test_bytes_with_bom_and_blank_lines(self):
        data = "\ufeff分词 100 n\n\n   \n案例 3\r\n".encode("utf-8")
        entries = parse_vocabulary(data)
        assert [e.word for e in entries] == ["分词", "案例"]
        assert entries[1].freq == 3

    def test_file_object(self):
        entries = parse_vocabulary(io.BytesIO("苹果 10 n\n".encode("utf-8")))
        assert entries == [VocabularyEntry("苹果", 10, "n")]

    def test_empty_source(self):
        assert parse_vocabulary(b"") == []

    def test_bad_frequency_names_line(self):
        with pytest.raises(LoadError) as exc_info:
            parse_vocabulary("好 1\n坏 many\n", "words.txt")
        err = exc_info.value
        assert err.line_no == 2
        assert err.source == "words.txt"
        assert "words.txt" in str(err)
        assert "line 2" in str(err)

    def test_too_many_fields(self):
        with pytest.raises(LoadError) as exc_info:
            parse_vocabulary("好 1 a extra\n")
        assert exc_info.value.line_no == 1

    def test_not_utf8(self):
        with pytest.raises(LoadError):
            parse_vocabulary("分词 1\n".encode("gbk"))

    def test_to_line_fills_defaults(self):
        assert VocabularyEntry("案例").to_line(5) == "案例 5 x"
        assert VocabularyEntry("案例", 7, "n").to_line(5) == "案例 7 n"
