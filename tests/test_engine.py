"""
Tests for engine.py - the jieba-backed segmentation engine.
"""

import pytest

from chissor.engine import SegmentationEngine
from chissor.errors import LoadError
from chissor.vocabulary import VocabularyEntry

FIXTURE_TEXT = "分词测试案例"


class TestDefaultDictionary:
    """Tests against jieba's bundled dictionary."""

    def test_cut(self, default_engine):
        assert default_engine.cut(FIXTURE_TEXT, True) == ["分词", "测试", "案例"]

    def test_cut_all(self, default_engine):
        assert default_engine.cut_all(FIXTURE_TEXT) == [
            "分", "分词", "词", "测", "测试", "试", "案", "案例", "例",
        ]

    def test_tag(self, default_engine):
        assert default_engine.tag(FIXTURE_TEXT, True) == [
            ("分词", "n"), ("测试", "vn"), ("案例", "n"),
        ]

    @pytest.mark.parametrize("use_hmm", [True, False])
    @pytest.mark.parametrize("text", [
        FIXTURE_TEXT,
        "我来到北京清华大学",
        "他说：“Hello, world!” 然后离开了。\n第二行  2024年",
        "",
    ])
    def test_cut_reconstructs_text(self, default_engine, text, use_hmm):
        assert "".join(default_engine.cut(text, use_hmm)) == text

    def test_tag_reconstructs_text(self, default_engine):
        text = "小明硕士毕业于中国科学院计算所"
        assert "".join(word for word, _ in default_engine.tag(text, True)) == text

    def test_cut_for_search_is_finer(self, default_engine):
        text = "小明硕士毕业于中国科学院计算所"
        words = default_engine.cut(text, True)
        search_words = default_engine.cut_for_search(text, True)
        assert len(search_words) >= len(words)
        for word in words:
            assert word in search_words


class TestVocabularyEngine:
    """Tests for engines built from parsed vocabulary."""

    def test_cut(self, fruit_engine):
        assert fruit_engine.cut("我喜欢苹果", False) == ["我", "喜欢", "苹果"]

    def test_tag_uses_vocabulary_tags(self, fruit_engine):
        assert fruit_engine.tag("我喜欢香蕉", False) == [("我", "r"), ("喜欢", "v"), ("香蕉", "n")]

    def test_missing_tag_is_unknown(self, make_engine):
        engine = make_engine("榴莲 10\n")
        assert engine.tag("榴莲", False) == [("榴莲", "x")]

    def test_missing_frequency_uses_default(self):
        engine = SegmentationEngine.from_entries([VocabularyEntry("榴莲")])
        assert engine.cut("榴莲", False) == ["榴莲"]

    def test_zero_frequencies(self, make_engine):
        engine = make_engine("苹果 0 n\n香蕉 0 n\n")
        for use_hmm in (False, True):
            assert "".join(engine.cut("苹果香蕉", use_hmm)) == "苹果香蕉"
            assert "".join(engine.cut_for_search("苹果香蕉", use_hmm)) == "苹果香蕉"
            assert "".join(word for word, _ in engine.tag("苹果香蕉", use_hmm)) == "苹果香蕉"

    def test_empty_vocabulary(self):
        with pytest.raises(LoadError):
            SegmentationEngine.from_entries([], "empty.txt")

    def test_add_word(self, fruit_engine):
        assert fruit_engine.cut("我喜欢榴莲", False) == ["我", "喜欢", "榴", "莲"]
        fruit_engine.add_word("榴莲", 100, "nz")
        assert fruit_engine.cut("我喜欢榴莲", False) == ["我", "喜欢", "榴莲"]
        assert fruit_engine.tag("榴莲", False) == [("榴莲", "nz")]

    def test_add_word_after_tagging(self, fruit_engine):
        fruit_engine.tag("苹果", False)
        fruit_engine.add_word("榴莲", 100, "nz")
        assert fruit_engine.tag("我喜欢榴莲", False)[-1] == ("榴莲", "nz")

    def test_merge(self, fruit_engine):
        fruit_engine.merge([VocabularyEntry("榴莲", 100, "nz"), VocabularyEntry("芒果", 90)])
        assert fruit_engine.cut("榴莲芒果", False) == ["榴莲", "芒果"]


class TestFromPath:
    """Tests for jieba-format dictionary files."""

    def test_load(self, tmp_path):
        path = tmp_path / "small.txt"
        path.write_text("苹果 100 n\n香蕉 80 n\n", encoding="utf-8")
        engine = SegmentationEngine.from_path(path)
        assert engine.cut("苹果香蕉", False) == ["苹果", "香蕉"]

    def test_zero_frequencies(self, tmp_path):
        path = tmp_path / "zero.txt"
        path.write_text("苹果 0 n\n", encoding="utf-8")
        engine = SegmentationEngine.from_path(path)
        assert "".join(engine.cut("苹果", False)) == "苹果"

    def test_malformed(self, tmp_path):
        path = tmp_path / "broken.txt"
        path.write_text("苹果 lots n\n", encoding="utf-8")
        with pytest.raises(LoadError):
            SegmentationEngine.from_path(path)
