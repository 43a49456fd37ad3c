"""
Shared fixtures for the chissor test suite.
"""

import pytest

from chissor.engine import SegmentationEngine
from chissor.labels import File
from chissor.registry import DictionaryEntry, DictionaryRegistry
from chissor.vocabulary import parse_vocabulary

# Small vocabulary: every single character is only a prefix, so cuts are
# fully determined by the listed words.
FRUIT_VOCAB = "我 200 r\n喜欢 60 v\n苹果 100 n\n香蕉 80 n\n水果 50 n\n"
ANIMAL_VOCAB = "猫 100 n\n狗 100 n\n小猫 40 n\n"


def _make_engine(vocab: str, name: str = "<test>") -> SegmentationEngine:
    return SegmentationEngine.from_entries(parse_vocabulary(vocab, name), name)


@pytest.fixture
def make_engine():
    """Factory building an engine from vocabulary text."""
    return _make_engine


@pytest.fixture(scope="session")
def default_engine():
    """Engine on jieba's bundled dictionary (slow to build, shared)."""
    return SegmentationEngine.default()


@pytest.fixture
def fruit_engine():
    return _make_engine(FRUIT_VOCAB, "fruit.txt")


@pytest.fixture
def registry(fruit_engine):
    """Three small dictionaries, the first one selected."""
    return DictionaryRegistry([
        DictionaryEntry(File("fruit.txt"), fruit_engine),
        DictionaryEntry(File("animal.txt"), _make_engine(ANIMAL_VOCAB, "animal.txt")),
        DictionaryEntry(File("extra.txt"), _make_engine(FRUIT_VOCAB + ANIMAL_VOCAB, "extra.txt")),
    ])
