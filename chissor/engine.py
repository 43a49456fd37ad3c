"""
Segmentation engine for Chissor.

Thin wrapper over jieba. The registry only talks to SegmentationEngine,
never to jieba directly, so the tokenizer can be built from jieba's
bundled dictionary, a dictionary file, or an in-memory vocabulary.
"""

import io
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import jieba
import jieba.posseg

from chissor.errors import LoadError
from chissor.settings import DEFAULT_WORD_FREQ
from chissor.vocabulary import VocabularyEntry

logger = logging.getLogger(__name__)


class _VocabularyTokenizer(jieba.Tokenizer):
    """
    jieba tokenizer whose main dictionary lives in memory.

    jieba only builds prefix dictionaries from files on disk (and caches
    them in the temp dir keyed by path), so the prefix dictionary is
    built here directly from the rendered vocabulary bytes instead.
    """

    def __init__(self, dict_bytes: bytes):
        super().__init__()
        self._dict_bytes = dict_bytes
        self.FREQ, total = self.gen_pfdict(self.get_dict_file())
        # jieba scores routes with log(total); an all-zero vocabulary is valid input.
        self.total = max(total, 1)
        self.initialized = True

    def get_dict_file(self):
        # Also read by POSTokenizer to build its word/tag table.
        return io.BytesIO(self._dict_bytes)


class SegmentationEngine:
    """
    One segmentation dictionary with cut, search and tag operations.

    All operations are pure functions of the current vocabulary and the
    input text. The vocabulary can grow through add_word() and merge().
    """

    def __init__(self, tokenizer: jieba.Tokenizer):
        self._tokenizer = tokenizer
        self._tagger: Optional[jieba.posseg.POSTokenizer] = None

    @classmethod
    def default(cls) -> "SegmentationEngine":
        """Engine backed by jieba's bundled dictionary (loaded on first use)."""
        return cls(jieba.Tokenizer())

    @classmethod
    def from_path(cls, path: Path) -> "SegmentationEngine":
        """
        Engine backed by a jieba-format dictionary file (``word freq tag``).

        Raises:
            LoadError: If the file is malformed.
            OSError: If the file cannot be read.
        """
        tokenizer = jieba.Tokenizer(str(path))
        try:
            tokenizer.initialize()
        except ValueError as e:
            raise LoadError(str(path), str(e)) from e
        tokenizer.total = max(tokenizer.total, 1)
        return cls(tokenizer)

    @classmethod
    def from_entries(cls, entries: Sequence[VocabularyEntry],
                     name: str = "<memory>") -> "SegmentationEngine":
        """
        Build a fresh engine from parsed vocabulary entries.

        Entries without a frequency get DEFAULT_WORD_FREQ.

        Raises:
            LoadError: If there are no entries.
        """
        if not entries:
            raise LoadError(name, "dictionary contains no entries")
        lines = [entry.to_line(DEFAULT_WORD_FREQ) for entry in entries]
        data = ("\n".join(lines) + "\n").encode("utf-8")
        return cls(_VocabularyTokenizer(data))

    # ------------------------------------------------------------------
    # Vocabulary mutation
    # ------------------------------------------------------------------

    def add_word(self, word: str, freq: Optional[int] = None, tag: Optional[str] = None):
        """Insert or overwrite a word. Without a frequency jieba suggests one."""
        self._tokenizer.add_word(word, freq, tag)

    def merge(self, entries: Sequence[VocabularyEntry]):
        """Add every entry to the vocabulary."""
        for entry in entries:
            self.add_word(entry.word, entry.freq, entry.tag)
        logger.debug(f"Merged {len(entries)} entries")

    # ------------------------------------------------------------------
    # Segmentation
    # ------------------------------------------------------------------

    def cut(self, text: str, use_hmm: bool = True) -> List[str]:
        return self._tokenizer.lcut(text, HMM=use_hmm)

    def cut_for_search(self, text: str, use_hmm: bool = True) -> List[str]:
        return self._tokenizer.lcut_for_search(text, HMM=use_hmm)

    def cut_all(self, text: str) -> List[str]:
        """
        Every dictionary word found in ``text``, ordered by start then end.

        Unlike jieba's own full mode, single characters that also start a
        longer word are kept.
        """
        dag = self._tokenizer.get_DAG(text)
        return [text[start:end + 1] for start in sorted(dag) for end in dag[start]]

    def tag(self, text: str, use_hmm: bool = True) -> List[Tuple[str, str]]:
        return [(pair.word, pair.flag) for pair in self.tagger.lcut(text, HMM=use_hmm)]

    @property
    def tagger(self) -> jieba.posseg.POSTokenizer:
        """Part-of-speech tokenizer sharing this engine's vocabulary."""
        if self._tagger is None:
            self._tokenizer.check_initialized()
            self._tagger = jieba.posseg.POSTokenizer(self._tokenizer)
        return self._tagger
