"""
Dictionary registry for Chissor.

Owns every loaded dictionary and the current selection. Invariants,
checked after every mutation:

    - the registry is never empty;
    - 0 <= selected_index < len(registry).

The selection is an index into the owning list, so each engine has
exactly one owner.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

from chissor import settings
from chissor.engine import SegmentationEngine
from chissor.errors import InvariantViolation, ParseError
from chissor.labels import DictionaryName, Embedded, EmbeddedKind, File, label
from chissor.vocabulary import VocabularySource, parse_frequency, parse_vocabulary

logger = logging.getLogger(__name__)


@dataclass
class DictionaryEntry:
    """A named segmentation dictionary."""
    name: DictionaryName
    engine: SegmentationEngine

    @property
    def label(self) -> str:
        return label(self.name)


class DictionaryRegistry:
    """Ordered collection of dictionaries with exactly one selected."""

    def __init__(self, entries: List[DictionaryEntry]):
        if not entries:
            raise InvariantViolation("a registry needs at least one dictionary")
        self._entries = list(entries)
        self._selected = 0

    @classmethod
    def with_builtin_dictionaries(cls) -> "DictionaryRegistry":
        """
        Registry pre-populated with the built-in dictionaries.

        The normal dictionary is jieba's bundled one and is always present.
        The small and big dictionaries are read from SMALL_DICT_PATH and
        BIG_DICT_PATH and skipped when those files are missing.
        """
        entries = [DictionaryEntry(Embedded(EmbeddedKind.NORMAL), SegmentationEngine.default())]

        for kind, path, url in (
            (EmbeddedKind.SMALL, settings.SMALL_DICT_PATH, settings.SMALL_DICT_URL),
            (EmbeddedKind.BIG, settings.BIG_DICT_PATH, settings.BIG_DICT_URL),
        ):
            if not path.is_file():
                logger.warning(f"Skipping {kind.value} dictionary, not found at {path} (download from {url})")
                continue
            entries.append(DictionaryEntry(Embedded(kind), SegmentationEngine.from_path(path)))

        return cls(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[DictionaryEntry]:
        return iter(self._entries)

    def names(self) -> List[str]:
        """Display labels in registry order."""
        return [entry.label for entry in self._entries]

    @property
    def selected_index(self) -> int:
        return self._selected

    @property
    def selected(self) -> DictionaryEntry:
        return self._entries[self._selected]

    def select(self, index: int):
        """
        Select the dictionary at ``index``.

        Raises:
            InvariantViolation: If ``index`` is out of range.
        """
        if not 0 <= index < len(self._entries):
            raise InvariantViolation(f"no dictionary at index {index}")
        self._selected = index

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def create_from(self, name: str, source: VocabularySource) -> DictionaryEntry:
        """
        Build a new dictionary from a vocabulary source and append it.

        The selection is left unchanged.

        Raises:
            LoadError: If the source is malformed. The registry is unchanged.
        """
        entries = parse_vocabulary(source, name)
        entry = DictionaryEntry(File(name), SegmentationEngine.from_entries(entries, name))
        self._entries.append(entry)
        logger.info(f"Created dictionary {name} with {len(entries)} entries")
        return entry

    def merge_into_selected(self, source: VocabularySource, name: str = "<memory>"):
        """
        Merge additional vocabulary into the selected dictionary.

        The whole source is validated before any word is added.

        Raises:
            LoadError: If the source is malformed. The dictionary is unchanged.
        """
        entries = parse_vocabulary(source, name)
        self.selected.engine.merge(entries)
        logger.info(f"Merged {len(entries)} entries from {name} into {self.selected.label}")

    def add_word(self, word: str, freq_text: str = "", tag_text: str = ""):
        """
        Add a word to the selected dictionary.

        Args:
            word: The word to add.
            freq_text: Frequency as text, empty for an automatic frequency.
            tag_text: Part-of-speech tag, empty for none.

        Raises:
            ParseError: If ``word`` is empty or ``freq_text`` is not a
                non-negative integer. Nothing is added.
        """
        if not word:
            raise ParseError("word", word, "word must not be empty")
        freq = parse_frequency(freq_text) if freq_text else None
        tag = tag_text or None
        self.selected.engine.add_word(word, freq, tag)
        logger.info(f"Added {word!r} to {self.selected.label} (freq={freq}, tag={tag})")

    def can_remove_selected(self) -> bool:
        return len(self._entries) > 1

    def remove_selected(self) -> DictionaryEntry:
        """
        Remove the selected dictionary.

        If it was the last one in order, the selection moves to the new last
        dictionary; otherwise it now points at the entry that followed.

        Raises:
            InvariantViolation: If this is the only dictionary. Callers must
                check can_remove_selected() first.
        """
        if not self.can_remove_selected():
            raise InvariantViolation("cannot remove the only dictionary")
        removed = self._entries.pop(self._selected)
        if self._selected == len(self._entries):
            self._selected -= 1
        logger.info(f"Removed dictionary {removed.label}")
        return removed

    def find(self, name: str) -> Optional[int]:
        """Index of the first dictionary labelled ``name``, if any."""
        for index, entry in enumerate(self._entries):
            if entry.label == name:
                return index
        return None
