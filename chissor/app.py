"""
Application controller for Chissor.

Holds the state a front end edits (word fields, input and output
buffers, separator, HMM flag) and turns user intents into calls on the
dictionary registry and batch processor. Every failure is recorded in
the notification center under the intent's category; nothing is
raised to the front end.

Path arguments are what a file picker returned: None means the user
cancelled, which is a no-op.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

from chissor import settings
from chissor.batch import BatchProcessor
from chissor.errors import BatchError, ChissorError, InvariantViolation
from chissor.models import BatchReport
from chissor.notifications import NotificationCenter
from chissor.operations import TextOperation, apply_operation, make_transform
from chissor.registry import DictionaryRegistry

logger = logging.getLogger(__name__)


class App:
    """Front-end state plus the intents that act on it."""

    def __init__(self, registry: Optional[DictionaryRegistry] = None,
                 notifications: Optional[NotificationCenter] = None):
        self.registry = registry if registry is not None else DictionaryRegistry.with_builtin_dictionaries()
        self.notifications = notifications if notifications is not None else NotificationCenter()
        self.batch_processor = BatchProcessor()

        self.word = ""
        self.freq = ""
        self.tag = ""
        self.input = ""
        self.output = ""
        self.separator = settings.DEFAULT_SEPARATOR
        self.use_hmm = settings.DEFAULT_USE_HMM

    def _fail(self, category: str, error: Exception):
        logger.debug(f"{category} failed: {error}")
        self.notifications.record(category, error)

    # ------------------------------------------------------------------
    # Dictionaries
    # ------------------------------------------------------------------

    def new_dictionary(self, path: Optional[Path]) -> bool:
        """Create a dictionary from a file, named after the file."""
        if path is None:
            return False
        path = Path(path)
        try:
            with open(path, "rb") as f:
                self.registry.create_from(path.name, f)
        except (OSError, ChissorError) as e:
            self._fail("new", e)
            return False
        return True

    def load_dictionary(self, path: Optional[Path]) -> bool:
        """Merge a vocabulary file into the selected dictionary."""
        if path is None:
            return False
        path = Path(path)
        try:
            with open(path, "rb") as f:
                self.registry.merge_into_selected(f, path.name)
        except (OSError, ChissorError) as e:
            self._fail("load", e)
            return False
        return True

    def add_word(self) -> bool:
        try:
            self.registry.add_word(self.word, self.freq, self.tag)
        except ChissorError as e:
            self._fail("add", e)
            return False
        return True

    def remove_dictionary(self) -> bool:
        if not self.registry.can_remove_selected():
            self._fail("remove", InvariantViolation("cannot remove the only dictionary"))
            return False
        self.registry.remove_selected()
        return True

    def select_dictionary(self, index: int):
        self.registry.select(index)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def import_text(self, path: Optional[Path]) -> bool:
        if path is None:
            return False
        try:
            self.input = Path(path).read_text(encoding="utf-8").strip()
        except (OSError, ValueError) as e:
            self._fail("import", e)
            return False
        return True

    def export_text(self, path: Optional[Path]) -> bool:
        if path is None:
            return False
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(self.output + settings.NEWLINE)
        except OSError as e:
            self._fail("export", e)
            return False
        return True

    def run(self, operation: TextOperation) -> str:
        self.output = apply_operation(
            self.registry.selected.engine, operation, self.input, self.separator, self.use_hmm,
        )
        return self.output

    def segment(self) -> str:
        return self.run(TextOperation.SEGMENT)

    def segment_granular(self) -> str:
        return self.run(TextOperation.SEGMENT_GRANULAR)

    def search(self) -> str:
        return self.run(TextOperation.SEARCH)

    def tag_text(self) -> str:
        return self.run(TextOperation.TAG)

    # ------------------------------------------------------------------
    # Batch
    # ------------------------------------------------------------------

    def batch(self, paths: Optional[Sequence[Path]], output_dir: Optional[Path],
              operation: TextOperation) -> Optional[BatchReport]:
        """Run ``operation`` over ``paths`` into ``output_dir``."""
        if not paths or output_dir is None:
            return None
        transform = make_transform(
            self.registry.selected.engine, operation, self.separator, self.use_hmm,
        )
        try:
            written = self.batch_processor.run(paths, output_dir, transform)
        except BatchError as e:
            self._fail("batch", e)
            return BatchReport.from_run(operation, Path(output_dir), e.written, e.path, str(e))
        return BatchReport.from_run(operation, Path(output_dir), written)
