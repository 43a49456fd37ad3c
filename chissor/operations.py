"""
Text operations: the four ways Chissor turns input text into output.
"""

from enum import Enum
from typing import Callable, List

from chissor.engine import SegmentationEngine
from chissor.settings import NEWLINE


class TextOperation(Enum):
    SEGMENT = "segment"
    SEGMENT_GRANULAR = "segment-granular"
    SEARCH = "search"
    TAG = "tag"


TextTransform = Callable[[str], str]


def resolve_separator(separator: str) -> str:
    """An empty separator means one item per line."""
    return separator or NEWLINE


def format_tag(word: str, tag: str) -> str:
    return f"{word} {tag}"


def operation_items(engine: SegmentationEngine, operation: TextOperation,
                    text: str, use_hmm: bool = True) -> List[str]:
    """
    Run ``operation`` over ``text`` and return the items to be joined.

    Tagged words come back already formatted as ``"{word} {tag}"``.
    The search operation ignores ``use_hmm``.
    """
    if operation is TextOperation.SEGMENT:
        return engine.cut(text, use_hmm)
    if operation is TextOperation.SEGMENT_GRANULAR:
        return engine.cut_for_search(text, use_hmm)
    if operation is TextOperation.SEARCH:
        return engine.cut_all(text)
    if operation is TextOperation.TAG:
        return [format_tag(word, tag) for word, tag in engine.tag(text, use_hmm)]
    raise ValueError(f"Unknown operation: {operation}")


def apply_operation(engine: SegmentationEngine, operation: TextOperation, text: str,
                    separator: str = "", use_hmm: bool = True) -> str:
    """Run ``operation`` and join the items with the resolved separator."""
    items = operation_items(engine, operation, text, use_hmm)
    return resolve_separator(separator).join(items)


def make_transform(engine: SegmentationEngine, operation: TextOperation,
                   separator: str = "", use_hmm: bool = True) -> TextTransform:
    """Bind an engine and the current settings into a ``str -> str`` transform."""
    def transform(text: str) -> str:
        return apply_operation(engine, operation, text, separator, use_hmm)
    return transform
