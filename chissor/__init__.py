"""
Chissor: Chinese word segmentation with multiple dictionaries.
"""

from typing import List

__version__ = "0.2.0"

_default_engine = None


def segment(text: str, mode: str = "segment", use_hmm: bool = True) -> List[str]:
    """
    Segment text with jieba's bundled dictionary.

    This is the main high-level API for one-off use. To work with several
    dictionaries use chissor.registry.DictionaryRegistry.

    Args:
        text: Chinese text to process.
        mode: One of "segment", "segment-granular", "search", "tag".
        use_hmm: Use the Hidden Markov model for unknown words.

    Returns:
        Output items; in tag mode each item is "word tag".

    Example:
        >>> import chissor
        >>> chissor.segment("分词测试案例")
        ['分词', '测试', '案例']
    """
    from chissor.engine import SegmentationEngine
    from chissor.operations import TextOperation, operation_items

    global _default_engine
    if _default_engine is None:
        _default_engine = SegmentationEngine.default()

    return operation_items(_default_engine, TextOperation(mode), text, use_hmm)
