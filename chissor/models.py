"""
Pydantic models for Chissor's JSON output.

Usage:
    from chissor.models import SegmentationResult

    result = SegmentationResult.from_engine(engine, TextOperation.TAG, "分词测试案例")
    print(result.model_dump_json())
"""

from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

from chissor.engine import SegmentationEngine
from chissor.operations import TextOperation, operation_items


class TaggedWord(BaseModel):
    """A word with its part-of-speech tag."""
    word: str = Field(..., description="Surface text")
    tag: str = Field(..., description="Part-of-speech tag, 'x' when unknown")


class SegmentationResult(BaseModel):
    """
    Result of running one operation over a text.

    ``words`` is always filled; ``tags`` only for the tag operation.
    """
    mode: TextOperation = Field(..., description="Operation that produced the result")
    dictionary: Optional[str] = Field(None, description="Label of the dictionary used")
    text: str = Field(..., description="Input text")
    words: List[str] = Field(default_factory=list, description="Output items in order")
    tags: Optional[List[TaggedWord]] = Field(None, description="Tagged words (tag mode only)")

    @classmethod
    def from_engine(cls, engine: SegmentationEngine, mode: TextOperation, text: str,
                    use_hmm: bool = True, dictionary: Optional[str] = None) -> "SegmentationResult":
        if mode is TextOperation.TAG:
            tags = [TaggedWord(word=w, tag=t) for w, t in engine.tag(text, use_hmm)]
            return cls(mode=mode, dictionary=dictionary, text=text,
                       words=[t.word for t in tags], tags=tags)
        return cls(
            mode=mode,
            dictionary=dictionary,
            text=text,
            words=operation_items(engine, mode, text, use_hmm),
        )


class BatchReport(BaseModel):
    """Summary of a batch run."""
    mode: TextOperation
    output_dir: str
    written: List[str] = Field(default_factory=list, description="Output files written, in order")
    failed: Optional[str] = Field(None, description="Input that stopped the batch, if any")
    error: Optional[str] = None

    @classmethod
    def from_run(cls, mode: TextOperation, output_dir: Path, written: Sequence[Path],
                 failed: Optional[Path] = None, error: Optional[str] = None) -> "BatchReport":
        return cls(
            mode=mode,
            output_dir=str(output_dir),
            written=[str(p) for p in written],
            failed=str(failed) if failed else None,
            error=error,
        )
