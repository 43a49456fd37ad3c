"""
Vocabulary source parsing for Chissor.

A vocabulary source is UTF-8 text with one entry per line:

    word [frequency] [tag]

Fields are separated by whitespace, frequency is a non-negative integer
and tag is an arbitrary token. Blank lines are skipped. A single
malformed line rejects the whole source, so callers never see a
partially parsed vocabulary.
"""

import io
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Iterator, List, Optional, Union

from chissor.errors import LoadError, ParseError

VocabularySource = Union[bytes, str, BinaryIO]

BOM = "\ufeff"


@dataclass(frozen=True)
class VocabularyEntry:
    """One parsed vocabulary line."""
    word: str
    freq: Optional[int] = None
    tag: Optional[str] = None

    def to_line(self, default_freq: int, default_tag: str = "x") -> str:
        """Render as a fully populated ``word freq tag`` line."""
        freq = self.freq if self.freq is not None else default_freq
        return f"{self.word} {freq} {self.tag or default_tag}"


def parse_frequency(text: str) -> int:
    """
    Parse a frequency field.

    Only plain ASCII digits are accepted, so signs, underscores and
    non-ASCII numerals are all rejected.

    Raises:
        ParseError: If ``text`` is not a non-negative integer.
    """
    if not (text.isascii() and text.isdigit()):
        raise ParseError("frequency", text, "invalid frequency")
    return int(text)


def decode_source(source: VocabularySource, name: str = "<memory>") -> str:
    """Turn bytes, text or a binary file object into text."""
    if isinstance(source, str):
        text = source
    else:
        data = source if isinstance(source, (bytes, bytearray)) else source.read()
        try:
            text = bytes(data).decode("utf-8")
        except UnicodeDecodeError as e:
            raise LoadError(name, f"dictionary must be utf-8 ({e.reason})") from e
    return text[1:] if text.startswith(BOM) else text


def iter_entries(lines: Iterable[str], name: str = "<memory>") -> Iterator[VocabularyEntry]:
    """
    Parse vocabulary lines lazily.

    Args:
        lines: Decoded text lines.
        name: Source name used in error messages.

    Yields:
        VocabularyEntry for each non-blank line.

    Raises:
        LoadError: On the first malformed line.
    """
    for line_no, raw in enumerate(lines, 1):
        line = raw.strip()
        if not line:
            continue

        fields = line.split()
        if len(fields) > 3:
            raise LoadError(name, f"expected at most 3 fields, got {len(fields)}", line_no, line)

        word = fields[0]
        freq = None
        tag = None
        if len(fields) >= 2:
            try:
                freq = parse_frequency(fields[1])
            except ParseError as e:
                raise LoadError(name, str(e), line_no, line) from e
        if len(fields) == 3:
            tag = fields[2]

        yield VocabularyEntry(word, freq, tag)


def parse_vocabulary(source: VocabularySource, name: str = "<memory>") -> List[VocabularyEntry]:
    """
    Parse a complete vocabulary source.

    Args:
        source: Raw bytes, text, or a binary file object.
        name: Source name used in error messages.

    Returns:
        All entries in source order.

    Raises:
        LoadError: If the source is not UTF-8 or any line is malformed.

    Example:
        >>> parse_vocabulary("分词 100 n\\n案例\\n")
        [VocabularyEntry(word='分词', freq=100, tag='n'), VocabularyEntry(word='案例', freq=None, tag=None)]
    """
    text = decode_source(source, name)
    return list(iter_entries(io.StringIO(text), name))
