"""
Dictionary names and their display labels.

Built-in dictionaries are named by kind and get a localized label;
user-loaded dictionaries keep the name they were loaded with. The
current locale is a single process-wide slot that only affects labels.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union

from chissor.settings import AVAILABLE_LOCALES, DEFAULT_LOCALE


class EmbeddedKind(Enum):
    """Built-in dictionary variants."""
    NORMAL = "normal"
    SMALL = "small"
    BIG = "big"


@dataclass(frozen=True)
class Embedded:
    kind: EmbeddedKind


@dataclass(frozen=True)
class File:
    name: str


DictionaryName = Union[Embedded, File]


EMBEDDED_LABELS: Dict[str, Dict[EmbeddedKind, str]] = {
    "en": {
        EmbeddedKind.NORMAL: "Default",
        EmbeddedKind.SMALL: "Default (small)",
        EmbeddedKind.BIG: "Default (big)",
    },
    "zh-CN": {
        EmbeddedKind.NORMAL: "默认",
        EmbeddedKind.SMALL: "默认（小）",
        EmbeddedKind.BIG: "默认（大）",
    },
    "zh-HK": {
        EmbeddedKind.NORMAL: "預設",
        EmbeddedKind.SMALL: "預設（小）",
        EmbeddedKind.BIG: "預設（大）",
    },
}


_locale = DEFAULT_LOCALE if DEFAULT_LOCALE in AVAILABLE_LOCALES else AVAILABLE_LOCALES[0]


def get_locale() -> str:
    return _locale


def set_locale(locale: str):
    """
    Switch the display language.

    Raises:
        ValueError: If ``locale`` is not one of AVAILABLE_LOCALES.
    """
    global _locale
    if locale not in AVAILABLE_LOCALES:
        raise ValueError(f"Unknown locale: {locale} (available: {', '.join(AVAILABLE_LOCALES)})")
    _locale = locale


def label(name: DictionaryName) -> str:
    """Display label for a dictionary name in the current locale."""
    if isinstance(name, Embedded):
        return EMBEDDED_LABELS[_locale][name.kind]
    return name.name
