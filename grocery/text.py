"""Text normalization and language detection helpers."""

from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")
_HEBREW = re.compile(r"[\u0590-\u05FF]")
_LETTER = re.compile(r"[a-zA-Z\u0590-\u05FF]")


def normalize_text(text: str) -> str:
    """Lowercase, trim and collapse internal whitespace runs."""
    return _WHITESPACE.sub(" ", text.lower().strip())


def contains_hebrew(text: str) -> bool:
    return bool(_HEBREW.search(text))


def detect_language(text: str) -> str:
    """Return ``"he"`` if the text has any Hebrew character, else ``"en"``."""
    return "he" if contains_hebrew(text) else "en"


def has_letters(text: str) -> bool:
    """True if the text has at least one Latin or Hebrew letter."""
    return bool(_LETTER.search(text))
