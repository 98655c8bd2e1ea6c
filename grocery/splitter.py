"""Split a pasted block of text into individual grocery item strings."""

from __future__ import annotations

import re

_NEWLINES = re.compile(r"\n+")
_COMMAS = re.compile(r"[,،]")
_WHITESPACE = re.compile(r"\s+")

# A space-separated line is only treated as a list when it has at least
# this many words, each of a plausible single-word item length.
_MIN_LIST_WORDS = 4
_MIN_WORD_LEN = 2
_MAX_WORD_LEN = 20


def _has_comma(text: str) -> bool:
    return "," in text or "،" in text


def _split_commas(text: str) -> list[str]:
    return [part.strip() for part in _COMMAS.split(text) if part.strip()]


def parse_item_list(text: str) -> list[str]:
    """Split raw input into item strings.

    Newlines take precedence (each line may additionally be comma-separated),
    then commas (Latin or Arabic), then whitespace for lines that look like a
    run of single-word items (``"milk eggs bread butter"``). Anything else is
    kept as one item. Duplicates are preserved.
    """
    trimmed = text.strip()
    if not trimmed:
        return []

    if "\n" in trimmed:
        items: list[str] = []
        for line in _NEWLINES.split(trimmed):
            line = line.strip()
            if not line:
                continue
            if _has_comma(line):
                items.extend(_split_commas(line))
            else:
                items.append(line)
        return items

    if _has_comma(trimmed):
        return _split_commas(trimmed)

    words = _WHITESPACE.split(trimmed)

    # One or two words: a single (possibly multi-word) product name
    if len(words) <= 2:
        return [trimmed]

    single_word_items = all(
        _MIN_WORD_LEN <= len(word) <= _MAX_WORD_LEN for word in words
    )
    if single_word_items and len(words) >= _MIN_LIST_WORDS:
        return words

    return [trimmed]
