"""Extract an explicit quantity and unit from a single item string."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .text import has_letters
from .units import normalize_unit_token

_NUMBER = r"(\d+(?:\.\d+)?)"
_UNIT_TOKEN = r'(kg|g|l|ml|ק"ג|גרם|ליטר|מ"ל)'

# "milk x3", "milk X3", "milkx3", "milk ×3"
_X_SUFFIX = re.compile(rf"^(.+?)\s*[xX×]\s*{_NUMBER}\s*$")
# "x3 milk"
_X_PREFIX = re.compile(rf"^\s*[xX×]\s*{_NUMBER}\s+(.+)$")
# "apples 2kg", "apples 2 kg"
_UNIT_SUFFIX = re.compile(rf"^(.+?)\s+{_NUMBER}\s*{_UNIT_TOKEN}\s*$", re.IGNORECASE)
# "2kg apples", "2 kg apples"
_UNIT_PREFIX = re.compile(rf"^{_NUMBER}\s*{_UNIT_TOKEN}\s+(.+)$", re.IGNORECASE)
# "3 milk", "3milk"
_NUMBER_PREFIX = re.compile(rf"^{_NUMBER}\s*(.+)$")
# "milk 3"
_NUMBER_SUFFIX = re.compile(rf"^(.+?)\s+{_NUMBER}\s*$")

# Bounds for a bare trailing number to count as a quantity
MIN_TRAILING_QUANTITY = 1
MAX_TRAILING_QUANTITY = 999


@dataclass
class ParsedItem:
    name: str
    quantity: float | None = None
    unit: str | None = None  # canonical unit id


def parse_quantity_from_name(text: str) -> ParsedItem:
    """Parse an item string such as ``"milk x3"`` or ``"חלב 2 ליטר"``.

    Patterns are tried in a fixed order and the first match wins. Quantity
    and unit are only set when explicitly present in the text.

    Args:
        text: One item string, e.g. "2kg apples", "טונה x8", "2% milk"

    Returns:
        ParsedItem with the cleaned name. If nothing matches, the trimmed
        input is returned as the name.
    """
    trimmed = text.strip()
    if not trimmed:
        return ParsedItem(name="")

    m = _X_SUFFIX.match(trimmed)
    if m:
        return ParsedItem(name=m.group(1).strip(), quantity=float(m.group(2)))

    m = _X_PREFIX.match(trimmed)
    if m:
        return ParsedItem(name=m.group(2).strip(), quantity=float(m.group(1)))

    m = _UNIT_SUFFIX.match(trimmed)
    if m:
        return ParsedItem(
            name=m.group(1).strip(),
            quantity=float(m.group(2)),
            unit=normalize_unit_token(m.group(3)),
        )

    m = _UNIT_PREFIX.match(trimmed)
    if m:
        return ParsedItem(
            name=m.group(3).strip(),
            quantity=float(m.group(1)),
            unit=normalize_unit_token(m.group(2)),
        )

    # "2% milk" must stay a name
    m = _NUMBER_PREFIX.match(trimmed)
    if m and not m.group(2).startswith("%"):
        name = m.group(2).strip()
        if has_letters(name):
            return ParsedItem(name=name, quantity=float(m.group(1)))

    m = _NUMBER_SUFFIX.match(trimmed)
    if m:
        name = m.group(1).strip()
        qty = float(m.group(2))
        if has_letters(name) and MIN_TRAILING_QUANTITY <= qty <= MAX_TRAILING_QUANTITY:
            return ParsedItem(name=name, quantity=qty)

    return ParsedItem(name=trimmed)
