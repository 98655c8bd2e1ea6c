"""Parsing and validation of oracle responses.

Oracle output is untrusted text. Every response goes through the same
steps: locate the first balanced JSON block, ``json.loads`` it, then
validate each field against the current category and unit registries.
Nothing here raises; problems come back as ``OracleErr``.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from ..models import ItemCategorizationResult
from ..text import normalize_text
from ..units import is_valid_unit
from . import AI_CONFIDENCE, OracleErr, OracleOk, OracleResult

if TYPE_CHECKING:
    from ..categories import CategoryRegistry

logger = logging.getLogger(__name__)

_CLOSERS = {"{": "}", "[": "]"}


def extract_json_block(text: str, opener: str) -> str | None:
    """Return the first balanced ``{...}`` or ``[...]`` substring of ``text``.

    Brackets inside JSON strings are ignored. Returns None if no opener is
    found or the block never closes.
    """
    closer = _CLOSERS[opener]
    start = text.find(opener)
    if start < 0:
        return None

    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth == 0:
                return text[start : i + 1]
    return None


def _load_block(text: str, opener: str) -> Any:
    block = extract_json_block(text, opener)
    if block is None:
        raise ValueError(f"no {opener}...{_CLOSERS[opener]} block in response")
    return json.loads(block)


def _quantity(value: Any) -> float:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0:
        return float(value)
    return 1.0


def _validate_entry(
    entry: Any, registry: CategoryRegistry, fallback_name: str
) -> OracleResult[ItemCategorizationResult]:
    if not isinstance(entry, dict):
        return OracleErr(f"expected an object, got {type(entry).__name__}")

    category_id = entry.get("categoryId")
    if not isinstance(category_id, str) or category_id not in registry:
        return OracleErr(f"unknown categoryId {category_id!r}")

    unit = entry.get("unit")
    if not is_valid_unit(unit):
        return OracleErr(f"unknown unit {unit!r}")

    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        name = fallback_name

    return OracleOk(
        ItemCategorizationResult(
            category_id=category_id,
            unit=unit,
            quantity=_quantity(entry.get("quantity")),
            confidence=AI_CONFIDENCE,
            source="ai",
            parsed_name=name.strip(),
        )
    )


def parse_single_response(
    text: str, registry: CategoryRegistry, item_name: str
) -> OracleResult[ItemCategorizationResult]:
    """Parse a single-item answer ``{"name", "categoryId", "unit", "quantity"}``."""
    try:
        payload = _load_block(text, "{")
    except ValueError as e:  # json.JSONDecodeError is a ValueError
        return OracleErr(f"unparseable response: {e}")

    return _validate_entry(payload, registry, item_name.strip())


def parse_batch_response(
    text: str, registry: CategoryRegistry
) -> OracleResult[dict[str, ItemCategorizationResult]]:
    """Parse a batch answer: a JSON array of ``{"original", "name", ...}``.

    Entries are validated one by one and invalid ones are skipped. Results
    are keyed by the normalized ``original`` input (or ``name`` if absent).
    """
    try:
        payload = _load_block(text, "[")
    except ValueError as e:
        return OracleErr(f"unparseable batch response: {e}")

    if not isinstance(payload, list):
        return OracleErr("batch response is not an array")

    results: dict[str, ItemCategorizationResult] = {}
    for entry in payload:
        if not isinstance(entry, dict):
            logger.warning("Skipping non-object batch entry: %r", entry)
            continue

        original = entry.get("original")
        if not isinstance(original, str) or not original.strip():
            original = entry.get("name")
        if not isinstance(original, str) or not original.strip():
            logger.warning("Skipping batch entry without original/name: %r", entry)
            continue

        validated = _validate_entry(entry, registry, original)
        if isinstance(validated, OracleErr):
            logger.warning(
                "Skipping invalid batch entry for %r: %s", original, validated.reason
            )
            continue
        results[normalize_text(original)] = validated.value

    return OracleOk(results)
