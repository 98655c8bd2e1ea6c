"""Keyword-based category matching for cleaned item names."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .categories import OTHER_CATEGORY_ID, Category, CategoryRegistry
from .text import detect_language, normalize_text
from .units import get_item_unit_default

# Confidence per matching rule
CONFIDENCE_EXACT = 1.0
CONFIDENCE_OVERRIDE_SUBSTRING = 0.95
CONFIDENCE_SUBSTRING = 0.8
CONFIDENCE_WORD = 0.6
CONFIDENCE_NONE = 0.0

# Override terms must be longer than this to match as a substring
MIN_OVERRIDE_SUBSTRING_LEN = 3
# Words shorter than this are ignored by word-level matching
MIN_WORD_LEN = 3

# Compound/processed products whose final form decides the category,
# not the raw ingredient ("apple juice" is a beverage, not a fruit).
# term → (category_id, unit, quantity)
COMPOUND_OVERRIDES: dict[str, tuple[str, str, float]] = {
    # Juices
    "juice": ("beverages", "l", 1),
    "orange juice": ("beverages", "l", 1),
    "apple juice": ("beverages", "l", 1),
    "grape juice": ("beverages", "l", 1),
    "cranberry juice": ("beverages", "l", 1),
    "tomato juice": ("beverages", "l", 1),
    "carrot juice": ("beverages", "l", 1),
    "מיץ": ("beverages", "l", 1),
    "מיץ תפוזים": ("beverages", "l", 1),
    "מיץ תפוחים": ("beverages", "l", 1),
    "מיץ ענבים": ("beverages", "l", 1),
    "מיץ גזר": ("beverages", "l", 1),
    # Plant milks
    "almond milk": ("beverages", "l", 1),
    "oat milk": ("beverages", "l", 1),
    "soy milk": ("beverages", "l", 1),
    "חלב שקדים": ("beverages", "l", 1),
    "חלב שיבולת שועל": ("beverages", "l", 1),
    "חלב סויה": ("beverages", "l", 1),
    # Canned and preserved
    "tuna": ("canned", "unit", 1),
    "canned": ("canned", "unit", 1),
    "canned tuna": ("canned", "unit", 1),
    "canned corn": ("canned", "unit", 1),
    "canned beans": ("canned", "unit", 1),
    "canned tomatoes": ("canned", "unit", 1),
    "canned peas": ("canned", "unit", 1),
    "canned chickpeas": ("canned", "unit", 1),
    "tomato sauce": ("canned", "unit", 1),
    "tomato paste": ("canned", "unit", 1),
    "coconut milk": ("canned", "unit", 1),
    "sardines": ("canned", "unit", 1),
    "olives": ("canned", "unit", 1),
    "pickles": ("canned", "unit", 1),
    "chickpeas": ("canned", "unit", 1),
    "beans": ("canned", "unit", 1),
    "lentils": ("canned", "unit", 1),
    "טונה": ("canned", "unit", 1),
    "שימורים": ("canned", "unit", 1),
    "תירס": ("canned", "unit", 1),
    "תירס משומר": ("canned", "unit", 1),
    "טונה בשימורים": ("canned", "unit", 1),
    "רסק עגבניות": ("canned", "unit", 1),
    "רוטב עגבניות": ("canned", "unit", 1),
    "חלב קוקוס": ("canned", "unit", 1),
    "סרדינים": ("canned", "unit", 1),
    "זיתים": ("canned", "unit", 1),
    "חמוצים": ("canned", "unit", 1),
    "חומוס": ("canned", "unit", 1),
    "שעועית": ("canned", "unit", 1),
    "עדשים": ("canned", "unit", 1),
    "קטשופ": ("canned", "unit", 1),
    "ketchup": ("canned", "unit", 1),
    # Frozen
    "frozen": ("frozen", "package", 1),
    "קפוא": ("frozen", "package", 1),
    "קפואים": ("frozen", "package", 1),
    "קפואה": ("frozen", "package", 1),
    # Dried fruit
    "dried fruit": ("snacks", "package", 1),
    "dried fruits": ("snacks", "package", 1),
    "פירות יבשים": ("snacks", "package", 1),
    # Baking
    "sugar": ("baking", "kg", 1),
    "flour": ("baking", "kg", 1),
    "baking powder": ("baking", "unit", 1),
    "baking soda": ("baking", "unit", 1),
    "yeast": ("baking", "unit", 1),
    "vanilla": ("baking", "unit", 1),
    "cocoa": ("baking", "unit", 1),
    "honey": ("baking", "unit", 1),
    "סוכר": ("baking", "kg", 1),
    "קמח": ("baking", "kg", 1),
    "אבקת אפייה": ("baking", "unit", 1),
    "שמרים": ("baking", "unit", 1),
    "וניל": ("baking", "unit", 1),
    "קקאו": ("baking", "unit", 1),
    "דבש": ("baking", "unit", 1),
}

_NORMALIZED_OVERRIDES: dict[str, tuple[str, str, float]] = {
    normalize_text(term): value for term, value in COMPOUND_OVERRIDES.items()
}


@dataclass(frozen=True)
class CategorizationResult:
    category_id: str
    confidence: float  # 0.0〜1.0
    unit: str
    quantity: float


@dataclass(frozen=True)
class CategorySuggestion:
    category_id: str
    score: float


def _resolve(
    item_name: str, category: Category, confidence: float
) -> CategorizationResult:
    """Attach unit/quantity: item-specific default first, then the category's."""
    item_default = get_item_unit_default(item_name)
    return CategorizationResult(
        category_id=category.id,
        confidence=confidence,
        unit=item_default.unit if item_default else category.default_unit,
        quantity=item_default.default if item_default else category.default_quantity,
    )


def _normalized_keywords(category: Category, language: str) -> list[str]:
    return [normalize_text(k) for k in category.keywords_for(language)]


def categorize_by_keyword(
    item_name: str, registry: CategoryRegistry
) -> CategorizationResult:
    """Guess the category of a cleaned item name.

    Rules are tried in strict priority and the first hit wins: compound
    override (exact, then substring), exact keyword, substring keyword,
    word-level keyword, and finally the ``other`` category.
    """
    normalized = normalize_text(item_name)
    language = detect_language(item_name)

    # An empty name would be "contained" in every keyword
    if not normalized:
        return _resolve(item_name, registry.other(), CONFIDENCE_NONE)

    override = _NORMALIZED_OVERRIDES.get(normalized)
    if override is not None:
        category_id, unit, quantity = override
        return CategorizationResult(category_id, CONFIDENCE_EXACT, unit, quantity)

    for term, (category_id, unit, quantity) in _NORMALIZED_OVERRIDES.items():
        if len(term) > MIN_OVERRIDE_SUBSTRING_LEN and term in normalized:
            return CategorizationResult(
                category_id, CONFIDENCE_OVERRIDE_SUBSTRING, unit, quantity
            )

    # Normalized once per call; the registry may change between calls
    keyword_table = [
        (category, _normalized_keywords(category, language)) for category in registry
    ]

    for category, keywords in keyword_table:
        if normalized in keywords:
            return _resolve(item_name, category, CONFIDENCE_EXACT)

    for category, keywords in keyword_table:
        for keyword in keywords:
            if keyword in normalized or normalized in keyword:
                return _resolve(item_name, category, CONFIDENCE_SUBSTRING)

    words = normalized.split(" ")
    for category, keywords in keyword_table:
        for word in words:
            if len(word) < MIN_WORD_LEN:
                continue
            for keyword in keywords:
                if word == keyword or word in keyword:
                    return _resolve(item_name, category, CONFIDENCE_WORD)

    return _resolve(item_name, registry.other(), CONFIDENCE_NONE)


def categorize_multiple_by_keyword(
    item_names: Iterable[str], registry: CategoryRegistry
) -> list[CategorizationResult]:
    return [categorize_by_keyword(name, registry) for name in item_names]


def get_category_suggestions(
    item_name: str, registry: CategoryRegistry, limit: int = 3
) -> list[CategorySuggestion]:
    """Score every category against the item and return the best ``limit``.

    Scores: 1.0 exact, 0.8 item contains keyword, 0.7 keyword contains item,
    0.5 a word (3+ chars) of the item appears in a keyword. The catch-all
    ``other`` category is never suggested.
    """
    normalized = normalize_text(item_name)
    language = detect_language(item_name)
    words = [w for w in normalized.split(" ") if len(w) >= MIN_WORD_LEN]

    suggestions: list[CategorySuggestion] = []
    if not normalized:
        return suggestions

    for category in registry:
        if category.id == OTHER_CATEGORY_ID:
            continue

        best = 0.0
        for keyword in _normalized_keywords(category, language):
            if normalized == keyword:
                score = 1.0
            elif keyword in normalized:
                score = 0.8
            elif normalized in keyword:
                score = 0.7
            elif any(word in keyword for word in words):
                score = 0.5
            else:
                score = 0.0
            best = max(best, score)

        if best > 0:
            suggestions.append(CategorySuggestion(category.id, best))

    suggestions.sort(key=lambda s: s.score, reverse=True)
    return suggestions[:limit]


def does_category_match(
    item_name: str, category_id: str, registry: CategoryRegistry
) -> bool:
    """True if keyword matching confidently puts the item in ``category_id``."""
    result = categorize_by_keyword(item_name, registry)
    return result.category_id == category_id and result.confidence > 0.5
