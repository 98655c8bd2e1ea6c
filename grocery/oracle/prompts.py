"""Prompt construction for the categorization oracle."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Sequence

from ..units import UNITS

if TYPE_CHECKING:
    from ..categories import CategoryRegistry

_INSTRUCTIONS = """\
You are a smart grocery list assistant. Parse grocery item input and extract:
1. The clean item name (without quantity/unit info)
2. The quantity (if specified in the input, otherwise use smart defaults)
3. The appropriate unit of measurement
4. The most appropriate category

CATEGORIZATION RULES:
- Categorize by the FINAL PRODUCT TYPE, not by ingredients.
- "orange juice", "apple juice", "grape juice" → beverages (NOT fruits)
- "almond milk", "oat milk", "soy milk" → beverages
- "frozen vegetables", "frozen fruits" → frozen (NOT vegetables/fruits)
- "dried fruits" → snacks (NOT fruits)
- "fruit yogurt" → dairy (NOT fruits)

CANNED PRODUCTS → "canned":
- "tuna", "canned tuna", "טונה" (NOT meat)
- "tomato sauce", "tomato paste", "רסק עגבניות" (NOT vegetables)
- "canned corn", "canned beans", "chickpeas", "lentils", "beans"
- "olives", "pickles", "חמוצים", "זיתים", "sardines", "סרדינים"
- "coconut milk", "חלב קוקוס", any preserved/jarred/canned item

BAKING PRODUCTS → "baking":
- "sugar", "סוכר", "flour", "קמח", "baking powder", "אבקת אפייה"
- "yeast", "שמרים", "vanilla", "וניל", "cocoa", "קקאו", "honey", "דבש"

Quantity formats to recognize:
- "item x5", "item X5", "itemx5", "x5 item" → quantity 5
- "5 items", "item 5" → quantity 5
- "2kg apples", "apples 2kg" → quantity 2, unit kg
- "milk 1.5l" → quantity 1.5, unit l
- "טונה x8", "8 טונה" → quantity 8
- "2% milk" is a product name, not a quantity

Default quantities when not specified:
- Fruits/Vegetables: 1 kg
- Beverages/Juices and milk: 1 liter
- Eggs: 1 package
- Most other items: 1 unit
"""

_RESPONSE_FORMAT = """\
Respond ONLY with a JSON object in this exact format:
{"name": "clean_item_name", "categoryId": "category_id", "unit": "unit_type", "quantity": number}

Examples:
- "milk x3" → {"name": "milk", "categoryId": "dairy", "unit": "l", "quantity": 3}
- "apples 2kg" → {"name": "apples", "categoryId": "fruits", "unit": "kg", "quantity": 2}
- "apple juice 2L" → {"name": "apple juice", "categoryId": "beverages", "unit": "l", "quantity": 2}
- "טונה x8" → {"name": "טונה", "categoryId": "canned", "unit": "unit", "quantity": 8}
- "תפוחים 2 קילו" → {"name": "תפוחים", "categoryId": "fruits", "unit": "kg", "quantity": 2}

If unsure about the category, use "other". Always extract the quantity if present.
"""


def build_system_prompt(registry: CategoryRegistry) -> str:
    """Build the system prompt from the current category and unit registries."""
    category_list = "\n".join(
        f"- {c.id}: {c.name.get('en', c.id)} ({c.name.get('he', c.id)})"
        for c in registry
    )
    unit_list = "\n".join(f"- {u.id}: {u.name['en']}" for u in UNITS.values())

    return (
        f"{_INSTRUCTIONS}\n"
        f"Available categories:\n{category_list}\n\n"
        f"Available units:\n{unit_list}\n\n"
        f"{_RESPONSE_FORMAT}"
    )


def build_item_prompt(item_name: str) -> str:
    return f"Parse and categorize this grocery item: {json.dumps(item_name, ensure_ascii=False)}"


def build_batch_prompt(item_names: Sequence[str]) -> str:
    numbered = ", ".join(
        f"{i}. {json.dumps(name, ensure_ascii=False)}"
        for i, name in enumerate(item_names, 1)
    )
    return (
        "Parse and categorize each of these grocery items. "
        "Extract quantities if specified.\n"
        f"Items: {numbered}\n\n"
        "Return a JSON array instead of a single object, one entry per item, "
        "echoing the input exactly in \"original\":\n"
        '[{"original": "original_input", "name": "clean_name", '
        '"categoryId": "...", "unit": "...", "quantity": ...}, ...]'
    )
