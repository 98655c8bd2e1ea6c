"""Measurement units, per-item unit defaults, and quantity helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .text import normalize_text

if TYPE_CHECKING:
    from .categories import CategoryRegistry

UNIT_TYPES: tuple[str, ...] = (
    "unit", "kg", "g", "l", "ml", "package", "dozen", "bunch",
)


@dataclass(frozen=True)
class Unit:
    id: str
    name: dict[str, str]  # {"en": ..., "he": ...}
    short_name: dict[str, str]
    step: float  # increment granularity
    min_value: float


@dataclass(frozen=True)
class ItemUnitDefault:
    unit: str
    default: float


@dataclass(frozen=True)
class UnitResolution:
    unit: str
    quantity: float
    source: str  # "item" | "category" | "default"


UNITS: dict[str, Unit] = {
    "unit": Unit("unit", {"en": "Units", "he": "יחידות"}, {"en": "x", "he": "x"}, 1, 1),
    "kg": Unit("kg", {"en": "Kilograms", "he": "קילוגרם"}, {"en": "kg", "he": 'ק"ג'}, 0.5, 0.5),
    "g": Unit("g", {"en": "Grams", "he": "גרם"}, {"en": "g", "he": "גר'"}, 100, 100),
    "l": Unit("l", {"en": "Liters", "he": "ליטר"}, {"en": "L", "he": "ל'"}, 0.5, 0.5),
    "ml": Unit("ml", {"en": "Milliliters", "he": "מיליליטר"}, {"en": "ml", "he": 'מ"ל'}, 100, 100),
    "package": Unit("package", {"en": "Package", "he": "אריזה"}, {"en": "pkg", "he": "אר'"}, 1, 1),
    "dozen": Unit("dozen", {"en": "Dozen", "he": "תריסר"}, {"en": "dz", "he": "תר'"}, 1, 1),
    "bunch": Unit("bunch", {"en": "Bunch", "he": "צרור"}, {"en": "bunch", "he": "צרור"}, 1, 1),
}

# Unit tokens recognized inside free text → canonical unit id
_UNIT_TOKENS: dict[str, str] = {
    "kg": "kg",
    'ק"ג': "kg",
    "קילו": "kg",
    "g": "g",
    "גרם": "g",
    "גר": "g",
    "l": "l",
    "ליטר": "l",
    "ml": "ml",
    'מ"ל': "ml",
}

# Item name → (unit, default quantity), English names
_ITEM_DEFAULTS_EN: dict[str, tuple[str, float]] = {
    # Fruits by weight
    "apple": ("kg", 1), "apples": ("kg", 1),
    "banana": ("kg", 1), "bananas": ("kg", 1),
    "orange": ("kg", 1), "oranges": ("kg", 1),
    "grape": ("kg", 1), "grapes": ("kg", 1),
    "mango": ("kg", 1), "mangoes": ("kg", 1),
    "peach": ("kg", 1), "peaches": ("kg", 1),
    "pear": ("kg", 1), "pears": ("kg", 1),
    "plum": ("kg", 1), "plums": ("kg", 1),
    "strawberry": ("kg", 0.5), "strawberries": ("kg", 0.5),
    "cherry": ("kg", 0.5), "cherries": ("kg", 0.5),
    "watermelon": ("unit", 1),
    "melon": ("unit", 1),
    "pineapple": ("unit", 1),
    "coconut": ("unit", 1),
    # Fruits by unit
    "avocado": ("unit", 2), "avocados": ("unit", 2),
    "lemon": ("unit", 3), "lemons": ("unit", 3),
    "lime": ("unit", 3), "limes": ("unit", 3),
    "kiwi": ("unit", 4),
    "pomegranate": ("unit", 2),
    # Vegetables by weight
    "tomato": ("kg", 1), "tomatoes": ("kg", 1),
    "potato": ("kg", 1), "potatoes": ("kg", 1),
    "carrot": ("kg", 1), "carrots": ("kg", 1),
    "cucumber": ("kg", 1), "cucumbers": ("kg", 1),
    "onion": ("kg", 1), "onions": ("kg", 1),
    "pepper": ("kg", 1), "peppers": ("kg", 1),
    "zucchini": ("kg", 1),
    "eggplant": ("kg", 1),
    "spinach": ("kg", 0.5),
    "lettuce": ("unit", 1),
    "cabbage": ("unit", 1),
    "broccoli": ("unit", 1),
    "cauliflower": ("unit", 1),
    "mushroom": ("kg", 0.5), "mushrooms": ("kg", 0.5),
    # Vegetables by unit
    "garlic": ("unit", 2),
    "ginger": ("unit", 1),
    "corn": ("unit", 3),
    # Herbs by bunch
    "parsley": ("bunch", 1),
    "cilantro": ("bunch", 1),
    "coriander": ("bunch", 1),
    "dill": ("bunch", 1),
    "mint": ("bunch", 1),
    "basil": ("bunch", 1),
    "green onion": ("bunch", 1), "green onions": ("bunch", 1),
    "scallion": ("bunch", 1), "scallions": ("bunch", 1),
    "celery": ("bunch", 1),
    # Dairy
    "milk": ("l", 1),
    "cheese": ("package", 1),
    "yogurt": ("unit", 4),
    "butter": ("package", 1),
    "cream": ("unit", 1),
    "sour cream": ("unit", 1),
    "cottage cheese": ("unit", 1),
    "cream cheese": ("package", 1),
    "eggs": ("package", 1), "egg": ("package", 1),
    # Meat
    "chicken": ("kg", 1),
    "beef": ("kg", 0.5),
    "pork": ("kg", 0.5),
    "lamb": ("kg", 0.5),
    "turkey": ("kg", 1),
    "fish": ("kg", 0.5),
    "salmon": ("kg", 0.5),
    "tuna": ("unit", 2),
    "ground beef": ("kg", 0.5),
    "ground chicken": ("kg", 0.5),
    "steak": ("kg", 0.5),
    "sausage": ("package", 1), "sausages": ("package", 1),
    "bacon": ("package", 1),
    "deli meat": ("g", 200),
    # Bakery
    "bread": ("unit", 1),
    "bagel": ("unit", 4), "bagels": ("unit", 4),
    "croissant": ("unit", 4), "croissants": ("unit", 4),
    "muffin": ("unit", 4), "muffins": ("unit", 4),
    "roll": ("unit", 6), "rolls": ("unit", 6),
    "baguette": ("unit", 1),
    "pita": ("package", 1),
    "tortilla": ("package", 1), "tortillas": ("package", 1),
    "cake": ("unit", 1),
    "pie": ("unit", 1),
    # Frozen
    "ice cream": ("unit", 1),
    "frozen pizza": ("unit", 1),
    "frozen vegetables": ("package", 1),
    "frozen fruit": ("package", 1),
    "frozen fish": ("package", 1),
    # Beverages
    "juice": ("l", 1),
    "soda": ("l", 1.5),
    "water": ("l", 1.5),
    "mineral water": ("l", 1.5),
    "coffee": ("package", 1),
    "tea": ("package", 1),
    "wine": ("unit", 1),
    "beer": ("unit", 6),
    # Pantry
    "pasta": ("package", 1),
    "rice": ("package", 1),
    "cereal": ("package", 1),
    "oatmeal": ("package", 1),
    "flour": ("kg", 1),
    "sugar": ("kg", 1),
    "salt": ("package", 1),
    "oil": ("l", 1),
    "olive oil": ("l", 1),
    "vinegar": ("unit", 1),
    "soy sauce": ("unit", 1),
    "ketchup": ("unit", 1),
    "mayonnaise": ("unit", 1),
    "mustard": ("unit", 1),
    "honey": ("unit", 1),
    "jam": ("unit", 1),
    "peanut butter": ("unit", 1),
    "nutella": ("unit", 1),
    # Snacks
    "chips": ("package", 1),
    "cookies": ("package", 1),
    "crackers": ("package", 1),
    "nuts": ("package", 1),
    "chocolate": ("unit", 1),
    "candy": ("package", 1),
    "popcorn": ("package", 1),
    "granola": ("package", 1),
    "protein bar": ("package", 1),
    # Household
    "toilet paper": ("package", 1),
    "paper towels": ("package", 1),
    "tissues": ("package", 1),
    "detergent": ("unit", 1),
    "dish soap": ("unit", 1),
    "laundry detergent": ("unit", 1),
    "fabric softener": ("unit", 1),
    "bleach": ("unit", 1),
    "sponge": ("package", 1), "sponges": ("package", 1),
    "trash bags": ("package", 1),
    "aluminum foil": ("unit", 1),
    "plastic wrap": ("unit", 1),
    "zip bags": ("package", 1),
    # Personal care
    "shampoo": ("unit", 1),
    "conditioner": ("unit", 1),
    "body wash": ("unit", 1),
    "soap": ("unit", 1),
    "toothpaste": ("unit", 1),
    "toothbrush": ("unit", 1),
    "deodorant": ("unit", 1),
    "lotion": ("unit", 1),
    "sunscreen": ("unit", 1),
    "razor blades": ("package", 1),
    "cotton pads": ("package", 1),
}

# Item name → (unit, default quantity), Hebrew names
_ITEM_DEFAULTS_HE: dict[str, tuple[str, float]] = {
    # פירות
    "תפוח": ("kg", 1), "תפוחים": ("kg", 1),
    "בננה": ("kg", 1), "בננות": ("kg", 1),
    "תפוז": ("kg", 1), "תפוזים": ("kg", 1),
    "ענבים": ("kg", 1),
    "מנגו": ("kg", 1),
    "אפרסק": ("kg", 1), "אפרסקים": ("kg", 1),
    "אגס": ("kg", 1),
    "שזיף": ("kg", 1),
    "תות": ("kg", 0.5), "תותים": ("kg", 0.5),
    "דובדבן": ("kg", 0.5),
    "אבטיח": ("unit", 1),
    "מלון": ("unit", 1),
    "אננס": ("unit", 1),
    "אבוקדו": ("unit", 2),
    "לימון": ("unit", 3), "לימונים": ("unit", 3),
    "ליים": ("unit", 3),
    "קיווי": ("unit", 4),
    "רימון": ("unit", 2),
    # ירקות
    "עגבניה": ("kg", 1), "עגבניות": ("kg", 1),
    "תפוחאדמה": ("kg", 1), "תפוח אדמה": ("kg", 1),
    "גזר": ("kg", 1),
    "מלפפון": ("kg", 1), "מלפפונים": ("kg", 1),
    "בצל": ("kg", 1),
    "פלפל": ("kg", 1),
    "קישוא": ("kg", 1),
    "חציל": ("kg", 1),
    "תרד": ("kg", 0.5),
    "חסה": ("unit", 1),
    "כרוב": ("unit", 1),
    "ברוקולי": ("unit", 1),
    "כרובית": ("unit", 1),
    "פטריות": ("kg", 0.5),
    "שום": ("unit", 2),
    "ג'ינג'ר": ("unit", 1),
    "תירס": ("unit", 3),
    "פטרוזיליה": ("bunch", 1),
    "כוסברה": ("bunch", 1),
    "שמיר": ("bunch", 1),
    "נענע": ("bunch", 1),
    "בזיליקום": ("bunch", 1),
    "בצל ירוק": ("bunch", 1),
    "סלרי": ("bunch", 1),
    # מוצרי חלב
    "חלב": ("l", 1),
    "גבינה": ("package", 1),
    "יוגורט": ("unit", 4),
    "חמאה": ("package", 1),
    "שמנת": ("unit", 1),
    "קוטג": ("unit", 1), "קוטג'": ("unit", 1),
    "לבנה": ("unit", 1),
    "ביצים": ("package", 1), "ביצה": ("package", 1),
    # בשר
    "עוף": ("kg", 1),
    "בקר": ("kg", 0.5),
    "כבש": ("kg", 0.5),
    "הודו": ("kg", 1),
    "דג": ("kg", 0.5),
    "סלמון": ("kg", 0.5),
    "טונה": ("unit", 2),
    "בשר טחון": ("kg", 0.5),
    "סטייק": ("kg", 0.5),
    "נקניקיות": ("package", 1),
    # מאפים
    "לחם": ("unit", 1),
    "בייגל": ("unit", 4),
    "קרואסון": ("unit", 4),
    "מאפין": ("unit", 4),
    "לחמניה": ("unit", 6), "לחמניות": ("unit", 6),
    "באגט": ("unit", 1),
    "פיתה": ("package", 1),
    "טורטייה": ("package", 1),
    "עוגה": ("unit", 1),
    # משקאות
    "מיץ": ("l", 1),
    "מים": ("l", 1.5),
    "קפה": ("package", 1),
    "תה": ("package", 1),
    "יין": ("unit", 1),
    "בירה": ("unit", 6),
    # מזווה
    "פסטה": ("package", 1),
    "אורז": ("package", 1),
    "קורנפלקס": ("package", 1),
    "שיבולת": ("package", 1),
    "קמח": ("kg", 1),
    "סוכר": ("kg", 1),
    "מלח": ("package", 1),
    "שמן": ("l", 1),
    "שמן זית": ("l", 1),
    "חומץ": ("unit", 1),
    "קטשופ": ("unit", 1),
    "מיונז": ("unit", 1),
    "חרדל": ("unit", 1),
    "דבש": ("unit", 1),
    "ריבה": ("unit", 1),
    # חטיפים
    "צ'יפס": ("package", 1),
    "עוגיות": ("package", 1),
    "קרקרים": ("package", 1),
    "אגוזים": ("package", 1),
    "שוקולד": ("unit", 1),
    "סוכריות": ("package", 1),
    "פופקורן": ("package", 1),
    # מוצרי בית
    "נייר טואלט": ("package", 1),
    "מגבות נייר": ("package", 1),
    "טישו": ("package", 1),
    "סבון כלים": ("unit", 1),
    "אבקת כביסה": ("unit", 1),
    "מרכך": ("unit", 1),
    "אקונומיקה": ("unit", 1),
    "ספוג": ("package", 1),
    "שקיות אשפה": ("package", 1),
    "נייר כסף": ("unit", 1),
    "ניילון נצמד": ("unit", 1),
    # טיפוח אישי
    "שמפו": ("unit", 1),
    "מרכך שיער": ("unit", 1),
    "סבון גוף": ("unit", 1),
    "סבון": ("unit", 1),
    "משחת שיניים": ("unit", 1),
    "מברשת שיניים": ("unit", 1),
    "דאודורנט": ("unit", 1),
    "קרם": ("unit", 1),
    "קרם הגנה": ("unit", 1),
}

# Units offered per built-in category in quantity editors
_CATEGORY_UNITS: dict[str, list[str]] = {
    "fruits": ["kg", "g", "unit", "bunch"],
    "vegetables": ["kg", "g", "unit", "bunch"],
    "dairy": ["unit", "l", "ml", "package", "g"],
    "meat": ["kg", "g", "unit", "package"],
    "bakery": ["unit", "package", "dozen"],
    "frozen": ["package", "unit", "kg", "g"],
    "beverages": ["l", "ml", "unit", "package"],
    "snacks": ["package", "unit", "g"],
    "household": ["unit", "package"],
    "personal": ["unit", "package", "ml"],
    "other": ["unit", "kg", "g", "l", "ml", "package"],
}

_CONVERSIONS: dict[tuple[str, str], float] = {
    ("kg", "g"): 1000,
    ("g", "kg"): 0.001,
    ("l", "ml"): 1000,
    ("ml", "l"): 0.001,
}


def get_all_units() -> list[str]:
    return list(UNIT_TYPES)


def get_unit(unit_id: str) -> Unit:
    return UNITS[unit_id]


def is_valid_unit(value: object) -> bool:
    return isinstance(value, str) and value in UNITS


def normalize_unit_token(token: str) -> str:
    """Map a unit token found in text (``kg``, ``ק"ג``, ``ליטר``...) to a unit id.

    Unknown tokens are returned lowercased.
    """
    lower = token.lower()
    return _UNIT_TOKENS.get(lower, lower)


def get_item_unit_default(item_name: str) -> ItemUnitDefault | None:
    """Look up the preferred unit for a common grocery noun.

    The English table is checked first, then the Hebrew one.
    """
    key = normalize_text(item_name)
    entry = _ITEM_DEFAULTS_EN.get(key) or _ITEM_DEFAULTS_HE.get(key)
    if entry is None:
        return None
    return ItemUnitDefault(unit=entry[0], default=entry[1])


def resolve_item_unit(
    item_name: str,
    category_id: str | None = None,
    registry: CategoryRegistry | None = None,
) -> UnitResolution:
    """Resolve unit and quantity: item table → category defaults → 1 unit."""
    item_default = get_item_unit_default(item_name)
    if item_default is not None:
        return UnitResolution(item_default.unit, item_default.default, "item")

    if category_id and registry is not None:
        category = registry.get(category_id)
        if category is not None:
            return UnitResolution(
                category.default_unit, category.default_quantity, "category"
            )

    return UnitResolution("unit", 1, "default")


def get_available_units_for_category(category_id: str) -> list[str]:
    return list(_CATEGORY_UNITS.get(category_id, UNIT_TYPES))


def get_unit_step(unit_id: str) -> float:
    unit = UNITS.get(unit_id)
    return unit.step if unit else 1


def get_unit_min_value(unit_id: str) -> float:
    unit = UNITS.get(unit_id)
    return unit.min_value if unit else 1


def _round_half_up(value: float) -> float:
    return math.floor(value + 0.5)


def _format_number(value: float) -> str:
    text = f"{value:.1f}"
    return text[:-2] if text.endswith(".0") else text


def format_quantity(quantity: float, unit_id: str) -> str:
    """Format a quantity for display; decimal-step units keep one decimal."""
    if get_unit_step(unit_id) < 1:
        return _format_number(quantity)
    return str(int(_round_half_up(quantity)))


def format_quantity_with_unit(
    quantity: float, unit_id: str, language: str = "en"
) -> str:
    """Format e.g. ``x3`` for plain units, ``1.5 kg`` / ``2 ק"ג`` otherwise."""
    if float(quantity).is_integer():
        qty = str(int(quantity))
    else:
        qty = _format_number(quantity)

    if unit_id == "unit":
        return f"x{qty}"

    short = UNITS[unit_id].short_name.get(language, UNITS[unit_id].short_name["en"])
    return f"{qty} {short}"


def adjust_quantity(quantity: float, unit_id: str, direction: str) -> float:
    """Step a quantity ``"up"`` or ``"down"``, never below the unit minimum."""
    step = get_unit_step(unit_id)
    min_value = get_unit_min_value(unit_id)

    if direction == "up":
        new_quantity = quantity + step
    elif direction == "down":
        new_quantity = quantity - step
    else:
        raise ValueError(f"direction must be 'up' or 'down', got {direction!r}")

    new_quantity = max(new_quantity, min_value)
    return _round_half_up(new_quantity * 10) / 10


def validate_quantity(quantity: float, unit_id: str) -> float:
    """Clamp to the unit minimum and round to the nearest step."""
    min_value = get_unit_min_value(unit_id)
    if quantity < min_value:
        return min_value
    step = get_unit_step(unit_id)
    return _round_half_up(quantity / step) * step


def convert_unit(quantity: float, from_unit: str, to_unit: str) -> float | None:
    """Convert between kg/g and l/ml. Returns None when no conversion exists."""
    factor = _CONVERSIONS.get((from_unit, to_unit))
    if factor is None:
        return None
    return quantity * factor
