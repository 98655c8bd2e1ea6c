"""Built-in grocery categories and the merged category registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator

from .units import is_valid_unit

OTHER_CATEGORY_ID = "other"


class InvalidCategoryError(ValueError):
    """A category definition is malformed."""


class DuplicateCategoryError(InvalidCategoryError):
    """Two categories share the same identifier."""


@dataclass(frozen=True)
class Category:
    id: str
    name: dict[str, str]  # {"en": ..., "he": ...}
    color: str  # opaque display token
    keywords: dict[str, list[str]] = field(default_factory=dict)
    default_unit: str = "unit"
    default_quantity: float = 1
    icon: str | None = None
    is_default: bool = False

    def keywords_for(self, language: str) -> list[str]:
        """Keyword list for a language; English when that language has none."""
        keywords = self.keywords.get(language)
        if keywords is None:
            keywords = self.keywords.get("en", [])
        return keywords


DEFAULT_CATEGORIES: list[Category] = [
    Category(
        id="fruits",
        name={"en": "Fruits", "he": "פירות"},
        color="bg-emerald-500",
        icon="Apple",
        is_default=True,
        keywords={
            "en": [
                "apple", "apples", "banana", "bananas", "orange", "oranges",
                "grape", "grapes", "mango", "mangoes", "peach", "peaches",
                "pear", "pears", "plum", "plums", "strawberry", "strawberries",
                "cherry", "cherries", "watermelon", "melon", "pineapple",
                "coconut", "avocado", "avocados", "lemon", "lemons", "lime",
                "limes", "kiwi", "pomegranate", "blueberry", "blueberries",
                "raspberry", "raspberries", "blackberry", "blackberries",
                "papaya", "passion fruit", "dragon fruit", "grapefruit",
                "tangerine", "clementine", "nectarine", "apricot", "fig", "date",
            ],
            "he": [
                "תפוח", "תפוחים", "בננה", "בננות", "תפוז", "תפוזים", "ענבים",
                "מנגו", "אפרסק", "אפרסקים", "אגס", "שזיף", "תות", "תותים",
                "דובדבן", "אבטיח", "מלון", "אננס", "קוקוס", "אבוקדו", "לימון",
                "לימונים", "ליים", "קיווי", "רימון", "אוכמניות", "פטל",
                "פפאיה", "פסיפלורה", "אשכולית", "קלמנטינה", "נקטרינה", "משמש",
                "תאנה", "תמר",
            ],
        },
        default_unit="kg",
        default_quantity=1,
    ),
    Category(
        id="vegetables",
        name={"en": "Vegetables", "he": "ירקות"},
        color="bg-lime-500",
        icon="Carrot",
        is_default=True,
        keywords={
            "en": [
                "tomato", "tomatoes", "potato", "potatoes", "carrot", "carrots",
                "cucumber", "cucumbers", "onion", "onions", "pepper", "peppers",
                "zucchini", "eggplant", "spinach", "lettuce", "cabbage",
                "broccoli", "cauliflower", "mushroom", "mushrooms", "garlic",
                "ginger", "corn", "parsley", "cilantro", "coriander", "dill",
                "mint", "basil", "green onion", "green onions", "scallion",
                "scallions", "celery", "asparagus", "artichoke", "beet",
                "beets", "radish", "turnip", "sweet potato", "pumpkin",
                "squash", "kale", "arugula", "chard", "leek", "fennel", "okra",
                "peas", "green beans", "bean sprouts",
            ],
            "he": [
                "עגבניה", "עגבניות", "תפוח אדמה", "תפוחי אדמה", "גזר", "מלפפון",
                "מלפפונים", "בצל", "פלפל", "קישוא", "חציל", "תרד", "חסה", "כרוב",
                "ברוקולי", "כרובית", "פטריות", "שום", "ג'ינג'ר", "תירס",
                "פטרוזיליה", "כוסברה", "שמיר", "נענע", "בזיליקום", "בצל ירוק",
                "סלרי", "אספרגוס", "ארטישוק", "סלק", "צנון", "בטטה", "דלעת",
                "קייל", "רוקט", "מנגולד", "כרישה", "שומר", "במיה", "אפונה",
                "שעועית ירוקה", "נבטים",
            ],
        },
        default_unit="kg",
        default_quantity=1,
    ),
    Category(
        id="dairy",
        name={"en": "Dairy", "he": "מוצרי חלב"},
        color="bg-sky-500",
        icon="Milk",
        is_default=True,
        keywords={
            "en": [
                "milk", "cheese", "yogurt", "butter", "cream", "sour cream",
                "cottage cheese", "cream cheese", "mozzarella", "cheddar",
                "parmesan", "feta", "brie", "gouda", "ricotta", "mascarpone",
                "whipped cream", "half and half", "eggs", "egg",
            ],
            "he": [
                "חלב", "גבינה", "יוגורט", "חמאה", "שמנת", "שמנת חמוצה", "קוטג",
                "קוטג'", "גבינת שמנת", "מוצרלה", "צ'דר", "פרמזן", "פטה", "ברי",
                "גאודה", "ריקוטה", "מסקרפונה", "קצפת", "ביצים", "ביצה", "לבנה",
                "גבינה צהובה", "גבינה לבנה",
            ],
        },
        default_unit="unit",
        default_quantity=1,
    ),
    Category(
        id="meat",
        name={"en": "Meat", "he": "בשר"},
        color="bg-rose-500",
        icon="Beef",
        is_default=True,
        keywords={
            "en": [
                "chicken", "beef", "pork", "lamb", "turkey", "fish", "salmon",
                "ground beef", "ground chicken", "ground turkey", "steak",
                "sausage", "sausages", "bacon", "ham", "deli meat", "hot dog",
                "hot dogs", "meatballs", "ribs", "wings", "drumsticks",
                "thighs", "breast", "fillet", "shrimp", "prawns", "crab",
                "lobster", "scallops", "mussels", "clams", "oysters", "cod",
                "tilapia", "trout", "halibut", "fresh fish",
            ],
            "he": [
                "עוף", "בקר", "כבש", "הודו", "דג", "סלמון", "בשר טחון", "סטייק",
                "נקניקיות", "נקניק", "שניצל", "כנפיים", "שוקיים", "חזה", "פילה",
                "שרימפס", "סרטנים", "לובסטר", "צדפות", "קלמרי", "דג בורי",
                "דג טרי", "דג אמנון", "קבב", "המבורגר", "קציצות",
            ],
        },
        default_unit="kg",
        default_quantity=0.5,
    ),
    Category(
        id="bakery",
        name={"en": "Bakery", "he": "מאפים"},
        color="bg-amber-500",
        icon="Croissant",
        is_default=True,
        keywords={
            "en": [
                "bread", "bagel", "bagels", "croissant", "croissants", "muffin",
                "muffins", "roll", "rolls", "baguette", "pita", "tortilla",
                "tortillas", "cake", "pie", "donut", "donuts", "pastry",
                "pastries", "danish", "scone", "biscuit", "cornbread",
                "focaccia", "ciabatta", "sourdough", "rye bread", "whole wheat",
                "brioche", "challah", "naan", "flatbread", "crackers",
                "breadsticks",
            ],
            "he": [
                "לחם", "בייגל", "קרואסון", "מאפין", "לחמניה", "לחמניות", "באגט",
                "פיתה", "טורטייה", "עוגה", "פאי", "סופגניה", "מאפה", "דניש",
                "סקון", "ביסקוויט", "פוקאצ'ה", "צ'באטה", "לחם שאור", "לחם שיפון",
                "לחם מלא", "בריוש", "חלה", "נאן", "לחם שטוח", "קרקרים",
                "מקלות לחם", "בורקס", "רוגלך", "שטרודל",
            ],
        },
        default_unit="unit",
        default_quantity=1,
    ),
    Category(
        id="frozen",
        name={"en": "Frozen", "he": "קפואים"},
        color="bg-cyan-500",
        icon="Snowflake",
        is_default=True,
        keywords={
            "en": [
                "ice cream", "frozen pizza", "frozen vegetables", "frozen fruit",
                "frozen fish", "frozen chicken", "frozen dinner", "frozen meal",
                "frozen yogurt", "popsicle", "ice", "sorbet", "gelato",
                "frozen waffles", "frozen pancakes", "frozen fries",
                "frozen peas", "frozen corn", "frozen berries", "frozen shrimp",
            ],
            "he": [
                "גלידה", "פיצה קפואה", "ירקות קפואים", "פירות קפואים", "דג קפוא",
                "עוף קפוא", "ארוחה קפואה", "יוגורט קפוא", "ארטיק", "קרח", "סורבה",
                "ג'לטו", "וופל קפוא", "פנקייק קפוא", "צ'יפס קפוא", "אפונה קפואה",
                "תירס קפוא", "פירות יער קפואים",
            ],
        },
        default_unit="package",
        default_quantity=1,
    ),
    Category(
        id="beverages",
        name={"en": "Beverages", "he": "משקאות"},
        color="bg-violet-500",
        icon="Coffee",
        is_default=True,
        keywords={
            "en": [
                "juice", "soda", "water", "mineral water", "sparkling water",
                "coffee", "tea", "wine", "beer", "energy drink", "sports drink",
                "lemonade", "iced tea", "smoothie", "milkshake",
                "hot chocolate", "espresso", "cappuccino", "latte",
                "coconut water", "almond milk", "oat milk", "soy milk",
                "kombucha",
            ],
            "he": [
                "מיץ", "סודה", "מים", "מים מינרליים", "מים מוגזים", "קפה", "תה",
                "יין", "בירה", "משקה אנרגיה", "לימונדה", "תה קר", "סמוזי",
                "מילקשייק", "שוקו חם", "אספרסו", "קפוצ'ינו", "לאטה", "מי קוקוס",
                "חלב שקדים", "חלב שיבולת שועל", "חלב סויה", "קומבוצ'ה",
            ],
        },
        default_unit="l",
        default_quantity=1,
    ),
    Category(
        id="snacks",
        name={"en": "Snacks", "he": "חטיפים"},
        color="bg-orange-500",
        icon="Cookie",
        is_default=True,
        keywords={
            "en": [
                "chips", "cookies", "crackers", "nuts", "chocolate", "candy",
                "popcorn", "granola", "protein bar", "energy bar", "pretzels",
                "trail mix", "dried fruit", "gummy", "gummies", "licorice",
                "jerky", "rice cakes", "peanuts", "almonds", "cashews",
                "pistachios", "walnuts", "sunflower seeds", "pumpkin seeds",
            ],
            "he": [
                "צ'יפס", "עוגיות", "קרקרים", "אגוזים", "שוקולד", "סוכריות",
                "פופקורן", "גרנולה", "חטיף חלבון", "בייגלה", "פירות יבשים",
                "סוכריות גומי", "בשר מיובש", "פריכיות", "בוטנים", "שקדים", "קשיו",
                "פיסטוק", "אגוזי מלך", "גרעיני חמניה", "גרעיני דלעת", "במבה",
                "ביסלי", "קליק",
            ],
        },
        default_unit="package",
        default_quantity=1,
    ),
    Category(
        id="household",
        name={"en": "Household", "he": "מוצרי בית"},
        color="bg-slate-500",
        icon="Home",
        is_default=True,
        keywords={
            "en": [
                "toilet paper", "paper towels", "tissues", "detergent",
                "dish soap", "laundry detergent", "fabric softener", "bleach",
                "sponge", "sponges", "trash bags", "aluminum foil",
                "plastic wrap", "zip bags", "cleaning spray", "glass cleaner",
                "floor cleaner", "disinfectant", "air freshener", "candles",
                "light bulbs", "batteries", "matches", "garbage bags",
                "sandwich bags",
            ],
            "he": [
                "נייר טואלט", "מגבות נייר", "טישו", "סבון כלים", "אבקת כביסה",
                "מרכך כביסה", "אקונומיקה", "ספוג", "שקיות אשפה", "נייר כסף",
                "ניילון נצמד", "שקיות זיפלוק", "תרסיס ניקוי", "מנקה חלונות",
                "מנקה רצפות", "חומר חיטוי", "מפיץ ריח", "נרות", "נורות", "סוללות",
                "גפרורים", "שקיות כריכים",
            ],
        },
        default_unit="unit",
        default_quantity=1,
    ),
    Category(
        id="personal",
        name={"en": "Personal Care", "he": "טיפוח אישי"},
        color="bg-pink-500",
        icon="Heart",
        is_default=True,
        keywords={
            "en": [
                "shampoo", "conditioner", "body wash", "soap", "toothpaste",
                "toothbrush", "deodorant", "lotion", "sunscreen",
                "razor blades", "cotton pads", "q-tips", "floss", "mouthwash",
                "hand sanitizer", "face wash", "moisturizer", "lip balm",
                "makeup", "mascara", "foundation", "nail polish", "perfume",
                "cologne", "hair gel", "hair spray", "body lotion",
                "hand cream", "shaving cream",
            ],
            "he": [
                "שמפו", "מרכך שיער", "סבון גוף", "סבון", "משחת שיניים",
                "מברשת שיניים", "דאודורנט", "קרם", "קרם הגנה", "סכיני גילוח",
                "פדים", "מקלוני אוזניים", "חוט דנטלי", "מי פה", "ג'ל חיטוי",
                "סבון פנים", "קרם לחות", "שפתון", "איפור", "מסקרה", "פאונדיישן",
                "לק", "בושם", "ג'ל לשיער", "ספריי לשיער", "קרם גוף", "קרם ידיים",
                "קצף גילוח",
            ],
        },
        default_unit="unit",
        default_quantity=1,
    ),
    Category(
        id="baking",
        name={"en": "Baking", "he": "אפייה"},
        color="bg-amber-400",
        icon="CakeSlice",
        is_default=True,
        keywords={
            "en": [
                "sugar", "flour", "baking powder", "baking soda", "yeast",
                "vanilla", "vanilla extract", "cocoa", "cocoa powder",
                "chocolate chips", "brown sugar", "powdered sugar",
                "icing sugar", "cornstarch", "corn starch", "honey",
                "maple syrup", "molasses", "food coloring", "sprinkles",
                "frosting", "icing", "cake mix", "brownie mix", "muffin mix",
                "almond flour", "coconut flour", "bread flour",
                "all purpose flour", "self rising flour", "gelatin", "pectin",
                "cream of tartar", "salt", "cinnamon", "nutmeg", "ginger",
                "baking chocolate", "white chocolate", "dark chocolate",
                "milk chocolate", "condensed milk", "evaporated milk",
                "coconut cream", "shortening", "lard", "pie crust",
                "puff pastry", "phyllo dough", "fondant", "marzipan",
            ],
            "he": [
                "סוכר", "קמח", "אבקת אפייה", "סודה לשתייה", "שמרים", "וניל",
                "תמצית וניל", "קקאו", "אבקת קקאו", "שוקולד צ'יפס", "סוכר חום",
                "אבקת סוכר", "סוכר דק", "עמילן", "עמילן תירס", "דבש", "סילאן",
                "מייפל", "צבע מאכל", "סוכריות לקישוט", "ציפוי", "תערובת עוגה",
                "תערובת בראוניז", "תערובת מאפינס", "קמח שקדים", "קמח קוקוס",
                "קמח לחם", "קמח רב תכליתי", "קמח תופח", "ג'לטין", "פקטין", "מלח",
                "קינמון", "אגוז מוסקט", "ג'ינג'ר", "שוקולד לאפייה", "שוקולד לבן",
                "שוקולד מריר", "שוקולד חלב", "חלב מרוכז", "חלב מאודה", "קרם קוקוס",
                "שומן צמחי", "מרגרינה", "בצק פריך", "בצק עלים", "בצק פילו",
                "פונדנט", "מרציפן",
            ],
        },
        default_unit="package",
        default_quantity=1,
    ),
    Category(
        id="canned",
        name={"en": "Canned", "he": "שימורים"},
        color="bg-yellow-600",
        icon="Package",
        is_default=True,
        keywords={
            "en": [
                "canned", "tuna", "canned tuna", "canned beans", "canned corn",
                "canned tomatoes", "canned peas", "canned chickpeas",
                "canned olives", "canned mushrooms", "canned fruit",
                "canned peaches", "canned pineapple", "sardines", "anchovies",
                "tomato paste", "tomato sauce", "coconut milk",
                "condensed milk", "evaporated milk", "canned soup",
                "canned vegetables", "pickles", "olives", "capers",
                "artichoke hearts", "baked beans", "refried beans",
                "black beans", "kidney beans", "chickpeas", "lentils",
            ],
            "he": [
                "שימורים", "טונה", "טונה בשימורים", "תירס", "תירס משומר",
                "עגבניות משומרות", "אפונה משומרת", "חומוס משומר", "זיתים",
                "פטריות משומרות", "פירות משומרים", "אפרסקים משומרים",
                "אננס משומר", "סרדינים", "אנשובי", "רסק עגבניות", "רוטב עגבניות",
                "חלב קוקוס", "חלב מרוכז", "מרק משומר", "ירקות משומרים",
                "מלפפון חמוץ", "חמוצים", "צלפים", "לבבות ארטישוק", "שעועית",
                "עדשים",
            ],
        },
        default_unit="unit",
        default_quantity=1,
    ),
    Category(
        id=OTHER_CATEGORY_ID,
        name={"en": "Other", "he": "אחר"},
        color="bg-gray-500",
        icon="Package",
        is_default=True,
        keywords={"en": [], "he": []},
        default_unit="unit",
        default_quantity=1,
    ),
]


class CategoryRegistry:
    """Ordered, merged view over the built-in and custom categories.

    Registry order is matching priority. Custom categories follow the
    built-ins, and ``other`` is always kept last as the catch-all.
    """

    def __init__(
        self,
        custom: Iterable[Category] = (),
        defaults: Iterable[Category] = DEFAULT_CATEGORIES,
    ) -> None:
        defaults = list(defaults)
        custom = list(custom)

        for category in custom:
            if category.id == OTHER_CATEGORY_ID:
                raise InvalidCategoryError(
                    f"custom category may not use the reserved id {OTHER_CATEGORY_ID!r}"
                )
            if not is_valid_unit(category.default_unit):
                raise InvalidCategoryError(
                    f"category {category.id!r} has unknown default unit "
                    f"{category.default_unit!r}"
                )

        others = [c for c in defaults if c.id == OTHER_CATEGORY_ID]
        ordered = [c for c in defaults if c.id != OTHER_CATEGORY_ID] + custom + others

        by_id: dict[str, Category] = {}
        for category in ordered:
            if category.id in by_id:
                raise DuplicateCategoryError(f"duplicate category id {category.id!r}")
            by_id[category.id] = category

        self._categories: tuple[Category, ...] = tuple(ordered)
        self._by_id = by_id
        self._defaults = tuple(defaults)

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._by_id

    def __repr__(self) -> str:
        return f"CategoryRegistry({list(self._by_id)!r})"

    @property
    def custom(self) -> list[Category]:
        return [c for c in self._categories if not c.is_default]

    def get(self, category_id: str) -> Category | None:
        return self._by_id.get(category_id)

    def ids(self) -> list[str]:
        return [c.id for c in self._categories]

    def other(self) -> Category:
        """The catch-all category (the last one if ``other`` is missing)."""
        return self._by_id.get(OTHER_CATEGORY_ID) or self._categories[-1]

    def with_custom(self, custom: Iterable[Category]) -> CategoryRegistry:
        """Return a new registry with the given custom categories."""
        return CategoryRegistry(custom=custom, defaults=self._defaults)

    def category_name(self, category_id: str, language: str = "en") -> str:
        category = self.get(category_id)
        if category is None:
            return category_id
        return category.name.get(language) or category_id

    def category_color(self, category_id: str) -> str:
        category = self.get(category_id)
        return category.color if category else "bg-gray-500"

    def default_unit(self, category_id: str) -> str:
        category = self.get(category_id)
        return category.default_unit if category else "unit"

    def default_quantity(self, category_id: str) -> float:
        category = self.get(category_id)
        return category.default_quantity if category else 1


def category_from_dict(data: dict[str, Any]) -> Category:
    """Build a custom category from a config mapping.

    Expected keys: ``id``, ``name_en``, ``name_he``, ``color``, ``icon``,
    ``keywords_en``, ``keywords_he``, ``default_unit``, ``default_quantity``.
    """
    category_id = str(data.get("id", "")).strip()
    if not category_id:
        raise InvalidCategoryError("custom category requires an 'id'")

    name_en = data.get("name_en") or category_id
    name_he = data.get("name_he") or name_en

    return Category(
        id=category_id,
        name={"en": name_en, "he": name_he},
        color=data.get("color", "bg-gray-500"),
        icon=data.get("icon"),
        is_default=False,
        keywords={
            "en": list(data.get("keywords_en", [])),
            "he": list(data.get("keywords_he", [])),
        },
        default_unit=data.get("default_unit", "unit"),
        default_quantity=data.get("default_quantity", 1),
    )
