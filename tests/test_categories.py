"""Tests for built-in categories and the category registry."""

import pytest

from grocery.categories import (
    DEFAULT_CATEGORIES,
    OTHER_CATEGORY_ID,
    Category,
    CategoryRegistry,
    DuplicateCategoryError,
    InvalidCategoryError,
    category_from_dict,
)


def _pets(**kwargs) -> Category:
    fields = dict(
        id="pets",
        name={"en": "Pets", "he": "חיות מחמד"},
        color="bg-teal-500",
        keywords={"en": ["dog food", "cat litter"], "he": ["אוכל לכלבים"]},
        default_unit="package",
    )
    fields.update(kwargs)
    return Category(**fields)


class TestDefaultCategories:
    def test_ids(self):
        ids = [c.id for c in DEFAULT_CATEGORIES]
        assert ids == [
            "fruits", "vegetables", "dairy", "meat", "bakery", "frozen",
            "beverages", "snacks", "household", "personal", "baking",
            "canned", "other",
        ]

    def test_all_marked_default(self):
        assert all(c.is_default for c in DEFAULT_CATEGORIES)

    def test_other_has_no_keywords(self):
        other = DEFAULT_CATEGORIES[-1]
        assert other.keywords_for("en") == []
        assert other.keywords_for("he") == []

    def test_bilingual_names(self):
        for c in DEFAULT_CATEGORIES:
            assert c.name["en"]
            assert c.name["he"]


class TestKeywordsFor:
    def test_falls_back_to_english(self):
        c = Category(id="x", name={"en": "X"}, color="", keywords={"en": ["a"]})
        assert c.keywords_for("he") == ["a"]

    def test_no_keywords(self):
        c = Category(id="x", name={"en": "X"}, color="")
        assert c.keywords_for("en") == []


class TestCategoryRegistry:
    def test_defaults(self):
        registry = CategoryRegistry()
        assert len(registry) == 13
        assert registry.ids()[-1] == OTHER_CATEGORY_ID
        assert "dairy" in registry
        assert registry.custom == []

    def test_custom_inserted_before_other(self):
        registry = CategoryRegistry(custom=[_pets()])
        ids = registry.ids()
        assert ids[-2:] == ["pets", OTHER_CATEGORY_ID]
        assert registry.custom[0].id == "pets"

    def test_duplicate_id(self):
        with pytest.raises(DuplicateCategoryError):
            CategoryRegistry(custom=[_pets(), _pets()])

    def test_duplicate_of_builtin(self):
        with pytest.raises(DuplicateCategoryError, match="dairy"):
            CategoryRegistry(custom=[_pets(id="dairy")])

    def test_reserved_other(self):
        with pytest.raises(InvalidCategoryError, match="reserved"):
            CategoryRegistry(custom=[_pets(id=OTHER_CATEGORY_ID)])

    def test_invalid_unit(self):
        with pytest.raises(InvalidCategoryError, match="unit"):
            CategoryRegistry(custom=[_pets(default_unit="bushel")])

    def test_duplicate_is_invalid_category_and_value_error(self):
        assert issubclass(DuplicateCategoryError, InvalidCategoryError)
        assert issubclass(InvalidCategoryError, ValueError)

    def test_with_custom_replaces(self):
        registry = CategoryRegistry(custom=[_pets()])
        updated = registry.with_custom([])
        assert "pets" not in updated
        assert "pets" in registry

    def test_other_fallback_to_last(self):
        defaults = [c for c in DEFAULT_CATEGORIES if c.id != OTHER_CATEGORY_ID]
        registry = CategoryRegistry(defaults=defaults)
        assert registry.other().id == "canned"

    def test_lookups(self):
        registry = CategoryRegistry()
        assert registry.category_name("dairy") == "Dairy"
        assert registry.category_name("dairy", "he") == "מוצרי חלב"
        assert registry.category_name("no-such") == "no-such"
        assert registry.category_color("no-such") == "bg-gray-500"
        assert registry.default_unit("meat") == "kg"
        assert registry.default_quantity("meat") == 0.5
        assert registry.default_unit("no-such") == "unit"
        assert registry.get("no-such") is None


class TestCategoryFromDict:
    def test_full(self):
        c = category_from_dict(
            {
                "id": "pets",
                "name_en": "Pets",
                "name_he": "חיות מחמד",
                "color": "bg-teal-500",
                "keywords_en": ["dog food"],
                "keywords_he": ["אוכל לכלבים"],
                "default_unit": "package",
                "default_quantity": 2,
            }
        )
        assert c.id == "pets"
        assert c.name == {"en": "Pets", "he": "חיות מחמד"}
        assert c.keywords_for("he") == ["אוכל לכלבים"]
        assert c.default_unit == "package"
        assert c.default_quantity == 2
        assert c.is_default is False

    def test_minimal(self):
        c = category_from_dict({"id": "pets"})
        assert c.name == {"en": "pets", "he": "pets"}
        assert c.default_unit == "unit"

    def test_missing_id(self):
        with pytest.raises(InvalidCategoryError):
            category_from_dict({"name_en": "Pets"})
