"""Tests for unit tables and quantity helpers."""

import pytest

from grocery.categories import CategoryRegistry
from grocery.units import (
    UNIT_TYPES,
    adjust_quantity,
    convert_unit,
    format_quantity,
    format_quantity_with_unit,
    get_all_units,
    get_available_units_for_category,
    get_item_unit_default,
    get_unit_step,
    is_valid_unit,
    normalize_unit_token,
    resolve_item_unit,
    validate_quantity,
)


class TestUnitTable:
    def test_all_units(self):
        assert get_all_units() == list(UNIT_TYPES)
        assert set(UNIT_TYPES) == {
            "unit", "kg", "g", "l", "ml", "package", "dozen", "bunch",
        }

    def test_is_valid_unit(self):
        assert is_valid_unit("kg")
        assert not is_valid_unit("pound")
        assert not is_valid_unit(None)
        assert not is_valid_unit(3)

    def test_steps(self):
        assert get_unit_step("kg") == 0.5
        assert get_unit_step("g") == 100
        assert get_unit_step("unit") == 1
        assert get_unit_step("unknown") == 1

    @pytest.mark.parametrize(
        "token,expected",
        [("KG", "kg"), ('ק"ג', "kg"), ("גרם", "g"), ("L", "l"), ("ליטר", "l"), ('מ"ל', "ml")],
    )
    def test_normalize_unit_token(self, token, expected):
        assert normalize_unit_token(token) == expected

    def test_category_units(self):
        assert get_available_units_for_category("dairy")[0] == "unit"
        assert get_available_units_for_category("no-such") == list(UNIT_TYPES)


class TestItemUnitDefault:
    def test_english(self):
        d = get_item_unit_default("Milk ")
        assert d.unit == "l"
        assert d.default == 1

    def test_hebrew(self):
        d = get_item_unit_default("חלב")
        assert d.unit == "l"

    def test_weighted_fruit(self):
        d = get_item_unit_default("strawberries")
        assert d.unit == "kg"
        assert d.default == 0.5

    def test_internal_whitespace_collapsed(self):
        d = get_item_unit_default(" Green   Onions ")
        assert d.unit == "bunch"

    def test_unknown(self):
        assert get_item_unit_default("spaceship") is None


class TestResolveItemUnit:
    def test_item_table_wins(self):
        r = resolve_item_unit("bananas", "other", CategoryRegistry())
        assert (r.unit, r.quantity, r.source) == ("kg", 1, "item")

    def test_category_default(self):
        r = resolve_item_unit("entrecote", "meat", CategoryRegistry())
        assert (r.unit, r.quantity, r.source) == ("kg", 0.5, "category")

    def test_fallback(self):
        r = resolve_item_unit("entrecote")
        assert (r.unit, r.quantity, r.source) == ("unit", 1, "default")

    def test_unknown_category(self):
        r = resolve_item_unit("entrecote", "no-such", CategoryRegistry())
        assert r.source == "default"


class TestFormatting:
    def test_plain_units(self):
        assert format_quantity_with_unit(3, "unit") == "x3"

    def test_decimal(self):
        assert format_quantity_with_unit(1.5, "kg") == "1.5 kg"

    def test_hebrew_short_name(self):
        assert format_quantity_with_unit(2.0, "kg", "he") == '2 ק"ג'

    def test_format_quantity(self):
        assert format_quantity(1.0, "kg") == "1"
        assert format_quantity(1.5, "l") == "1.5"
        assert format_quantity(2.5, "unit") == "3"


class TestAdjustQuantity:
    def test_up(self):
        assert adjust_quantity(1, "kg", "up") == 1.5
        assert adjust_quantity(200, "g", "up") == 300

    def test_down_clamps_to_minimum(self):
        assert adjust_quantity(0.5, "kg", "down") == 0.5
        assert adjust_quantity(1, "unit", "down") == 1

    def test_bad_direction(self):
        with pytest.raises(ValueError, match="direction"):
            adjust_quantity(1, "kg", "sideways")


class TestValidateQuantity:
    def test_below_minimum(self):
        assert validate_quantity(0.2, "kg") == 0.5

    def test_rounds_to_step(self):
        assert validate_quantity(1.3, "kg") == 1.5
        assert validate_quantity(250, "g") == 300


class TestConvertUnit:
    def test_weight(self):
        assert convert_unit(2, "kg", "g") == 2000

    def test_volume(self):
        assert convert_unit(500, "ml", "l") == pytest.approx(0.5)

    def test_no_conversion(self):
        assert convert_unit(1, "kg", "l") is None
