"""Tests for quantity/unit extraction from item strings."""

import pytest

from grocery.quantity import ParsedItem, parse_quantity_from_name


def _parsed(text):
    p = parse_quantity_from_name(text)
    return (p.name, p.quantity, p.unit)


class TestMultiplier:
    @pytest.mark.parametrize(
        "text", ["milk x3", "milk X3", "milkx3", "milk ×3", "milk x 3"]
    )
    def test_suffix(self, text):
        assert _parsed(text) == ("milk", 3, None)

    def test_prefix(self):
        assert _parsed("x3 milk") == ("milk", 3, None)

    def test_hebrew(self):
        assert _parsed("טונה x8") == ("טונה", 8, None)

    def test_decimal(self):
        assert _parsed("cheese x1.5") == ("cheese", 1.5, None)

    @pytest.mark.parametrize("name", ["milk", "orange juice", "טונה", "גבינה צהובה"])
    @pytest.mark.parametrize("qty", [1, 7, 42, 999])
    def test_explicit_multiplier_round_trip(self, name, qty):
        parsed = parse_quantity_from_name(f"{name} x{qty}")
        assert parsed.name == name
        assert parsed.quantity == qty


class TestUnits:
    def test_unit_suffix(self):
        assert _parsed("apples 2kg") == ("apples", 2, "kg")
        assert _parsed("apples 2 kg") == ("apples", 2, "kg")

    def test_unit_prefix(self):
        assert _parsed("2kg apples") == ("apples", 2, "kg")
        assert _parsed("500 g cheese") == ("cheese", 500, "g")

    def test_case_insensitive(self):
        assert _parsed("milk 1.5L") == ("milk", 1.5, "l")

    def test_hebrew_liter(self):
        assert _parsed("חלב 2 ליטר") == ("חלב", 2, "l")

    def test_hebrew_tokens(self):
        assert _parsed('תפוחים 2 ק"ג') == ("תפוחים", 2, "kg")
        assert _parsed("גבינה 200 גרם") == ("גבינה", 200, "g")
        assert _parsed('שמנת 250 מ"ל') == ("שמנת", 250, "ml")


class TestBareNumbers:
    def test_leading_number(self):
        assert _parsed("3 milk") == ("milk", 3, None)
        assert _parsed("8 טונה") == ("טונה", 8, None)

    def test_trailing_number(self):
        assert _parsed("milk 3") == ("milk", 3, None)

    def test_percent_is_part_of_name(self):
        assert _parsed("2% milk") == ("2% milk", None, None)

    def test_trailing_number_out_of_range(self):
        assert _parsed("milk 0.5") == ("milk 0.5", None, None)
        assert _parsed("milk 1000") == ("milk 1000", None, None)

    def test_number_only(self):
        assert _parsed("42") == ("42", None, None)


class TestNoQuantity:
    def test_plain_name(self):
        assert parse_quantity_from_name("  orange juice ") == ParsedItem("orange juice")

    def test_empty(self):
        assert parse_quantity_from_name("   ") == ParsedItem("")
