"""Tests for splitting pasted text into item strings."""

import pytest

from grocery.splitter import parse_item_list


class TestParseItemList:
    def test_commas(self):
        assert parse_item_list("milk, eggs, bread") == ["milk", "eggs", "bread"]

    def test_newlines(self):
        assert parse_item_list("milk\neggs\nbread") == ["milk", "eggs", "bread"]

    def test_newlines_with_commas(self):
        text = "milk\neggs, bread\n\n  butter  \n"
        assert parse_item_list(text) == ["milk", "eggs", "bread", "butter"]

    def test_hebrew_commas(self):
        assert parse_item_list("חלב, ביצים, לחם") == ["חלב", "ביצים", "לחם"]

    def test_arabic_comma(self):
        assert parse_item_list("חלב، ביצים") == ["חלב", "ביצים"]

    def test_two_words_is_one_item(self):
        assert parse_item_list("orange juice") == ["orange juice"]
        assert parse_item_list("מיץ תפוזים") == ["מיץ תפוזים"]

    def test_space_separated_list(self):
        assert parse_item_list("milk eggs bread butter") == [
            "milk", "eggs", "bread", "butter",
        ]

    def test_three_words_is_one_item(self):
        assert parse_item_list("milk eggs bread") == ["milk eggs bread"]

    def test_short_word_keeps_one_item(self):
        assert parse_item_list("a loaf of bread") == ["a loaf of bread"]

    def test_quantities_survive(self):
        assert parse_item_list("milk x3, 2kg apples") == ["milk x3", "2kg apples"]

    def test_duplicates_kept(self):
        assert parse_item_list("milk, milk") == ["milk", "milk"]

    @pytest.mark.parametrize("text", ["", "   ", "\n\n", " , ,"])
    def test_empty(self, text):
        assert parse_item_list(text) == []

    @pytest.mark.parametrize(
        "text", ["milk, eggs, bread", "חלב\nגבינה צהובה", "tomato sauce, tuna x3"]
    )
    def test_resplitting_an_item_is_stable(self, text):
        for item in parse_item_list(text):
            assert parse_item_list(item) == [item]
