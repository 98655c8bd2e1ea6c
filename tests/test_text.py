"""Tests for text normalization helpers."""

from grocery.text import contains_hebrew, detect_language, has_letters, normalize_text


class TestNormalizeText:
    def test_lowercases_and_trims(self):
        assert normalize_text("  Milk ") == "milk"

    def test_collapses_whitespace(self):
        assert normalize_text("orange \t  juice\n") == "orange juice"

    def test_hebrew_unchanged(self):
        assert normalize_text(" חלב  טרי ") == "חלב טרי"

    def test_empty(self):
        assert normalize_text("   ") == ""


class TestDetectLanguage:
    def test_english(self):
        assert detect_language("milk") == "en"

    def test_hebrew(self):
        assert detect_language("חלב") == "he"

    def test_mixed_is_hebrew(self):
        assert detect_language("milk חלב") == "he"
        assert contains_hebrew("x3 טונה")

    def test_digits_only_is_english(self):
        assert detect_language("123") == "en"


def test_has_letters():
    assert has_letters("milk")
    assert has_letters("טונה")
    assert not has_letters("3.5")
    assert not has_letters("%")
