"""Tests for grocery config loading."""

import os
import tempfile

import pytest

from grocery.categories import DuplicateCategoryError, InvalidCategoryError
from grocery.config import GroceryConfig, load_config


def _load(toml_content: bytes):
    with tempfile.NamedTemporaryFile(suffix=".toml", delete=False) as f:
        f.write(toml_content)
        f.flush()
        config = load_config(f.name)

    os.unlink(f.name)
    return config


def test_load_config_defaults(monkeypatch):
    """Loading with no path returns all defaults."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)

    config = load_config()
    assert isinstance(config, GroceryConfig)
    assert config.oracle.backend == "gemini"
    assert config.oracle.ai_enabled is False
    assert config.oracle.low_confidence_threshold == 0.8
    assert config.oracle.gemini.api_key == ""
    assert config.oracle.gemini.model == "gemini-2.0-flash"
    assert config.oracle.active_api_key() == ""
    assert config.suggestions.limit == 3
    assert config.custom_categories == []
    assert len(config.registry()) == 13


def test_load_config_nonexistent_file():
    """Loading a nonexistent file returns defaults."""
    config = load_config("/nonexistent/path.toml")
    assert config.oracle.backend == "gemini"


def test_load_config_from_toml():
    """Loading a valid TOML file populates config."""
    config = _load(b"""\
[oracle]
backend = "claude"
ai_enabled = true
low_confidence_threshold = 0.5

[oracle.claude]
api_key = "test-key-123"
model = "claude-test"

[suggestions]
limit = 5
""")
    assert config.oracle.backend == "claude"
    assert config.oracle.ai_enabled is True
    assert config.oracle.low_confidence_threshold == 0.5
    assert config.oracle.claude.api_key == "test-key-123"
    assert config.oracle.claude.model == "claude-test"
    assert config.oracle.active_api_key() == "test-key-123"
    assert config.suggestions.limit == 5


def test_load_config_env_override(monkeypatch):
    """Environment variables fill empty API keys."""
    monkeypatch.setenv("ANTHROPIC_API_KEY", "env-anthropic-key")
    monkeypatch.setenv("GEMINI_API_KEY", "env-gemini-key")

    config = load_config()
    assert config.oracle.claude.api_key == "env-anthropic-key"
    assert config.oracle.gemini.api_key == "env-gemini-key"
    assert config.oracle.active_api_key() == "env-gemini-key"


def test_load_config_file_key_takes_precedence(monkeypatch):
    """Config file API key takes precedence over env var."""
    monkeypatch.setenv("GEMINI_API_KEY", "env-key")

    config = _load(b"""\
[oracle.gemini]
api_key = "file-key"
""")
    assert config.oracle.gemini.api_key == "file-key"


def test_load_config_custom_categories():
    """[[categories]] tables become custom categories placed before 'other'."""
    config = _load("""\
[[categories]]
id = "pets"
name_en = "Pets"
name_he = "חיות מחמד"
color = "bg-teal-500"
keywords_en = ["dog food", "cat litter"]
keywords_he = ["אוכל לכלבים"]
default_unit = "package"
default_quantity = 2

[[categories]]
id = "garden"
""".encode("utf-8"))
    assert [c.id for c in config.custom_categories] == ["pets", "garden"]
    pets = config.custom_categories[0]
    assert pets.name["he"] == "חיות מחמד"
    assert pets.keywords_for("en") == ["dog food", "cat litter"]
    assert pets.default_quantity == 2
    assert config.registry().ids()[-3:] == ["pets", "garden", "other"]


def test_load_config_duplicate_category():
    with pytest.raises(DuplicateCategoryError):
        _load(b"""\
[[categories]]
id = "dairy"
""")


def test_load_config_invalid_category_unit():
    with pytest.raises(InvalidCategoryError):
        _load(b"""\
[[categories]]
id = "pets"
default_unit = "bushel"
""")


def test_load_config_invalid_threshold():
    with pytest.raises(ValueError, match="low_confidence_threshold"):
        _load(b"""\
[oracle]
low_confidence_threshold = 1.5
""")


def test_load_config_invalid_limit():
    with pytest.raises(ValueError, match="limit"):
        _load(b"""\
[suggestions]
limit = 0
""")


def test_active_api_key_unknown_backend():
    config = load_config()
    config.oracle.backend = "unknown"
    assert config.oracle.active_api_key() == ""
