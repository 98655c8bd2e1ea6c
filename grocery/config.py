"""TOML configuration loader for the grocery categorizer."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .categories import Category, CategoryRegistry, category_from_dict


@dataclass
class GeminiOracleConfig:
    api_key: str = ""
    model: str = "gemini-2.0-flash"


@dataclass
class ClaudeOracleConfig:
    api_key: str = ""
    model: str = "claude-sonnet-4-5-20250929"


@dataclass
class OracleConfig:
    backend: str = "gemini"
    ai_enabled: bool = False
    # Keyword results below this confidence are re-scored by the oracle
    low_confidence_threshold: float = 0.8
    gemini: GeminiOracleConfig = field(default_factory=GeminiOracleConfig)
    claude: ClaudeOracleConfig = field(default_factory=ClaudeOracleConfig)

    def active_api_key(self) -> str:
        """API key of the selected backend ("" when unknown or unset)."""
        match self.backend:
            case "gemini":
                return self.gemini.api_key
            case "claude":
                return self.claude.api_key
            case _:
                return ""


@dataclass
class SuggestionsConfig:
    limit: int = 3


@dataclass
class GroceryConfig:
    oracle: OracleConfig = field(default_factory=OracleConfig)
    suggestions: SuggestionsConfig = field(default_factory=SuggestionsConfig)
    custom_categories: list[Category] = field(default_factory=list)

    def registry(self) -> CategoryRegistry:
        """Merged built-in + custom category registry."""
        return CategoryRegistry(custom=self.custom_categories)


def load_config(path: str | Path | None = None) -> GroceryConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    API keys can be overridden via environment variables.
    """
    raw: dict[str, Any] = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    orc = raw.get("oracle", {})
    sug = raw.get("suggestions", {})

    gemini_cfg = orc.get("gemini", {})
    claude_cfg = orc.get("claude", {})

    # Resolve API keys: config file → environment variable
    gemini_api_key = gemini_cfg.get("api_key", "") or os.environ.get(
        "GEMINI_API_KEY", ""
    )
    claude_api_key = claude_cfg.get("api_key", "") or os.environ.get(
        "ANTHROPIC_API_KEY", ""
    )

    threshold = float(orc.get("low_confidence_threshold", 0.8))
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(
            f"oracle.low_confidence_threshold must be within [0, 1], got {threshold}"
        )

    limit = int(sug.get("limit", 3))
    if limit < 1:
        raise ValueError(f"suggestions.limit must be positive, got {limit}")

    custom_categories = [category_from_dict(c) for c in raw.get("categories", [])]

    config = GroceryConfig(
        oracle=OracleConfig(
            backend=orc.get("backend", "gemini"),
            ai_enabled=orc.get("ai_enabled", False),
            low_confidence_threshold=threshold,
            gemini=GeminiOracleConfig(
                api_key=gemini_api_key,
                model=gemini_cfg.get("model", "gemini-2.0-flash"),
            ),
            claude=ClaudeOracleConfig(
                api_key=claude_api_key,
                model=claude_cfg.get("model", "claude-sonnet-4-5-20250929"),
            ),
        ),
        suggestions=SuggestionsConfig(limit=limit),
        custom_categories=custom_categories,
    )

    # Fail fast on duplicate ids or bad units in custom categories
    config.registry()
    return config
