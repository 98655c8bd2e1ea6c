"""Bilingual (English/Hebrew) grocery item parsing and categorization."""

from .categories import (
    DEFAULT_CATEGORIES,
    OTHER_CATEGORY_ID,
    Category,
    CategoryRegistry,
    DuplicateCategoryError,
    InvalidCategoryError,
)
from .categorizer import Categorizer
from .config import GroceryConfig, OracleConfig, SuggestionsConfig, load_config
from .keywords import (
    CategorizationResult,
    CategorySuggestion,
    categorize_by_keyword,
    categorize_multiple_by_keyword,
    does_category_match,
    get_category_suggestions,
)
from .models import CategorizationStatus, ItemCategorizationResult
from .oracle import OracleBackend, create_oracle
from .quantity import ParsedItem, parse_quantity_from_name
from .settings import SettingsProvider, StaticSettings
from .splitter import parse_item_list
from .text import detect_language, normalize_text
from .units import UNIT_TYPES, Unit, get_item_unit_default, resolve_item_unit

__all__ = [
    "Category",
    "CategoryRegistry",
    "DEFAULT_CATEGORIES",
    "OTHER_CATEGORY_ID",
    "InvalidCategoryError",
    "DuplicateCategoryError",
    "Categorizer",
    "GroceryConfig",
    "OracleConfig",
    "SuggestionsConfig",
    "load_config",
    "CategorizationResult",
    "CategorySuggestion",
    "categorize_by_keyword",
    "categorize_multiple_by_keyword",
    "does_category_match",
    "get_category_suggestions",
    "CategorizationStatus",
    "ItemCategorizationResult",
    "OracleBackend",
    "create_oracle",
    "ParsedItem",
    "parse_quantity_from_name",
    "SettingsProvider",
    "StaticSettings",
    "parse_item_list",
    "detect_language",
    "normalize_text",
    "UNIT_TYPES",
    "Unit",
    "get_item_unit_default",
    "resolve_item_unit",
]
