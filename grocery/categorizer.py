"""Categorization entry points: keyword-only, AI-preferred, and batch."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from .categories import CategoryRegistry
from .keywords import CategorySuggestion, categorize_by_keyword, get_category_suggestions
from .models import CategorizationStatus, ItemCategorizationResult
from .oracle import (
    OracleBackend,
    OracleErr,
    build_batch_prompt,
    build_item_prompt,
    build_system_prompt,
    parse_batch_response,
    parse_single_response,
)
from .quantity import parse_quantity_from_name
from .settings import SettingsProvider, StaticSettings
from .splitter import parse_item_list
from .text import normalize_text

logger = logging.getLogger(__name__)

RegistryProvider = Callable[[], CategoryRegistry]

DEFAULT_LOW_CONFIDENCE_THRESHOLD = 0.8


def default_registry_provider(
    registry: CategoryRegistry | None = None,
) -> RegistryProvider:
    """A provider that always returns the same registry (built-ins by default)."""
    fixed = registry if registry is not None else CategoryRegistry()
    return lambda: fixed


class Categorizer:
    """Turns free-text grocery items into ``ItemCategorizationResult``.

    The keyword path is synchronous and never fails. When AI is enabled, an
    API key is present and an oracle is configured, the async entry points
    consult the oracle first and fall back to keywords on any failure.

    The registry provider is called at the start of every call so custom
    categories edited between calls are always seen. The API key is read
    from the settings for every oracle call.
    """

    def __init__(
        self,
        registry_provider: RegistryProvider | None = None,
        settings: SettingsProvider | None = None,
        oracle: OracleBackend | None = None,
        low_confidence_threshold: float = DEFAULT_LOW_CONFIDENCE_THRESHOLD,
    ) -> None:
        self._registry_provider = registry_provider or default_registry_provider()
        self._settings = settings if settings is not None else StaticSettings()
        self._oracle = oracle
        self._threshold = low_confidence_threshold

    @classmethod
    def from_config(cls, config, oracle: OracleBackend | None = None) -> Categorizer:
        """Build a categorizer from a GroceryConfig.

        The oracle is created from the config only when AI is enabled and no
        oracle is passed in.
        """
        from .oracle import create_oracle
        from .settings import settings_from_config

        if oracle is None and config.oracle.ai_enabled:
            oracle = create_oracle(config)

        return cls(
            registry_provider=default_registry_provider(config.registry()),
            settings=settings_from_config(config),
            oracle=oracle,
            low_confidence_threshold=config.oracle.low_confidence_threshold,
        )

    @property
    def registry(self) -> CategoryRegistry:
        return self._registry_provider()

    # -- keyword path ---------------------------------------------------

    @staticmethod
    def _keyword_result(
        text: str, registry: CategoryRegistry
    ) -> ItemCategorizationResult:
        parsed = parse_quantity_from_name(text)
        keyword = categorize_by_keyword(parsed.name, registry)

        # Quantity/unit written in the text win over keyword defaults
        return ItemCategorizationResult(
            category_id=keyword.category_id,
            unit=parsed.unit or keyword.unit,
            quantity=parsed.quantity if parsed.quantity is not None else keyword.quantity,
            confidence=keyword.confidence,
            source="keyword",
            parsed_name=parsed.name,
        )

    def categorize_item_sync(self, text: str) -> ItemCategorizationResult:
        """Keyword-only categorization, for immediate feedback."""
        return self._keyword_result(text, self._registry_provider())

    def suggest_categories(
        self, text: str, limit: int = 3
    ) -> list[CategorySuggestion]:
        """Top-N "did you mean" categories for the item name in ``text``."""
        parsed = parse_quantity_from_name(text)
        return get_category_suggestions(parsed.name, self._registry_provider(), limit)

    # -- oracle path ----------------------------------------------------

    async def _ai_ready(self) -> bool:
        if self._oracle is None or not self._settings.ai_enabled:
            return False
        return await self._settings.has_api_key()

    async def categorize_item(self, text: str) -> ItemCategorizationResult:
        """Categorize one item, preferring the AI oracle when available.

        The raw text goes to the oracle, which does its own quantity
        extraction. Oracle errors and invalid answers are logged and the
        keyword result is returned instead; nothing is raised.
        """
        registry = self._registry_provider()

        if text.strip() and await self._ai_ready():
            try:
                response = await self._oracle.complete(
                    build_system_prompt(registry),
                    build_item_prompt(text.strip()),
                    api_key=await self._settings.get_api_key(),
                )
            except Exception as e:
                logger.warning(
                    "AI categorization failed for %r, using keywords: %s", text, e
                )
            else:
                result = parse_single_response(response, registry, text)
                if isinstance(result, OracleErr):
                    logger.warning(
                        "Invalid AI response for %r, using keywords: %s",
                        text,
                        result.reason,
                    )
                else:
                    logger.debug("AI categorized %r as %s", text, result.value.category_id)
                    return result.value

        return self._keyword_result(text, registry)

    async def categorize_multiple_items(
        self, texts: Iterable[str]
    ) -> dict[str, ItemCategorizationResult]:
        """Categorize many items with at most one oracle call.

        Every item gets a keyword result first. Items below the confidence
        threshold are then sent to the oracle as one batch, and valid oracle
        answers replace their keyword results.

        Returns:
            Results keyed by the normalized input text. Blank inputs are
            skipped.
        """
        registry = self._registry_provider()

        results: dict[str, ItemCategorizationResult] = {}
        originals: dict[str, str] = {}
        for text in texts:
            key = normalize_text(text)
            if not key or key in results:
                continue
            results[key] = self._keyword_result(text, registry)
            originals[key] = text.strip()

        if not results or not await self._ai_ready():
            return results

        low_confidence = [
            key for key, result in results.items() if result.confidence < self._threshold
        ]
        if not low_confidence:
            return results

        try:
            response = await self._oracle.complete(
                build_system_prompt(registry),
                build_batch_prompt([originals[key] for key in low_confidence]),
                api_key=await self._settings.get_api_key(),
            )
        except Exception as e:
            logger.warning(
                "AI batch categorization failed for %d items, keeping keyword results: %s",
                len(low_confidence),
                e,
            )
            return results

        parsed = parse_batch_response(response, registry)
        if isinstance(parsed, OracleErr):
            logger.warning("Invalid AI batch response: %s", parsed.reason)
            return results

        wanted = set(low_confidence)
        for key, ai_result in parsed.value.items():
            if key in wanted:
                results[key] = ai_result
        logger.debug(
            "AI re-scored %d of %d low-confidence items",
            len(wanted & parsed.value.keys()),
            len(wanted),
        )
        return results

    async def categorize_text(
        self, block: str
    ) -> list[tuple[str, ItemCategorizationResult]]:
        """Split a pasted block into items and categorize them, in input order."""
        items = parse_item_list(block)
        results = await self.categorize_multiple_items(items)
        return [(item, results[normalize_text(item)]) for item in items]

    async def recategorize_item(
        self, text: str, prefer_ai: bool = True
    ) -> ItemCategorizationResult:
        if prefer_ai:
            return await self.categorize_item(text)
        return self.categorize_item_sync(text)

    async def get_status(self) -> CategorizationStatus:
        ai_available = await self._ai_ready()
        return CategorizationStatus(
            ai_available=ai_available,
            ai_enabled=self._settings.ai_enabled,
            method="ai" if ai_available else "keyword",
        )
