"""Settings seen by the categorizer: the AI toggle and API key access."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .config import GroceryConfig


class SettingsProvider(Protocol):
    """Where the categorizer reads the AI toggle and API key from.

    Key retrieval is async so an implementation may decrypt or fetch it.
    """

    @property
    def ai_enabled(self) -> bool: ...

    async def has_api_key(self) -> bool: ...

    async def get_api_key(self) -> str | None: ...


@dataclass
class StaticSettings:
    ai_enabled: bool = False
    api_key: str | None = None

    async def has_api_key(self) -> bool:
        return bool(self.api_key)

    async def get_api_key(self) -> str | None:
        return self.api_key or None


def settings_from_config(config: GroceryConfig) -> StaticSettings:
    """Settings for the configured oracle backend (key from file or env)."""
    return StaticSettings(
        ai_enabled=config.oracle.ai_enabled,
        api_key=config.oracle.active_api_key() or None,
    )
