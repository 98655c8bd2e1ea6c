"""AI categorization oracle: backend base class, result types, and factory."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar, Union

if TYPE_CHECKING:
    from ..config import GroceryConfig

T = TypeVar("T")

# Confidence assigned to every accepted oracle answer
AI_CONFIDENCE = 0.9


@dataclass(frozen=True)
class OracleOk(Generic[T]):
    value: T


@dataclass(frozen=True)
class OracleErr:
    reason: str


OracleResult = Union[OracleOk[T], OracleErr]


class OracleBackend(ABC):
    """Abstract base for an external AI model that parses grocery items."""

    @abstractmethod
    async def complete(
        self, system_prompt: str, user_prompt: str, api_key: str | None = None
    ) -> str:
        """Send one prompt pair and return the raw response text.

        ``api_key`` overrides the key the backend was created with. The text
        is untrusted; callers parse and validate it.
        """
        ...


def create_oracle(config: GroceryConfig) -> OracleBackend:
    """Create an oracle backend based on configuration."""
    backend_name = config.oracle.backend

    match backend_name:
        case "gemini":
            from .gemini import GeminiOracle

            return GeminiOracle(
                api_key=config.oracle.gemini.api_key,
                model=config.oracle.gemini.model,
            )
        case "claude":
            from .claude import ClaudeOracle

            return ClaudeOracle(
                api_key=config.oracle.claude.api_key,
                model=config.oracle.claude.model,
            )
        case _:
            raise ValueError(
                f"Unknown oracle backend: {backend_name!r} "
                f"(choose gemini or claude)"
            )


from .prompts import build_batch_prompt, build_item_prompt, build_system_prompt  # noqa: E402
from .responses import (  # noqa: E402
    extract_json_block,
    parse_batch_response,
    parse_single_response,
)

__all__ = [
    "AI_CONFIDENCE",
    "OracleBackend",
    "OracleOk",
    "OracleErr",
    "OracleResult",
    "create_oracle",
    "build_system_prompt",
    "build_item_prompt",
    "build_batch_prompt",
    "extract_json_block",
    "parse_single_response",
    "parse_batch_response",
]
