"""Result types handed from the categorizer to the rest of the application."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class ItemCategorizationResult:
    category_id: str
    unit: str
    quantity: float
    confidence: float  # 0.0 to 1.0
    source: str  # "ai" | "keyword"
    parsed_name: str  # item name with quantity/unit text removed

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CategorizationStatus:
    ai_available: bool
    ai_enabled: bool
    method: str  # "ai" | "keyword"
