"""Data models for the innovation inspiration app."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ProviderName(str, Enum):
    OPENAI = "openai"
    REPLICATE = "replicate"
    GEMINI = "gemini"


class GenerationStatus(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"
    ERROR = "error"


PROVIDER_LABELS: dict[str, str] = {
    "openai": "OpenAI",
    "replicate": "Replicate",
    "gemini": "Gemini",
}

PROVIDER_KEY_ENV: dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "replicate": "REPLICATE_API_TOKEN",
    "gemini": "GEMINI_API_KEY",
}


def utc_now_iso() -> str:
    """ISO-8601 timestamp in UTC with millisecond precision and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str | None) -> datetime:
    if not value:
        return datetime.now(timezone.utc)
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return datetime.now(timezone.utc)


@dataclass
class Concept:
    """Templated marketing copy describing one fictitious product."""

    product_name: str
    innovation: str
    market_disruption: str
    consumer_insight: str
    image_prompt: str
    features: list[str]
    ingredients: str
    usage: str
    price: str
    sustainability: str


@dataclass
class GeneratedImage:
    url: str
    prompt: str
    brand: str
    category: str
    concept: Concept
    is_placeholder: bool = False
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: str = field(default_factory=utc_now_iso)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the camelCase keys the frontend expects."""
        return {
            "id": self.id,
            "url": self.url,
            "localPath": "",
            "prompt": self.prompt,
            "brand": self.brand,
            "category": self.category,
            "productName": self.concept.product_name,
            "innovation": self.concept.innovation,
            "marketDisruption": self.concept.market_disruption,
            "consumerInsight": self.concept.consumer_insight,
            "features": list(self.concept.features),
            "ingredients": self.concept.ingredients,
            "usage": self.concept.usage,
            "price": self.concept.price,
            "sustainability": self.concept.sustainability,
            "isPlaceholder": self.is_placeholder,
            "createdAt": self.created_at,
        }


@dataclass
class GenerationBatch:
    images: list[GeneratedImage] = field(default_factory=list)
    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> dict[str, Any]:
        return {
            "images": [img.to_dict() for img in self.images],
            "sessionId": self.session_id,
            "totalGenerated": len(self.images),
        }


@dataclass
class Product:
    """Client-side record shown in the product grid."""

    id: str
    image_url: str
    name: str
    brand: str
    category: str
    features: list[str]
    prompt: str
    created_at: datetime
    sustainability_score: int | None = None
    local_path: str = ""
    product_name: str = ""
    innovation: str = ""
    market_disruption: str = ""
    consumer_insight: str = ""
    ingredients: str = ""
    usage: str = ""
    price: str = ""
    sustainability: str = ""
    is_placeholder: bool = False
