"""In-memory UI state: selections, generated products, favorites, generate status."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field

from core.models import GenerationStatus, Product

logger = logging.getLogger(__name__)


@dataclass
class InnovationStore:
    selected_category: str | None = None
    selected_brand: str | None = None
    generated_products: list[Product] = field(default_factory=list)
    selected_product: Product | None = None
    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    favorites: list[str] = field(default_factory=list)
    status: GenerationStatus = GenerationStatus.IDLE
    error: str | None = None

    def set_selected_category(self, category: str | None) -> None:
        self.selected_category = category

    def set_selected_brand(self, brand: str | None) -> None:
        self.selected_brand = brand

    def add_generated_products(self, products: list[Product]) -> None:
        self.generated_products = [*self.generated_products, *products]

    def set_selected_product(self, product: Product | None) -> None:
        self.selected_product = product

    def toggle_favorite(self, product_id: str) -> None:
        if product_id in self.favorites:
            self.favorites = [pid for pid in self.favorites if pid != product_id]
        else:
            self.favorites = [*self.favorites, product_id]

    def is_favorite(self, product_id: str) -> bool:
        return product_id in self.favorites

    def favorite_products(self) -> list[Product]:
        return [p for p in self.generated_products if p.id in self.favorites]

    # --- generate action ---

    @property
    def is_generating(self) -> bool:
        return self.status == GenerationStatus.GENERATING

    @property
    def can_generate(self) -> bool:
        return self.selected_category is not None and not self.is_generating

    def begin_generation(self) -> bool:
        """Move to GENERATING. Returns False (and changes nothing) if not allowed."""
        if not self.can_generate:
            return False
        self.status = GenerationStatus.GENERATING
        self.error = None
        return True

    def complete_generation(self, products: list[Product]) -> None:
        self.add_generated_products(products)
        self.status = GenerationStatus.IDLE
        logger.info("Added %d product(s); %d total", len(products), len(self.generated_products))

    def fail_generation(self, message: str) -> None:
        self.status = GenerationStatus.ERROR
        self.error = message
        logger.warning("Generation failed: %s", message)
