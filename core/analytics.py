"""Analytics for the products generated in the current UI session."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any

from core.models import Product


@dataclass
class SessionAnalytics:
    """Tracks what the current session generated and what went wrong."""

    generation_log: list[dict[str, Any]] = field(default_factory=list)
    category_counts: dict[str, int] = field(default_factory=dict)
    brand_counts: dict[str, int] = field(default_factory=dict)
    innovation_counts: dict[str, int] = field(default_factory=dict)
    request_times: list[float] = field(default_factory=list)
    total_products: int = 0
    placeholder_count: int = 0
    session_start: float = field(default_factory=time.time)
    errors: list[dict[str, Any]] = field(default_factory=list)

    def record_products(self, products: list[Product], request_time_s: float = 0.0) -> None:
        """Record one successful generate call."""
        self.request_times.append(request_time_s)

        for product in products:
            self.total_products += 1
            if product.is_placeholder:
                self.placeholder_count += 1

            self.category_counts[product.category] = self.category_counts.get(product.category, 0) + 1
            self.brand_counts[product.brand] = self.brand_counts.get(product.brand, 0) + 1
            if product.innovation:
                self.innovation_counts[product.innovation] = (
                    self.innovation_counts.get(product.innovation, 0) + 1
                )

            self.generation_log.append({
                "id": product.id,
                "category": product.category,
                "brand": product.brand,
                "innovation": product.innovation,
                "placeholder": product.is_placeholder,
                "sustainability_score": product.sustainability_score,
                "request_time_s": round(request_time_s, 2),
                "timestamp": time.time(),
            })

    def record_error(self, category: str, error: str) -> None:
        self.errors.append({
            "category": category,
            "error": error,
            "timestamp": time.time(),
        })

    @property
    def total_requests(self) -> int:
        return len(self.request_times)

    @property
    def avg_request_time(self) -> float:
        if not self.request_times:
            return 0.0
        return sum(self.request_times) / len(self.request_times)

    @property
    def placeholder_ratio(self) -> float:
        if self.total_products == 0:
            return 0.0
        return self.placeholder_count / self.total_products

    @property
    def session_duration(self) -> float:
        return time.time() - self.session_start

    def get_summary(self) -> dict[str, Any]:
        return {
            "total_products": self.total_products,
            "total_requests": self.total_requests,
            "placeholders": self.placeholder_count,
            "placeholder_ratio": round(self.placeholder_ratio, 2),
            "avg_request_time_s": round(self.avg_request_time, 2),
            "session_duration_s": round(self.session_duration, 2),
            "categories": dict(self.category_counts),
            "brands": dict(self.brand_counts),
            "innovations": dict(self.innovation_counts),
            "errors": len(self.errors),
        }

    def to_dataframe_records(self) -> list[dict[str, Any]]:
        """Return the generation log as records suitable for a pandas DataFrame."""
        return self.generation_log
