"""HTTP client for the innovation API, reshaping responses into Product records."""

from __future__ import annotations

import logging
import random
from typing import Any

import httpx

from core.models import Product, parse_timestamp
from prompts.templates import (
    BASE_FEATURES,
    CATEGORY_FEATURES,
    NAME_MIDDLES,
    NAME_PREFIXES,
    NAME_SUFFIXES,
)

logger = logging.getLogger(__name__)

DEFAULT_BRAND_LABEL = "Church & Dwight"
DEFAULT_COUNT = 9
MAX_FEATURES = 5


class GenerationError(Exception):
    """Base error for failed generate calls; the message is user-facing."""


class ConfigurationError(GenerationError):
    pass


class ServerError(GenerationError):
    pass


class RequestTimeout(GenerationError):
    pass


class ConnectionFailed(GenerationError):
    pass


def generate_features(category: str) -> list[str]:
    """Category-specific features first, padded with the shared ones."""
    features = list(CATEGORY_FEATURES.get(category, [])[:3])
    for feature in BASE_FEATURES:
        if len(features) >= MAX_FEATURES:
            break
        features.append(feature)
    return features


def generate_product_name(category: str, brand: str, rng: random.Random | None = None) -> str:
    rng = rng or random.Random()
    prefix = rng.choice(NAME_PREFIXES)
    middles = NAME_MIDDLES.get(category)
    middle = rng.choice(middles) if middles else "Pro"
    suffix = rng.choice(NAME_SUFFIXES) if rng.random() > 0.5 else ""

    name = f"{brand} {prefix} {middle}"
    if suffix:
        name += f" {suffix}"
    return name


def to_product(image: dict[str, Any], category: str, brand: str | None, rng: random.Random) -> Product:
    display_brand = image.get("brand") or brand or DEFAULT_BRAND_LABEL
    return Product(
        id=image["id"],
        image_url=image.get("url", ""),
        local_path=image.get("localPath") or "",
        name=generate_product_name(category, display_brand, rng),
        brand=display_brand,
        category=category,
        features=generate_features(category),
        sustainability_score=rng.randint(70, 99),
        prompt=image.get("prompt", ""),
        created_at=parse_timestamp(image.get("createdAt")),
        product_name=image.get("productName", ""),
        innovation=image.get("innovation", ""),
        market_disruption=image.get("marketDisruption", ""),
        consumer_insight=image.get("consumerInsight", ""),
        ingredients=image.get("ingredients", ""),
        usage=image.get("usage", ""),
        price=image.get("price", ""),
        sustainability=image.get("sustainability", ""),
        is_placeholder=bool(image.get("isPlaceholder", False)),
    )


def _error_body(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def translate_http_error(response: httpx.Response) -> GenerationError:
    """Map an error response to the matching GenerationError subclass."""
    body = _error_body(response)
    error = str(body.get("error") or "")
    details = str(body.get("details") or "")

    if response.status_code >= 500 and error.endswith("API not configured"):
        provider = error[: -len(" API not configured")] or "image"
        return ConfigurationError(
            f"The {provider} API key is not configured. Please check server settings."
        )
    if details:
        return GenerationError(details) if response.status_code < 500 else ServerError(details)
    if response.status_code >= 500:
        return ServerError("Server error. Please try again or check the server logs.")
    return GenerationError(error or f"Request failed with status {response.status_code}.")


class InnovationClient:
    """Calls ``POST {base_url}/generate`` and ``GET {base_url}/health``."""

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000/api",
        timeout: float = 60.0,
        http_client: httpx.Client | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._http = http_client or httpx.Client(timeout=timeout)
        self.rng = rng or random.Random()

    def generate_products(
        self,
        category: str,
        brand: str | None = None,
        count: int = DEFAULT_COUNT,
        session_id: str | None = None,
    ) -> list[Product]:
        url = f"{self.base_url}/generate"
        headers = {"X-Session-Id": session_id} if session_id else None
        logger.info("Calling API: url=%s category=%s brand=%s count=%d", url, category, brand, count)

        try:
            response = self._http.post(
                url,
                json={"category": category, "brand": brand, "count": count},
                headers=headers,
            )
        except httpx.TimeoutException as e:
            logger.error("Generate request timed out: %s", e)
            raise RequestTimeout(
                "The request timed out. Image generation can be slow, please try again."
            ) from e
        except httpx.TransportError as e:
            logger.error("Cannot reach API at %s: %s", url, e)
            raise ConnectionFailed(
                "Cannot connect to the server. Please check if the API is running."
            ) from e

        if response.is_error:
            error = translate_http_error(response)
            logger.error("Failed to generate products (%d): %s", response.status_code, error)
            raise error

        try:
            data = response.json()
            products = [to_product(image, category, brand, self.rng) for image in data.get("images", [])]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error("Unexpected response from %s: %s", url, e)
            raise GenerationError("Unexpected response from server.") from e

        logger.info("Received %d product(s), session=%s", len(products), data.get("sessionId"))
        return products

    def health(self) -> dict[str, Any]:
        response = self._http.get(f"{self.base_url}/health")
        response.raise_for_status()
        return response.json()

    def close(self) -> None:
        self._http.close()
