"""Prompt builder that turns a category and brand into an innovation concept."""

from __future__ import annotations

import logging
import random

from core.models import Concept
from prompts.templates import (
    BRANDS_BY_CATEGORY,
    CONCEPT_FEATURES,
    CONSUMER_INSIGHT,
    DEFAULT_BRAND,
    FALLBACK_PRODUCT_NAME,
    IMAGE_PROMPT,
    INGREDIENTS,
    INNOVATIONS,
    MARKET_DISRUPTION,
    PRICE,
    PRODUCT_NAMES,
    SUSTAINABILITY,
    USAGE,
)

logger = logging.getLogger(__name__)


def clean_category(category: str) -> str:
    return category.replace("-", " ")


def select_brand(category: str, requested: str | None = None, rng: random.Random | None = None) -> str:
    """Use the requested brand, else a random brand for the category, else the default."""
    if requested:
        return requested
    rng = rng or random.Random()
    brands = BRANDS_BY_CATEGORY.get(category)
    if brands:
        return rng.choice(brands)
    return DEFAULT_BRAND


def build_image_prompt(brand: str, category: str, tech: str) -> str:
    return IMAGE_PROMPT.safe_substitute(
        brand=brand,
        category=clean_category(category),
        tech=tech,
    )


def build_concept(category: str, brand: str, rng: random.Random | None = None) -> Concept:
    """Build a concept from one random innovation and one random base name.

    Unknown categories are passed through; they get the fallback base name
    and the category text is used as-is in the copy.
    """
    rng = rng or random.Random()
    innovation = rng.choice(INNOVATIONS)
    tech = innovation["tech"]
    category_text = clean_category(category)

    names = PRODUCT_NAMES.get(category)
    base_name = rng.choice(names) if names else FALLBACK_PRODUCT_NAME
    product_name = f"{brand} {base_name} {tech.split(' ')[0]}"

    concept = Concept(
        product_name=product_name,
        innovation=tech,
        market_disruption=MARKET_DISRUPTION.safe_substitute(
            category=category_text, desc=innovation["desc"]
        ),
        consumer_insight=CONSUMER_INSIGHT.safe_substitute(category=category_text),
        image_prompt=build_image_prompt(brand, category, tech),
        features=[feature.safe_substitute(tech=tech) for feature in CONCEPT_FEATURES],
        ingredients=INGREDIENTS.safe_substitute(tech=tech),
        usage=USAGE,
        price=PRICE,
        sustainability=SUSTAINABILITY,
    )

    logger.debug("Built concept for category=%s brand=%s: %s", category, brand, product_name)
    return concept
