"""Generation pipeline: brand selection, concept building, timed image call, fallback."""

from __future__ import annotations

import logging
import random
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError

from core.config import Settings
from core.enhancer import PromptEnhancer
from core.models import PROVIDER_KEY_ENV, PROVIDER_LABELS, GeneratedImage, GenerationBatch
from core.placeholder import placeholder_url
from core.prompt_builder import build_concept, select_brand
from core.providers import ImageProvider, get_provider

logger = logging.getLogger(__name__)


class ProviderNotConfigured(RuntimeError):
    """Raised when image generation is enabled but no provider could be built."""

    def __init__(self, provider_name: str, details: str = "") -> None:
        label = PROVIDER_LABELS.get(provider_name, provider_name)
        env_name = PROVIDER_KEY_ENV.get(provider_name, "the API key")
        self.error = f"{label} API not configured"
        self.details = details or f"Please ensure {env_name} is set in environment variables"
        super().__init__(self.error)


def build_provider(settings: Settings) -> ImageProvider | None:
    """Build the configured provider, or None if its credentials are missing."""
    kwargs: dict = {"timeout": settings.image_timeout_s}
    if settings.image_provider == "openai":
        kwargs.update(
            api_key=settings.openai_api_key,
            model=settings.image_model,
            quality=settings.image_quality,
            style=settings.image_style,
        )
    try:
        return get_provider(settings.image_provider, **kwargs)
    except ValueError as e:
        logger.error("Image provider %s unavailable: %s", settings.image_provider, e)
        return None


class GenerationService:
    """Produces concept batches; owns the provider, enhancer and worker pool.

    Created once at application startup and closed at shutdown.
    """

    def __init__(
        self,
        settings: Settings,
        provider: ImageProvider | None = None,
        enhancer: PromptEnhancer | None = None,
        rng: random.Random | None = None,
        max_workers: int = 4,
    ) -> None:
        self.settings = settings
        self.provider = provider
        self.enhancer = enhancer
        self.rng = rng or random.Random()
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="image-gen")

    @classmethod
    def from_settings(cls, settings: Settings, rng: random.Random | None = None) -> GenerationService:
        provider = build_provider(settings) if settings.enable_image_generation else None
        enhancer = None
        if settings.enable_prompt_enhancement:
            enhancer = PromptEnhancer(
                api_key=settings.openai_api_key,
                model=settings.chat_model,
                timeout=settings.image_timeout_s,
            )
        return cls(settings, provider=provider, enhancer=enhancer, rng=rng)

    @property
    def configured(self) -> bool:
        return not self.settings.enable_image_generation or self.provider is not None

    def clamp_count(self, count: int | None) -> int:
        """An omitted count means one item; zero or less means none."""
        if count is None:
            return 1
        return max(0, min(int(count), self.settings.max_images))

    def ensure_configured(self) -> None:
        if not self.configured:
            raise ProviderNotConfigured(self.settings.image_provider)

    def generate(
        self,
        category: str,
        brand: str | None = None,
        count: int | None = None,
        session_id: str | None = None,
    ) -> GenerationBatch:
        """Generate up to ``count`` concepts for a category.

        Provider failures and timeouts are replaced with a local placeholder;
        an item that fails anywhere else is logged and skipped.
        """
        self.ensure_configured()

        batch = GenerationBatch()
        if session_id:
            batch.session_id = session_id

        total = self.clamp_count(count)
        logger.info(
            "Generating %d concept(s) for category=%s requested_brand=%s",
            total, category, brand,
        )

        for idx in range(1, total + 1):
            try:
                batch.images.append(self._generate_one(category, brand))
            except Exception:
                logger.exception("Concept %d/%d for category=%s failed, skipping", idx, total, category)

        logger.info("Generated %d/%d concept(s), session=%s", len(batch.images), total, batch.session_id)
        return batch

    def _generate_one(self, category: str, requested_brand: str | None) -> GeneratedImage:
        brand = select_brand(category, requested_brand, rng=self.rng)
        concept = build_concept(category, brand, rng=self.rng)

        prompt = concept.image_prompt
        if self.enhancer is not None and self.enhancer.available:
            prompt = self.enhancer.enhance_prompt(prompt, innovation=concept.innovation)

        url = None
        if self.settings.enable_image_generation and self.provider is not None:
            url = self._request_image(prompt)

        is_placeholder = url is None
        if is_placeholder:
            url = placeholder_url(concept.product_name, concept.innovation, category)

        return GeneratedImage(
            url=url,
            prompt=prompt,
            brand=brand,
            category=category,
            concept=concept,
            is_placeholder=is_placeholder,
        )

    def _request_image(self, prompt: str) -> str | None:
        """Call the provider under the configured timeout; None means fall back."""
        width, height = self.settings.image_dimensions
        timeout = self.settings.image_timeout_s
        future = self._executor.submit(self.provider.timed_generate_url, prompt, width, height)
        try:
            url, elapsed = future.result(timeout=timeout)
        except FutureTimeoutError:
            future.cancel()
            logger.warning(
                "Image generation via %s timed out after %.1fs, using placeholder",
                self.provider.provider_name, timeout,
            )
            return None
        except Exception as e:
            logger.warning(
                "Image generation via %s failed (%s: %s), using placeholder",
                self.provider.provider_name, type(e).__name__, e,
            )
            return None

        if not url:
            logger.warning("%s returned an empty image URL, using placeholder", self.provider.provider_name)
            return None

        logger.info("Image generated via %s in %.2fs", self.provider.provider_name, elapsed)
        return url

    def close(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)
        if self.provider is not None:
            self.provider.close()
        if self.enhancer is not None:
            self.enhancer.close()
