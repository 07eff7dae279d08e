"""Image generation provider interface and implementations."""

from __future__ import annotations

import logging
import os
import time
from abc import ABC, abstractmethod

from core.placeholder import to_data_url

logger = logging.getLogger(__name__)


def resolve_api_key(explicit: str | None, *env_names: str) -> str:
    """Return the explicit key if given, else the first non-empty environment variable."""
    if explicit and explicit.strip():
        return explicit.strip()
    for name in env_names:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return ""


class ImageProvider(ABC):
    """Base interface for image generation providers.

    Providers return a URL the browser can load directly: either a remote
    URL from the provider or a ``data:`` URL for providers that only return
    raw bytes.
    """

    provider_name: str = "base"

    @abstractmethod
    def generate_url(self, prompt: str, width: int = 1024, height: int = 1024) -> str:
        ...

    def timed_generate_url(self, prompt: str, width: int = 1024, height: int = 1024) -> tuple[str, float]:
        start = time.time()
        url = self.generate_url(prompt, width, height)
        elapsed = time.time() - start
        return url, elapsed

    def close(self) -> None:
        """Release any network resources held by the provider."""


class OpenAIProvider(ImageProvider):
    """OpenAI DALL-E provider."""

    provider_name = "openai"

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "dall-e-3",
        quality: str = "standard",
        style: str = "natural",
        timeout: float = 5.0,
    ) -> None:
        self.api_key = resolve_api_key(api_key, "OPENAI_API_KEY")
        self.model = model
        self.quality = quality
        self.style = style
        if not self.api_key:
            raise ValueError("OpenAI API key is required. Set OPENAI_API_KEY or pass api_key.")

        from openai import OpenAI

        # The caller owns the fallback policy, so the SDK must not retry.
        self._client = OpenAI(api_key=self.api_key, timeout=timeout, max_retries=0)

    def generate_url(self, prompt: str, width: int = 1024, height: int = 1024) -> str:
        logger.info("Generating image via OpenAI model=%s", self.model)

        response = self._client.images.generate(
            model=self.model,
            prompt=prompt,
            n=1,
            size=self._map_size(width, height),
            quality=self.quality,
            style=self.style,
        )

        if not response.data or not response.data[0].url:
            raise RuntimeError("OpenAI returned no image.")
        return response.data[0].url

    def close(self) -> None:
        self._client.close()

    @staticmethod
    def _map_size(width: int, height: int) -> str:
        if width == height:
            return "1024x1024"
        elif width > height:
            return "1792x1024"
        else:
            return "1024x1792"


class ReplicateProvider(ImageProvider):
    """Replicate API provider using FLUX models."""

    provider_name = "replicate"

    def __init__(
        self,
        api_token: str | None = None,
        model: str = "black-forest-labs/flux-schnell",
        timeout: float = 5.0,
    ) -> None:
        self.api_token = resolve_api_key(api_token, "REPLICATE_API_TOKEN")
        self.model = model
        if not self.api_token:
            raise ValueError(
                "Replicate API token is required. Set REPLICATE_API_TOKEN or pass api_token."
            )

        import replicate

        self._client = replicate.Client(api_token=self.api_token, timeout=timeout)

    def generate_url(self, prompt: str, width: int = 1024, height: int = 1024) -> str:
        logger.info("Generating image via Replicate model=%s", self.model)

        output = self._client.run(
            self.model,
            input={
                "prompt": prompt,
                "width": width,
                "height": height,
                "num_outputs": 1,
            },
        )

        if isinstance(output, list):
            if not output:
                raise RuntimeError("Replicate returned no images.")
            output = output[0]
        return str(output)


class GeminiProvider(ImageProvider):
    """Google Gemini Imagen provider; images come back inline as data URLs."""

    provider_name = "gemini"

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "imagen-3.0-generate-002",
        timeout: float = 5.0,
    ) -> None:
        self.api_key = resolve_api_key(api_key, "GEMINI_API_KEY", "GOOGLE_API_KEY")
        self.model = model
        if not self.api_key:
            raise ValueError(
                "Gemini API key is required. Set GEMINI_API_KEY or pass api_key."
            )

        from google import genai
        from google.genai import types

        self._client = genai.Client(
            api_key=self.api_key,
            http_options=types.HttpOptions(timeout=int(timeout * 1000)),
        )

    def generate_url(self, prompt: str, width: int = 1024, height: int = 1024) -> str:
        from google.genai import types

        logger.info("Generating image via Gemini Imagen model=%s", self.model)

        response = self._client.models.generate_images(
            model=self.model,
            prompt=prompt,
            config=types.GenerateImagesConfig(
                number_of_images=1,
                aspect_ratio=self._compute_aspect_ratio(width, height),
                safety_filter_level="BLOCK_ONLY_HIGH",
            ),
        )

        if not response.generated_images:
            raise RuntimeError("Gemini returned no images, prompt may have been filtered.")

        image = response.generated_images[0].image
        return to_data_url(image.image_bytes, image.mime_type or "image/png")

    @staticmethod
    def _compute_aspect_ratio(width: int, height: int) -> str:
        ratio = width / height
        if abs(ratio - 1.0) < 0.15:
            return "1:1"
        elif ratio > 1.3:
            return "16:9"
        elif ratio > 1.05:
            return "4:3"
        elif ratio < 0.77:
            return "9:16"
        else:
            return "3:4"


def get_provider(name: str, **kwargs) -> ImageProvider:
    """Factory function to get a provider by name."""
    providers: dict[str, type[ImageProvider]] = {
        "openai": OpenAIProvider,
        "replicate": ReplicateProvider,
        "gemini": GeminiProvider,
    }
    if name not in providers:
        raise ValueError(f"Unknown provider: {name}. Available: {list(providers.keys())}")
    return providers[name](**kwargs)
