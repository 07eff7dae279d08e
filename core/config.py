"""Runtime settings loaded from the environment (and a .env file, if present)."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from core.models import PROVIDER_KEY_ENV, ProviderName

TRUTHY = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in TRUTHY


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}") from None


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass
class Settings:
    openai_api_key: str = ""
    image_provider: str = ProviderName.OPENAI.value
    enable_image_generation: bool = True
    image_timeout_s: float = 5.0
    image_model: str = "dall-e-3"
    image_size: str = "1024x1024"
    image_quality: str = "standard"
    image_style: str = "natural"
    max_images: int = 4
    enable_prompt_enhancement: bool = False
    chat_model: str = "gpt-4o-mini"
    log_level: str = "INFO"
    api_url: str = "http://127.0.0.1:8000/api"

    @classmethod
    def from_env(cls, dotenv: bool = True) -> Settings:
        if dotenv:
            load_dotenv()

        provider = os.environ.get("IMAGE_PROVIDER", ProviderName.OPENAI.value).strip().lower()
        if provider not in PROVIDER_KEY_ENV:
            raise ValueError(
                f"Unknown IMAGE_PROVIDER: {provider}. Available: {list(PROVIDER_KEY_ENV.keys())}"
            )

        return cls(
            openai_api_key=os.environ.get("OPENAI_API_KEY", "").strip(),
            image_provider=provider,
            enable_image_generation=_env_bool("ENABLE_IMAGE_GENERATION", True),
            image_timeout_s=_env_float("IMAGE_TIMEOUT_S", 5.0),
            image_model=os.environ.get("IMAGE_MODEL", "dall-e-3"),
            image_size=os.environ.get("IMAGE_SIZE", "1024x1024"),
            image_quality=os.environ.get("IMAGE_QUALITY", "standard"),
            image_style=os.environ.get("IMAGE_STYLE", "natural"),
            max_images=max(1, _env_int("MAX_IMAGES", 4)),
            enable_prompt_enhancement=_env_bool("ENABLE_PROMPT_ENHANCEMENT", False),
            chat_model=os.environ.get("CHAT_MODEL", "gpt-4o-mini"),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
            api_url=os.environ.get("INNOVATION_API_URL", "http://127.0.0.1:8000/api").rstrip("/"),
        )

    @property
    def image_dimensions(self) -> tuple[int, int]:
        try:
            width, height = (int(part) for part in self.image_size.lower().split("x"))
        except ValueError:
            return 1024, 1024
        return width, height
