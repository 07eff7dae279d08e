import pytest

from core.config import Settings

ENV_VARS = [
    "OPENAI_API_KEY",
    "IMAGE_PROVIDER",
    "ENABLE_IMAGE_GENERATION",
    "IMAGE_TIMEOUT_S",
    "MAX_IMAGES",
    "ENABLE_PROMPT_ENHANCEMENT",
    "LOG_LEVEL",
    "INNOVATION_API_URL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings.from_env(dotenv=False)
    assert settings.openai_api_key == ""
    assert settings.image_provider == "openai"
    assert settings.enable_image_generation is True
    assert settings.image_timeout_s == 5.0
    assert settings.max_images == 4
    assert settings.enable_prompt_enhancement is False
    assert settings.image_dimensions == (1024, 1024)


def test_overrides(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", " sk-abc ")
    monkeypatch.setenv("IMAGE_PROVIDER", "Gemini")
    monkeypatch.setenv("ENABLE_IMAGE_GENERATION", "off")
    monkeypatch.setenv("IMAGE_TIMEOUT_S", "12.5")
    monkeypatch.setenv("MAX_IMAGES", "0")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("INNOVATION_API_URL", "https://example.com/api/")

    settings = Settings.from_env(dotenv=False)
    assert settings.openai_api_key == "sk-abc"
    assert settings.image_provider == "gemini"
    assert settings.enable_image_generation is False
    assert settings.image_timeout_s == 12.5
    assert settings.max_images == 1
    assert settings.log_level == "DEBUG"
    assert settings.api_url == "https://example.com/api"


def test_unknown_provider(monkeypatch):
    monkeypatch.setenv("IMAGE_PROVIDER", "midjourney")
    with pytest.raises(ValueError, match="IMAGE_PROVIDER"):
        Settings.from_env(dotenv=False)


def test_bad_timeout(monkeypatch):
    monkeypatch.setenv("IMAGE_TIMEOUT_S", "soon")
    with pytest.raises(ValueError, match="IMAGE_TIMEOUT_S"):
        Settings.from_env(dotenv=False)


def test_image_dimensions_parsing():
    assert Settings(image_size="1792x1024").image_dimensions == (1792, 1024)
    assert Settings(image_size="huge").image_dimensions == (1024, 1024)
