import uuid
from dataclasses import replace

import pytest

import core.pipeline as pipeline
from core.pipeline import GenerationService, ProviderNotConfigured
from fakes import FakeProvider


class FakeEnhancer:
    available = True

    def __init__(self):
        self.closed = False

    def enhance_prompt(self, basic_prompt, innovation=""):
        return f"enhanced: {basic_prompt}"

    def close(self):
        self.closed = True


def test_generate_uses_provider_url(make_service, provider):
    service = make_service(provider)
    batch = service.generate("laundry")

    assert len(batch.images) == 1
    image = batch.images[0]
    assert image.url == provider.url
    assert image.is_placeholder is False
    assert image.category == "laundry"
    assert image.brand in ["ARM & HAMMER", "OXICLEAN", "XTRA"]
    assert provider.prompts == [image.prompt]
    uuid.UUID(image.id)


def test_generate_keeps_requested_brand_and_session(make_service, provider):
    service = make_service(provider)
    batch = service.generate("home-care", brand="KABOOM", session_id="session-abc")
    assert batch.session_id == "session-abc"
    assert batch.images[0].brand == "KABOOM"
    assert batch.images[0].concept.product_name.startswith("KABOOM ")


def test_timeout_falls_back_to_placeholder(make_service, settings):
    slow = FakeProvider(delay=0.5)
    service = make_service(slow, settings_override=replace(settings, image_timeout_s=0.05))

    image = service.generate("oral-care").images[0]
    assert image.is_placeholder is True
    assert image.url.startswith("data:image/png;base64,")


def test_provider_error_falls_back_to_placeholder(make_service):
    failing = FakeProvider(error=RuntimeError("upstream exploded"))
    service = make_service(failing)

    batch = service.generate("health", count=2)
    assert len(batch.images) == 2
    assert all(img.is_placeholder for img in batch.images)
    assert all("upstream exploded" not in img.url for img in batch.images)


def test_empty_provider_url_falls_back_to_placeholder(make_service):
    service = make_service(FakeProvider(url=""))
    assert service.generate("laundry").images[0].is_placeholder is True


def test_disabled_generation_never_calls_provider(make_service, settings, provider):
    service = make_service(provider, settings_override=replace(settings, enable_image_generation=False))
    image = service.generate("pet-care").images[0]
    assert image.is_placeholder is True
    assert provider.prompts == []


def test_disabled_generation_needs_no_provider(make_service, settings):
    service = make_service(None, settings_override=replace(settings, enable_image_generation=False))
    assert service.configured is True
    assert len(service.generate("laundry").images) == 1


def test_missing_provider_is_not_configured(make_service):
    service = make_service(None)
    assert service.configured is False
    with pytest.raises(ProviderNotConfigured) as exc_info:
        service.generate("laundry")
    assert exc_info.value.error == "OpenAI API not configured"
    assert "OPENAI_API_KEY" in exc_info.value.details


def test_not_configured_message_follows_provider(make_service, settings):
    service = make_service(None, settings_override=replace(settings, image_provider="replicate"))
    with pytest.raises(ProviderNotConfigured) as exc_info:
        service.ensure_configured()
    assert exc_info.value.error == "Replicate API not configured"
    assert "REPLICATE_API_TOKEN" in exc_info.value.details


@pytest.mark.parametrize(
    "requested, expected",
    [(None, 1), (0, 0), (-3, 0), (2, 2), (4, 4), (50, 4)],
)
def test_count_is_clamped(make_service, provider, requested, expected):
    service = make_service(provider)
    assert service.clamp_count(requested) == expected


def test_generated_ids_are_unique(make_service, provider):
    batch = make_service(provider).generate("laundry", count=4)
    ids = [img.id for img in batch.images]
    assert len(ids) == 4
    assert len(set(ids)) == 4


def test_failed_item_is_skipped(make_service, provider, monkeypatch):
    real_build = pipeline.build_concept
    calls = {"n": 0}

    def flaky_build(category, brand, rng=None):
        calls["n"] += 1
        if calls["n"] == 2:
            raise KeyError("broken table")
        return real_build(category, brand, rng=rng)

    monkeypatch.setattr(pipeline, "build_concept", flaky_build)
    batch = make_service(provider).generate("laundry", count=3)
    assert len(batch.images) == 2
    assert batch.to_dict()["totalGenerated"] == 2


def test_enhancer_rewrites_prompt(make_service, provider):
    service = make_service(provider, enhancer=FakeEnhancer())
    image = service.generate("laundry").images[0]
    assert image.prompt.startswith("enhanced: Professional product photography")
    assert provider.prompts == [image.prompt]


def test_same_seed_same_concepts(make_service, provider):
    first = make_service(provider, seed=99).generate("health", count=3)
    second = make_service(provider, seed=99).generate("health", count=3)
    assert [i.concept.product_name for i in first.images] == [i.concept.product_name for i in second.images]
    assert [i.brand for i in first.images] == [i.brand for i in second.images]


def test_batch_serializes_camel_case(make_service, provider):
    payload = make_service(provider).generate("laundry").to_dict()
    assert set(payload) == {"images", "sessionId", "totalGenerated"}
    image = payload["images"][0]
    for key in (
        "id", "url", "prompt", "brand", "category", "productName", "innovation",
        "marketDisruption", "consumerInsight", "features", "ingredients", "usage",
        "price", "sustainability", "createdAt",
    ):
        assert key in image
    assert image["createdAt"].endswith("Z")


def test_close_releases_provider_and_enhancer(settings, provider):
    enhancer = FakeEnhancer()
    service = GenerationService(settings, provider=provider, enhancer=enhancer)
    service.close()
    assert provider.closed is True
    assert enhancer.closed is True


def test_from_settings_without_key_has_no_provider(settings, monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    service = GenerationService.from_settings(replace(settings, openai_api_key=""))
    try:
        assert service.provider is None
        assert service.configured is False
    finally:
        service.close()


def test_zero_count_generates_nothing(make_service, provider):
    batch = make_service(provider).generate("laundry", count=0)
    assert batch.images == []
    assert batch.to_dict()["totalGenerated"] == 0
    assert provider.prompts == []
