from types import SimpleNamespace

import pytest

from core.providers import OpenAIProvider, ReplicateProvider


class FakeImages:
    def __init__(self, data):
        self.data = data
        self.calls = []

    def generate(self, **kwargs):
        self.calls.append(kwargs)
        return SimpleNamespace(data=self.data)


class FakeReplicate:
    def __init__(self, output):
        self.output = output
        self.calls = []

    def run(self, model, input):
        self.calls.append((model, input))
        return self.output


def openai_with(data, **kwargs):
    provider = OpenAIProvider(api_key="sk-test", **kwargs)
    provider._client.close()
    images = FakeImages(data)
    provider._client = SimpleNamespace(images=images, close=lambda: None)
    return provider, images


def replicate_with(output):
    provider = ReplicateProvider(api_token="r8-test")
    provider._client = FakeReplicate(output)
    return provider, provider._client


def test_openai_sends_quality_style_and_single_image():
    provider, images = openai_with(
        [SimpleNamespace(url="https://images.example.com/a.png")],
        model="dall-e-3",
        quality="hd",
        style="vivid",
    )

    url = provider.generate_url("a bottle", width=1792, height=1024)

    assert url == "https://images.example.com/a.png"
    assert images.calls == [{
        "model": "dall-e-3",
        "prompt": "a bottle",
        "n": 1,
        "size": "1792x1024",
        "quality": "hd",
        "style": "vivid",
    }]


@pytest.mark.parametrize("data", [[], [SimpleNamespace(url=None)]])
def test_openai_without_image_raises(data):
    provider, _ = openai_with(data)
    with pytest.raises(RuntimeError, match="no image"):
        provider.generate_url("a bottle")


@pytest.mark.parametrize(
    "width, height, expected",
    [(1024, 1024, "1024x1024"), (1792, 1024, "1792x1024"), (512, 900, "1024x1792")],
)
def test_openai_size_mapping(width, height, expected):
    assert OpenAIProvider._map_size(width, height) == expected


def test_replicate_requires_token(monkeypatch):
    monkeypatch.delenv("REPLICATE_API_TOKEN", raising=False)
    with pytest.raises(ValueError, match="REPLICATE_API_TOKEN"):
        ReplicateProvider(api_token=None)


def test_replicate_reads_env_token(monkeypatch):
    monkeypatch.setenv("REPLICATE_API_TOKEN", "r8-env")
    assert ReplicateProvider().api_token == "r8-env"


def test_replicate_returns_first_list_output():
    provider, fake = replicate_with(["https://replicate.example.com/1.png", "https://replicate.example.com/2.png"])

    url = provider.generate_url("a tube", width=768, height=1024)

    assert url == "https://replicate.example.com/1.png"
    model, payload = fake.calls[0]
    assert model == "black-forest-labs/flux-schnell"
    assert payload == {"prompt": "a tube", "width": 768, "height": 1024, "num_outputs": 1}


def test_replicate_accepts_single_output():
    provider, _ = replicate_with("https://replicate.example.com/only.png")
    assert provider.generate_url("a tube") == "https://replicate.example.com/only.png"


def test_replicate_empty_list_raises():
    provider, _ = replicate_with([])
    with pytest.raises(RuntimeError, match="no images"):
        provider.generate_url("a tube")


def test_timed_generate_url_reports_elapsed():
    provider, _ = replicate_with(["https://replicate.example.com/1.png"])
    url, elapsed = provider.timed_generate_url("a tube")
    assert url == "https://replicate.example.com/1.png"
    assert elapsed >= 0
