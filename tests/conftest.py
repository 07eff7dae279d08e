from pathlib import Path
import random
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.config import Settings
from core.pipeline import GenerationService
from fakes import FakeProvider


@pytest.fixture
def settings():
    return Settings(openai_api_key="sk-test-1234567890", image_timeout_s=1.0, max_images=4)


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def make_service(settings):
    services = []

    def factory(provider=None, settings_override=None, seed=7, **kwargs):
        svc = GenerationService(
            settings_override or settings,
            provider=provider,
            rng=random.Random(seed),
            **kwargs,
        )
        services.append(svc)
        return svc

    yield factory
    for svc in services:
        svc.close()
