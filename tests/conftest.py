"""Shared fixtures for the routing tests."""

import pytest

from intentroute.config import ConfigSnapshot
from intentroute.routing import IntentRouter, build_registry


@pytest.fixture(scope="session")
def registry():
    """Compiled matchers, built once like at application startup."""
    return build_registry()


@pytest.fixture
def router(registry):
    return IntentRouter(registry)


@pytest.fixture
def openai_snapshot():
    """OpenAI models on both tiers, no overrides."""
    return ConfigSnapshot(
        standard_model="gpt-4o-mini",
        premium_model="gpt-4.1",
        category_model_overrides={},
        alternate_search_enabled=True,
    )
