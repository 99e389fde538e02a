"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock

import pytest

from azure_rerank.config import get_settings
from azure_rerank.rerank.models import RerankOptions

ENDPOINT = "https://example.eastus.models.ai.azure.com/v1/rerank"


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> None:
    """Settings are read fresh for every test."""
    get_settings.cache_clear()


@pytest.fixture
def transport() -> AsyncMock:
    """Transport mock returning an empty results list by default."""
    return AsyncMock(return_value={"results": []})


@pytest.fixture
def make_options(transport: AsyncMock) -> Callable[..., RerankOptions]:
    """Build RerankOptions around the transport mock.

    Returns:
        Factory accepting RerankOptions field overrides.
    """

    def _make(**overrides: Any) -> RerankOptions:
        fields: dict[str, Any] = {
            "endpoint_url": ENDPOINT,
            "headers": {"api-key": "secret-key"},
            "model": "rerank-v3.5",
            "top_n": 3,
            "transport": transport,
        }
        fields.update(overrides)
        return RerankOptions(**fields)

    return _make
