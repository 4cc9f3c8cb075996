"""Unit test fixtures (mocks and stubs).

Provides mock objects for testing without external dependencies.
"""

import random

import pytest
from unittest.mock import AsyncMock

from ollama_tools.client.ollama_client import OllamaClient
from ollama_tools.retry.config import RetryConfig
from ollama_tools.retry.exceptions import HttpStatusError
from ollama_tools.retry.metadata import RetryRecord


@pytest.fixture
def fast_retry_config() -> RetryConfig:
    """Retry config with millisecond delays so tests do not wait."""
    return RetryConfig(max_retries=3, base_delay=0.001, max_delay=0.01, timeout=1.0)


@pytest.fixture
def retry_records() -> list[RetryRecord]:
    """List filled by the recording_sink fixture."""
    return []


@pytest.fixture
def recording_sink(retry_records):
    """Retry sink that stores every RetryRecord in retry_records."""
    return retry_records.append


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source for jitter."""
    return random.Random(1234)


@pytest.fixture
def make_http_error():
    """Factory fixture for HttpStatusError.

    Usage:
        def test_something(make_http_error):
            error = make_http_error(503, retry_after="2")
    """
    def _create(status: int, retry_after: str | None = None) -> HttpStatusError:
        return HttpStatusError(
            f"Request failed: {status}",
            status=status,
            retry_after=retry_after,
        )

    return _create


@pytest.fixture
def mock_ollama_client():
    """Mock OllamaClient for tool tests."""
    mock = AsyncMock(spec=OllamaClient)

    mock.list_models = AsyncMock(return_value={"models": [{"name": "llama3.2", "size": 100}]})
    mock.health_check = AsyncMock(return_value=True)
    mock.copy = AsyncMock(return_value={"status": "success"})
    mock.delete = AsyncMock(return_value={"status": "success"})

    return mock


@pytest.fixture
async def ollama_client():
    """Real OllamaClient pointed at fake URLs (use with respx)."""
    client = OllamaClient(
        base_url="http://ollama.test:11434",
        timeout=5.0,
        api_key="test-key",
        web_api_url="https://cloud.ollama.test",
    )
    yield client
    await client.close()
