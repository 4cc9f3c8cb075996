"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import pytest
from typing import Dict, Any

from ollama_tools.config import Settings


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing.

    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.OLLAMA_HOST = "http://custom:11434"
    """
    return Settings(
        # === Application ===
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",

        # === Ollama ===
        OLLAMA_HOST="http://localhost:11434",
        OLLAMA_TIMEOUT=10.0,
        OLLAMA_API_KEY="test-key",
        OLLAMA_WEB_API_URL="https://ollama.com",

        # === Retry ===
        WEB_API_MAX_RETRIES=2,
        WEB_API_BASE_DELAY=0.01,
        WEB_API_MAX_DELAY=0.05,
        WEB_API_TIMEOUT=5.0,

    )


@pytest.fixture
def tags_payload() -> Dict[str, Any]:
    """GET /api/tags response with two models."""
    return {
        "models": [
            {
                "name": "llama3.2:latest",
                "size": 2019393189,
                "digest": "a80c4f17acd5",
                "details": {"family": "llama", "parameter_size": "3.2B"},
            },
            {
                "name": "qwen2.5:7b",
                "size": 4683087332,
                "digest": "845dbda0ea48",
                "details": {"family": "qwen2", "parameter_size": "7.6B"},
            },
        ]
    }


@pytest.fixture
def web_search_payload() -> Dict[str, Any]:
    """POST /api/web_search response."""
    return {
        "results": [
            {
                "title": "Ollama",
                "url": "https://ollama.com",
                "content": "Get up and running with large language models.",
            },
            {
                "title": "Ollama on GitHub",
                "url": "https://github.com/ollama/ollama",
                "content": "Run Llama, Gemma and other models locally.",
            },
        ]
    }
