"""Integration test fixtures (service checks and prerequisites).

Integration tests talk to a real Ollama server and are skipped if it is
not running. Set OLLAMA_HOST / OLLAMA_TEST_MODEL to point them elsewhere.
"""

import os

import httpx
import pytest

from ollama_tools.client.ollama_client import OllamaClient

OLLAMA_HOST = os.environ.get("OLLAMA_HOST", "http://localhost:11434")
TEST_MODEL = os.environ.get("OLLAMA_TEST_MODEL", "llama3.2")


@pytest.fixture(scope="session")
def check_ollama():
    """Check if Ollama is available at OLLAMA_HOST.

    Skips tests if Ollama is not reachable.
    """
    try:
        response = httpx.get(f"{OLLAMA_HOST}/api/tags", timeout=5)
        if response.status_code != 200:
            pytest.skip("Ollama not available (non-200 status)")
    except httpx.HTTPError as e:
        pytest.skip(f"Ollama not available: {e}")


@pytest.fixture(scope="session")
def test_model(check_ollama) -> str:
    """Name of a locally installed model; skips if it is missing."""
    response = httpx.get(f"{OLLAMA_HOST}/api/tags", timeout=5)
    names = {model["name"] for model in response.json().get("models", [])}
    if TEST_MODEL not in names and f"{TEST_MODEL}:latest" not in names:
        pytest.skip(f"Model {TEST_MODEL} not installed")
    return TEST_MODEL


@pytest.fixture
async def real_ollama_client(check_ollama):
    """Real OllamaClient instance for integration tests."""
    client = OllamaClient(base_url=OLLAMA_HOST, timeout=120.0)
    yield client
    await client.close()
