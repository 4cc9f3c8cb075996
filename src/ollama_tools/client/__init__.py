"""
Ollama HTTP client.

Components:
- OllamaClient: Async client for the local API and the cloud web API
- exceptions: Ollama-specific errors layered on the retry error hierarchy
"""

from ollama_tools.client.exceptions import MissingAPIKeyError, ModelNotFoundError
from ollama_tools.client.ollama_client import OllamaClient

__all__ = [
    "OllamaClient",
    "ModelNotFoundError",
    "MissingAPIKeyError",
]
