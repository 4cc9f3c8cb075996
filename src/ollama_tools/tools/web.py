"""
Web tools backed by the Ollama Cloud API.

Unlike the local API, the cloud endpoints are rate limited and occasionally
overloaded, so every call runs through RetryEngine: 429/5xx responses are
retried with jittered backoff (or the server's Retry-After), and each
attempt is bounded by the per-attempt timeout.
"""

import asyncio
from typing import Optional

from ollama_tools.client.ollama_client import OllamaClient
from ollama_tools.formatting.response_formatter import render
from ollama_tools.models.enums import ResponseFormat
from ollama_tools.retry.config import WEB_API_RETRY_CONFIG, RetryConfig
from ollama_tools.retry.engine import RetryEngine
from ollama_tools.retry.metadata import RetrySink


async def web_search(
    client: OllamaClient,
    query: str,
    max_results: int,
    fmt: ResponseFormat,
    *,
    retry_config: Optional[RetryConfig] = None,
    on_retry: Optional[RetrySink] = None,
    cancel_event: Optional[asyncio.Event] = None,
) -> str:
    """
    Search the web and render the results.

    Args:
        client: Ollama client (must carry an API key)
        query: Search query
        max_results: Maximum number of results
        fmt: Output format
        retry_config: Retry policy (defaults to WEB_API_RETRY_CONFIG)
        on_retry: Diagnostic sink for retry decisions
        cancel_event: Aborts the call, including during backoff

    Raises:
        MissingAPIKeyError: No API key configured
        AttemptError: Final attempt failed
    """
    engine = RetryEngine(retry_config or WEB_API_RETRY_CONFIG, on_retry)
    data = await engine.execute(
        lambda: client.web_search(query, max_results),
        cancel_event=cancel_event,
    )
    return render(data, fmt)


async def web_fetch(
    client: OllamaClient,
    url: str,
    fmt: ResponseFormat,
    *,
    retry_config: Optional[RetryConfig] = None,
    on_retry: Optional[RetrySink] = None,
    cancel_event: Optional[asyncio.Event] = None,
) -> str:
    """Fetch a web page (title, content, links) and render it."""
    engine = RetryEngine(retry_config or WEB_API_RETRY_CONFIG, on_retry)
    data = await engine.execute(
        lambda: client.web_fetch(url),
        cancel_event=cancel_event,
    )
    return render(data, fmt)
