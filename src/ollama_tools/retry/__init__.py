"""
Retry layer for flaky remote HTTP calls.

Components (leaves first):
    - with_timeout: Bounds a single attempt in time
    - classify: Maps an attempt error to Retryable or Fatal
    - next_delay: Full-jitter backoff honouring Retry-After
    - RetryEngine: Orchestrates attempt -> classify -> wait -> retry

Usage:
    >>> from ollama_tools.retry import RetryConfig, RetryEngine
    >>> engine = RetryEngine(RetryConfig(max_retries=3))
    >>> payload = await engine.execute(fetch_payload)
"""

from ollama_tools.retry.backoff import next_delay, parse_retry_after
from ollama_tools.retry.classifier import Fatal, Retryable, as_attempt_error, classify
from ollama_tools.retry.config import (
    RETRYABLE_STATUS_CODES,
    WEB_API_RETRY_CONFIG,
    WEB_API_TIMEOUT,
    RetryConfig,
)
from ollama_tools.retry.engine import RetryEngine, retry_with_backoff
from ollama_tools.retry.exceptions import (
    AttemptError,
    AttemptErrorKind,
    AttemptTimeoutError,
    CallCancelledError,
    HttpStatusError,
    TransportError,
)
from ollama_tools.retry.metadata import RetryRecord, log_retry_record
from ollama_tools.retry.timeout import with_timeout

__all__ = [
    "RetryEngine",
    "retry_with_backoff",
    "RetryConfig",
    "RetryRecord",
    "log_retry_record",
    "RETRYABLE_STATUS_CODES",
    "WEB_API_RETRY_CONFIG",
    "WEB_API_TIMEOUT",
    "with_timeout",
    "classify",
    "as_attempt_error",
    "Retryable",
    "Fatal",
    "next_delay",
    "parse_retry_after",
    "AttemptError",
    "AttemptErrorKind",
    "AttemptTimeoutError",
    "HttpStatusError",
    "TransportError",
    "CallCancelledError",
]
