"""
Error classification for the retry engine.

Maps whatever an attempt raised to either Retryable (transient HTTP status,
with the server's Retry-After hint forwarded) or Fatal.

Rules, in order:
    1. Timeouts are fatal
    2. HTTP 429/500/502/503/504 are retryable
    3. Any other HTTP status is fatal
    4. Everything else (DNS, connection reset, bad body) is fatal
"""

import json
from dataclasses import dataclass

import httpx

from ollama_tools.retry.config import RETRYABLE_STATUS_CODES
from ollama_tools.retry.exceptions import (
    AttemptError,
    AttemptTimeoutError,
    HttpStatusError,
    TransportError,
)


@dataclass(frozen=True)
class Retryable:
    """The attempt failed transiently and may be repeated."""

    status: int
    retry_after: str | None = None


@dataclass(frozen=True)
class Fatal:
    """The attempt failed permanently; surface the error now."""

    reason: str


Classification = Retryable | Fatal


def as_attempt_error(error: BaseException) -> AttemptError:
    """
    Convert an arbitrary exception into the AttemptError hierarchy.

    AttemptError instances are returned as-is. Raw httpx errors are mapped
    by type; anything else becomes a TransportError.
    """
    if isinstance(error, AttemptError):
        return error

    if isinstance(error, httpx.TimeoutException):
        return AttemptTimeoutError(str(error) or "Request timeout")

    if isinstance(error, httpx.HTTPStatusError):
        response = error.response
        return HttpStatusError(
            f"HTTP {response.status_code} {response.reason_phrase}",
            status=response.status_code,
            retry_after=response.headers.get("Retry-After"),
        )

    if isinstance(error, json.JSONDecodeError):
        return TransportError(f"Invalid JSON response: {error.msg}")

    return TransportError(
        str(error) or type(error).__name__,
        details={"error_type": type(error).__name__},
    )


def classify(error: BaseException) -> Classification:
    """
    Decide whether a failed attempt is worth retrying.

    Args:
        error: Exception raised by the attempt

    Returns:
        Retryable(status, retry_after) or Fatal(reason)
    """
    attempt_error = as_attempt_error(error)

    if isinstance(attempt_error, AttemptTimeoutError):
        return Fatal(reason="timeout")

    if isinstance(attempt_error, HttpStatusError):
        if attempt_error.status in RETRYABLE_STATUS_CODES:
            return Retryable(
                status=attempt_error.status,
                retry_after=attempt_error.retry_after,
            )
        return Fatal(reason="http_status")

    return Fatal(reason="transport")
