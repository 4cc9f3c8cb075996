"""
Attempt-level exceptions for the retry layer.

A single network attempt can fail in exactly three ways, tagged by
AttemptErrorKind:

- TIMEOUT: the attempt exceeded its per-attempt time budget
- HTTP_STATUS: the server answered with a non-2xx status
- TRANSPORT: anything else (DNS, connection reset, undecodable body)

The classifier inspects these types (not ad-hoc attributes) to decide
whether an attempt is worth repeating.
"""

from enum import Enum

from ollama_tools.exceptions import OllamaToolsError


class AttemptErrorKind(str, Enum):
    """Discriminator for AttemptError subclasses."""

    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    TRANSPORT = "transport"


class AttemptError(OllamaToolsError):
    """
    Base exception for a failed network attempt.

    Attributes:
        kind: Which failure family this error belongs to
        status: HTTP status code (HTTP_STATUS only)
        retry_after: Raw Retry-After header value, if the server sent one
    """

    kind: AttemptErrorKind = AttemptErrorKind.TRANSPORT

    def __init__(
        self,
        message: str,
        status: int | None = None,
        retry_after: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, details)
        self.status = status
        self.retry_after = retry_after

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"kind={self.kind.value}, status={self.status}, "
            f"message={self.message!r})"
        )


class AttemptTimeoutError(AttemptError):
    """
    Raised when a single attempt exceeds its time budget.

    Never retried: a timeout usually means the remote side is saturated.
    """

    kind = AttemptErrorKind.TIMEOUT

    def __init__(self, message: str, timeout: float | None = None, details: dict | None = None):
        super().__init__(message, details=details)
        self.timeout = timeout


class HttpStatusError(AttemptError):
    """Raised when the server responds with a non-2xx HTTP status."""

    kind = AttemptErrorKind.HTTP_STATUS

    def __init__(
        self,
        message: str,
        status: int,
        retry_after: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, status=status, retry_after=retry_after, details=details)


class TransportError(AttemptError):
    """
    Raised for connection, DNS and response-decoding failures.

    No attempt is made to tell transient transport failures from permanent
    ones; all of them are fatal.
    """

    kind = AttemptErrorKind.TRANSPORT


class CallCancelledError(OllamaToolsError):
    """Raised when the caller aborts a whole call via its cancel event."""
    pass
