"""
Retry configuration.

RetryConfig is an immutable value object; every call builds (or reuses) one
explicitly instead of relying on hidden mutable defaults. All durations are
in seconds.
"""

from dataclasses import dataclass

DEFAULT_MAX_RETRIES = 3
DEFAULT_BASE_DELAY = 1.0
DEFAULT_MAX_DELAY = 10.0
DEFAULT_TIMEOUT = 30.0

RETRYABLE_STATUS_CODES: frozenset[int] = frozenset({429, 500, 502, 503, 504})


@dataclass(frozen=True)
class RetryConfig:
    """
    Retry policy for a single logical call.

    Attributes:
        max_retries: Retries after the first attempt (3 -> 4 attempts total)
        base_delay: Backoff ceiling before the first retry
        max_delay: Upper bound for any delay; None means unbounded
        timeout: Per-attempt time budget; None means unbounded

    base_delay may exceed max_delay; max_delay still caps the result.
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    base_delay: float = DEFAULT_BASE_DELAY
    max_delay: float | None = DEFAULT_MAX_DELAY
    timeout: float | None = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        """Validate config invariants."""
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")

        if self.base_delay < 0:
            raise ValueError("base_delay must be >= 0")

        if self.max_delay is not None and self.max_delay < 0:
            raise ValueError("max_delay must be >= 0 or None")

        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be > 0 or None")

    @property
    def max_attempts(self) -> int:
        """Total attempts including the first one."""
        return self.max_retries + 1


# Individual web API requests give up after this many seconds
WEB_API_TIMEOUT = 30.0

# Policy used by the web search / web fetch tools
WEB_API_RETRY_CONFIG = RetryConfig(max_retries=3, base_delay=1.0, timeout=WEB_API_TIMEOUT)
