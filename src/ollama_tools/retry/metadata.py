"""
Retry diagnostics.

This module defines the RetryRecord dataclass emitted once per retry
decision, and the default sink that logs it and feeds Prometheus.
"""

from dataclasses import dataclass
from typing import Callable

import structlog

from ollama_tools.monitoring.metrics import retries_total, retry_delay_seconds

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RetryRecord:
    """
    Diagnostic record for one retry decision.

    Attributes:
        attempt_number: 1-based number of the attempt that just failed
        delay: Seconds the engine will wait before the next attempt
        error_message: Message of the error that triggered the retry
        status: HTTP status that made the error retryable
    """

    attempt_number: int
    delay: float
    error_message: str
    status: int | None = None

    def __post_init__(self) -> None:
        """Validate record invariants."""
        if self.attempt_number < 1:
            raise ValueError("attempt_number must be >= 1")

        if self.delay < 0:
            raise ValueError("delay must be >= 0")


RetrySink = Callable[[RetryRecord], None]


def log_retry_record(record: RetryRecord) -> None:
    """Default sink: structured warning log plus retry metrics."""
    logger.warning(
        "Retrying after transient failure",
        attempt=record.attempt_number,
        delay_seconds=round(record.delay, 3),
        status=record.status,
        error=record.error_message,
    )

    retries_total.labels(status=str(record.status)).inc()
    retry_delay_seconds.observe(record.delay)
