"""
Backoff scheduling.

Computes how long to wait before the next attempt:

- A valid Retry-After hint from the server wins outright, capped at
  max_delay, with no jitter.
- Otherwise full jitter: a uniform sample from [0, min(base * 2**n, max)).
"""

import math
import random
import re
import sys
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

from ollama_tools.retry.config import RetryConfig

_DELTA_SECONDS = re.compile(r"^\d+$")


def parse_retry_after(value: str | None, now: datetime | None = None) -> float | None:
    """
    Parse a Retry-After header value into seconds from now.

    Accepts either delta-seconds ("120") or an HTTP-date
    ("Wed, 21 Oct 2015 07:28:00 GMT").

    Args:
        value: Raw header value
        now: Reference time for HTTP-dates (defaults to current UTC time)

    Returns:
        Seconds to wait (math.inf for delta-seconds too large for a float),
        or None if the value is missing, invalid or in the past
    """
    if value is None:
        return None

    value = value.strip()
    if not value:
        return None

    if _DELTA_SECONDS.match(value):
        try:
            return float(int(value))
        except (ValueError, OverflowError):
            # Too many digits for a float: longer than any max_delay
            return math.inf

    try:
        deadline = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return None
    if deadline is None:
        return None

    if deadline.tzinfo is None:
        deadline = deadline.replace(tzinfo=timezone.utc)
    if now is None:
        now = datetime.now(timezone.utc)

    remaining = (deadline - now).total_seconds()
    if remaining <= 0:
        return None
    return remaining


def exponential_ceiling(attempt_index: int, config: RetryConfig) -> float:
    """Upper bound of the jitter window for a zero-based retry index."""
    if config.base_delay == 0:
        return 0.0
    try:
        ceiling = math.ldexp(config.base_delay, attempt_index)
    except OverflowError:
        ceiling = sys.float_info.max
    if config.max_delay is not None:
        ceiling = min(ceiling, config.max_delay)
    return ceiling


def next_delay(
    attempt_index: int,
    config: RetryConfig,
    retry_after: str | None = None,
    *,
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> float:
    """
    Compute the delay before the next attempt.

    Args:
        attempt_index: Zero-based retry index (0 = delay before retry #1)
        config: Retry policy supplying base_delay / max_delay
        retry_after: Raw Retry-After header from the failed response
        now: Reference time for HTTP-date hints
        rng: Random source (defaults to the module-level generator)

    Returns:
        Delay in seconds
    """
    hint = parse_retry_after(retry_after, now=now)
    if hint is not None and config.max_delay is not None:
        return min(hint, config.max_delay)
    if hint is not None and math.isfinite(hint):
        return hint

    ceiling = exponential_ceiling(attempt_index, config)
    sample = (rng or random).random()
    return sample * ceiling
