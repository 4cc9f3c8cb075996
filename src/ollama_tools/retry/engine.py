"""
Retry engine for flaky remote calls.

Drives a single logical call through a sequential state machine:

    Attempting(n) --success--------------------------> return payload
    Attempting(n) --fatal----------------------------> re-raise error
    Attempting(n) --retryable, n == max_retries------> re-raise error
    Attempting(n) --retryable, n <  max_retries------> Waiting -> Attempting(n+1)

Each attempt is bounded by with_timeout. Errors are never wrapped: the
caller receives the exact exception raised by the last attempt. Retry
decisions are reported to a caller-owned sink as RetryRecord values.

Usage:
    engine = RetryEngine(RetryConfig(max_retries=2, base_delay=0.1))
    payload = await engine.execute(lambda: client.web_search("ollama"))
"""

import asyncio
import random
from typing import Awaitable, Callable, TypeVar

from ollama_tools.retry.backoff import next_delay
from ollama_tools.retry.classifier import Fatal, classify
from ollama_tools.retry.config import RetryConfig
from ollama_tools.retry.exceptions import CallCancelledError
from ollama_tools.retry.metadata import RetryRecord, RetrySink, log_retry_record
from ollama_tools.retry.timeout import with_timeout

T = TypeVar("T")


async def backoff_sleep(delay: float, cancel_event: asyncio.Event | None = None) -> None:
    """
    Wait ``delay`` seconds, aborting early if ``cancel_event`` is set.

    Raises:
        CallCancelledError: The event fired before the delay elapsed
    """
    if cancel_event is None:
        await asyncio.sleep(delay)
        return

    try:
        await asyncio.wait_for(cancel_event.wait(), timeout=delay)
    except asyncio.TimeoutError:
        return
    raise CallCancelledError("Call cancelled during backoff")


class RetryEngine:
    """
    Retry engine with timeout, classification and jittered backoff.

    The engine holds no per-call state, so one instance can serve many
    concurrent calls.

    Attributes:
        config: Retry policy
        on_retry: Sink invoked once per retry decision
    """

    def __init__(
        self,
        config: RetryConfig | None = None,
        on_retry: RetrySink | None = None,
        *,
        rng: random.Random | None = None,
    ):
        """
        Initialize retry engine.

        Args:
            config: Retry policy (defaults to RetryConfig())
            on_retry: Diagnostic sink (defaults to log_retry_record)
            rng: Random source for jitter
        """
        self.config = config or RetryConfig()
        self.on_retry = on_retry or log_retry_record
        self._rng = rng

    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> T:
        """
        Run ``operation`` until it succeeds, fails fatally or the budget runs out.

        Args:
            operation: Zero-argument coroutine function performing one attempt
            cancel_event: Optional event that aborts the call, including
                during a backoff wait

        Returns:
            The operation's result

        Raises:
            CallCancelledError: cancel_event was set
            Exception: The error of the final attempt, unchanged
        """
        retries_done = 0

        while True:
            try:
                return await with_timeout(
                    operation, self.config.timeout, cancel_event=cancel_event
                )
            except CallCancelledError:
                raise
            except Exception as error:
                verdict = classify(error)
                if isinstance(verdict, Fatal) or retries_done >= self.config.max_retries:
                    raise

                delay = next_delay(
                    retries_done, self.config, verdict.retry_after, rng=self._rng
                )
                retries_done += 1
                self.on_retry(
                    RetryRecord(
                        attempt_number=retries_done,
                        delay=delay,
                        error_message=str(error),
                        status=verdict.status,
                    )
                )

            await backoff_sleep(delay, cancel_event)


async def retry_with_backoff(
    operation: Callable[[], Awaitable[T]],
    config: RetryConfig | None = None,
    *,
    on_retry: RetrySink | None = None,
    cancel_event: asyncio.Event | None = None,
) -> T:
    """Run ``operation`` under a one-off RetryEngine."""
    engine = RetryEngine(config, on_retry)
    return await engine.execute(operation, cancel_event=cancel_event)
