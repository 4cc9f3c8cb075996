"""
Per-attempt timeout wrapper.

Runs one attempt as an internally owned asyncio task and bounds it in time.
The caller may also pass an asyncio.Event to abort the attempt early; the
attempt is raced against both the timer and the event.
"""

import asyncio
from typing import Awaitable, Callable, TypeVar

from ollama_tools.retry.exceptions import AttemptTimeoutError, CallCancelledError

T = TypeVar("T")


async def with_timeout(
    operation: Callable[[], Awaitable[T]],
    timeout: float | None,
    *,
    cancel_event: asyncio.Event | None = None,
) -> T:
    """
    Run ``operation()`` and give up after ``timeout`` seconds.

    Args:
        operation: Zero-argument coroutine function performing one attempt
        timeout: Time budget in seconds (None = wait forever)
        cancel_event: Optional caller-owned event that aborts the attempt

    Returns:
        Whatever the operation returns

    Raises:
        AttemptTimeoutError: The operation did not finish in time
        CallCancelledError: cancel_event was set before the operation finished
        Exception: Anything the operation raised, unchanged
    """
    if cancel_event is not None and cancel_event.is_set():
        raise CallCancelledError("Call cancelled before attempt started")

    task = asyncio.ensure_future(operation())
    waiters: set[asyncio.Future] = {task}

    cancel_waiter: asyncio.Future | None = None
    if cancel_event is not None:
        cancel_waiter = asyncio.ensure_future(cancel_event.wait())
        waiters.add(cancel_waiter)

    try:
        done, _ = await asyncio.wait(
            waiters, timeout=timeout, return_when=asyncio.FIRST_COMPLETED
        )

        if task in done:
            return task.result()

        if cancel_waiter is not None and cancel_waiter in done:
            raise CallCancelledError("Call cancelled during attempt")

        raise AttemptTimeoutError(
            f"Request timeout after {timeout}s",
            timeout=timeout,
            details={"timeout": timeout},
        )
    finally:
        # Tear down whatever is still in flight, on every exit path
        for waiter in waiters:
            if not waiter.done():
                waiter.cancel()
        await asyncio.gather(*waiters, return_exceptions=True)
