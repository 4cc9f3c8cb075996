"""
Unit tests for the per-attempt timeout wrapper.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from ollama_tools.retry.exceptions import AttemptTimeoutError, CallCancelledError
from ollama_tools.retry.timeout import with_timeout


class SlowOperation:
    """Operation that sleeps and records whether it was cancelled."""

    def __init__(self, duration: float = 10.0, result: str = "done"):
        self.duration = duration
        self.result = result
        self.started = False
        self.cancelled = False

    async def __call__(self) -> str:
        self.started = True
        try:
            await asyncio.sleep(self.duration)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        return self.result


@pytest.mark.asyncio
async def test_returns_result_when_operation_finishes():
    """Test a fast operation's result is returned."""
    operation = AsyncMock(return_value={"models": []})

    result = await with_timeout(operation, 1.0)

    assert result == {"models": []}
    operation.assert_awaited_once()


@pytest.mark.asyncio
async def test_no_timeout_bound():
    """Test timeout=None waits for completion."""
    operation = SlowOperation(duration=0.01)

    assert await with_timeout(operation, None) == "done"


@pytest.mark.asyncio
async def test_timeout_raises_and_cancels_operation():
    """Test the in-flight operation is actively cancelled on timeout."""
    operation = SlowOperation(duration=10.0)

    with pytest.raises(AttemptTimeoutError) as exc_info:
        await with_timeout(operation, 0.05)

    assert operation.cancelled is True
    assert exc_info.value.timeout == 0.05
    assert "0.05" in str(exc_info.value)


@pytest.mark.asyncio
async def test_operation_error_propagates_unchanged():
    """Test errors raised by the operation are not wrapped."""
    error = ValueError("bad payload")
    operation = AsyncMock(side_effect=error)

    with pytest.raises(ValueError) as exc_info:
        await with_timeout(operation, 1.0)

    assert exc_info.value is error


@pytest.mark.asyncio
async def test_cancel_event_already_set_skips_operation():
    """Test a pre-set cancel event never starts the operation."""
    event = asyncio.Event()
    event.set()
    operation = AsyncMock(return_value="never")

    with pytest.raises(CallCancelledError):
        await with_timeout(operation, 1.0, cancel_event=event)

    operation.assert_not_called()


@pytest.mark.asyncio
async def test_cancel_event_aborts_in_flight_operation():
    """Test the caller's event and the timer are both honoured."""
    event = asyncio.Event()
    operation = SlowOperation(duration=10.0)
    asyncio.get_running_loop().call_later(0.05, event.set)

    with pytest.raises(CallCancelledError):
        await with_timeout(operation, 5.0, cancel_event=event)

    assert operation.started is True
    assert operation.cancelled is True


@pytest.mark.asyncio
async def test_unset_cancel_event_does_not_interfere():
    """Test a cancel event that never fires leaves the result intact."""
    event = asyncio.Event()
    operation = SlowOperation(duration=0.01, result="ok")

    assert await with_timeout(operation, 1.0, cancel_event=event) == "ok"


@pytest.mark.asyncio
async def test_timeout_wins_over_unset_cancel_event():
    event = asyncio.Event()
    operation = SlowOperation(duration=10.0)

    with pytest.raises(AttemptTimeoutError):
        await with_timeout(operation, 0.05, cancel_event=event)

    assert operation.cancelled is True


@pytest.mark.asyncio
async def test_outer_task_cancellation_cancels_operation():
    """Test cancelling the caller's task tears down the inner attempt."""
    operation = SlowOperation(duration=10.0)
    outer = asyncio.ensure_future(with_timeout(operation, 5.0))

    await asyncio.sleep(0.05)
    outer.cancel()

    with pytest.raises(asyncio.CancelledError):
        await outer

    assert operation.cancelled is True
