"""Linear backoff for rate limited requests.

When the server answers 429 the request is retried after waiting 100 ms, then
200 ms, 300 ms and so on. There is no maximum number of attempts: the loop only
ends with ``MaximumWaitTimeReached`` once the next wait can no longer be
represented as a ``timedelta``.

The retry policy is defined once and instantiated as a tenacity ``Retrying``
for blocking callers and ``AsyncRetrying`` for async callers. The caller's
wait primitive is plugged in as tenacity's sleep.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable
from datetime import timedelta
from typing import Any

from loguru import logger
from tenacity import AsyncRetrying, RetryCallState, Retrying, retry_if_exception_type

from tenable_api.errors import MaximumWaitTimeReached, RateLimitReached

INITIAL_WAIT = timedelta(milliseconds=100)
WAIT_INCREMENT = timedelta(milliseconds=100)

Wait = Callable[[timedelta], None]
AsyncWait = Callable[[timedelta], Awaitable[None]]


def sleep(duration: timedelta) -> None:
    """Block the calling thread for ``duration``."""
    time.sleep(duration.total_seconds())


async def async_sleep(duration: timedelta) -> None:
    """Suspend the current task for ``duration``."""
    await asyncio.sleep(duration.total_seconds())


class LinearBackoff:
    """Backoff state of a single dispatch.

    Holds the current wait, which grows by a fixed increment after every wait.
    A new instance is created for every call so concurrent calls never share
    their waits.
    """

    def __init__(
        self,
        initial: timedelta = INITIAL_WAIT,
        increment: timedelta = WAIT_INCREMENT,
    ):
        """Initialize backoff state.

        Args:
            initial: First wait after a rate limited response.
            increment: Amount added to the wait after each rate limited response.
        """
        self.current = initial
        self.increment = increment

    def advance(self) -> None:
        """Increase the current wait by one increment.

        Raises:
            MaximumWaitTimeReached: If the new wait is not representable.
        """
        try:
            self.current = self.current + self.increment
        except OverflowError as e:
            raise MaximumWaitTimeReached() from e

    def seconds(self, retry_state: RetryCallState) -> float:
        """Current wait in seconds, used as tenacity's wait strategy."""
        return self.current.total_seconds()

    def sleeper(self, wait: Wait) -> Callable[[float], None]:
        """Adapt a blocking wait primitive to tenacity's sleep."""

        def _sleep(_seconds: float) -> None:
            wait(self.current)
            self.advance()

        return _sleep

    def async_sleeper(self, wait: AsyncWait) -> Callable[[float], Awaitable[None]]:
        """Adapt an awaitable wait primitive to tenacity's sleep."""

        async def _sleep(_seconds: float) -> None:
            await wait(self.current)
            self.advance()

        return _sleep


def _log_rate_limited(retry_state: RetryCallState) -> None:
    logger.debug(
        f"Rate limit reached (attempt {retry_state.attempt_number}), "
        f"backing off for {retry_state.upcoming_sleep:.1f}s"
    )


def _policy(backoff: LinearBackoff) -> dict[str, Any]:
    return {
        "retry": retry_if_exception_type(RateLimitReached),
        "wait": backoff.seconds,
        "before_sleep": _log_rate_limited,
        "reraise": True,
    }


def retrying(wait: Wait, initial: timedelta = INITIAL_WAIT) -> Retrying:
    """Create a blocking retry controller for one dispatch.

    Args:
        wait: Function blocking the calling thread for the given duration.
        initial: First wait after a rate limited response.

    Returns:
        Configured tenacity Retrying instance.
    """
    backoff = LinearBackoff(initial)
    return Retrying(sleep=backoff.sleeper(wait), **_policy(backoff))


def async_retrying(wait: AsyncWait, initial: timedelta = INITIAL_WAIT) -> AsyncRetrying:
    """Create an async retry controller for one dispatch.

    Args:
        wait: Coroutine function suspending for the given duration.
        initial: First wait after a rate limited response.

    Returns:
        Configured tenacity AsyncRetrying instance.
    """
    backoff = LinearBackoff(initial)
    return AsyncRetrying(sleep=backoff.async_sleeper(wait), **_policy(backoff))
