"""
Bounded timeout and retry policy for calls to external services.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """Timeout plus retry-with-jitter settings for one external call."""

    timeout: float = 30.0  # Seconds per attempt
    retries: int = 1  # Extra attempts after the first
    jitter: float = 0.5  # Max random wait before a retry
    retry_on: tuple[type[BaseException], ...] = (Exception,)


async def call_with_retry(fn: Callable[[], Awaitable[T]], policy: RetryPolicy) -> T:
    """
    Await ``fn()`` under a timeout, retrying on failure.

    Args:
        fn: Zero-argument coroutine factory (called once per attempt)
        policy: Timeout and retry settings

    Returns:
        Result of the first successful attempt

    Raises:
        The last attempt's exception (``asyncio.TimeoutError`` on timeout)
    """
    async for attempt in AsyncRetrying(
        stop=stop_after_attempt(policy.retries + 1),
        wait=wait_random(0, policy.jitter),
        retry=retry_if_exception_type(policy.retry_on),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    ):
        with attempt:
            return await asyncio.wait_for(fn(), timeout=policy.timeout)

    raise RuntimeError("unreachable")  # pragma: no cover
