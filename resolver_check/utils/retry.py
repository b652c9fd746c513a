"""Bounded retry with a fixed delay between attempts."""

import logging
import time
from typing import Any, Callable, Tuple, Type, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar("T")


def call_with_retry(
    func: Callable[..., T],
    *args: Any,
    max_retries: int,
    delay: float,
    retry_on: Tuple[Type[BaseException], ...],
    sleep: Callable[[float], None] = time.sleep,
    **kwargs: Any,
) -> T:
    """Call ``func`` up to ``max_retries + 1`` times.

    Only exceptions listed in ``retry_on`` are retried, and only while
    attempts remain; the wait between attempts is always ``delay`` seconds.
    Any other exception, or a retryable one on the final attempt, is
    re-raised immediately.

    Args:
        func: Callable to invoke.
        *args: Positional arguments for ``func``.
        max_retries: Number of retries after the first attempt (>= 0).
        delay: Seconds to sleep between attempts.
        retry_on: Exception types that trigger a retry.
        sleep: Sleep function, injectable for tests.
        **kwargs: Keyword arguments for ``func``.

    Returns:
        T: Whatever ``func`` returns on the first successful attempt.

    Raises:
        ValueError: If max_retries is negative.

    Examples:
        >>> call_with_retry(int, "42", max_retries=0, delay=0, retry_on=())
        42
    """
    if max_retries < 0:
        raise ValueError("max_retries must be >= 0")

    attempt = 0
    while True:
        try:
            return func(*args, **kwargs)
        except retry_on as e:
            if attempt >= max_retries:
                raise
            attempt += 1
            logger.debug(
                f"{type(e).__name__} on attempt {attempt}/{max_retries + 1}, "
                f"retrying in {delay}s"
            )
            sleep(delay)
