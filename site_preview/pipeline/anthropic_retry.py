"""Retry content provider calls with linear backoff.

A provider attempt can fail on transport, on a non-2xx status, or because
Claude returned something that is not the JSON we asked for. A second attempt
usually fixes the last case, so failed calls are retried a small fixed number
of times before the error reaches the user.
"""

from __future__ import annotations

import time
from typing import Callable, Optional, TypeVar

from site_preview import config
from site_preview.errors import ProviderError

T = TypeVar("T")

RETRYABLE = (ProviderError,)


def call_with_retry(
    fn: Callable[[], T],
    max_attempts: Optional[int] = None,
    base_delay: Optional[float] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """Call fn() until it succeeds or max_attempts is used up.

    After failed attempt n (1-based) waits n * base_delay seconds. The last
    error is re-raised unchanged. Errors outside RETRYABLE propagate at once.
    """
    if max_attempts is None:
        max_attempts = config.MAX_ATTEMPTS
    if base_delay is None:
        base_delay = config.BASE_DELAY

    for attempt in range(1, max_attempts + 1):
        try:
            return fn()
        except RETRYABLE as e:
            if attempt >= max_attempts:
                raise
            print(f"  .. Attempt {attempt} failed: {e}")
            print(f"  .. Retrying ({attempt + 1}/{max_attempts})...")
            sleep(attempt * base_delay)
    raise RuntimeError("retry loop exited without return or raise")
