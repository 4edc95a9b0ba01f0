"""Millisecond wall-clock helpers."""

import time

_POLL_SECONDS = 0.0001


def now_ms() -> int:
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def precise_sleep(ms: int) -> None:
    """Wait until at least ``ms`` milliseconds have passed, polling finely."""
    start = now_ms()
    while now_ms() - start < ms:
        time.sleep(_POLL_SECONDS)