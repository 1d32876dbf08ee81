# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable
from threading import Lock
from typing import ClassVar


def _now_ms() -> int:
    return int(time.time() * 1000)


class SlidingWindowRateLimiter:
    """In-memory attempt counter per key over a sliding time window.

    State lives in this process only. A single lock serializes the
    prune/check/append sequence so concurrent callers never over- or
    under-count.
    """

    DEFAULT_MAX_ATTEMPTS: ClassVar[int] = 5
    DEFAULT_WINDOW_MS: ClassVar[int] = 60_000

    def __init__(self, clock: Callable[[], int] = _now_ms) -> None:
        self._clock = clock
        self._attempts: dict[str, list[int]] = {}
        self._last_sweep = clock()
        self._lock = Lock()

    def is_allowed(
        self,
        key: str,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        window_ms: int = DEFAULT_WINDOW_MS,
    ) -> bool:
        with self._lock:
            now = self._clock()
            window_start = now - window_ms
            if now - self._last_sweep >= window_ms:
                self._sweep(window_start)
                self._last_sweep = now

            valid = [ts for ts in self._attempts.get(key, ()) if ts > window_start]

            if len(valid) >= max_attempts:
                # Rejections are not recorded; the window still drains.
                if valid:
                    self._attempts[key] = valid
                else:
                    self._attempts.pop(key, None)
                return False

            valid.append(now)
            self._attempts[key] = valid
            return True

    def _sweep(self, window_start: int) -> None:
        """Drop keys whose newest attempt has left the window. Caller holds the lock."""
        drained = [key for key, stamps in self._attempts.items() if stamps[-1] <= window_start]
        for key in drained:
            del self._attempts[key]

    def reset(self, key: str) -> None:
        with self._lock:
            self._attempts.pop(key, None)

    def attempts(self, key: str) -> int:
        with self._lock:
            return len(self._attempts.get(key, ()))

    def __len__(self) -> int:
        with self._lock:
            return len(self._attempts)


__all__ = ["SlidingWindowRateLimiter"]
