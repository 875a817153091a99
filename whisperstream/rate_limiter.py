"""Per-IP tracking of authentication failures to slow down brute-force attempts."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable


@dataclass
class _IpState:
    failures: int
    window_start: float


class AuthRateLimiter:
    """Counts authentication failures per IP within a fixed time window.

    An IP is blocked once it has more than ``max_failures`` failures in the
    current window. A window that has lasted longer than ``window_secs``
    starts over. With ``max_tracked_ips`` above zero, the number of tracked
    IPs is capped by evicting expired entries first and then the oldest.
    """

    def __init__(
        self,
        max_failures: int = 10,
        window_secs: float = 60.0,
        max_tracked_ips: int = 0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_failures < 0:
            raise ValueError("max_failures must be non-negative")
        if window_secs < 0:
            raise ValueError("window_secs must be non-negative")
        if max_tracked_ips < 0:
            raise ValueError("max_tracked_ips must be non-negative")
        self.max_failures = int(max_failures)
        self.window_secs = float(window_secs)
        self.max_tracked_ips = int(max_tracked_ips)
        self._clock = clock
        self._states: dict[str, _IpState] = {}
        self._lock = threading.Lock()

    def check_and_record_failure(self, ip: str) -> bool:
        """Record a failure for ``ip``; return True if it is now rate-limited."""
        with self._lock:
            now = self._clock()
            state = self._states.get(ip)
            if state is None:
                state = _IpState(failures=0, window_start=now)
                self._states[ip] = state
            elif self._expired(state, now):
                state.failures = 0
                state.window_start = now

            state.failures += 1
            blocked = state.failures > self.max_failures

            if self.max_tracked_ips > 0 and len(self._states) > self.max_tracked_ips:
                self._evict_to_cap(now)

            return blocked

    def is_blocked(self, ip: str) -> bool:
        """Whether ``ip`` is currently blocked, without recording a failure."""
        with self._lock:
            state = self._states.get(ip)
            if state is None:
                return False
            if self._expired(state, self._clock()):
                del self._states[ip]
                return False
            return state.failures > self.max_failures

    def cleanup(self) -> None:
        """Drop every entry whose window has expired."""
        with self._lock:
            self._remove_expired(self._clock())

    def __len__(self) -> int:
        with self._lock:
            return len(self._states)

    def _expired(self, state: _IpState, now: float) -> bool:
        return now - state.window_start > self.window_secs

    def _remove_expired(self, now: float) -> None:
        expired = [ip for ip, state in self._states.items() if self._expired(state, now)]
        for ip in expired:
            del self._states[ip]

    def _evict_to_cap(self, now: float) -> None:
        self._remove_expired(now)
        while len(self._states) > self.max_tracked_ips:
            oldest = min(self._states, key=lambda ip: self._states[ip].window_start)
            del self._states[oldest]