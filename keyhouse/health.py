"""Health reporting based on the last contact with the backing store."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class HealthResponse:
    """Health of the service and its backing store."""

    online: bool
    etcd_online: bool
    etcd_last_contact_ms: int


def evaluate_health(
    last_contact_ms: int, now_ms: int, max_refresh_rate_ms: int
) -> HealthResponse:
    """Report the store online if it was contacted within two refresh periods."""
    delta = now_ms - last_contact_ms
    if delta < 0:
        raise ValueError("last contact lies in the future")
    return HealthResponse(
        online=True,
        etcd_online=delta <= max_refresh_rate_ms * 2,
        etcd_last_contact_ms=delta,
    )


class EtcdContact:
    """Thread-safe record of when the backing store was last reached."""

    def __init__(self, last_contact_ms: int = 0) -> None:
        self._lock = threading.Lock()
        self._last_contact_ms = last_contact_ms

    @property
    def last_contact_ms(self) -> int:
        with self._lock:
            return self._last_contact_ms

    def touch(self, now_ms: Optional[int] = None) -> None:
        """Record a contact at now_ms, or at the current time."""
        if now_ms is None:
            now_ms = int(time.time() * 1000)
        with self._lock:
            self._last_contact_ms = now_ms

    def health(
        self, now_ms: Optional[int] = None, max_refresh_rate_ms: int = 0
    ) -> HealthResponse:
        """Evaluate health at now_ms, or at the current time."""
        if now_ms is None:
            now_ms = int(time.time() * 1000)
        return evaluate_health(self.last_contact_ms, now_ms, max_refresh_rate_ms)