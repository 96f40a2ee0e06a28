"""Time-bounded cache used for FoodData Central lookups."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol


class Cache(Protocol):
    """Key-value cache with per-entry expiry."""

    def get(self, key: str) -> object | None:
        """Return the cached value, or None when missing or expired."""

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        """Store a value for ``ttl_seconds``."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class InMemoryCache(Cache):
    """Process-local cache; entries expire lazily on read."""

    clock: Callable[[], datetime] = _utc_now
    _entries: dict[str, tuple[object, datetime]] = field(default_factory=dict)

    def get(self, key: str) -> object | None:
        """Return a live entry, dropping it once expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self.clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        """Store a value until ``ttl_seconds`` from now."""
        expires_at = self.clock() + timedelta(seconds=ttl_seconds)
        self._entries[key] = (value, expires_at)

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()
