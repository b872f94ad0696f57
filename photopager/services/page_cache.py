"""Self-invalidating cache of page streams, keyed by zero-based page index.

Each entry wraps the :class:`ObservableValue` that was handed out for its
page together with a validity flag and an expiry deadline.  Entries are
never removed: when a page goes stale its stream stays in place so a
background refresh can publish into the same object the UI is already
subscribed to, and the UI keeps rendering the last-known data meanwhile.

Expiry is lazy.  There is no timer per entry; a read compares the clock to
``expires_at`` and flips ``valid`` off once the deadline has passed.

Per-index lifecycle::

    (absent) ──register_pending──→ Fetching ──mark_refreshed──→ Valid
                                                   ↑              │ now >= expires_at
                                                   └─mark_refreshed── Expired
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

import structlog

from photopager.models.page import PageRecord
from photopager.services.observable import ObservableValue
from photopager.utils.logging import get_logger

# Lifetime of the upstream API's own response cache (5 min).
API_CACHE_LIFETIME = 300.0

PageStream = ObservableValue[PageRecord]


@dataclass
class PageCacheEntry:
    """One page's stream plus its freshness bookkeeping."""

    stream: PageStream
    valid: bool = False
    expires_at: float = 0.0

    def is_fresh(self, now: float) -> bool:
        """Return validity at *now*, invalidating the entry if it has expired."""
        if self.valid and now >= self.expires_at:
            self.valid = False
        return self.valid

    def refresh(self, now: float, ttl: float) -> None:
        self.valid = True
        self.expires_at = now + ttl


class PageCache:
    """Keyed store of :class:`PageCacheEntry` objects.

    Not thread-safe: only the pagination controller's foreground context
    touches the entry map.

    Parameters
    ----------
    ttl:
        Seconds a refreshed entry stays valid.
    clock:
        Monotonic time source in seconds; injectable for tests.
    """

    def __init__(
        self,
        ttl: float = API_CACHE_LIFETIME,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl
        self._clock = clock
        self._entries: dict[int, PageCacheEntry] = {}
        self._logger: structlog.BoundLogger = get_logger(__name__)

    @property
    def ttl(self) -> float:
        return self._ttl

    @property
    def clock(self) -> Callable[[], float]:
        return self._clock

    def try_get_valid(self, index: int) -> PageStream | None:
        """Return the stream for *index* only while it is valid and unexpired."""
        entry = self._entries.get(index)
        if entry is None:
            self._logger.debug("cache_miss", index=index, reason="absent")
            return None

        was_valid = entry.valid
        if not entry.is_fresh(self._clock()):
            if was_valid:
                self._logger.debug("cache_entry_expired", index=index)
            self._logger.debug("cache_miss", index=index, reason="invalid")
            return None

        self._logger.debug("cache_hit", index=index)
        return entry.stream

    def get_even_if_invalid(self, index: int) -> PageStream | None:
        """Return the stream for *index* regardless of validity, or ``None``."""
        entry = self._entries.get(index)
        return entry.stream if entry is not None else None

    def register_pending(self, index: int, stream: PageStream) -> None:
        """Track *stream* for *index* as not-yet-valid if the index is new.

        Lets every request made before the first successful fetch share one
        stream.
        """
        if index not in self._entries:
            self._entries[index] = PageCacheEntry(stream=stream)

    def mark_refreshed(self, index: int, stream: PageStream) -> None:
        """Revalidate *index*, inserting an entry for *stream* if absent."""
        entry = self._entries.get(index)
        if entry is None:
            entry = PageCacheEntry(stream=stream)
            self._entries[index] = entry
        entry.refresh(self._clock(), self._ttl)
        self._logger.debug("cache_refreshed", index=index, expires_at=round(entry.expires_at, 3))

    def __contains__(self, index: object) -> bool:
        return index in self._entries

    def __len__(self) -> int:
        return len(self._entries)
