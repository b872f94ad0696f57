"""Pagination and prefetch orchestration over the page cache and feed client.

The controller hands out one :class:`ObservableValue` per page index and
keeps it fed:

1. A valid cached stream is returned as-is (no network call).
2. Otherwise the existing stream for the index (stale, or still fetching)
   is reused, or a new one is seeded with an empty placeholder page.
3. A fetch is scheduled on the running event loop and the stream is
   returned immediately; the fetch later revalidates the cache entry and
   publishes into that same stream.

Failed fetches are abandoned silently as far as streams are concerned:
nothing is published and cache validity is left alone.  Each failure is
recorded as a :class:`DiagnosticEvent` in the injected sink.

Neighbouring pages are prefetched so that swiping one page forward or
back normally lands on data that is already cached.

Concurrent requests for the same stale index are NOT deduplicated: both go
to the network and both publish into the same stream, in completion order.
"""

from __future__ import annotations

import asyncio

import structlog

from photopager.interfaces.diagnostic_sink import IDiagnosticSink
from photopager.interfaces.feed_client import IFeedClient
from photopager.models.diagnostics import DiagnosticEvent, DiagnosticKind
from photopager.models.page import PageRecord
from photopager.providers.diagnostics.sinks import StructlogDiagnosticSink
from photopager.services.observable import ObservableValue
from photopager.services.page_cache import PageCache, PageStream
from photopager.utils.errors import FeedError
from photopager.utils.logging import get_logger, page_fetch_context

DEFAULT_FEATURE = "popular"


class PaginationController:
    """Serves page streams for one feed feature.

    Must be driven from a single event-loop thread; page fetches run as
    tasks on that loop.

    Parameters
    ----------
    feed_client:
        Performs the actual network requests.
    feature:
        Feed category to page through.
    diagnostics:
        Receives one event per abandoned fetch.  Defaults to a structlog
        warning sink.
    page_cache:
        Cache to use; a fresh one by default.  The controller owns it.
    page_size:
        Items per page forwarded to the client; ``None`` uses the client's
        default.
    """

    def __init__(
        self,
        feed_client: IFeedClient,
        feature: str = DEFAULT_FEATURE,
        diagnostics: IDiagnosticSink | None = None,
        page_cache: PageCache | None = None,
        page_size: int | None = None,
    ) -> None:
        self._client = feed_client
        self._feature = feature
        self._diagnostics = diagnostics if diagnostics is not None else StructlogDiagnosticSink()
        self._cache = page_cache if page_cache is not None else PageCache()
        self._page_size = page_size
        self._page_count = ObservableValue(1)
        self._pending: set[asyncio.Task[None]] = set()
        self._logger: structlog.BoundLogger = get_logger(__name__)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def feature(self) -> str:
        return self._feature

    @property
    def page_count(self) -> int:
        """Total pages, as last reported by the feed (1 until known)."""
        return self._page_count.value

    @property
    def page_count_stream(self) -> ObservableValue[int]:
        """Publishes each time ``page_count`` changes.

        A paging UI subscribes here and re-queries its next/previous
        boundaries on every update rather than remembering them.
        """
        return self._page_count

    @property
    def page_cache(self) -> PageCache:
        return self._cache

    @property
    def pending_count(self) -> int:
        """Number of fetches still in flight."""
        return len(self._pending)

    def page_title(self, index: int) -> str:
        """Human-readable heading for page *index*, e.g. ``"Popular Images Page 1"``."""
        return f"{self._feature.replace('_', ' ').title()} Images Page {index + 1}"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def initialize(self, feature: str) -> PageStream:
        """Start paging *feature* and request its first page.

        Switching to a different feature drops the old cache and resets the
        page count; ``page_count`` becomes authoritative once the first
        response arrives.
        """
        if feature != self._feature:
            self._cache = PageCache(ttl=self._cache.ttl, clock=self._cache.clock)
            self._set_page_count(1)
        self._feature = feature
        self._logger.info("pagination_initialized", feature=feature)
        return self.request_page(0)

    def request_page(self, index: int) -> PageStream:
        """Return the stream for page *index*, fetching it if not validly cached.

        The returned stream is never ``None`` and is returned before any
        network response; later data is published into it.
        """
        if index < 0:
            raise ValueError(f"page index must be >= 0, got {index}")

        cached = self._cache.try_get_valid(index)
        if cached is not None:
            return cached

        stream = self._cache.get_even_if_invalid(index)
        if stream is None:
            stream = ObservableValue(PageRecord.default(self._feature))
            self._cache.register_pending(index, stream)

        if not self._client.is_available():
            self._record_failure(
                DiagnosticKind.MISSING_CREDENTIAL,
                index,
                "no API consumer key configured; fetch skipped",
            )
            return stream

        self._schedule_fetch(index, stream)
        return stream

    def first_page(self) -> PageStream:
        """Return page 0 and prefetch page 1."""
        stream = self.request_page(0)
        self.request_page(1)
        return stream

    def page_before(self, current_index: int) -> PageStream | None:
        """Return the page preceding *current_index*, or ``None`` at the start."""
        if current_index <= 0:
            return None
        if current_index - 1 > 0:
            self.request_page(current_index - 2)
        return self.request_page(current_index - 1)

    def page_after(self, current_index: int) -> PageStream | None:
        """Return the page following *current_index*, or ``None`` at the end."""
        page_count = self.page_count
        if current_index + 1 >= page_count:
            return None
        if current_index + 1 != page_count - 1:
            self.request_page(current_index + 2)
        return self.request_page(current_index + 1)

    async def wait_for_pending(self) -> None:
        """Wait until every scheduled fetch, including ones started meanwhile, is done."""
        while True:
            pending = [task for task in self._pending if not task.done()]
            if not pending:
                return
            await asyncio.gather(*pending, return_exceptions=True)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _schedule_fetch(self, index: int, stream: PageStream) -> None:
        loop = asyncio.get_running_loop()
        task = loop.create_task(
            self._fetch_into(self._cache, self._feature, index, stream),
            name=f"fetch-page-{self._feature}-{index}",
        )
        self._pending.add(task)
        task.add_done_callback(self._on_fetch_done)
        self._logger.debug("page_fetch_scheduled", feature=self._feature, index=index)

    def _on_fetch_done(self, task: asyncio.Task[None]) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self._logger.error(
                "page_fetch_task_failed",
                task=task.get_name(),
                exc_type=type(exc).__name__,
                error=str(exc),
            )

    async def _fetch_into(
        self,
        cache: PageCache,
        feature: str,
        index: int,
        stream: PageStream,
    ) -> None:
        """Fetch page *index* and publish it into *stream*.

        *cache* and *feature* are bound at scheduling time so a late answer
        for a previous feature cannot land in the current cache.

        On success the cache entry and ``page_count`` are updated before the
        record is published, so observers reacting to the new page already
        see it as a valid cache hit and can navigate past it.
        """
        with page_fetch_context(feature, index):
            try:
                record = await self._client.fetch_page(feature, index + 1, self._page_size)
            except FeedError as exc:
                self._record_failure(exc.kind, index, str(exc), feature=feature)
                return
            except Exception as exc:
                # Not part of the feed error taxonomy; abandoned like a transport failure.
                self._logger.error(
                    "page_fetch_crashed",
                    exc_type=type(exc).__name__,
                    error=str(exc),
                    exc_info=True,
                )
                self._record_failure(
                    DiagnosticKind.TRANSPORT_FAILURE,
                    index,
                    f"{type(exc).__name__}: {exc}",
                    feature=feature,
                )
                return

            cache.mark_refreshed(index, stream)
            if cache is self._cache:
                self._set_page_count(record.total_pages)

            self._logger.debug(
                "page_fetch_complete",
                items=len(record.items),
                total_pages=record.total_pages,
            )
            stream.publish(record)

    def _set_page_count(self, page_count: int) -> None:
        if page_count == self._page_count.value:
            return
        self._logger.info(
            "page_count_changed",
            feature=self._feature,
            old=self._page_count.value,
            new=page_count,
        )
        self._page_count.publish(page_count)

    def _record_failure(
        self,
        kind: DiagnosticKind,
        index: int,
        detail: str,
        feature: str | None = None,
    ) -> None:
        self._diagnostics.record(
            DiagnosticEvent(
                kind=kind,
                feature=feature if feature is not None else self._feature,
                page_index=index,
                detail=detail,
                provider_name=self._client.get_provider_name(),
            )
        )
