"""Shared pytest fixtures for the photopager test suite."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest
import structlog

from photopager.interfaces.feed_client import IFeedClient
from photopager.models.page import PageRecord
from photopager.providers.diagnostics.sinks import MemoryDiagnosticSink
from photopager.services.page_cache import PageCache
from photopager.services.pagination_controller import PaginationController

# ---------------------------------------------------------------------------
# Wire payload builders
# ---------------------------------------------------------------------------


def make_photo(**overrides: Any) -> dict[str, Any]:
    """Return one photo as the feed API encodes it."""
    photo: dict[str, Any] = {
        "name": "Blue hour over the harbour",
        "user": {
            "username": "lmoreau",
            "fullname": "Lea Moreau",
            "userpic_url": "https://cdn.example.com/u/lmoreau.jpg",
            "cover_url": None,
        },
        "created_at": "2020-07-19T10:15:00-04:00",
        "description": "Taken from the pier.",
        "comments_count": 12,
        "votes_count": 431,
        "positive_votes_count": 431,
        "times_viewed": 6990,
        "images": [
            {
                "format": "jpeg",
                "size": 2,
                "url": "https://cdn.example.com/p/1/2.jpg",
                "https_url": "https://cdn.example.com/p/1/2.jpg",
            },
            {
                "format": "jpeg",
                "size": 21,
                "url": "https://cdn.example.com/p/1/21.jpg",
                "https_url": "https://cdn.example.com/p/1/21.jpg",
            },
        ],
    }
    photo.update(overrides)
    return photo


def make_page_payload(
    current_page: int = 1,
    total_pages: int = 5,
    total_items: int = 100,
    feature: str = "popular",
    photos: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Return a ``/photos`` response document."""
    return {
        "current_page": current_page,
        "total_pages": total_pages,
        "total_items": total_items,
        "feature": feature,
        "filters": {},
        "photos": photos if photos is not None else [make_photo(), make_photo(name="Second")],
    }


def make_record(index: int, total_pages: int = 5, feature: str = "popular") -> PageRecord:
    """Return a decoded record for zero-based *index*."""
    return PageRecord.from_api(
        make_page_payload(current_page=index + 1, total_pages=total_pages, feature=feature)
    )


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


class ManualClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeFeedClient(IFeedClient):
    """Scripted in-memory feed.

    By default every page answers with a record reporting ``total_pages``.
    ``failures[page]`` makes that (one-based) page raise; ``gates[page]``
    holds its answer until the event is set; ``queued[page]`` is a list of
    ``(gate, result)`` pairs consumed one per call, for ordering tests.
    ``log_contexts`` keeps the structlog context seen by each call.
    """

    def __init__(self, total_pages: int = 5, available: bool = True) -> None:
        self.total_pages = total_pages
        self.available = available
        self.calls: list[tuple[str, int, int | None]] = []
        self.failures: dict[int, BaseException] = {}
        self.gates: dict[int, asyncio.Event] = {}
        self.queued: dict[int, list[tuple[asyncio.Event | None, Any]]] = {}
        self.log_contexts: list[dict[str, Any]] = []

    def get_provider_name(self) -> str:
        return "fake"

    def is_available(self) -> bool:
        return self.available

    @property
    def pages_requested(self) -> list[int]:
        return [page for _, page, _ in self.calls]

    async def fetch_page(self, feature: str, page: int, page_size: int | None = None) -> PageRecord:
        self.calls.append((feature, page, page_size))
        self.log_contexts.append(structlog.contextvars.get_contextvars())

        if self.queued.get(page):
            gate, result = self.queued[page].pop(0)
            if gate is not None:
                await gate.wait()
        else:
            gate = self.gates.get(page)
            if gate is not None:
                await gate.wait()
            result = self.failures.get(page) or make_record(
                page - 1, total_pages=self.total_pages, feature=feature
            )

        if isinstance(result, BaseException):
            raise result
        return result


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def feed() -> FakeFeedClient:
    return FakeFeedClient(total_pages=5)


@pytest.fixture
def diagnostics() -> MemoryDiagnosticSink:
    return MemoryDiagnosticSink()


@pytest.fixture
def controller(
    feed: FakeFeedClient,
    diagnostics: MemoryDiagnosticSink,
    clock: ManualClock,
) -> PaginationController:
    return PaginationController(
        feed_client=feed,
        feature="popular",
        diagnostics=diagnostics,
        page_cache=PageCache(clock=clock),
    )
