"""Abstract base class for photo-feed clients.

A feed client performs exactly one network request per call and returns a
decoded :class:`~photopager.models.page.PageRecord`.  It does no caching and
no retrying; those decisions belong to the pagination controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from photopager.models.page import PageRecord


class IFeedClient(ABC):
    """Contract for the paginated photo-feed API boundary."""

    @abstractmethod
    async def fetch_page(self, feature: str, page: int, page_size: int | None = None) -> PageRecord:
        """Fetch one page of the *feature* feed.

        Parameters
        ----------
        feature:
            Feed category, e.g. ``"popular"``.
        page:
            One-based page number as the wire protocol expects it.
        page_size:
            Items per page.  ``None`` lets the client use its default.

        Returns
        -------
        PageRecord
            The decoded page.

        Raises
        ------
        photopager.utils.errors.FeedError
            One of its subclasses for every failure mode (missing
            credential, transport, HTTP status, empty body, decode).
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Return ``True`` when the client is configured to make requests."""

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier for logs and diagnostics."""
