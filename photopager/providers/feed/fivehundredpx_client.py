"""500px ``/v1/photos`` feed client over an injected ``httpx.AsyncClient``.

One call, one GET request.  No caching, no retry: the pagination
controller owns those decisions.  Every failure is translated into a
:class:`~photopager.utils.errors.FeedError` subclass so the caller can
treat them uniformly.
"""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from photopager.interfaces.feed_client import IFeedClient
from photopager.models.page import PageRecord
from photopager.utils.errors import (
    EmptyBodyError,
    FeedDecodeError,
    FeedStatusError,
    FeedTransportError,
    MissingCredentialError,
)
from photopager.utils.logging import get_logger

_DEFAULT_BASE_URL = "https://api.500px.com/v1"
_PHOTOS_ENDPOINT = "/photos"
_DEFAULT_PAGE_SIZE = 20
_DEFAULT_TIMEOUT = 30.0
_PROVIDER_NAME = "500px"


class FiveHundredPxFeedClient(IFeedClient):
    """Feed client for the public 500px photo API.

    Parameters
    ----------
    http_client:
        Injected ``httpx.AsyncClient``.  The caller owns its lifetime.
    consumer_key:
        API consumer key, or ``None`` when none was configured.  Without a
        key :meth:`is_available` is false and :meth:`fetch_page` raises
        :class:`MissingCredentialError` without touching the network.
    base_url:
        API root, without a trailing slash.
    page_size:
        Default items per page (the API's ``rpp`` parameter).
    timeout:
        Per-request timeout in seconds.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        consumer_key: str | None,
        base_url: str = _DEFAULT_BASE_URL,
        page_size: int = _DEFAULT_PAGE_SIZE,
        timeout: float = _DEFAULT_TIMEOUT,
    ) -> None:
        self._http = http_client
        self._consumer_key = consumer_key or None
        self._base_url = base_url.rstrip("/")
        self._page_size = page_size
        self._timeout = timeout
        self._logger = get_logger(__name__)

    # ------------------------------------------------------------------
    # IFeedClient implementation
    # ------------------------------------------------------------------

    def get_provider_name(self) -> str:
        return _PROVIDER_NAME

    def is_available(self) -> bool:
        return self._consumer_key is not None

    async def fetch_page(self, feature: str, page: int, page_size: int | None = None) -> PageRecord:
        """GET one page of *feature* and decode it into a :class:`PageRecord`."""
        if self._consumer_key is None:
            raise MissingCredentialError(provider_name=_PROVIDER_NAME)

        params = {
            "feature": feature,
            "page": page,
            "rpp": page_size or self._page_size,
            "consumer_key": self._consumer_key,
        }
        url = f"{self._base_url}{_PHOTOS_ENDPOINT}"

        try:
            response = await self._http.get(url, params=params, timeout=self._timeout)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            self._logger.warning(
                "feed_request_failed",
                feature=feature,
                page=page,
                exc_type=type(exc).__name__,
                error=str(exc),
            )
            raise FeedTransportError(
                message=f"{type(exc).__name__}: {exc}",
                provider_name=_PROVIDER_NAME,
            ) from exc

        if not 200 <= response.status_code <= 299:
            self._logger.warning(
                "feed_unexpected_status",
                feature=feature,
                page=page,
                status=response.status_code,
            )
            raise FeedStatusError(response.status_code, provider_name=_PROVIDER_NAME)

        if not response.content:
            raise EmptyBodyError(provider_name=_PROVIDER_NAME)

        try:
            record = PageRecord.from_api(response.json())
        except (ValidationError, ValueError) as exc:
            self._logger.warning(
                "feed_decode_failed",
                feature=feature,
                page=page,
                error=str(exc)[:300],
            )
            raise FeedDecodeError(
                message=f"Could not decode page {page} of '{feature}': {exc}",
                provider_name=_PROVIDER_NAME,
            ) from exc

        self._logger.debug(
            "feed_page_fetched",
            feature=feature,
            page=page,
            items=len(record.items),
            total_pages=record.total_pages,
        )
        return record
