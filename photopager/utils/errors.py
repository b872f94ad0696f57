"""Custom exception hierarchy for photopager.

All application exceptions inherit from :class:`PhotoPagerError`, which
carries an optional ``provider_name`` so error handlers can identify which
external service (e.g. "500px") caused the failure.

The hierarchy is organized by concern:

    PhotoPagerError  (base -- catch-all for any photopager error)
    +-- ConfigurationError       (startup / missing config)
    +-- FeedError                (any failed page fetch against the feed API)
        +-- MissingCredentialError  (no consumer key configured)
        +-- FeedTransportError      (connection, DNS, TLS, timeout)
        +-- FeedStatusError         (HTTP status outside 2xx)
        +-- EmptyBodyError          (2xx response with no payload)
        +-- FeedDecodeError         (invalid JSON or schema mismatch)

Every ``FeedError`` subclass maps onto exactly one
:class:`~photopager.models.diagnostics.DiagnosticKind`, which is what the
pagination controller records when it abandons a fetch.
"""

from __future__ import annotations

from photopager.models.diagnostics import DiagnosticKind


class PhotoPagerError(Exception):
    """Base exception for all photopager errors.

    Every subclass carries a human-readable ``message`` and an optional
    ``provider_name``.  ``__str__`` prefixes the provider name in brackets
    for log output, e.g. ``[500px] HTTP 503``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


class ConfigurationError(PhotoPagerError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Feed fetch errors
# ---------------------------------------------------------------------------

class FeedError(PhotoPagerError):
    """Base for every way a single page fetch can fail.

    Subclasses override :attr:`kind`; callers that only need to know *that*
    a fetch failed catch ``FeedError`` and read ``kind`` for the details.
    """

    kind: DiagnosticKind = DiagnosticKind.TRANSPORT_FAILURE

    def __init__(
        self,
        message: str = "Feed request failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class MissingCredentialError(FeedError):
    """Raised when no API consumer key is available."""

    kind = DiagnosticKind.MISSING_CREDENTIAL

    def __init__(
        self,
        message: str = "API consumer key is not configured",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class FeedTransportError(FeedError):
    """Raised when the request never produced an HTTP response."""

    kind = DiagnosticKind.TRANSPORT_FAILURE

    def __init__(
        self,
        message: str = "Transport failure",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class FeedStatusError(FeedError):
    """Raised when the feed answers with a non-2xx status code."""

    kind = DiagnosticKind.HTTP_STATUS_FAILURE

    def __init__(
        self,
        status_code: int,
        message: str | None = None,
        provider_name: str | None = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(
            message=message or f"Unexpected HTTP status {status_code}",
            provider_name=provider_name,
        )


class EmptyBodyError(FeedError):
    """Raised when a successful response carries no body."""

    kind = DiagnosticKind.EMPTY_BODY

    def __init__(
        self,
        message: str = "Response body is empty",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class FeedDecodeError(FeedError):
    """Raised when the body is not valid JSON or does not match the page schema."""

    kind = DiagnosticKind.DECODE_FAILURE

    def __init__(
        self,
        message: str = "Could not decode page data",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
