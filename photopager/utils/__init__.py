"""Utility modules for photopager.

- **errors** -- Domain exception hierarchy rooted at PhotoPagerError; every
  way a page fetch can fail is its own ``FeedError`` subclass.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production, plus
  ``page_fetch_context`` for tagging one fetch's log lines.
- **number_format** -- ``short_form`` rendering of engagement counters.
"""

# -- Domain exception hierarchy --------------------------------------------
from photopager.utils.errors import (
    ConfigurationError,
    EmptyBodyError,
    FeedDecodeError,
    FeedError,
    FeedStatusError,
    FeedTransportError,
    MissingCredentialError,
    PhotoPagerError,
)

# -- Structured logging setup ----------------------------------------------
from photopager.utils.logging import configure_logging, get_logger, page_fetch_context

# -- Counter formatting ----------------------------------------------------
from photopager.utils.number_format import short_form

__all__ = [
    "ConfigurationError",
    "EmptyBodyError",
    "FeedDecodeError",
    "FeedError",
    "FeedStatusError",
    "FeedTransportError",
    "MissingCredentialError",
    "PhotoPagerError",
    "configure_logging",
    "get_logger",
    "page_fetch_context",
    "short_form",
]
