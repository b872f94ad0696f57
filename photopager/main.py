"""Component wiring: settings → credential → feed client → controller.

Everything is constructed explicitly here and passed down; nothing below
this module reads global configuration.  The consumer key is read once,
at build time, and handed to the feed client's constructor.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from photopager.config.credentials import load_consumer_key
from photopager.config.settings import Settings
from photopager.interfaces.diagnostic_sink import IDiagnosticSink
from photopager.providers.diagnostics.sinks import StructlogDiagnosticSink
from photopager.providers.feed.fivehundredpx_client import FiveHundredPxFeedClient
from photopager.services.pagination_controller import PaginationController
from photopager.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)


def build_all(
    app_settings: Settings,
    http_client: httpx.AsyncClient | None = None,
    diagnostics: IDiagnosticSink | None = None,
    feature: str | None = None,
) -> dict[str, Any]:
    """Construct the feed client and pagination controller.

    Returns a flat dict of named components.  When no ``http_client`` is
    injected one is created here and the caller is responsible for
    closing it (``await components["http_client"].aclose()``).
    """
    consumer_key = load_consumer_key(app_settings.feed_api_key_file)

    if http_client is None:
        http_client = httpx.AsyncClient(timeout=app_settings.feed_timeout_seconds)

    feed_client = FiveHundredPxFeedClient(
        http_client=http_client,
        consumer_key=consumer_key,
        base_url=app_settings.feed_base_url,
        page_size=app_settings.feed_page_size,
        timeout=app_settings.feed_timeout_seconds,
    )

    sink = diagnostics if diagnostics is not None else StructlogDiagnosticSink()
    controller = PaginationController(
        feed_client=feed_client,
        feature=feature or app_settings.feed_default_feature,
        diagnostics=sink,
        page_size=app_settings.feed_page_size,
    )

    _logger.info(
        "components_built",
        feature=controller.feature,
        credential_configured=feed_client.is_available(),
        base_url=app_settings.feed_base_url,
    )

    return {
        "http_client": http_client,
        "feed_client": feed_client,
        "diagnostics": sink,
        "controller": controller,
    }
