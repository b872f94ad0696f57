"""Diagnostic events emitted when a page fetch is abandoned.

The page streams handed to the UI only ever carry successful data, so a
failed fetch is invisible there.  Instead the pagination controller records
one :class:`DiagnosticEvent` per abandoned attempt into an injectable sink
(see :mod:`photopager.interfaces.diagnostic_sink`).
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DiagnosticKind(str, Enum):
    """Every way a single page fetch can be abandoned."""

    MISSING_CREDENTIAL = "MISSING_CREDENTIAL"
    TRANSPORT_FAILURE = "TRANSPORT_FAILURE"
    HTTP_STATUS_FAILURE = "HTTP_STATUS_FAILURE"
    EMPTY_BODY = "EMPTY_BODY"
    DECODE_FAILURE = "DECODE_FAILURE"


class DiagnosticEvent(BaseModel):
    """One abandoned fetch attempt."""

    model_config = ConfigDict(frozen=True)

    kind: DiagnosticKind
    feature: str
    page_index: int = Field(ge=0, description="Zero-based page index that was requested.")
    detail: str = ""
    provider_name: str | None = None
    occurred_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=timezone.utc)  # noqa: UP017
    )
