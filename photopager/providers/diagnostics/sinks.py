"""Diagnostic sinks for abandoned page fetches.

``StructlogDiagnosticSink`` is the production default: one warning line per
abandoned fetch.  ``MemoryDiagnosticSink`` keeps the most recent events in a
bounded buffer and can forward to another sink, which is how the CLI prints
a failure summary and how tests assert on what was recorded.
"""

from __future__ import annotations

import threading
from collections import deque

from photopager.interfaces.diagnostic_sink import IDiagnosticSink
from photopager.models.diagnostics import DiagnosticEvent, DiagnosticKind
from photopager.utils.logging import get_logger


class StructlogDiagnosticSink(IDiagnosticSink):
    """Writes each event to the structured log at warning level."""

    def __init__(self) -> None:
        self._logger = get_logger(__name__)

    def record(self, event: DiagnosticEvent) -> None:
        self._logger.warning(
            "feed_fetch_abandoned",
            kind=event.kind.value,
            feature=event.feature,
            page_index=event.page_index,
            provider=event.provider_name,
            detail=event.detail,
        )


class MemoryDiagnosticSink(IDiagnosticSink):
    """Bounded in-memory collector.

    Parameters
    ----------
    max_events:
        Oldest events are dropped once this many are held.
    forward_to:
        Optional sink that also receives every event.
    """

    def __init__(self, max_events: int = 500, forward_to: IDiagnosticSink | None = None) -> None:
        self._events: deque[DiagnosticEvent] = deque(maxlen=max_events)
        self._forward_to = forward_to
        self._lock = threading.Lock()

    def record(self, event: DiagnosticEvent) -> None:
        with self._lock:
            self._events.append(event)
        if self._forward_to is not None:
            self._forward_to.record(event)

    @property
    def events(self) -> list[DiagnosticEvent]:
        """Snapshot of held events, oldest first."""
        with self._lock:
            return list(self._events)

    def count_by_kind(self) -> dict[DiagnosticKind, int]:
        counts: dict[DiagnosticKind, int] = {}
        for event in self.events:
            counts[event.kind] = counts.get(event.kind, 0) + 1
        return counts

    def clear(self) -> None:
        with self._lock:
            self._events.clear()
