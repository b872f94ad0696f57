"""Abstract base class for diagnostic collectors.

The pagination controller never surfaces fetch failures to the page
streams.  It reports them here instead, so operators see them in the logs
and tests can assert on them without capturing console output.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from photopager.models.diagnostics import DiagnosticEvent


class IDiagnosticSink(ABC):
    """Contract for anything that collects :class:`DiagnosticEvent` records."""

    @abstractmethod
    def record(self, event: DiagnosticEvent) -> None:
        """Accept one diagnostic event.  Must not raise."""
