"""Public interface definitions for external collaborators.

The feed API and the diagnostic log sink are accessed exclusively through
the abstract base classes in this package.  Concrete adapters live in
``photopager/providers/`` and are wired up in ``photopager/main.py``; unit
tests inject fakes instead.

    Interface           →  Concrete implementations
    ──────────────────────────────────────────────────────────
    IFeedClient         →  FiveHundredPxFeedClient
    IDiagnosticSink     →  StructlogDiagnosticSink, MemoryDiagnosticSink
"""

from __future__ import annotations

from photopager.interfaces.diagnostic_sink import IDiagnosticSink
from photopager.interfaces.feed_client import IFeedClient

__all__ = ["IDiagnosticSink", "IFeedClient"]
