"""Diagnostic sink providers.

Collectors for fetch attempts the pagination controller abandoned.  The
structlog sink is the default; the memory sink buffers events for the CLI
summary and for tests.
"""

from photopager.providers.diagnostics.sinks import MemoryDiagnosticSink, StructlogDiagnosticSink

__all__ = ["MemoryDiagnosticSink", "StructlogDiagnosticSink"]
