"""photopager domain models: re-exports all public model classes.

    - page.py        PageRecord, ImageRecord and their nested wire types
    - diagnostics.py DiagnosticEvent / DiagnosticKind for abandoned fetches
"""

from __future__ import annotations

from photopager.models.diagnostics import DiagnosticEvent, DiagnosticKind
from photopager.models.page import ImageAuthor, ImageRecord, ImageVariant, PageRecord

__all__ = [
    "DiagnosticEvent",
    "DiagnosticKind",
    "ImageAuthor",
    "ImageRecord",
    "ImageVariant",
    "PageRecord",
]
