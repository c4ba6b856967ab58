"""Recognize and decode classical PDF cross-reference tables."""

from __future__ import annotations

from .core import (
    NO_HANDLERS,
    ParseHandlers,
    XRefEntry,
    XRefSubsection,
    XRefTable,
    XRefTableMatch,
    detect_cross_reference_kind,
    locate_startxref,
    parse_entries,
    parse_subsections,
    parse_xref_table,
    read_xref_table,
    read_xref_table_at,
)
from .exceptions import PdfXRefError, StartXRefNotFoundError, XRefTableNotFoundError

__version__ = "0.1.0"

__all__ = [
    "XRefEntry",
    "XRefSubsection",
    "XRefTable",
    "XRefTableMatch",
    "ParseHandlers",
    "NO_HANDLERS",
    "parse_entries",
    "parse_subsections",
    "parse_xref_table",
    "locate_startxref",
    "detect_cross_reference_kind",
    "read_xref_table_at",
    "read_xref_table",
    "PdfXRefError",
    "StartXRefNotFoundError",
    "XRefTableNotFoundError",
    "__version__",
]
