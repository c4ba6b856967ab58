"""Core value objects and recognizers for PDF cross-reference tables."""

from .locator import (
    detect_cross_reference_kind,
    locate_startxref,
    read_xref_table,
    read_xref_table_at,
)
from .model import XRefEntry, XRefSubsection, XRefTable
from .parser import (
    NO_HANDLERS,
    ParseHandlers,
    XRefTableMatch,
    parse_entries,
    parse_subsections,
    parse_xref_table,
)

__all__ = [
    "XRefEntry",
    "XRefSubsection",
    "XRefTable",
    "ParseHandlers",
    "NO_HANDLERS",
    "XRefTableMatch",
    "parse_entries",
    "parse_subsections",
    "parse_xref_table",
    "locate_startxref",
    "detect_cross_reference_kind",
    "read_xref_table_at",
    "read_xref_table",
]
