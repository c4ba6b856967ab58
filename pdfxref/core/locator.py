"""Locate the cross-reference section of a whole PDF document."""

from __future__ import annotations

import logging

from ..exceptions import StartXRefNotFoundError, XRefTableNotFoundError
from .parser import NO_HANDLERS, ParseHandlers, XRefTableMatch, parse_xref_table
from .utils import scan_digits, skip_whitespace

__all__ = [
    "locate_startxref",
    "detect_cross_reference_kind",
    "read_xref_table_at",
    "read_xref_table",
]

LOGGER = logging.getLogger("pdfxref.locator")

_STARTXREF = b"startxref"


def locate_startxref(data: bytes) -> int:
    """Return the byte offset recorded after the last ``startxref`` marker.

    Anything after the digit run, such as a trailing comment, is ignored.
    """

    marker = data.rfind(_STARTXREF)
    if marker == -1:
        raise StartXRefNotFoundError("Unable to locate startxref marker")
    start = skip_whitespace(data, marker + len(_STARTXREF))
    stop = scan_digits(data, start)
    if stop == start:
        raise StartXRefNotFoundError(f"No offset follows the startxref marker at {marker}")
    return int(data[start:stop])


def detect_cross_reference_kind(data: bytes, offset: int) -> str:
    """Return ``"table"`` when ``offset`` starts a classical table, else ``"stream"``."""

    start = skip_whitespace(data, offset)
    if data.startswith(b"xref", start):
        return "table"
    return "stream"


def read_xref_table_at(
    data: bytes, offset: int, handlers: ParseHandlers = NO_HANDLERS
) -> XRefTableMatch | None:
    """Run the table recognizer on ``data`` starting at ``offset``."""

    if offset < 0 or offset >= len(data):
        LOGGER.debug("Offset %d lies outside a %d byte document", offset, len(data))
        return None
    return parse_xref_table(data[offset:], handlers)


def read_xref_table(data: bytes, handlers: ParseHandlers = NO_HANDLERS) -> XRefTableMatch:
    """Parse the table referenced by the document's ``startxref`` marker.

    Raises:
        StartXRefNotFoundError: If the marker or its offset is missing.
        XRefTableNotFoundError: If the offset does not start a classical table.
    """

    offset = locate_startxref(data)
    LOGGER.debug("startxref points at offset %d", offset)
    match = read_xref_table_at(data, offset, handlers)
    if match is None:
        kind = detect_cross_reference_kind(data, offset) if 0 <= offset < len(data) else None
        raise XRefTableNotFoundError(offset, kind)
    return match
