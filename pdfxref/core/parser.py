"""Recognizers for classical PDF cross-reference tables.

The grammar handled here is::

    Table      := "xref" WS Subsection+
    Subsection := FirstObjNum " " EntryCount WS Entry+
    Entry      := Offset10 " " GenNum5 " " Flag
    WS         := { " " | "\\n" | "\\r" }*

Three layers compose top-down.  :func:`parse_entries` decodes a run of
fixed-width records, :func:`parse_subsections` decodes header-plus-entries
blocks, and :func:`parse_xref_table` finds the ``xref`` keyword at the start
of a byte buffer and reports the bytes that follow the table.  Every layer
returns ``None`` when the input does not match; nothing is raised for
malformed input so callers can try a different construct on the same bytes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, NamedTuple

from .model import XRefEntry, XRefSubsection, XRefTable
from .utils import decode_range, trim_bytes

__all__ = [
    "ParseHandlers",
    "NO_HANDLERS",
    "XRefTableMatch",
    "parse_entries",
    "parse_subsections",
    "parse_xref_table",
]

LOGGER = logging.getLogger("pdfxref.parser")

_KEYWORD = "xref"
_DIGITS = frozenset("0123456789")
_WS = frozenset(" \n\r")
# Whitespace trimmed around and between tokens by the two inner recognizers.
_TRIM = frozenset(" \t\n\r\f\v")
_FLAGS = frozenset("nf")
_BODY_CHARS = _DIGITS | _WS | _FLAGS
# Bytes that may appear anywhere in a table, keyword included.
_TABLE_ALPHABET = frozenset(b"xrefn \n\r0123456789")

_OFFSET_WIDTH = 10
_GENERATION_WIDTH = 5
# "oooooooooo ggggg n" without the end-of-line marker.
_ENTRY_WIDTH = _OFFSET_WIDTH + 1 + _GENERATION_WIDTH + 1 + 1


def _ignore(table: XRefTable) -> None:
    pass


@dataclass(frozen=True)
class ParseHandlers:
    """Observers notified as constructs are recognized; no-ops by default."""

    on_parse_xref_table: Callable[[XRefTable], None] = _ignore


NO_HANDLERS = ParseHandlers()


class XRefTableMatch(NamedTuple):
    """Successful table recognition: the table and the bytes after it."""

    table: XRefTable
    remainder: bytes


# -- Cursor helpers ----------------------------------------------------------


def _skip_ws(text: str, index: int, end: int, chars: frozenset[str] = _WS) -> int:
    while index < end and text[index] in chars:
        index += 1
    return index


def _trimmed_end(text: str) -> int:
    end = len(text)
    while end > 0 and text[end - 1] in _TRIM:
        end -= 1
    return end


def _scan_digits(text: str, index: int, end: int) -> int:
    while index < end and text[index] in _DIGITS:
        index += 1
    return index


def _is_digit_run(text: str, start: int, stop: int) -> bool:
    return all(char in _DIGITS for char in text[start:stop])


def _match_entry(text: str, index: int, end: int) -> tuple[XRefEntry, int] | None:
    """Match one ``<10 digits> <5 digits> <n|f>`` token at ``index``."""

    stop = index + _ENTRY_WIDTH
    if stop > end:
        return None
    generation_start = index + _OFFSET_WIDTH + 1
    flag_index = generation_start + _GENERATION_WIDTH + 1
    if not _is_digit_run(text, index, index + _OFFSET_WIDTH):
        return None
    if text[index + _OFFSET_WIDTH] != " ":
        return None
    if not _is_digit_run(text, generation_start, generation_start + _GENERATION_WIDTH):
        return None
    if text[flag_index - 1] != " " or text[flag_index] not in _FLAGS:
        return None

    entry = XRefEntry.create(
        offset=int(text[index : index + _OFFSET_WIDTH]),
        generation_number=int(text[generation_start : generation_start + _GENERATION_WIDTH]),
        in_use=text[flag_index] == "n",
    )
    return entry, stop


def _scan_entries_block(text: str, index: int, end: int) -> int | None:
    """Return the end of the maximal whitespace-interleaved run of entries."""

    cursor = _skip_ws(text, index, end)
    block_end: int | None = None
    while True:
        matched = _match_entry(text, cursor, end)
        if matched is None:
            return block_end
        cursor = _skip_ws(text, matched[1], end)
        block_end = cursor


def _match_header(text: str, index: int, end: int) -> tuple[int, int, int] | None:
    """Match ``<digits> <digits>``.

    Returns the first object number and the start and end of the count digits.
    """

    first_end = _scan_digits(text, index, end)
    if first_end == index or first_end >= end or text[first_end] != " ":
        return None
    count_start = first_end + 1
    count_end = _scan_digits(text, count_start, end)
    if count_end == count_start:
        return None
    return int(text[index:first_end]), count_start, count_end


def _match_subsection_body(
    text: str, count_start: int, count_end: int, end: int
) -> tuple[int, int] | None:
    """Find the entries block following a header's count digits.

    The count may run straight into the first entry's offset, as in
    ``0 10000000000 65535 f``; the last ten digits then belong to the entry.
    """

    block_end = _scan_entries_block(text, count_end, end)
    if block_end is not None:
        return count_end, block_end
    block_start = count_end - _OFFSET_WIDTH
    if block_start <= count_start:
        return None
    block_end = _scan_entries_block(text, block_start, end)
    if block_end is None:
        return None
    return block_start, block_end


# -- Recognizers -------------------------------------------------------------


def parse_entries(text: str) -> list[XRefEntry] | None:
    """Decode every entry in ``text`` or return ``None``.

    The whole span must consist of entry tokens separated by optional
    whitespace.  A single bad token discards everything matched before it.
    An empty span yields an empty list.  Tabs, form feeds and vertical tabs
    are trimmed along with spaces and line breaks.
    """

    end = _trimmed_end(text)
    index = _skip_ws(text, 0, end, _TRIM)
    entries: list[XRefEntry] = []
    while index < end:
        matched = _match_entry(text, index, end)
        if matched is None:
            LOGGER.debug("Entry token did not match at position %d", index)
            return None
        entry, index = matched
        entries.append(entry)
        index = _skip_ws(text, index, end, _TRIM)
    return entries


def parse_subsections(text: str) -> list[XRefSubsection] | None:
    """Decode one or more subsections from ``text`` or return ``None``.

    The declared entry count in each header is read but not compared with the
    number of entries that follow it.
    """

    end = _trimmed_end(text)
    index = _skip_ws(text, 0, end, _TRIM)
    if index >= end:
        LOGGER.debug("No subsections found in cross-reference body")
        return None

    subsections: list[XRefSubsection] = []
    while index < end:
        header = _match_header(text, index, end)
        if header is None:
            LOGGER.debug("Subsection header did not match at position %d", index)
            return None
        first_object_number, count_start, count_end = header

        body = _match_subsection_body(text, count_start, count_end, end)
        if body is None:
            LOGGER.debug("Subsection %d has no entries", first_object_number)
            return None
        block_start, block_end = body
        entries = parse_entries(text[block_start:block_end])
        if entries is None:
            return None

        subsections.append(
            XRefSubsection.from_entries(entries, first_object_number=first_object_number)
        )
        index = _skip_ws(text, block_end, end, _TRIM)
    return subsections


def parse_xref_table(
    data: bytes, handlers: ParseHandlers = NO_HANDLERS
) -> XRefTableMatch | None:
    """Recognize a cross-reference table at the start of ``data``.

    Returns the parsed :class:`XRefTable` with the trimmed input's remaining
    bytes, or ``None`` if the trimmed input does not begin with a well formed
    table.  ``handlers.on_parse_xref_table`` is invoked with the table before
    returning, and only on success.
    """

    trimmed = trim_bytes(data)
    length = len(trimmed)

    index = 0
    while index < length and trimmed[index] in _TABLE_ALPHABET:
        index += 1

    text = decode_range(trimmed, 0, index)
    if not text.startswith(_KEYWORD):
        LOGGER.debug("Input does not start with the %r keyword", _KEYWORD)
        return None

    body_end = len(_KEYWORD)
    while body_end < len(text) and text[body_end] in _BODY_CHARS:
        body_end += 1

    subsections = parse_subsections(text[len(_KEYWORD) : body_end])
    if subsections is None:
        LOGGER.debug("Cross-reference keyword found but body did not parse")
        return None

    table = XRefTable.from_subsections(subsections)
    LOGGER.debug(
        "Parsed cross-reference table: %d subsections, %d entries, %d bytes",
        len(table.subsections),
        table.entry_count,
        body_end,
    )
    handlers.on_parse_xref_table(table)

    return XRefTableMatch(table=table, remainder=trimmed[body_end:])
