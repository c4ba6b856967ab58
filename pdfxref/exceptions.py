"""Custom exceptions raised by the strict :mod:`pdfxref` entry points."""

from __future__ import annotations


class PdfXRefError(Exception):
    """Base exception for all errors raised by :mod:`pdfxref`."""


class StartXRefNotFoundError(PdfXRefError):
    """Raised when a document has no usable ``startxref`` marker."""


class XRefTableNotFoundError(PdfXRefError):
    """Raised when no classical cross-reference table sits at an offset."""

    def __init__(self, offset: int, kind: str | None = None) -> None:
        self.offset = offset
        self.kind = kind
        message = f"No cross-reference table found at offset {offset}"
        if kind == "stream":
            message += " (document uses a cross-reference stream)"
        super().__init__(message)


__all__ = ["PdfXRefError", "StartXRefNotFoundError", "XRefTableNotFoundError"]
