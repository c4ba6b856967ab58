"""Command line interface for :mod:`pdfxref`."""

from .main import main

__all__ = ["main"]
