"""Byte-level helpers shared by the cross-reference recognizers."""

from __future__ import annotations

import logging

_WHITESPACE = b"\x00\t\n\r\f "
_DIGITS = b"0123456789"


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def skip_whitespace(data: bytes, index: int) -> int:
    """Return the first index at or after ``index`` that is not PDF whitespace."""

    while index < len(data) and data[index] in _WHITESPACE:
        index += 1
    return index


def scan_digits(data: bytes, index: int) -> int:
    """Return the end of the ASCII digit run starting at ``index``."""

    while index < len(data) and data[index] in _DIGITS:
        index += 1
    return index


def trim_bytes(data: bytes) -> bytes:
    """Strip PDF whitespace from both ends of ``data``."""

    start = skip_whitespace(data, 0)
    end = len(data)
    while end > start and data[end - 1] in _WHITESPACE:
        end -= 1
    return bytes(data[start:end])


def decode_range(data: bytes, start: int, end: int) -> str:
    """Decode ``data[start:end]`` one character per byte."""

    return bytes(data[start:end]).decode("latin-1")


__all__ = ["get_logger", "skip_whitespace", "scan_digits", "trim_bytes", "decode_range"]
