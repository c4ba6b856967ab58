"""Command line interface for the pdfxref toolkit."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from ..core.utils import get_logger
from ..exceptions import PdfXRefError
from .commands import dump

COMMAND_MODULES = [dump]


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pdfxref", description="PDF cross-reference table reader")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True
    for module in COMMAND_MODULES:
        module.configure_parser(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _create_parser()
    args = parser.parse_args(argv)
    logger = get_logger("pdfxref")
    logger.setLevel(logging.DEBUG if args.verbose else logging.WARNING)
    try:
        return args.handler(args)
    except (PdfXRefError, OSError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"pdfxref: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
