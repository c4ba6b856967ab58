"""CLI helpers for the dump command."""

from __future__ import annotations

import json
from argparse import ArgumentParser, Namespace, _SubParsersAction
from pathlib import Path
from typing import Any

from ...core.locator import read_xref_table, read_xref_table_at
from ...core.model import XRefTable
from ...exceptions import XRefTableNotFoundError


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("dump", help="Print the cross-reference table of a PDF")
    parser.add_argument("input", help="Input PDF file")
    parser.add_argument(
        "--offset",
        type=int,
        default=None,
        help="Byte offset of the table; defaults to the startxref value",
    )
    parser.add_argument("--format", choices=["text", "json"], default="text")
    parser.set_defaults(handler=run)


def table_to_dict(table: XRefTable) -> dict[str, Any]:
    return {
        "subsections": [
            {
                "first_object_number": subsection.first_object_number,
                "entries": [
                    {
                        "offset": entry.offset,
                        "generation_number": entry.generation_number,
                        "in_use": entry.in_use,
                    }
                    for entry in subsection.entries
                ],
            }
            for subsection in table.subsections
        ]
    }


def run(args: Namespace) -> int:
    data = Path(args.input).expanduser().read_bytes()
    if args.offset is None:
        match = read_xref_table(data)
    else:
        match = read_xref_table_at(data, args.offset)
        if match is None:
            raise XRefTableNotFoundError(args.offset)

    table, remainder = match
    if args.format == "json":
        payload = table_to_dict(table)
        payload["remainder_length"] = len(remainder)
        print(json.dumps(payload, indent=2))
    else:
        print(table.to_string(), end="")
    return 0
