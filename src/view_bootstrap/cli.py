"""Command-line entry point for bootstrapping a file on disk."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from view_bootstrap.buffer import SelectionRange, SelectionValidationError
from view_bootstrap.config import ENV_PREFIX
from view_bootstrap.invocation import BootstrapCommand, Invocation
from view_bootstrap.runtime import telemetry


def parse_selection(raw: str) -> SelectionRange:
    """``"12"`` or ``"12:15"`` (1-based, inclusive) to a zero-based selection."""

    start_text, _, end_text = raw.partition(":")
    try:
        start = int(start_text)
        end = int(end_text) if end_text else start
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid line range '{raw}'") from exc
    if start < 1 or end < 1:
        raise argparse.ArgumentTypeError(f"line numbers start at 1: '{raw}'")
    return SelectionRange.lines(start - 1, end - 1)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="view-bootstrap",
        description="Generate view hierarchy construction stubs for selected declarations.",
    )
    parser.add_argument("path", type=Path, help="Source file to rewrite")
    parser.add_argument(
        "-s",
        "--select",
        dest="selections",
        action="append",
        type=parse_selection,
        required=True,
        metavar="START[:END]",
        help="Selected line range (1-based, inclusive); repeat for several",
    )
    parser.add_argument(
        "-i",
        "--in-place",
        action="store_true",
        help="Write the result back to PATH instead of stdout",
    )
    parser.add_argument(
        "--encoding",
        default=os.environ.get(f"{ENV_PREFIX}ENCODING", "utf-8"),
        help="File encoding (default: utf-8)",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        help="Telemetry preset to activate before running",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)

    try:
        # newline="" leaves existing CRLF endings untouched; generated lines use LF
        with args.path.open(encoding=args.encoding, newline="") as handle:
            text = handle.read()
    except OSError as exc:
        print(f"view-bootstrap: {exc}", file=sys.stderr)
        return 2

    outcome: List[Optional[Exception]] = []
    invocation = Invocation(text=text, selections=tuple(args.selections))
    BootstrapCommand().perform(invocation, outcome.append)
    error = outcome[0] if outcome else None
    if error is not None:
        if isinstance(error, SelectionValidationError):
            print(f"view-bootstrap: {error}", file=sys.stderr)
            return 2
        raise error

    if args.in_place:
        try:
            with args.path.open("w", encoding=args.encoding, newline="") as handle:
                handle.write(invocation.text)
        except OSError as exc:
            print(f"view-bootstrap: {exc}", file=sys.stderr)
            return 2
    else:
        sys.stdout.write(invocation.text)
    return 0


__all__ = ["main", "parse_selection"]
