#!/usr/bin/env python3
"""Print the symbol and function tables of an HRB file."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Optional, Sequence

from . import load
from .config import load_hrb_config
from .errors import DecodeError
from .report import describe

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DECODE_ERROR = 1
EXIT_IO_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hrb-dump", description="Decode an HRB bundle and list its contents"
    )
    parser.add_argument("path", type=Path, help="HRB file to decode")
    parser.add_argument(
        "--pcode-preview",
        type=int,
        default=None,
        metavar="N",
        help="Bytes of pcode to show per function, 0 to hide (env HRB_PCODE_PREVIEW)",
    )
    parser.add_argument(
        "--debug",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Enable debug logging (env HRB_DEBUG)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        config = load_hrb_config()
    except ValueError as exc:
        parser.error(str(exc))

    debug = config.debug if args.debug is None else args.debug
    preview = config.pcode_preview if args.pcode_preview is None else args.pcode_preview
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        data = args.path.read_bytes()
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_IO_ERROR
    logger.debug("Read %d bytes from %s", len(data), args.path)

    try:
        body = load(data)
    except DecodeError as exc:
        print(f"error: {args.path}: {exc}", file=sys.stderr)
        return EXIT_DECODE_ERROR

    print(describe(body, pcode_preview=max(preview, 0)))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
