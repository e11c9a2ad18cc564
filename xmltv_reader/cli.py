from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from lxml import etree # type: ignore
from pydantic import BaseModel

from xmltv_reader.config import settings, setup_logging
from xmltv_reader.services import XmlTvReader
from xmltv_reader.utils.dates import DateFormatError, parse_iso8601_to_utc

logger = logging.getLogger(__name__)

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def _iso_datetime(value: str):
    try:
        return parse_iso8601_to_utc(value)
    except DateFormatError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    # Parent with global flags so every subcommand accepts them
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument("file", type=Path, help="XMLTV document")
    parent.add_argument("--language", "-l", default=None, help="Preferred language (default: XMLTV_LANGUAGE)")
    parent.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
                        help="Log level (default: XMLTV_LOG_LEVEL)")

    ap = argparse.ArgumentParser(prog="xmltv-reader", description="Read channels and programmes from XMLTV files")
    sub = ap.add_subparsers(dest="cmd", required=True)

    sub.add_parser("channels", parents=[parent], help="List channels")

    sp_prog = sub.add_parser("programmes", parents=[parent], help="List programmes of one channel")
    sp_prog.add_argument("--channel", "-c", required=True, help="XMLTV channel ID")
    sp_prog.add_argument("--from", dest="start", type=_iso_datetime, required=True,
                         help="ISO8601 start of the window (e.g., '2025-10-09T00:00:00Z')")
    sp_prog.add_argument("--to", dest="end", type=_iso_datetime, required=True,
                         help="ISO8601 end of the window")

    sub.add_parser("languages", parents=[parent], help="Count languages used in the document")

    return ap


def _write(records: Sequence[BaseModel]) -> None:
    for record in records:
        sys.stdout.write(record.model_dump_json() + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    reader = XmlTvReader(args.file, language=args.language or settings.language)

    try:
        if args.cmd == "channels":
            _write(reader.list_channels())
        elif args.cmd == "programmes":
            _write(reader.list_programmes(args.channel, args.start, args.end))
        elif args.cmd == "languages":
            _write(reader.list_languages())
    except (OSError, etree.XMLSyntaxError) as e:
        logger.error(f"Failed to read {args.file}: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
