from __future__ import annotations

import argparse
import logging
import sys

from .api import run
from .config import DEFAULT_DELIMITER, STDIN, build_config
from .errors import ConfigError, RangeSyntaxError
from .logging_utils import configure_logging


PROG = "rangecut"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog=PROG, description="Select bytes, characters or fields from each line")
    ap.add_argument("files", nargs="*", metavar="FILE", default=[STDIN], help="Input file(s) (default: -)")
    ap.add_argument(
        "-d",
        "--delim",
        dest="delimiter",
        default=DEFAULT_DELIMITER,
        help="Field delimiter (default: TAB)",
    )
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("-f", "--fields", metavar="LIST", help="Selected fields")
    mode.add_argument("-b", "--bytes", metavar="LIST", help="Selected bytes")
    mode.add_argument("-c", "--chars", metavar="LIST", help="Selected characters")
    ap.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        type=str.upper,
        help="Diagnostic log level (default: WARNING)",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=getattr(logging, args.log_level))

    try:
        config = build_config(
            files=args.files,
            delimiter=args.delimiter,
            fields=args.fields,
            bytes=args.bytes,
            chars=args.chars,
        )
    except (ConfigError, RangeSyntaxError) as e:
        print(f"{PROG}: {e}", file=sys.stderr)
        return 1

    return run(config)
