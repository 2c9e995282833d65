"""CLI for reformatting documents into canonical indented form."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Sequence

from jsonpp import Formatter, ParseError, Parser, ParserConfig
from jsonpp.logger import Logger


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Reformat a document with one item per line and fixed indentation."
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="File to format (defaults to standard input).",
    )
    parser.add_argument(
        "-i",
        "--in-place",
        action="store_true",
        help="Rewrite the input file instead of printing to standard output.",
    )
    parser.add_argument(
        "--indent",
        default="    ",
        help="Indentation characters to use (default: four spaces).",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=200,
        help="Reject documents nested deeper than this (default: 200).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parser progress to standard error.",
    )
    args = parser.parse_args(argv)
    if args.in_place and args.input is None:
        parser.error("--in-place requires an input file")
    return args


def format_document(stream: Iterable[str], formatter: Formatter, config: ParserConfig | None = None) -> str:
    value = Parser(stream, config=config).parse()
    return formatter.format(value)


def write_in_place(path: Path, text: str) -> None:
    """Replace ``path`` with ``text`` without truncating it first."""
    staging = path.with_name(f".{path.name}.jsonpp-tmp")
    try:
        staging.write_text(text, encoding="utf-8")
        staging.replace(path)
    finally:
        staging.unlink(missing_ok=True)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.WARNING
    logger = Logger(config={"name": "jsonpp", "level": level}).logger
    formatter = Formatter(indent=args.indent)
    config: ParserConfig = {"max_depth": args.max_depth, "log_level": level}

    try:
        if args.input is None:
            result = format_document(sys.stdin, formatter, config)
        else:
            source = Path(args.input)
            with source.open("r", encoding="utf-8") as f:
                result = format_document(f, formatter, config)
    except ParseError as exc:
        print(exc, file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.in_place:
        try:
            write_in_place(source, result + "\n")
        except OSError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        logger.info(f"Wrote {source}")
    else:
        sys.stdout.write(result + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
