from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from .config import ExtractorConfig
from .extractor import JsonExtractor


def build_cli() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonrescue",
        description="Recover JSON objects and arrays from model output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    extract_cmd = subparsers.add_parser("extract", help="Extract JSON from a text file")
    extract_cmd.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Path to the input text. Reads stdin when omitted or '-'.",
    )
    extract_cmd.add_argument(
        "--all",
        dest="extract_all",
        action="store_true",
        help="Print every JSON container found as a JSON array.",
    )
    extract_cmd.add_argument(
        "--raw",
        action="store_true",
        help="Print the extracted text as found instead of re-serialising it.",
    )
    extract_cmd.add_argument("--indent", type=int, default=2)
    extract_cmd.add_argument(
        "--strategy",
        action="store_true",
        help="Report the strategy that recovered the JSON on stderr.",
    )
    extract_cmd.add_argument("--no-markdown", dest="use_markdown", action="store_false")
    extract_cmd.add_argument("--no-patterns", dest="use_patterns", action="store_false")
    extract_cmd.add_argument(
        "--no-basic-pattern",
        dest="use_basic_pattern",
        action="store_false",
    )
    extract_cmd.add_argument("--no-repair", dest="use_repair", action="store_false")
    extract_cmd.add_argument("--max-input-chars", type=int, default=None)
    extract_cmd.add_argument("-v", "--verbose", action="store_true")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_cli()
    args = parser.parse_args(argv)

    if args.command == "extract":
        return _run_extract(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


def _run_extract(args: argparse.Namespace) -> int:
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = ExtractorConfig(
            use_markdown=args.use_markdown,
            use_patterns=args.use_patterns,
            use_basic_pattern=args.use_basic_pattern,
            use_repair=args.use_repair,
            max_input_chars=args.max_input_chars,
        )
        text = _read_input(args.file)
    except (OSError, UnicodeDecodeError, PydanticValidationError) as exc:
        print(f"jsonrescue error: {exc}", file=sys.stderr)
        return 2

    extractor = JsonExtractor(config)
    indent = args.indent if args.indent > 0 else None

    if args.extract_all:
        results = extractor.extract_all_json(text)
        print(json.dumps(results, ensure_ascii=False, indent=indent))
        return 0 if results else 1

    outcome = extractor.locate(text)
    if outcome is None:
        print("jsonrescue: no JSON object or array found", file=sys.stderr)
        return 1

    if args.strategy:
        print(f"strategy: {outcome.strategy.value}", file=sys.stderr)

    if args.raw:
        print(outcome.text)
    else:
        print(json.dumps(outcome.value, ensure_ascii=False, indent=indent))
    return 0


def _read_input(file_arg: str) -> str:
    if file_arg == "-":
        return sys.stdin.read()
    return Path(file_arg).read_text(encoding="utf-8")
