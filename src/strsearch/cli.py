"""strsearch CLI entry point.

Usage:
    strsearch search PATTERN TEXT [-a kmp] [-o matches.txt]
    strsearch compare PATTERN --text-file corpus.txt
"""
import argparse
import logging
import sys
from pathlib import Path

from strsearch.matching import Algorithm, InvalidInputError, search, search_all
from strsearch.reporting import (
    format_comparison,
    format_report,
    format_summary,
    write_report,
)

log = logging.getLogger(__name__)

EXIT_WRITE_FAILED = 1
EXIT_INVALID_INPUT = 2


def _add_input_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("pattern", help="Pattern to search for.")
    p.add_argument(
        "text", nargs="?", default=None,
        help="Text to search (omit when using --text-file).",
    )
    p.add_argument(
        "--text-file", type=Path, default=None,
        help="Read the text to search from this UTF-8 file.",
    )


def _add_search_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "search",
        help="Search with one algorithm and print the report.",
    )
    _add_input_arguments(p)
    p.add_argument(
        "--algorithm", "-a",
        choices=[a.value for a in Algorithm], default=Algorithm.NAIVE.value,
        help="Matching algorithm (default: naive)",
    )
    p.add_argument(
        "--output", "-o", type=Path, default=None,
        help="Also save the report to this file when anything matches.",
    )


def _add_compare_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "compare",
        help="Run all four algorithms and compare their comparison counts.",
    )
    _add_input_arguments(p)


def _read_text(args: argparse.Namespace, parser: argparse.ArgumentParser) -> str:
    if args.text_file is not None:
        if args.text is not None:
            parser.error("give TEXT or --text-file, not both")
        try:
            return args.text_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            parser.error(f"cannot read {args.text_file}: {exc}")
    if args.text is None:
        parser.error("TEXT is required unless --text-file is given")
    return args.text


def _run_search(args: argparse.Namespace, text: str) -> int:
    result = search(args.algorithm, args.pattern, text)
    print(format_summary(result))
    print()
    print(format_report(result, args.pattern, text), end="")

    if args.output is None:
        return 0
    try:
        written = write_report(result, args.pattern, text, args.output)
    except OSError:
        log.exception("Could not write results to %s", args.output)
        return EXIT_WRITE_FAILED
    if written is None:
        print(":(")
    else:
        print(f"Results saved to {written}")
    return 0


def _run_compare(args: argparse.Namespace, text: str) -> int:
    results = search_all(args.pattern, text)
    print(format_comparison(results))
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="strsearch",
        description="Exact string matching with naive, KMP, Boyer-Moore and Rabin-Karp.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log each search at DEBUG level.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_search_parser(subparsers)
    _add_compare_parser(subparsers)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    text = _read_text(args, parser)
    try:
        if args.command == "search":
            status = _run_search(args, text)
        else:
            status = _run_compare(args, text)
    except InvalidInputError as exc:
        print(f"Input not valid: {exc}", file=sys.stderr)
        sys.exit(EXIT_INVALID_INPUT)
    sys.exit(status)
