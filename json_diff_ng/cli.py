"""json-diff-ng CLI.

Entry point for the ``json-diff-ng`` command-line tool.

Usage:
    json-diff-ng file <path1> <path2> [--sort-arrays]
                 [--exclude-key-regex PATTERN]... [--format json|text]
    json-diff-ng direct <json1> <json2> [--sort-arrays]
                 [--exclude-key-regex PATTERN]... [--format json|text]

Exit codes: 0 when equal, 1 when differences were found, 2 on errors.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .core.compare import compare_strs
from .core.errors import JsonDiffError
from .core.key_filter import compile_patterns
from .version import JSON_DIFF_NG_VERSION

logger = logging.getLogger("json_diff_ng")

EXIT_EQUAL = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2

# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


def _read_file(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


def _read_inputs(args: argparse.Namespace) -> tuple[str, str]:
    if args.command == "file":
        return _read_file(args.left), _read_file(args.right)
    return args.left, args.right


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------


def _cmd_compare(args: argparse.Namespace) -> int:
    logger.info("Reading input")
    try:
        text1, text2 = _read_inputs(args)
    except OSError as exc:
        print(f"Error: cannot read {exc.filename}: {exc.strerror}", file=sys.stderr)
        return EXIT_ERROR
    except UnicodeDecodeError as exc:
        print(f"Error: input is not valid UTF-8: {exc}", file=sys.stderr)
        return EXIT_ERROR

    try:
        logger.info("Compiling exclusion patterns")
        patterns = compile_patterns(args.exclude_key_regex)
        logger.info("Comparing")
        result = compare_strs(text1, text2, args.sort_arrays, patterns)
    except JsonDiffError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    logger.info("Printing results")
    if args.format == "json":
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(result.render())

    return EXIT_EQUAL if result.is_empty() else EXIT_DIFFERENT


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-s",
        "--sort-arrays",
        action="store_true",
        help="Deep-sort arrays before comparing",
    )
    parser.add_argument(
        "-e",
        "--exclude-key-regex",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Exclude object keys matching this regex (repeatable)",
    )
    parser.add_argument(
        "--format",
        choices=["json", "text"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log progress to stderr"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-diff-ng",
        description="Structural diff of two JSON documents",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {JSON_DIFF_NG_VERSION}"
    )
    subparsers = parser.add_subparsers(dest="command")

    file_parser = subparsers.add_parser("file", help="Compare two JSON files")
    file_parser.add_argument("left", help="Path to the left JSON file")
    file_parser.add_argument("right", help="Path to the right JSON file")
    _add_common_options(file_parser)
    file_parser.set_defaults(func=_cmd_compare)

    direct_parser = subparsers.add_parser(
        "direct", help="Compare two JSON texts given inline"
    )
    direct_parser.add_argument("left", help="Left JSON text")
    direct_parser.add_argument("right", help="Right JSON text")
    _add_common_options(direct_parser)
    direct_parser.set_defaults(func=_cmd_compare)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(EXIT_DIFFERENT)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
