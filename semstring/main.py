from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from semstring.config import SemstringSettings, load_settings
from semstring.errors import SemanticStringError
from semstring.parts import Text
from semstring.schemas import LogLevel, SortOptions
from semstring.semantic_string import SemanticString
from semstring.sorting import sort_lines

logger = logging.getLogger(__name__)

STDIN_NAME = "-"


def setup_logging(level: LogLevel | str = LogLevel.WARNING) -> None:
    level = LogLevel.coerce(level)
    logging.basicConfig(
        level=getattr(logging, level.value),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _input_path(value: str) -> str:
    if value == STDIN_NAME:
        return value
    if not Path(value).is_file():
        raise argparse.ArgumentTypeError(f"file not found: {value}")
    return value


def _log_level(value: str) -> LogLevel:
    try:
        return LogLevel.coerce(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _field_number(value: str) -> int:
    try:
        n = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid field number: {value!r}") from e
    if n < 1:
        raise argparse.ArgumentTypeError(f"field numbers start at 1 (got {n})")
    return n


def _read_lines(sources: list[str]) -> list[str]:
    lines: list[str] = []
    for src in sources or [STDIN_NAME]:
        if src == STDIN_NAME:
            logger.debug("reading stdin")
            lines.extend(sys.stdin.read().splitlines())
        else:
            logger.debug("reading %s", src)
            lines.extend(Path(src).read_text(encoding="utf-8").splitlines())
    return lines


def _build_parser(settings: SemstringSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="semstring",
        description="Natural ordering of strings with embedded numbers.",
    )
    parser.add_argument(
        "--log-level",
        type=_log_level,
        default=settings.log_level,
        help="logging level (default: $SEMSTRING_LOG_LEVEL or WARNING)",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    sort_p = sub.add_parser("sort", help="print input lines in semantic order")
    sort_p.add_argument("files", nargs="*", type=_input_path, help="input files ('-' for stdin)")
    sort_p.add_argument("-r", "--reverse", action="store_true", default=settings.reverse)
    sort_p.add_argument("-u", "--unique", action="store_true", default=settings.unique)
    sort_p.add_argument("--ignore-blank", action="store_true", help="drop empty lines")
    sort_p.add_argument(
        "-k", "--field", type=_field_number, default=None, help="1-based column to sort by"
    )
    sort_p.add_argument(
        "-t",
        "--separator",
        type=str,
        default=settings.field_separator,
        help="column separator (default: whitespace)",
    )

    tok_p = sub.add_parser("tokenize", help="show the text and number parts of a string")
    tok_p.add_argument("string")

    cmp_p = sub.add_parser("compare", help="print -1, 0 or 1 comparing two strings")
    cmp_p.add_argument("a")
    cmp_p.add_argument("b")
    return parser


def _cmd_sort(args: argparse.Namespace) -> int:
    try:
        options = SortOptions(
            reverse=args.reverse,
            unique=args.unique,
            ignore_blank=args.ignore_blank,
            field=args.field,
            separator=args.separator,
        )
    except ValidationError as e:
        raise SystemExit(f"invalid sort options: {e}") from e

    for line in sort_lines(_read_lines(args.files), options):
        print(line)
    return 0


def _cmd_tokenize(args: argparse.Namespace) -> int:
    s = SemanticString.parse(args.string)
    for part in s.parts:
        if isinstance(part, Text):
            print(f"TEXT\t{part.start}:{part.end}\t{part.text!r}")
        else:
            print(f"NUMBER\t{part.start}:{part.end}\t{part.value}")
    return 0


def _cmd_compare(args: argparse.Namespace) -> int:
    print(SemanticString.parse(args.a).compare(SemanticString.parse(args.b)))
    return 0


def main(argv: list[str] | None = None) -> int:
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"semstring: error: {e}", file=sys.stderr)
        return 2
    parser = _build_parser(settings)
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.cmd == "sort":
            return _cmd_sort(args)
        if args.cmd == "tokenize":
            return _cmd_tokenize(args)
        if args.cmd == "compare":
            return _cmd_compare(args)
    except SemanticStringError as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"semstring: error: {e}", file=sys.stderr)
        return 2

    raise AssertionError(f"unhandled cmd: {args.cmd}")


if __name__ == "__main__":
    raise SystemExit(main())
