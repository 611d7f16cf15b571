"""Command-line harness for running cursor queries over a file.

Usage:
    patternseeker data.json json:name json:age
    patternseeker page.xml xml:title attr:lang
    patternseeker --chain log.txt seek:"id=" uint seek:"id=" uint
    cat data.json | patternseeker - json:items

Queries:
    json:NAME          JSON property value
    xml:NAME           XML element body
    xml-tag:NAME       Whole XML element
    attr:NAME          Double-quoted attribute value
    between:FROM,TO    Text between FROM and the next TO (split on the first ",")
    until:TO           Text up to TO
    any-of:CHARS       Text up to the first of CHARS
    balanced:OC        Balanced span opened by O and closed by C
    fixed:N            Next N characters
    seek:TEXT          Move past TEXT (prints nothing)
    uint / int         Leading unsigned / signed 64-bit integer

Without --chain every query runs on a fresh cursor over the whole input.
With --chain all queries share one cursor and each moves it past its match,
so repeated queries walk through successive records. json: and attr: never
move the cursor.

Exit Codes:
    0   Every query matched
    1   At least one query found nothing
    2   Input could not be read or a query is malformed

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

from patternseeker import __version__
from patternseeker.constants import UINT64_MAX
from patternseeker.cursor import Cursor
from patternseeker.enums import MoveMode
from patternseeker.numbers import scan_unsigned

__all__ = ["Query", "build_parser", "main", "parse_query", "run_queries"]

logger = logging.getLogger(__name__)

_LOG_LEVEL_ENV = "PATTERNSEEKER_LOG_LEVEL"

QueryResult: TypeAlias = Cursor | int | None


@dataclass(frozen=True, slots=True)
class Query:
    """A parsed command-line query.

    Attributes:
        text: Query as typed (for messages)
        kind: Query keyword (json, xml, between, ...)
        args: Keyword arguments split out of the query text
    """

    text: str
    kind: str
    args: tuple[str, ...] = ()

    def run(self, cursor: Cursor, mode: MoveMode) -> QueryResult:
        """Run the query against cursor.

        Returns:
            A derived cursor for extraction queries, an int for integer
            queries, or None when an integer could not be parsed or a seek
            failed
        """
        return _RUNNERS[self.kind](cursor, self.args, mode)


def _run_seek(cursor: Cursor, args: tuple[str, ...], mode: MoveMode) -> QueryResult:
    if not cursor.seek_to(args[0], MoveMode.AFTER):
        return None
    return cursor.slice(0, 0)


_RUNNERS: dict[str, Callable[[Cursor, tuple[str, ...], MoveMode], QueryResult]] = {
    "json": lambda c, a, m: c.get_json_property(a[0]),
    "xml": lambda c, a, m: c.get_xml_tag_body(a[0], m),
    "xml-tag": lambda c, a, m: c.get_xml_tag(a[0], m),
    "attr": lambda c, a, m: c.get_xml_attr(a[0]),
    "between": lambda c, a, m: c.extract_between(a[0], a[1], m),
    "until": lambda c, a, m: c.extract_until(a[0], m),
    "any-of": lambda c, a, m: c.extract_until_any_of(a[0], m),
    "balanced": lambda c, a, m: c.extract_balanced(a[0][0], a[0][1], m),
    "fixed": lambda c, a, m: c.extract_fixed(int(a[0]), m),
    "seek": _run_seek,
    "uint": lambda c, a, m: c.take_unsigned_integer(),
    "int": lambda c, a, m: c.take_signed_integer(),
}

_NO_ARGUMENT = frozenset({"uint", "int"})


def parse_query(text: str) -> Query:
    """Parse "kind:argument" into a Query.

    Raises:
        ValueError: Unknown keyword or malformed argument
    """
    kind, sep, argument = text.partition(":")
    if kind not in _RUNNERS:
        msg = f"Unknown query {kind!r} (expected one of: {', '.join(_RUNNERS)})"
        raise ValueError(msg)

    if kind in _NO_ARGUMENT:
        if sep:
            msg = f"Query {kind!r} takes no argument, got {text!r}"
            raise ValueError(msg)
        return Query(text, kind)

    if not argument:
        msg = f"Query {kind!r} needs an argument, e.g. {kind}:VALUE"
        raise ValueError(msg)

    match kind:
        case "between":
            start, comma, stop = argument.partition(",")
            if not comma or not start or not stop:
                msg = f"between needs FROM,TO, got {argument!r}"
                raise ValueError(msg)
            return Query(text, kind, (start, stop))
        case "balanced":
            if len(argument) != 2 or argument[0] == argument[1]:
                msg = f"balanced needs two different characters, got {argument!r}"
                raise ValueError(msg)
        case "fixed":
            if not argument.isascii() or not argument.isdigit():
                msg = f"fixed needs a non-negative integer, got {argument!r}"
                raise ValueError(msg)
            scan = scan_unsigned(argument, 0, len(argument))
            if not scan.ok:
                msg = f"fixed length must be at most {UINT64_MAX}, got {len(argument)} digits"
                raise ValueError(msg)
            return Query(text, kind, (str(scan.value),))
    return Query(text, kind, (argument,))


def run_queries(
    cursor: Cursor, queries: list[Query], *, chain: bool = False
) -> list[QueryResult]:
    """Run queries in order and collect their results.

    Args:
        cursor: Root cursor over the input
        queries: Parsed queries
        chain: Share one cursor and move past each match instead of
            starting every query from the root

    Returns:
        One result per query; None or a not-found cursor marks a miss
    """
    mode = MoveMode.AFTER if chain else MoveMode.NONE
    shared = cursor.copy()
    results: list[QueryResult] = []
    for query in queries:
        target = shared if chain else cursor.copy()
        result = query.run(target, mode)
        logger.debug(
            "Query %s -> %r (cursor offset %d)", query.text, result, target.get_offset()
        )
        results.append(result)
    return results


def _is_miss(result: QueryResult) -> bool:
    return result is None or (isinstance(result, Cursor) and result.is_not_found)


def _format_result(query: Query, result: QueryResult, *, show_offset: bool) -> str | None:
    if query.kind == "seek":
        return None
    if isinstance(result, Cursor):
        text = result.to_string()
        if show_offset:
            line, col = result.compute_line_col()
            return f"{result.get_offset()}\t{line}:{col}\t{text}"
        return text
    return str(result)


def _read_source(path: str, encoding: str) -> str:
    data = sys.stdin.buffer.read() if path == "-" else Path(path).read_bytes()
    try:
        return data.decode(encoding)
    except UnicodeDecodeError:
        logger.warning("Input is not valid %s, using replacement characters", encoding)
        return data.decode(encoding, errors="replace")


def _configure_logging(verbose: bool, quiet: bool) -> None:
    if verbose:
        level: int | str = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = os.environ.get(_LOG_LEVEL_ENV, "WARNING").upper()
        if level not in logging.getLevelNamesMapping():
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the patternseeker command."""
    parser = argparse.ArgumentParser(
        prog="patternseeker",
        description="Extract values from text with zero-copy cursor queries.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  patternseeker data.json json:name json:age
  patternseeker page.xml xml:title attr:lang
  patternseeker --chain --offset log.txt seek:id= uint seek:id= uint
""",
    )
    parser.add_argument("file", help="Input file, or - for stdin")
    parser.add_argument("queries", nargs="+", metavar="QUERY", help="Query to run")
    parser.add_argument(
        "--chain",
        action="store_true",
        help="Run queries on one cursor, moving past each match",
    )
    parser.add_argument(
        "--offset",
        action="store_true",
        help="Prefix each result with its offset and line:column",
    )
    parser.add_argument("--encoding", default="utf-8", help="Input encoding (default: utf-8)")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Log every query")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Only log errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the patternseeker command."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose, args.quiet)

    try:
        queries = [parse_query(text) for text in args.queries]
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    try:
        source = _read_source(args.file, args.encoding)
    except (OSError, LookupError) as e:
        print(f"[ERROR] Cannot read input: {e}", file=sys.stderr)
        return 2
    logger.info("Read %d characters from %s", len(source), args.file)

    results = run_queries(Cursor(source), queries, chain=args.chain)

    status = 0
    for query, result in zip(queries, results, strict=True):
        if _is_miss(result):
            logger.warning("No match for %s", query.text)
            status = 1
            continue
        line = _format_result(query, result, show_offset=args.offset)
        if line is not None:
            print(line)
    return status
