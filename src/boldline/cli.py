import argparse
import logging
import sys
from typing import List, Optional

import structlog

from boldline import __version__
from boldline.generator import generate
from boldline.models import Marking
from boldline.names import (
    MARKUP_NAMES,
    PATTERN_NAMES,
    BoldlineError,
    join_lines,
    resolve_marking,
    resolve_pattern,
)

logger = structlog.get_logger(__name__)


def _configure_logging(verbose: bool):
    # Logs go to stderr so stdout carries only the generated lines
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boldline",
        description="Boldline: sweep a bold character across repeated lines of text",
    )
    parser.add_argument(
        "text",
        help="Text to generate bold lines from (put -- before text starting with a dash)",
    )
    parser.add_argument(
        "-m",
        "--markup",
        help=f"Markup to bold with: {', '.join(MARKUP_NAMES)} (default: ansi)",
    )
    parser.add_argument(
        "-p",
        "--pattern",
        default="cross",
        help=f"Sweep pattern: {', '.join(PATTERN_NAMES)} (default: cross)",
    )
    parser.add_argument("--prefix", help="Custom markup prefix (requires --suffix)")
    parser.add_argument("--suffix", help="Custom markup suffix (requires --prefix)")
    parser.add_argument(
        "--dedupe",
        action="store_true",
        help="With a custom markup, merge adjacent bold characters in the cross pattern",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _resolve_custom(parser: argparse.ArgumentParser, args: argparse.Namespace) -> Optional[Marking]:
    if args.prefix is None and args.suffix is None:
        if args.dedupe:
            parser.error("--dedupe only applies to a custom markup (--prefix/--suffix)")
        return None
    if args.prefix is None or args.suffix is None:
        parser.error("--prefix and --suffix must be given together")
    if args.markup is not None:
        parser.error("--markup cannot be combined with --prefix/--suffix")
    return Marking.custom(args.dedupe, args.prefix, args.suffix)


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    marking = _resolve_custom(parser, args)
    try:
        if marking is None:
            marking = resolve_marking(args.markup or "ansi")
        pattern = resolve_pattern(args.pattern)
    except BoldlineError as e:
        parser.error(str(e))

    logger.debug(f"Bolding {args.text!r} with {marking.kind.value} markup, {pattern.value} pattern")
    lines = generate(args.text, marking, pattern)
    logger.debug(f"Generated {len(lines)} lines for {len(args.text)} characters")
    print(join_lines(lines, marking))
    return 0


if __name__ == "__main__":
    sys.exit(main())
