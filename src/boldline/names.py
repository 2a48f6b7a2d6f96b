"""
Maps user-facing names to markings and patterns, and joins generated lines
with the separator each markup expects.
"""

from typing import Dict, Iterable

from boldline.models import (
    ANSI_BOLD,
    BBCODE_BOLD,
    HTML_BOLD,
    MARKDOWN_BOLD,
    Marking,
    MarkingKind,
    Pattern,
)


class BoldlineError(ValueError):
    """Base class for user input that boldline rejects."""


class InvalidMarkupName(BoldlineError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown markup '{name}'. Choose one of: {', '.join(MARKUP_NAMES)}")


class InvalidPatternName(BoldlineError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown pattern '{name}'. Choose one of: {', '.join(PATTERN_NAMES)}")


_MARKUP_ALIASES: Dict[str, Marking] = {
    "ansi": ANSI_BOLD,
    "ansibold": ANSI_BOLD,
    "a": ANSI_BOLD,
    "terminal": ANSI_BOLD,
    "t": ANSI_BOLD,
    "markdown": MARKDOWN_BOLD,
    "markdownbold": MARKDOWN_BOLD,
    "md": MARKDOWN_BOLD,
    "m": MARKDOWN_BOLD,
    "bbcode": BBCODE_BOLD,
    "bbcodebold": BBCODE_BOLD,
    "bb": BBCODE_BOLD,
    "b": BBCODE_BOLD,
    "html": HTML_BOLD,
    "htmlbold": HTML_BOLD,
    "h": HTML_BOLD,
}

_PATTERN_ALIASES: Dict[str, Pattern] = {
    "l": Pattern.LEFT,
    "left": Pattern.LEFT,
    "r": Pattern.RIGHT,
    "right": Pattern.RIGHT,
    "c": Pattern.CROSS,
    "x": Pattern.CROSS,
    "cross": Pattern.CROSS,
}

# Canonical names, for help text
MARKUP_NAMES = ("ansi", "markdown", "bbcode", "html")
PATTERN_NAMES = tuple(p.value for p in Pattern)

_SEPARATORS: Dict[MarkingKind, str] = {
    MarkingKind.HTML: "<br/>\n",
    # Markdown hard line break
    MarkingKind.MARKDOWN: "  \n",
}


def resolve_marking(name: str) -> Marking:
    try:
        return _MARKUP_ALIASES[name.strip().lower()]
    except KeyError:
        raise InvalidMarkupName(name) from None


def resolve_pattern(name: str) -> Pattern:
    try:
        return _PATTERN_ALIASES[name.strip().lower()]
    except KeyError:
        raise InvalidPatternName(name) from None


def line_separator(marking: Marking) -> str:
    return _SEPARATORS.get(marking.kind, "\n")


def join_lines(lines: Iterable[str], marking: Marking) -> str:
    """Joins generated lines for display. No trailing separator is added."""
    return line_separator(marking).join(lines)
