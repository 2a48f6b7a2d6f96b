from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("boldline")
except PackageNotFoundError:
    # Package is not installed (e.g., running from source/dev)
    __version__ = "0.0.0-dev"

from boldline.generator import generate, iter_lines
from boldline.models import ANSI_BOLD, BBCODE_BOLD, HTML_BOLD, MARKDOWN_BOLD, Marking, MarkingKind, Pattern
from boldline.names import (
    BoldlineError,
    InvalidMarkupName,
    InvalidPatternName,
    join_lines,
    resolve_marking,
    resolve_pattern,
)

__all__ = [
    "generate",
    "iter_lines",
    "Marking",
    "MarkingKind",
    "Pattern",
    "ANSI_BOLD",
    "MARKDOWN_BOLD",
    "BBCODE_BOLD",
    "HTML_BOLD",
    "BoldlineError",
    "InvalidMarkupName",
    "InvalidPatternName",
    "resolve_marking",
    "resolve_pattern",
    "join_lines",
    "__version__",
]
