import sys
import logging
import structlog

from mcp.server.fastmcp import FastMCP

# --- LOGGING CONFIGURATION ---
# CRITICAL: Redirect all logs to stderr.
# Any output to stdout will break the MCP JSON-RPC protocol.
logging.basicConfig(stream=sys.stderr, level=logging.INFO, force=True)

structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer()
    ],
    logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
)
# -----------------------------

from boldline.generator import generate
from boldline.names import MARKUP_NAMES, PATTERN_NAMES, BoldlineError, join_lines, resolve_marking, resolve_pattern

logger = structlog.get_logger(__name__)

# Initialize the MCP Server
mcp = FastMCP("Boldline Service")


@mcp.tool()
def bold_lines(text: str, markup: str = "html", pattern: str = "cross") -> str:
    """
    Repeats `text` once per line, sweeping a bold character across it.

    markup selects the wrapper (ansi, markdown, bbcode, html); pattern selects the
    sweep (left, right, cross). Lines come back already joined for the markup,
    e.g. with <br/> for HTML.
    Example: bold_lines("boldline", "markdown", "left") for a Markdown banner.
    """
    try:
        marking = resolve_marking(markup)
        sweep = resolve_pattern(pattern)
    except BoldlineError as e:
        logger.warning(f"Rejected bold_lines request: {e}")
        return f"Error: {str(e)}"

    return join_lines(generate(text, marking, sweep), marking)


@mcp.tool()
def list_markups() -> str:
    """Lists the markup and pattern names bold_lines accepts."""
    return f"Markups: {', '.join(MARKUP_NAMES)}\nPatterns: {', '.join(PATTERN_NAMES)}"


def main():
    # Runs the server over stdio
    mcp.run()


if __name__ == "__main__":
    main()
