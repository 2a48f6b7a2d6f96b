from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict


class MarkingKind(str, Enum):
    ANSI = "ansi"
    MARKDOWN = "markdown"
    BBCODE = "bbcode"
    HTML = "html"
    CUSTOM = "custom"


class Marking(BaseModel):
    """
    The wrapper placed around each bolded character.

    Dedupe controls whether two adjacent marks in a cross pattern share one
    wrapper pair. dedupe=True: `bol<b>dl</b>ine`; dedupe=False: `bol<b>d</b><b>l</b>ine`.
    """

    model_config = ConfigDict(frozen=True)

    kind: MarkingKind
    dedupe: bool
    prefix: str
    suffix: str

    @classmethod
    def custom(cls, dedupe: bool, prefix: str, suffix: str) -> "Marking":
        """Creates a custom marking if none of the built-in ones fit."""
        return cls(kind=MarkingKind.CUSTOM, dedupe=dedupe, prefix=prefix, suffix=suffix)


ANSI_BOLD = Marking(kind=MarkingKind.ANSI, dedupe=False, prefix="\x1b[1m", suffix="\x1b[0m")
MARKDOWN_BOLD = Marking(kind=MarkingKind.MARKDOWN, dedupe=True, prefix="**", suffix="**")
BBCODE_BOLD = Marking(kind=MarkingKind.BBCODE, dedupe=True, prefix="[b]", suffix="[/b]")
HTML_BOLD = Marking(kind=MarkingKind.HTML, dedupe=True, prefix="<b>", suffix="</b>")


class Pattern(str, Enum):
    # A line going left to right
    LEFT = "left"
    # A line going right to left
    RIGHT = "right"
    # Left and right combined
    CROSS = "cross"

    @property
    def sides(self) -> Tuple[bool, bool]:
        """(leftwise, rightwise)"""
        return (self is not Pattern.RIGHT, self is not Pattern.LEFT)
