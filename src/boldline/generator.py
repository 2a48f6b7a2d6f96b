# FILE: src/boldline/generator.py

from typing import Iterator, List

from boldline.models import Marking, Pattern

# Characters that never get bolded. A sweep position landing on one is dropped.
DONT_BOLD = frozenset({" ", "'", "."})


def _should_bold(c: str) -> bool:
    return c not in DONT_BOLD


def _render_line(
    text: str,
    marking: Marking,
    left: int,
    right: int,
    leftwise: bool,
    rightwise: bool,
    merge_pair: bool,
) -> str:
    """
    Builds one output line with the wrapper around `left` and/or `right`.

    With merge_pair, the two adjacent marked characters share a single
    prefix/suffix: the lower index opens, the higher index closes.
    """
    low, high = min(left, right), max(left, right)
    parts = []

    for j, c in enumerate(text):
        leftchar = leftwise and j == left
        rightchar = rightwise and j == right

        if not (leftchar or rightchar):
            parts.append(c)
        elif merge_pair and j == low:
            parts.append(marking.prefix + c)
        elif merge_pair and j == high:
            parts.append(c + marking.suffix)
        else:
            parts.append(marking.prefix + c + marking.suffix)

    return "".join(parts)


def iter_lines(text: str, marking: Marking, pattern: Pattern) -> Iterator[str]:
    """
    Lazily yields the bold lines for `text`, one per sweep position.

    Line order follows the sweep: the left cursor moves from the first
    character to the last while the right cursor mirrors it.
    """
    leftwise, rightwise = pattern.sides
    both = leftwise and rightwise
    length = len(text)

    was_next_to_last_iter = False

    for left in range(length):
        right = length - left - 1

        if (leftwise and not _should_bold(text[left])) or (rightwise and not _should_bold(text[right])):
            continue

        next_to_eachother = abs(left - right) == 1
        if not next_to_eachother:
            was_next_to_last_iter = False

        # Prevent a double line where the two cursors cross in the middle
        if next_to_eachother and was_next_to_last_iter and pattern is Pattern.CROSS:
            continue
        elif next_to_eachother:
            was_next_to_last_iter = True

        yield _render_line(
            text,
            marking,
            left,
            right,
            leftwise,
            rightwise,
            merge_pair=both and next_to_eachother and marking.dedupe,
        )


def generate(text: str, marking: Marking, pattern: Pattern) -> List[str]:
    """
    Generates the bold lines for `text`.

    Returns the list of lines instead of joining them, so the caller picks the
    separator (see `boldline.names.join_lines`).
    """
    return list(iter_lines(text, marking, pattern))
