"""
Description extraction.

The description of a label is the block of comment lines directly above
it, e.g.

    ; Prints a string.
    ; HL = pointer to the 0-terminated string
    print_string:

gives " Prints a string.\\n HL = pointer to the 0-terminated string".
"""

from __future__ import annotations

import re
from collections.abc import Callable

from asmdoc.listing.listfile import NO_LINE

# Blank lines allowed between the comment block and the label.
MAX_BLANK_LINES = 2

BLANK_LINE = re.compile(r"^\s*$")
COMMENT_LINE = re.compile(r"^\s*;(.*)")


def extract_description(
    line_number: int,
    lines: list[str],
    line_text: Callable[[str], str] | None = None,
    max_blank_lines: int = MAX_BLANK_LINES,
) -> str | None:
    """
    Retrieve the comment lines above a label, without the comment marker.

    line_text is applied before both the blank test and the comment test.
    A list file line with an empty source column is therefore blank even
    though its line number and address columns are not. Testing the raw
    line instead would never find a blank line in a list file, so no
    description would ever be cancelled by blank lines there.

    Args:
        line_number: Index of the label line (0-based), or NO_LINE.
        lines: All lines of the file.
        line_text: Maps a raw line to its logical source text. Lines are
            used unchanged if omitted.
        max_blank_lines: Blank lines tolerated between comment and label.

    Returns:
        The (multi-line) description. '' if the label has a line but no
        comment is found above it. None if line_number is NO_LINE, the
        label is the first line, or too many blank lines precede it.
    """
    if line_number == NO_LINE or line_number > len(lines):
        return None

    if line_text is None:
        line_text = _unchanged

    # Skip blank lines
    k = line_number
    while True:
        k -= 1
        if k < 0:
            return None
        if not BLANK_LINE.match(line_text(lines[k])):
            break
        if line_number - k > max_blank_lines:
            return None

    # Collect consecutive comment lines, bottom-up
    description: list[str] = []
    while k >= 0:
        match = COMMENT_LINE.match(line_text(lines[k]))
        if not match:
            break
        description.append(match.group(1))
        k -= 1

    description.reverse()
    return "\n".join(description)


def _unchanged(line: str) -> str:
    return line
