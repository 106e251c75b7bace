"""
Label kind classification.

Tells code labels from data labels and constants by looking at the
statement that follows the label in the source.
"""

from __future__ import annotations

import re
from enum import Enum

from asmdoc.listing.listfile import NO_LINE

DEFAULT_SCAN_LINES = 8

CONSTANT_DIRECTIVES = {"equ", "=", "defl"}

DATA_DIRECTIVES = {
    "db", "defb", "dw", "defw", "dd", "defd", "dword",
    "ds", "defs", "dm", "defm", "dz", "dc", "d24",
    "byte", "word", "block", "abyte", "abytec", "abytez",
    "incbin", "dg", "defg", "dh", "defh",
}

LABEL_DEFINITION = re.compile(r"^([A-Za-z_.@][\w.@!?#]*):?")


class LabelKind(str, Enum):
    """What an exported label refers to."""

    CODE = "code"
    DATA = "data"
    CONSTANT = "constant"
    UNKNOWN = "unknown"


def strip_comment(text: str) -> str:
    """Remove a trailing ';' comment. Semicolons in quotes are kept."""
    quote = None
    for i, char in enumerate(text):
        if quote:
            if char == quote:
                quote = None
        elif char == '"' or (char == "'" and not (i and text[i - 1].isalnum())):
            # af' is a register, not a quote
            quote = char
        elif char == ";":
            return text[:i]
    return text


def split_label(text: str) -> tuple[str | None, str]:
    """
    Split a logical line into its label definition and the statement.

    A label starts in the first column. Indented text has no label.
    """
    if not text or text[0].isspace():
        return None, text.strip()
    match = LABEL_DEFINITION.match(text)
    if not match:
        return None, text.strip()
    return match.group(1), text[match.end():].strip()


def statement_kind(statement: str) -> LabelKind:
    """Classify by the first word of a statement."""
    first = statement.split(None, 1)[0].lower()
    if first in CONSTANT_DIRECTIVES or first.startswith("="):
        return LabelKind.CONSTANT
    if first in DATA_DIRECTIVES or first.lstrip(".") in DATA_DIRECTIVES:
        return LabelKind.DATA
    return LabelKind.CODE


def classify_label(
    line_number: int,
    lines: list[str],
    scan_lines: int = DEFAULT_SCAN_LINES,
) -> LabelKind:
    """
    Classify the label defined at line_number.

    Args:
        line_number: Index of the label line, or NO_LINE.
        lines: Logical source lines.
        scan_lines: How many following lines are checked if the label
            stands on a line of its own.
    """
    if line_number == NO_LINE or not 0 <= line_number < len(lines):
        return LabelKind.UNKNOWN

    _, statement = split_label(strip_comment(lines[line_number]))
    if statement:
        return statement_kind(statement)

    # Label on its own line: the next statement decides
    end = min(len(lines), line_number + 1 + scan_lines)
    for text in lines[line_number + 1:end]:
        _, statement = split_label(strip_comment(text))
        if statement:
            return statement_kind(statement)

    return LabelKind.UNKNOWN
