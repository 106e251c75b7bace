"""
Pytest configuration and fixtures for asmdoc tests.
"""

from pathlib import Path

import pytest

from asmdoc.listing.labels import ExportedLabel, read_labels
from asmdoc.listing.listfile import ListFile

SAMPLE_SOURCE = [
    "; Sample program",
    "    MODULE text",
    "    MODULE layer2",
    "; Prints a string.",
    "; HL = pointer to the string",
    "print_string:",
    "    ld a,(hl)",
    "    ret",
    "",
    "; Prints one character.",
    "",
    "print_char: ld (hl),a",
    "    ret",
    "    ENDMODULE",
    "    MODULE ula",
    "print_string:",
    "    ret",
    "    ENDMODULE",
    "    ENDMODULE",
    "; Screen colour.",
    "COLOR: EQU 7",
    'msg: db "Hi;",0 ; greeting',
    "",
]

SAMPLE_LABELS = """\
text.layer2.print_string: EQU 0x00008000
text.ula.print_string: EQU 0x00008010
text.layer2.print_char: EQU 0x00008004
COLOR: EQU 0x00000007
msg: EQU 0x00008020
missing.label: EQU 0x00009000
"""


def _listing_line(number: int, source: str, address: int = 0x8000, data: str = "") -> str:
    """Format one line the way sjasmplus writes it (source at column 24)."""
    return f"{number:<6}{address:04X} {data:<13}{source}"


def _make_listing(source: list[str]) -> list[str]:
    """Raw list file lines for the given source lines, with a banner first."""
    lines = ["# file opened: main.asm"]
    for number, text in enumerate(source, start=1):
        lines.append(_listing_line(number, text))
    return lines


@pytest.fixture
def sample_listing() -> ListFile:
    """List file of SAMPLE_SOURCE. Index = source index + 1 (banner)."""
    return ListFile(_make_listing(SAMPLE_SOURCE), name="main.lis")


@pytest.fixture
def sample_labels() -> list[ExportedLabel]:
    return read_labels(SAMPLE_LABELS)


@pytest.fixture
def sample_files(tmp_path: Path) -> tuple[Path, Path]:
    """Write the sample list and labels files, return their paths."""
    list_path = tmp_path / "main.lis"
    labels_path = tmp_path / "main.labels"
    list_path.write_text("\n".join(_make_listing(SAMPLE_SOURCE)) + "\n", encoding="utf-8")
    labels_path.write_text(SAMPLE_LABELS, encoding="utf-8")
    return list_path, labels_path


@pytest.fixture
def sample_source() -> list[str]:
    """Source lines behind sample_listing."""
    return list(SAMPLE_SOURCE)


@pytest.fixture
def sample_listing_text() -> str:
    return "\n".join(_make_listing(SAMPLE_SOURCE))


@pytest.fixture
def sample_labels_text() -> str:
    return SAMPLE_LABELS
