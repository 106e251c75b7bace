"""
Assembler list file access.

A list file line carries the source line number, the address and the
opcode bytes in front of the original source text, e.g.

    4     8000 3E 05        start:  ld a,5  ; Load

Only the source text (from the source column on) is of interest for the
documentation. It is called the "main line" here.
"""

from __future__ import annotations

from pathlib import Path

from asmdoc.listing.base import read_text_file

# Index used for labels that have no line in the list file.
NO_LINE = -1

# Column where the source text starts in sjasmplus list files.
DEFAULT_SOURCE_COLUMN = 24


class ListFile:
    """
    The lines of one list file.

    Line numbers are 0-based indices into lines.
    """

    def __init__(
        self,
        lines: list[str],
        source_column: int = DEFAULT_SOURCE_COLUMN,
        name: str | None = None,
    ) -> None:
        if source_column < 0:
            raise ValueError(f"source_column must be >= 0, got {source_column}")
        self.lines = lines
        self.source_column = source_column
        self.name = name

    @classmethod
    def from_path(cls, path: Path, source_column: int = DEFAULT_SOURCE_COLUMN) -> ListFile:
        """
        Read a list file from disk.

        Raises:
            ListingError: If the file cannot be read.
        """
        path = Path(path)
        content = read_text_file(path)
        return cls(content.splitlines(), source_column=source_column, name=path.name)

    @classmethod
    def from_text(
        cls,
        text: str,
        source_column: int = DEFAULT_SOURCE_COLUMN,
        name: str | None = None,
    ) -> ListFile:
        return cls(text.splitlines(), source_column=source_column, name=name)

    @staticmethod
    def get_main_line(line: str, source_column: int = DEFAULT_SOURCE_COLUMN) -> str:
        """
        Return the source text of a list file line.

        Address and opcode columns are removed. Assembler banner lines
        ('# file opened: ...') and lines without source text give ''.
        """
        if line.startswith("#"):
            return ""
        return line[source_column:].rstrip()

    def main_line(self, line: str) -> str:
        """get_main_line with this file's source column."""
        return self.get_main_line(line, self.source_column)

    def logical_lines(self) -> list[str]:
        """Source text of every line, at the same indices as lines."""
        return [self.main_line(line) for line in self.lines]

    def __len__(self) -> int:
        return len(self.lines)

    def __repr__(self) -> str:
        return f"<ListFile {self.name or '?'} lines={len(self.lines)} column={self.source_column}>"
