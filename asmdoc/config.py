"""
Configuration for a documentation run.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from asmdoc.hierarchy.descriptions import MAX_BLANK_LINES
from asmdoc.listing.base import ListingError
from asmdoc.listing.kinds import DEFAULT_SCAN_LINES
from asmdoc.listing.listfile import DEFAULT_SOURCE_COLUMN


@dataclass
class DocConfig:
    """Configuration for generating documentation."""

    # Inputs and output
    list_path: Path | None = None
    labels_path: Path | None = None
    output_dir: Path = Path("docs")
    format: str = "html"
    title: str = "Assembler Documentation"

    # List file layout
    source_column: int = DEFAULT_SOURCE_COLUMN

    # Description and kind detection
    max_blank_lines: int = MAX_BLANK_LINES
    classify_kinds: bool = True
    kind_scan_lines: int = DEFAULT_SCAN_LINES

    def validate(self) -> None:
        """
        Check the values.

        Raises:
            ValueError: If a value is out of range.
        """
        if self.source_column < 0:
            raise ValueError(f"source_column must be >= 0, got {self.source_column}")
        if self.max_blank_lines < 0:
            raise ValueError(f"max_blank_lines must be >= 0, got {self.max_blank_lines}")
        if self.kind_scan_lines < 0:
            raise ValueError(f"kind_scan_lines must be >= 0, got {self.kind_scan_lines}")
        if not self.format:
            raise ValueError("format must not be empty")

    def to_dict(self) -> dict[str, Any]:
        return {
            "list_path": str(self.list_path) if self.list_path else None,
            "labels_path": str(self.labels_path) if self.labels_path else None,
            "output_dir": str(self.output_dir),
            "format": self.format,
            "title": self.title,
            "source_column": self.source_column,
            "max_blank_lines": self.max_blank_lines,
            "classify_kinds": self.classify_kinds,
            "kind_scan_lines": self.kind_scan_lines,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DocConfig:
        list_path = data.get("list_path")
        labels_path = data.get("labels_path")
        return cls(
            list_path=Path(list_path) if list_path else None,
            labels_path=Path(labels_path) if labels_path else None,
            output_dir=Path(data.get("output_dir", "docs")),
            format=data.get("format", "html"),
            title=data.get("title", "Assembler Documentation"),
            source_column=data.get("source_column", DEFAULT_SOURCE_COLUMN),
            max_blank_lines=data.get("max_blank_lines", MAX_BLANK_LINES),
            classify_kinds=data.get("classify_kinds", True),
            kind_scan_lines=data.get("kind_scan_lines", DEFAULT_SCAN_LINES),
        )

    @classmethod
    def from_file(cls, path: Path) -> DocConfig:
        """
        Load a configuration from a JSON file.

        Relative paths in the file are taken relative to the file.

        Raises:
            ListingError: If the file cannot be read or is not valid JSON.
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise ListingError(f"Config file not found: {path}", source_path=path) from e
        except (OSError, json.JSONDecodeError) as e:
            raise ListingError(
                f"Invalid config file: {e}",
                source_path=path,
                details=str(e),
            ) from e

        if not isinstance(data, dict):
            raise ListingError("Config file must contain a JSON object", source_path=path)

        config = cls.from_dict(data)
        base = path.parent
        if config.list_path and not config.list_path.is_absolute():
            config.list_path = base / config.list_path
        if config.labels_path and not config.labels_path.is_absolute():
            config.labels_path = base / config.labels_path
        if not config.output_dir.is_absolute():
            config.output_dir = base / config.output_dir
        return config
