"""
Exported labels.

The assembler writes the EXPORTed labels to a file of the form

    text.layer2.print_string: EQU 0x00008012
    text.ula.print_string: EQU 0x00008040

The order of the file is the declaration order and is kept. The labels
are then located in the list file to find the line they are defined on.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from asmdoc.listing.base import read_text_file
from asmdoc.listing.kinds import split_label, strip_comment
from asmdoc.listing.listfile import NO_LINE

logger = logging.getLogger(__name__)

EXPORT_LINE = re.compile(
    r"^\s*([A-Za-z_.@][\w.@!?#]*)\s*:?\s*(?:EQU\b|=)\s*([^;]*?)\s*(?:;.*)?$",
    re.IGNORECASE,
)
MODULE_DIRECTIVE = re.compile(r"^\s*MODULE\s+([\w.@!?#]+)", re.IGNORECASE)
ENDMODULE_DIRECTIVE = re.compile(r"^\s*ENDMODULE\b", re.IGNORECASE)


@dataclass
class ExportedLabel:
    """One line of the labels file."""

    name: str
    value: int | None = None


def parse_value(text: str) -> int | None:
    """
    Parse a numeric literal in one of the usual assembler notations.

    Examples:
    "0x8000", "$8000", "#8000", "8000h" -> 32768
    "%101", "0b101" -> 5
    "42" -> 42
    """
    text = text.strip().replace("_", "")
    if not text:
        return None
    lowered = text.lower()
    try:
        if lowered.startswith("0x"):
            return int(lowered[2:], 16)
        if lowered[0] in "$#":
            return int(lowered[1:], 16)
        if lowered.endswith("h") and lowered[0].isdigit():
            return int(lowered[:-1], 16)
        if lowered.startswith("0b"):
            return int(lowered[2:], 2)
        if lowered[0] == "%":
            return int(lowered[1:], 2)
        return int(lowered, 10)
    except ValueError:
        return None


def read_labels(text: str) -> list[ExportedLabel]:
    """
    Parse the content of a labels file.

    Blank and comment lines are skipped, malformed lines are logged and
    skipped. A label given twice keeps its first position and takes the
    later value.
    """
    labels: dict[str, ExportedLabel] = {}
    for index, line in enumerate(text.splitlines()):
        stripped = line.strip()
        if not stripped or stripped.startswith(";"):
            continue

        match = EXPORT_LINE.match(line)
        if not match:
            logger.warning("Skipping malformed label line %d: %r", index + 1, line)
            continue

        name, raw_value = match.group(1), match.group(2)
        value = parse_value(raw_value)
        if value is None and raw_value:
            logger.debug("Label %s has non-numeric value %r", name, raw_value)

        if name in labels:
            logger.warning("Label %s exported twice, using the later value", name)
            labels[name].value = value
        else:
            labels[name] = ExportedLabel(name=name, value=value)

    return list(labels.values())


def read_labels_file(path: Path) -> list[ExportedLabel]:
    """
    Read and parse a labels file.

    Raises:
        ListingError: If the file cannot be read.
    """
    labels = read_labels(read_text_file(Path(path)))
    logger.info("Read %d exported labels from %s", len(labels), path)
    return labels


class LabelLocator:
    """
    Finds the line a label is defined on.

    Label names are qualified the way the assembler does it: MODULE blocks
    prefix their labels, local labels ('.loop') are appended to the last
    non-local label and '@' labels ignore the module.
    """

    def __init__(self, lines: list[str]) -> None:
        """
        Args:
            lines: Logical source lines of the list file.
        """
        self.definitions: dict[str, int] = {}
        self._scan(lines)

    def _scan(self, lines: list[str]) -> None:
        modules: list[str] = []
        last_global = ""

        for index, text in enumerate(lines):
            code = strip_comment(text)

            module = MODULE_DIRECTIVE.match(code)
            if module:
                modules.append(module.group(1))
                last_global = ""
                continue
            if ENDMODULE_DIRECTIVE.match(code):
                if modules:
                    modules.pop()
                else:
                    logger.debug("ENDMODULE without MODULE at line %d", index)
                last_global = ""
                continue

            label, _ = split_label(code)
            if label is None:
                continue

            if label.startswith("."):
                prefix = last_global or ".".join(modules)
                name = f"{prefix}{label}" if prefix else label[1:]
            elif label.startswith("@"):
                name = label[1:]
                last_global = name
            else:
                name = ".".join([*modules, label])
                last_global = name

            self.definitions.setdefault(name, index)

    def locate(self, name: str) -> int:
        """Line index of the label definition, or NO_LINE."""
        return self.definitions.get(name, NO_LINE)

    def __len__(self) -> int:
        return len(self.definitions)
