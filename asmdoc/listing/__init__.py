"""List file and labels file access."""

from asmdoc.listing.base import ListingError
from asmdoc.listing.kinds import LabelKind, classify_label
from asmdoc.listing.labels import (
    ExportedLabel,
    LabelLocator,
    read_labels,
    read_labels_file,
)
from asmdoc.listing.listfile import NO_LINE, ListFile

__all__ = [
    "NO_LINE",
    "ExportedLabel",
    "LabelKind",
    "LabelLocator",
    "ListFile",
    "ListingError",
    "classify_label",
    "read_labels",
    "read_labels_file",
]
