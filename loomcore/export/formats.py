"""Export and import file formats."""

from __future__ import annotations

import enum
import os
from collections.abc import Sequence
from pathlib import Path


class ExportFormat(enum.Enum):
    """Supported file formats."""

    LDIF = "ldif"
    JSON = "json"
    CSV = "csv"
    XLSX = "xlsx"

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> ExportFormat | None:
        """Infer the format from a file extension, ignoring case."""
        extension = Path(path).suffix[1:].lower()
        return _EXTENSIONS.get(extension)


_EXTENSIONS = {
    "ldif": ExportFormat.LDIF,
    "ldf": ExportFormat.LDIF,
    "json": ExportFormat.JSON,
    "csv": ExportFormat.CSV,
    "xlsx": ExportFormat.XLSX,
    "xls": ExportFormat.XLSX,
}


def requested_attrs(attributes: Sequence[str]) -> Sequence[str] | None:
    """None when only ``"*"`` is requested (all attributes), else the list."""
    if len(attributes) == 1 and attributes[0] == "*":
        return None
    return attributes