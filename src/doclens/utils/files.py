"""Utility helpers for working with files."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator

from doclens.errors import SecurityError, ValidationError

_DRIVE_PREFIX = re.compile(r"^[A-Za-z]:")


def validate_filename(filename: str) -> None:
    """Reject filenames that could escape their storage directory.

    Must run before any filesystem access or cache lookup.
    """
    if not filename:
        raise ValidationError("Filename cannot be empty")
    if ".." in filename or "/" in filename or "\\" in filename:
        raise SecurityError(
            f"Invalid filename: {filename}. Filename cannot contain path separators "
            "or parent directory references."
        )
    if _DRIVE_PREFIX.match(filename):
        raise SecurityError(f"Invalid filename: {filename}. Filename cannot be an absolute path.")


def iter_files_with_suffix(directory: Path, suffix: str) -> Iterator[Path]:
    """Yield regular files directly inside ``directory`` matching ``suffix``.

    A missing directory yields nothing.
    """
    if not directory.is_dir():
        return
    suffix = suffix.lower()
    for child in sorted(directory.iterdir()):
        if child.is_file() and child.suffix.lower() == suffix:
            yield child
