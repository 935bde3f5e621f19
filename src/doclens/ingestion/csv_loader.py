"""Flatten CSV records into searchable text."""

from __future__ import annotations

import logging
import re
from typing import List

from doclens.errors import ParseError

LOGGER = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")


def parse_csv_line(line: str, *, delimiter: str = ",") -> List[str]:
    """Split a single CSV line, honouring double-quoted fields.

    Inside quotes the delimiter is literal and ``""`` stands for one quote.
    Values are stripped of surrounding whitespace.
    """
    values: List[str] = []
    current: List[str] = []
    in_quotes = False
    i = 0
    while i < len(line):
        char = line[i]
        if char == '"':
            if in_quotes and i + 1 < len(line) and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            values.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1
    values.append("".join(current).strip())
    return values


def decode_bytes(raw: bytes) -> str:
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ParseError(f"CSV content is not valid UTF-8: {exc}") from exc


def normalize_tabular(raw: bytes, *, source: str = "<csv>") -> str:
    """Render every data row as ``header: value | ...`` separated by blank lines."""
    text = decode_bytes(raw)
    lines = [line for line in _LINE_BREAK.split(text) if line.strip()]
    if not lines:
        raise ParseError(f"CSV file is empty: {source}")

    headers = parse_csv_line(lines[0])
    width = len(headers)
    rows: List[str] = []
    for line_number, line in enumerate(lines[1:], start=2):
        values = parse_csv_line(line)
        if len(values) != width:
            LOGGER.warning(
                "%s: row %d has %d columns but expected %d; padding with empty values",
                source,
                line_number,
                len(values),
                width,
            )
        padded = (values + [""] * width)[:width]
        rows.append(" | ".join(f"{header}: {value}" for header, value in zip(headers, padded)))
    return "\n\n".join(rows)
