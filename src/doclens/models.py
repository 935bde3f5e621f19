"""Core DocLens data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Tuple


class DocumentType(str, Enum):
    """Kinds of source documents the engine knows how to parse."""

    TABULAR = "tabular"
    PAGINATED = "paginated"

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]

    @property
    def label(self) -> str:
        """Short upper-case label used when rendering results."""
        return self.extension.lstrip(".").upper()

    @classmethod
    def parse(cls, value: str | DocumentType) -> DocumentType:
        """Accept enum values as well as the ``csv``/``pdf`` aliases."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key in _ALIASES:
            return _ALIASES[key]
        return cls(key)


_EXTENSIONS = {
    DocumentType.TABULAR: ".csv",
    DocumentType.PAGINATED: ".pdf",
}

_ALIASES = {
    "csv": DocumentType.TABULAR,
    "pdf": DocumentType.PAGINATED,
}


@dataclass(frozen=True, slots=True)
class Chunk:
    """Slice of a document's normalized text."""

    text: str
    page_number: int
    index: int


@dataclass(frozen=True, slots=True)
class Document:
    """Parsed document owning its chunk sequence."""

    filename: str
    type: DocumentType
    full_text: str
    chunks: Tuple[Chunk, ...]
    page_count: int
    parsed_at: datetime


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    filename: str
    type: DocumentType


@dataclass(slots=True)
class SearchResult:
    """Chunk paired with the identity of the document it came from."""

    filename: str
    type: DocumentType
    chunk: Chunk
    score: int

    @property
    def chunk_text(self) -> str:
        return self.chunk.text


def cache_key(filename: str, doc_type: DocumentType) -> str:
    return f"{doc_type.value}:{filename}"
