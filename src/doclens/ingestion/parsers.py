"""Turn stored files into immutable :class:`Document` objects."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Tuple

from doclens.config import AppConfig
from doclens.errors import DocLensError, ExtractionError, NotFoundError, ParseError
from doclens.ingestion.csv_loader import normalize_tabular
from doclens.ingestion.pdf_loader import PyMuPDFExtractor, TextExtractor
from doclens.models import Chunk, Document, DocumentType
from doclens.utils.files import validate_filename
from doclens.utils.text import chunk_text

LOGGER = logging.getLogger(__name__)

# Extraction gives no per-chunk page positions, so pages are approximated.
CHUNKS_PER_PAGE = 3


class DocumentParser(ABC):
    """Reads one kind of document from its storage directory."""

    doc_type: DocumentType

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @property
    def root(self) -> Path:
        return self.config.storage_dir(self.doc_type)

    def parse(self, filename: str) -> Document:
        validate_filename(filename)
        raw = self._read(filename)
        full_text, page_count = self._extract(filename, raw)
        pieces = chunk_text(
            full_text, max_chars=self.config.chunk_chars, overlap=self.config.overlap
        )
        chunks = tuple(
            Chunk(text=piece, page_number=self._page_for(index), index=index)
            for index, piece in enumerate(pieces)
        )
        LOGGER.info(
            "Parsed %s [%s]: %d chunks, %d pages",
            filename,
            self.doc_type.label,
            len(chunks),
            page_count,
        )
        return Document(
            filename=filename,
            type=self.doc_type,
            full_text=full_text,
            chunks=chunks,
            page_count=page_count,
            parsed_at=datetime.now(timezone.utc),
        )

    def _read(self, filename: str) -> bytes:
        path = self.root / filename
        if not self.root.is_dir() or not path.is_file():
            raise NotFoundError(
                f"{self.doc_type.label} file not found: {filename}. "
                f"Please ensure the file exists in the {self.root} directory."
            )
        try:
            return path.read_bytes()
        except FileNotFoundError as exc:
            raise NotFoundError(f"{self.doc_type.label} file not found: {filename}") from exc
        except OSError as exc:
            raise ParseError(f"Unable to read {filename}: {exc}") from exc

    @abstractmethod
    def _extract(self, filename: str, raw: bytes) -> Tuple[str, int]:
        """Return the normalized text and page count for ``raw``."""

    @abstractmethod
    def _page_for(self, chunk_index: int) -> int:
        """Approximate source page of the chunk at ``chunk_index``."""


class TabularParser(DocumentParser):
    """CSV files, treated as a single logical page."""

    doc_type = DocumentType.TABULAR

    def _extract(self, filename: str, raw: bytes) -> Tuple[str, int]:
        return normalize_tabular(raw, source=filename), 1

    def _page_for(self, chunk_index: int) -> int:
        return 1


class PaginatedParser(DocumentParser):
    """PDF files, text pulled out through a :class:`TextExtractor`."""

    doc_type = DocumentType.PAGINATED

    def __init__(self, config: AppConfig, extractor: TextExtractor | None = None) -> None:
        super().__init__(config)
        self.extractor = extractor or PyMuPDFExtractor()

    def _extract(self, filename: str, raw: bytes) -> Tuple[str, int]:
        try:
            return self.extractor.extract_text(raw)
        except DocLensError:
            raise
        except Exception as exc:
            raise ExtractionError(f"Failed to extract text from {filename}: {exc}") from exc

    def _page_for(self, chunk_index: int) -> int:
        return chunk_index // CHUNKS_PER_PAGE + 1


def parser_for(
    doc_type: DocumentType, config: AppConfig, *, extractor: TextExtractor | None = None
) -> DocumentParser:
    if doc_type is DocumentType.TABULAR:
        return TabularParser(config)
    return PaginatedParser(config, extractor)


class ParserRegistry:
    """One parser per document type, callable as the cache's parse function."""

    def __init__(self, config: AppConfig, *, extractor: TextExtractor | None = None) -> None:
        self._parsers = {
            doc_type: parser_for(doc_type, config, extractor=extractor)
            for doc_type in DocumentType
        }

    def __call__(self, filename: str, doc_type: DocumentType) -> Document:
        return self._parsers[doc_type].parse(filename)
