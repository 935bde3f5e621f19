"""PDF text extraction.

Uses PyMuPDF (fitz) for fast PDF text extraction.
"""

from __future__ import annotations

import logging
from typing import Protocol, Tuple

import fitz  # PyMuPDF

from doclens.errors import ExtractionError
from doclens.utils.text import normalize_whitespace

LOGGER = logging.getLogger(__name__)


class TextExtractor(Protocol):
    """Turns page-structured binary documents into plain text."""

    def extract_text(self, data: bytes) -> Tuple[str, int]:
        """Return ``(text, page_count)`` for the given document bytes."""
        ...


class PyMuPDFExtractor:
    """Default extractor backed by PyMuPDF."""

    def extract_text(self, data: bytes) -> Tuple[str, int]:
        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except Exception as exc:
            raise ExtractionError(f"Unable to open PDF: {exc}") from exc

        try:
            pages = []
            for index in range(len(doc)):
                try:
                    text = doc[index].get_text() or ""
                except Exception as exc:
                    raise ExtractionError(f"Failed to read page {index + 1}: {exc}") from exc
                normalized = normalize_whitespace(text.splitlines())
                if normalized:
                    pages.append(normalized)
            page_count = len(doc)
        finally:
            doc.close()

        LOGGER.debug("Extracted %d pages from PDF", page_count)
        return "\n".join(pages), page_count
