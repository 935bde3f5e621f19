"""Tests for core data models."""

from __future__ import annotations

import dataclasses
from datetime import datetime, timezone

import pytest

from doclens.models import Chunk, Document, DocumentType, SearchResult, cache_key


class TestDocumentType:
    """Test DocumentType enum."""

    def test_extensions_and_labels(self) -> None:
        assert DocumentType.TABULAR.extension == ".csv"
        assert DocumentType.PAGINATED.extension == ".pdf"
        assert DocumentType.TABULAR.label == "CSV"
        assert DocumentType.PAGINATED.label == "PDF"

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("csv", DocumentType.TABULAR),
            ("PDF", DocumentType.PAGINATED),
            ("tabular", DocumentType.TABULAR),
            (DocumentType.PAGINATED, DocumentType.PAGINATED),
        ],
    )
    def test_parse(self, value: str, expected: DocumentType) -> None:
        assert DocumentType.parse(value) is expected

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValueError):
            DocumentType.parse("docx")


class TestDocument:
    """Test Document dataclass."""

    def _document(self) -> Document:
        return Document(
            filename="guide.pdf",
            type=DocumentType.PAGINATED,
            full_text="Hello.",
            chunks=(Chunk(text="Hello.", page_number=1, index=0),),
            page_count=1,
            parsed_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )

    def test_document_is_immutable(self) -> None:
        """Documents cannot be mutated after construction."""
        document = self._document()
        with pytest.raises(dataclasses.FrozenInstanceError):
            document.full_text = "changed"  # type: ignore[misc]

    def test_cache_key(self) -> None:
        assert cache_key("guide.pdf", DocumentType.PAGINATED) == "paginated:guide.pdf"
        assert cache_key("a.csv", DocumentType.TABULAR) == "tabular:a.csv"


class TestSearchResult:
    """Test SearchResult dataclass."""

    def test_chunk_text(self) -> None:
        chunk = Chunk(text="name: widget | size: 42", page_number=1, index=0)
        result = SearchResult(filename="w.csv", type=DocumentType.TABULAR, chunk=chunk, score=3)

        assert result.chunk_text == "name: widget | size: 42"
