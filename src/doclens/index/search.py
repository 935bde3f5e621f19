"""Keyword relevance search over cached documents."""

from __future__ import annotations

import logging
from typing import List, Sequence

from doclens.config import AppConfig
from doclens.errors import DocLensError, NotFoundError
from doclens.index.cache import DocumentCache
from doclens.index.catalog import Catalog
from doclens.ingestion.parsers import ParserRegistry
from doclens.models import CatalogEntry, Document, DocumentType, SearchResult
from doclens.utils.files import validate_filename

LOGGER = logging.getLogger(__name__)

MIN_TERM_LENGTH = 3
EXACT_PHRASE_BONUS = 10


def query_terms(query: str) -> List[str]:
    """Lower-cased query words, ignoring words of two characters or fewer."""
    return [term for term in query.lower().split() if len(term) >= MIN_TERM_LENGTH]


def score_chunk(text: str, query: str) -> int:
    """Count query term occurrences, plus a bonus for the whole query verbatim."""
    content = text.lower()
    score = sum(content.count(term) for term in query_terms(query))
    phrase = query.lower().strip()
    if phrase and phrase in content:
        score += EXACT_PHRASE_BONUS
    return score


def rank(documents: Sequence[Document], query: str, *, top_k: int = 5) -> List[SearchResult]:
    """Score every chunk of ``documents`` and keep the ``top_k`` best.

    Zero-score chunks are dropped. Equal scores keep the order in which the
    chunks were produced (documents in the given order, chunks by index).
    """
    if not query.strip() or top_k <= 0:
        return []

    results: List[SearchResult] = []
    for document in documents:
        for chunk in document.chunks:
            score = score_chunk(chunk.text, query)
            if score > 0:
                results.append(
                    SearchResult(
                        filename=document.filename,
                        type=document.type,
                        chunk=chunk,
                        score=score,
                    )
                )
    results.sort(key=lambda result: result.score, reverse=True)
    return results[:top_k]


class SearchEngine:
    """High-level API resolving candidates, parsing through the cache and ranking."""

    def __init__(
        self,
        config: AppConfig,
        *,
        cache: DocumentCache | None = None,
        catalog: Catalog | None = None,
    ) -> None:
        self.config = config
        self.cache = cache if cache is not None else DocumentCache(ParserRegistry(config))
        self.catalog = catalog if catalog is not None else Catalog(config)

    def candidates(
        self, *, filename: str | None = None, doc_type: DocumentType | None = None
    ) -> List[CatalogEntry]:
        if filename and doc_type is not None:
            return [CatalogEntry(filename=filename, type=doc_type)]
        if filename:
            # No type given: look for the file under every storage directory.
            validate_filename(filename)
            entries = [
                CatalogEntry(filename=filename, type=kind)
                for kind in DocumentType
                if self.catalog.contains(filename, kind)
            ]
            if not entries:
                raise NotFoundError(f"Document not found: {filename}")
            return entries
        if doc_type is not None:
            return [
                CatalogEntry(filename=name, type=doc_type)
                for name in self.catalog.list_by_type(doc_type)
            ]
        return self.catalog.list_all()

    def search(
        self,
        query: str,
        *,
        filename: str | None = None,
        doc_type: DocumentType | None = None,
        top_k: int | None = None,
        entries: Sequence[CatalogEntry] | None = None,
    ) -> List[SearchResult]:
        """Rank chunks of the candidate documents against ``query``.

        Callers that already resolved ``entries`` through :meth:`candidates`
        pass them in so the storage directories are listed only once.
        """
        if entries is None:
            entries = self.candidates(filename=filename, doc_type=doc_type)
        limit = self.config.top_k if top_k is None else top_k
        if filename:
            # An explicitly named document must not fail silently.
            documents = [self.cache.get_or_parse(entry.filename, entry.type) for entry in entries]
        else:
            documents = self._load_many(entries)
        results = rank(documents, query, top_k=limit)
        LOGGER.debug(
            "Query %r matched %d chunks across %d documents", query, len(results), len(documents)
        )
        return results

    def get_document(self, filename: str, doc_type: DocumentType) -> Document:
        return self.cache.get_or_parse(filename, doc_type)

    def _load_many(self, entries: Sequence[CatalogEntry]) -> List[Document]:
        documents: List[Document] = []
        for entry in entries:
            try:
                documents.append(self.cache.get_or_parse(entry.filename, entry.type))
            except DocLensError as exc:
                LOGGER.error("Error processing %s: %s", entry.filename, exc)
        return documents
