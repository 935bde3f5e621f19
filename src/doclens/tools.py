"""User-facing operations that render engine output as text.

Every function returns a :class:`ToolResponse`; engine failures are rendered
into the response text instead of being raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from doclens.errors import DocLensError
from doclens.index.search import SearchEngine
from doclens.models import DocumentType

LOGGER = logging.getLogger(__name__)

PREVIEW_CHUNKS = 3


@dataclass(slots=True)
class ToolResponse:
    text: str
    is_error: bool = False


def _no_documents_message(engine: SearchEngine) -> str:
    return (
        "No documents found. Please add:\n"
        f"- CSV files to the '{engine.config.csv_dir}' directory\n"
        f"- PDF files to the '{engine.config.pdf_dir}' directory"
    )


def search_documentation(
    engine: SearchEngine,
    query: str,
    *,
    filename: Optional[str] = None,
    doc_type: Optional[DocumentType] = None,
    top_k: Optional[int] = None,
) -> ToolResponse:
    try:
        entries = engine.candidates(filename=filename, doc_type=doc_type)
        if not entries:
            return ToolResponse(_no_documents_message(engine))
        results = engine.search(
            query, filename=filename, doc_type=doc_type, top_k=top_k, entries=entries
        )
    except DocLensError as exc:
        LOGGER.error("Search failed: %s", exc)
        return ToolResponse(f"Error searching documentation: {exc}", is_error=True)

    if not results:
        return ToolResponse(f'No relevant results found for query: "{query}"')

    sections = [
        f"### Result {position} (from {result.filename} [{result.type.label}])\n\n{result.chunk_text}"
        for position, result in enumerate(results, start=1)
    ]
    return ToolResponse(
        f'# Search Results for: "{query}"\n\n'
        f"Found {len(results)} relevant section(s):\n\n" + "\n\n---\n\n".join(sections)
    )


def list_documents(engine: SearchEngine) -> ToolResponse:
    groups: List[str] = []
    for doc_type in DocumentType:
        names = engine.catalog.list_by_type(doc_type)
        if names:
            numbered = "\n".join(f"{index}. {name}" for index, name in enumerate(names, start=1))
            groups.append(f"## {doc_type.label} Files\n\n{numbered}")

    if not groups:
        return ToolResponse(_no_documents_message(engine))

    return ToolResponse(
        "# Available Documents\n\n"
        + "\n\n".join(groups)
        + "\n\n---\n\nUse `search_documentation` to search within these documents, "
        "or `get_document_content` with the filename and type to retrieve full content."
    )


def get_document_content(engine: SearchEngine, filename: str, doc_type: DocumentType) -> ToolResponse:
    try:
        document = engine.get_document(filename, doc_type)
    except DocLensError as exc:
        LOGGER.error("Unable to load %s: %s", filename, exc)
        return ToolResponse(f"Error retrieving document: {exc}", is_error=True)

    label = document.type.label
    return ToolResponse(
        f"# Document: {document.filename} [{label}]\n\n"
        f"**Type:** {label}\n"
        f"**Pages/Rows:** {document.page_count}\n"
        f"**Parsed at:** {document.parsed_at.isoformat()}\n\n"
        f"---\n\n{document.full_text}"
    )


def get_document_summary(engine: SearchEngine, filename: str, doc_type: DocumentType) -> ToolResponse:
    try:
        document = engine.get_document(filename, doc_type)
    except DocLensError as exc:
        LOGGER.error("Unable to summarize %s: %s", filename, exc)
        return ToolResponse(f"Error getting document summary: {exc}", is_error=True)

    preview = "\n\n".join(chunk.text for chunk in document.chunks[:PREVIEW_CHUNKS])
    return ToolResponse(
        f"# Document Summary: {document.filename}\n\n"
        f"**Type:** {document.type.label}\n"
        f"**Pages:** {document.page_count}\n"
        f"**Total chunks:** {len(document.chunks)}\n"
        f"**Character count:** {len(document.full_text)}\n\n"
        f"## Preview\n\n{preview}\n\n---\n\n"
        "*Use `get_document_content` to retrieve the full document or "
        "`search_documentation` to search for specific topics.*"
    )
