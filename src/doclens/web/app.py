"""FastAPI application exposing the DocLens engine over HTTP."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, List

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from doclens import __version__
from doclens.config import AppConfig
from doclens.errors import DocLensError, NotFoundError, ValidationError
from doclens.index.search import SearchEngine
from doclens.models import Document, DocumentType, SearchResult
from doclens.tools import PREVIEW_CHUNKS

LOGGER = logging.getLogger(__name__)

MAX_TOP_K = 50

app = FastAPI(title="DocLens", version=__version__)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

_engine: SearchEngine | None = None


class SearchPayload(BaseModel):
    query: str
    filename: str | None = None
    type: str | None = None
    top_k: int = 5


class ResultModel(BaseModel):
    filename: str
    type: DocumentType
    chunk_text: str
    page_number: int
    score: int


def configure(config: AppConfig) -> SearchEngine:
    """Replace the process-wide engine, e.g. when the CLI picks a docs dir."""
    global _engine
    _engine = SearchEngine(config)
    return _engine


def get_engine() -> SearchEngine:
    global _engine
    if _engine is None:
        _engine = SearchEngine(AppConfig())
    return _engine


def _to_http_error(exc: DocLensError) -> HTTPException:
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=400, detail=str(exc))
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=404, detail=str(exc))
    return HTTPException(status_code=422, detail=str(exc))


def _parse_type(value: str | None) -> DocumentType | None:
    if value is None:
        return None
    try:
        return DocumentType.parse(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unknown document type: {value}")


def _result_model(result: SearchResult) -> ResultModel:
    return ResultModel(
        filename=result.filename,
        type=result.type,
        chunk_text=result.chunk_text,
        page_number=result.chunk.page_number,
        score=result.score,
    )


def _describe(document: Document) -> dict[str, Any]:
    return {
        "filename": document.filename,
        "type": document.type.value,
        "page_count": document.page_count,
        "chunk_count": len(document.chunks),
        "character_count": len(document.full_text),
        "parsed_at": document.parsed_at.isoformat(),
    }


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.post("/search")
async def search_documents(
    payload: SearchPayload, engine: SearchEngine = Depends(get_engine)
) -> dict[str, Any]:
    doc_type = _parse_type(payload.type)
    top_k = max(1, min(payload.top_k, MAX_TOP_K))

    def run() -> tuple[bool, List[SearchResult]]:
        entries = engine.candidates(filename=payload.filename, doc_type=doc_type)
        if not entries:
            return False, []
        return True, engine.search(
            payload.query,
            filename=payload.filename,
            doc_type=doc_type,
            top_k=top_k,
            entries=entries,
        )

    try:
        has_documents, results = await asyncio.to_thread(run)
    except DocLensError as exc:
        raise _to_http_error(exc) from exc

    if not has_documents:
        return {"results": [], "message": "No documents found"}
    if not results:
        return {"results": [], "message": f'No relevant results found for query: "{payload.query}"'}
    return {"results": [_result_model(result) for result in results]}


@app.get("/documents")
async def list_documents(engine: SearchEngine = Depends(get_engine)) -> dict[str, Any]:
    """List documents available in the storage directories."""
    entries = await asyncio.to_thread(engine.catalog.list_all)
    documents = [{"filename": entry.filename, "type": entry.type.value} for entry in entries]
    if not documents:
        return {"documents": [], "message": "No documents found"}
    return {"documents": documents}


@app.get("/documents/{doc_type}/{filename}")
async def get_document(
    doc_type: str, filename: str, engine: SearchEngine = Depends(get_engine)
) -> dict[str, Any]:
    kind = _parse_type(doc_type)
    try:
        document = await asyncio.to_thread(engine.get_document, filename, kind)
    except DocLensError as exc:
        raise _to_http_error(exc) from exc
    return {**_describe(document), "text": document.full_text}


@app.get("/documents/{doc_type}/{filename}/summary")
async def get_document_summary(
    doc_type: str, filename: str, engine: SearchEngine = Depends(get_engine)
) -> dict[str, Any]:
    kind = _parse_type(doc_type)
    try:
        document = await asyncio.to_thread(engine.get_document, filename, kind)
    except DocLensError as exc:
        raise _to_http_error(exc) from exc
    preview = [chunk.text for chunk in document.chunks[:PREVIEW_CHUNKS]]
    return {**_describe(document), "preview": preview}
