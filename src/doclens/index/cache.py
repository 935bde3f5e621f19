"""Process-lifetime cache of parsed documents."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from typing import Callable, Dict, List, Tuple

from doclens.models import Document, DocumentType, cache_key
from doclens.utils.files import validate_filename

LOGGER = logging.getLogger(__name__)

ParseFn = Callable[[str, DocumentType], Document]


class DocumentCache:
    """Memoizes parsed documents keyed by ``"{type}:{filename}"``.

    Entries live as long as the cache object and are never evicted. Concurrent
    first requests for the same key share a single parse; the parse itself runs
    outside the registry lock so unrelated keys never wait on each other's IO.
    A failed parse is not stored and the next request tries again.
    """

    def __init__(self, parse: ParseFn) -> None:
        self._parse = parse
        self._lock = threading.Lock()
        self._documents: Dict[str, Document] = {}
        self._inflight: Dict[str, Future] = {}

    def get_or_parse(self, filename: str, doc_type: DocumentType) -> Document:
        validate_filename(filename)
        key = cache_key(filename, doc_type)

        with self._lock:
            document = self._documents.get(key)
            if document is not None:
                return document
            pending = self._inflight.get(key)
            if pending is None:
                pending = Future()
                self._inflight[key] = pending
                owner = True
            else:
                owner = False

        if not owner:
            LOGGER.debug("Waiting for in-flight parse of %s", key)
            return pending.result()

        try:
            document = self._parse(filename, doc_type)
        except BaseException as exc:
            with self._lock:
                del self._inflight[key]
            pending.set_exception(exc)
            raise

        with self._lock:
            self._documents[key] = document
            del self._inflight[key]
        pending.set_result(document)
        return document

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._documents)

    def __contains__(self, item: Tuple[str, DocumentType]) -> bool:
        filename, doc_type = item
        with self._lock:
            return cache_key(filename, doc_type) in self._documents

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)
