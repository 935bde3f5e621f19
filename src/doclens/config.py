"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from doclens.models import DocumentType

DOCS_DIR_ENV = "DOCLENS_DOCS_DIR"


def _get_default_docs_dir() -> Path:
    """Docs directory from the environment, falling back to ./docs."""
    env_dir = os.environ.get(DOCS_DIR_ENV)
    if env_dir:
        return Path(env_dir).expanduser()
    return Path("docs")


@dataclass(slots=True)
class AppConfig:
    docs_dir: Path | None = None
    chunk_chars: int = 1000
    overlap: int = 200
    top_k: int = 5

    def __post_init__(self) -> None:
        if self.docs_dir is None:
            self.docs_dir = _get_default_docs_dir()
        self.docs_dir = Path(self.docs_dir)

    @property
    def csv_dir(self) -> Path:
        return self.storage_dir(DocumentType.TABULAR)

    @property
    def pdf_dir(self) -> Path:
        return self.storage_dir(DocumentType.PAGINATED)

    def storage_dir(self, doc_type: DocumentType) -> Path:
        """Directory holding documents of the given type."""
        return Path(self.docs_dir) / doc_type.extension.lstrip(".")

    def resolve_docs_dir(self, base_dir: Path | None = None) -> Path:
        docs_dir = Path(self.docs_dir)
        if docs_dir.is_absolute() or base_dir is None:
            return docs_dir
        return base_dir / docs_dir
