"""Enumerate documents available in the storage directories."""

from __future__ import annotations

from typing import List

from doclens.config import AppConfig
from doclens.models import CatalogEntry, DocumentType
from doclens.utils.files import iter_files_with_suffix


class Catalog:
    """Lists storage directories afresh on every call."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def list_by_type(self, doc_type: DocumentType) -> List[str]:
        directory = self.config.storage_dir(doc_type)
        return [path.name for path in iter_files_with_suffix(directory, doc_type.extension)]

    def list_all(self) -> List[CatalogEntry]:
        return [
            CatalogEntry(filename=filename, type=doc_type)
            for doc_type in DocumentType
            for filename in self.list_by_type(doc_type)
        ]

    def contains(self, filename: str, doc_type: DocumentType) -> bool:
        return (self.config.storage_dir(doc_type) / filename).is_file()
