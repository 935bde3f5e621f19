"""Shared pytest fixtures for DocLens tests."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

import pytest

from doclens.config import AppConfig


class FakeExtractor:
    """Stands in for PyMuPDF; returns canned text and counts calls."""

    def __init__(self, text: str = "", page_count: int = 1) -> None:
        self.text = text
        self.page_count = page_count
        self.calls = 0

    def extract_text(self, data: bytes) -> Tuple[str, int]:
        self.calls += 1
        return self.text, self.page_count


@pytest.fixture()
def docs_dir(tmp_path: Path) -> Path:
    root = tmp_path / "docs"
    (root / "csv").mkdir(parents=True)
    (root / "pdf").mkdir(parents=True)
    return root


@pytest.fixture()
def config(docs_dir: Path) -> AppConfig:
    return AppConfig(docs_dir=docs_dir)


@pytest.fixture()
def widget_csv(docs_dir: Path) -> Path:
    path = docs_dir / "csv" / "widgets.csv"
    path.write_text("name,size\nwidget,42\n", encoding="utf-8")
    return path


@pytest.fixture()
def extractor_factory():
    return FakeExtractor
