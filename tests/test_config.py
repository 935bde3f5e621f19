"""Tests for application configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from doclens.config import DOCS_DIR_ENV, AppConfig
from doclens.models import DocumentType


class TestAppConfig:
    """Test AppConfig dataclass."""

    def test_default_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should create config with default values."""
        monkeypatch.delenv(DOCS_DIR_ENV, raising=False)
        config = AppConfig()

        assert config.docs_dir == Path("docs")
        assert config.chunk_chars == 1000
        assert config.overlap == 200
        assert config.top_k == 5

    def test_docs_dir_from_environment(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """Should read the docs directory from the environment."""
        monkeypatch.setenv(DOCS_DIR_ENV, str(tmp_path))

        assert AppConfig().docs_dir == tmp_path

    def test_custom_config(self) -> None:
        """Should create config with custom values."""
        config = AppConfig(docs_dir=Path("/custom/docs"), chunk_chars=800, overlap=100, top_k=3)

        assert config.docs_dir == Path("/custom/docs")
        assert config.chunk_chars == 800
        assert config.overlap == 100
        assert config.top_k == 3

    def test_storage_dirs(self) -> None:
        """Each document type has its own directory."""
        config = AppConfig(docs_dir=Path("/data"))

        assert config.csv_dir == Path("/data/csv")
        assert config.pdf_dir == Path("/data/pdf")
        assert config.storage_dir(DocumentType.TABULAR) == config.csv_dir

    def test_resolve_docs_dir_absolute(self) -> None:
        """Should return absolute path as-is."""
        config = AppConfig(docs_dir=Path("/absolute/docs"))

        assert config.resolve_docs_dir(Path("/base")) == Path("/absolute/docs")

    def test_resolve_docs_dir_relative_with_base(self) -> None:
        """Should resolve relative path against base_dir."""
        config = AppConfig(docs_dir=Path("relative/docs"))

        assert config.resolve_docs_dir(Path("/base")) == Path("/base/relative/docs")
        assert config.resolve_docs_dir(None) == Path("relative/docs")
