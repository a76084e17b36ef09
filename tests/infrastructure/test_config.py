"""Tests for environment-driven configuration."""

from pathlib import Path

import pytest

from catalog.infrastructure.config import CatalogConfig


class TestCatalogConfig:

    def test_defaults(self, monkeypatch):
        for name in ("CATALOG_DATA_DIR", "CATALOG_LOG_LEVEL", "CATALOG_DEFAULT_CURRENCY"):
            monkeypatch.delenv(name, raising=False)
        config = CatalogConfig.from_env()
        assert config.data_dir == Path("data")
        assert config.log_level == "WARNING"
        assert config.default_currency == "USD"
        assert config.products_file == Path("data") / "products.json"

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CATALOG_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("CATALOG_LOG_LEVEL", "debug")
        monkeypatch.setenv("CATALOG_DEFAULT_CURRENCY", "eur")
        config = CatalogConfig.from_env()
        assert config.data_dir == tmp_path
        assert config.log_level == "DEBUG"
        assert config.default_currency == "EUR"

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("CATALOG_LOG_LEVEL", "chatty")
        with pytest.raises(ValueError, match="Unknown log level"):
            CatalogConfig.from_env()
