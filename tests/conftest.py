"""Shared fixtures for the converter tests."""

import pytest

from keyword_csv_converter.settings import get_settings


@pytest.fixture
def fresh_settings(monkeypatch, tmp_path):
    """Point settings at an isolated export dir and clear the settings cache around the test."""
    for name in ("HOST", "PORT", "DEFAULT_FILE_NAME", "LOG_LEVEL"):
        monkeypatch.delenv(f"KEYWORD_CSV_{name}", raising=False)
    monkeypatch.setenv("KEYWORD_CSV_EXPORT_DIR", str(tmp_path / "exports"))
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
