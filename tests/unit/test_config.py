"""Tests for nested settings and startup checks."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from docsort.core.config import AppSettings, NotesConfig, ObservabilityConfig, OrderingConfig
from docsort.core.startup_checks import validate_settings


class TestAppSettings:
    def test_defaults(self) -> None:
        settings = AppSettings()
        assert settings.ordering.sort_order == "source"
        assert settings.notes.root is None
        assert settings.notes.encoding == "utf-8"
        assert settings.observability.log_level == "INFO"
        assert settings.observability.json_logs is None

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("DOCSORT_ORDERING_SORT_ORDER", "alpha")
        monkeypatch.setenv("DOCSORT_NOTES_ROOT", str(tmp_path))
        monkeypatch.setenv("DOCSORT_OBSERVABILITY_JSON_LOGS", "true")
        settings = AppSettings()
        assert settings.ordering.sort_order == "alpha"
        assert settings.notes.root == tmp_path
        assert settings.observability.json_logs is True

    def test_sub_configs_standalone(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DOCSORT_NOTES_ENCODING", "latin-1")
        assert NotesConfig().encoding == "latin-1"
        assert OrderingConfig(sort_order="alpha").sort_order == "alpha"
        assert ObservabilityConfig(log_level="DEBUG").log_level == "DEBUG"


class TestValidateSettings:
    def test_defaults_pass(self) -> None:
        validate_settings(AppSettings())

    def test_existing_notes_root(self, tmp_path: Path) -> None:
        validate_settings(AppSettings(notes=NotesConfig(root=tmp_path)))

    def test_missing_notes_root(self, tmp_path: Path) -> None:
        settings = AppSettings(notes=NotesConfig(root=tmp_path / "missing"))
        with pytest.raises(ValueError, match="DOCSORT_NOTES_ROOT"):
            validate_settings(settings)

    def test_unknown_sort_order_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        settings = AppSettings(ordering=OrderingConfig(sort_order="chronological"))
        with caplog.at_level(logging.WARNING, logger="docsort"):
            validate_settings(settings)
        assert any("chronological" in r.getMessage() for r in caplog.records)

    def test_unknown_log_level_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        settings = AppSettings(observability=ObservabilityConfig(log_level="chatty"))
        with caplog.at_level(logging.WARNING, logger="docsort"):
            validate_settings(settings)
        assert any("chatty" in r.getMessage() for r in caplog.records)
