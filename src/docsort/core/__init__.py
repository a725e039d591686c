"""Settings, logging setup and startup checks."""

from __future__ import annotations

from docsort.core.config import AppSettings, NotesConfig, ObservabilityConfig, OrderingConfig
from docsort.core.logging_config import setup_logging
from docsort.core.startup_checks import validate_settings

__all__ = [
    "AppSettings",
    "NotesConfig",
    "ObservabilityConfig",
    "OrderingConfig",
    "setup_logging",
    "validate_settings",
]
