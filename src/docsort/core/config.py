"""Nested pydantic-settings configuration for docsort.

Each sub-config reads its own ``DOCSORT_<GROUP>_*`` env vars::

    export DOCSORT_ORDERING_SORT_ORDER=alpha
    export DOCSORT_NOTES_ROOT=./docs
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from docsort.models import SOURCE


class OrderingConfig(BaseSettings):
    """Fallback ordering used when a config file does not set ``sortOrder``.

    Env vars use ``DOCSORT_ORDERING_`` prefix.
    """

    model_config = {"env_prefix": "DOCSORT_ORDERING_"}

    sort_order: str = SOURCE


class NotesConfig(BaseSettings):
    """Where TOC note files are read from.

    Env vars use ``DOCSORT_NOTES_`` prefix.  ``root`` defaults to the process
    working directory.
    """

    model_config = {"env_prefix": "DOCSORT_NOTES_"}

    root: Optional[Path] = None
    encoding: str = "utf-8"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``DOCSORT_OBSERVABILITY_`` prefix.  ``json_logs`` left unset
    renders JSON only when stderr is not a terminal.
    """

    model_config = {"env_prefix": "DOCSORT_OBSERVABILITY_"}

    log_level: str = "INFO"
    json_logs: Optional[bool] = None


class AppSettings(BaseSettings):
    """Top-level settings aggregating all sub-configs."""

    ordering: OrderingConfig = Field(default_factory=OrderingConfig)
    notes: NotesConfig = Field(default_factory=NotesConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
