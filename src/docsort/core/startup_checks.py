"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docsort.models import ALPHA, SOURCE

if TYPE_CHECKING:
    from docsort.core.config import AppSettings

log = logging.getLogger(__name__)

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"})


def validate_settings(settings: AppSettings) -> None:
    """Validate settings before sorting. Raises ValueError on fatal misconfig."""
    _check_notes_root(settings)
    _check_sort_order(settings)
    _check_log_level(settings)


def _check_notes_root(settings: AppSettings) -> None:
    """Reject a notes root that does not exist; every note file would fail."""
    root = settings.notes.root
    if root is not None and not root.is_dir():
        raise ValueError(
            f"DOCSORT_NOTES_ROOT={root} is not a directory. "
            "Point it at the folder holding TOC note files, or unset it."
        )


def _check_sort_order(settings: AppSettings) -> None:
    order = settings.ordering.sort_order
    if order not in (ALPHA, SOURCE):
        log.warning(
            "DOCSORT_ORDERING_SORT_ORDER=%r is not %r; sorting by source location.",
            order,
            ALPHA,
        )


def _check_log_level(settings: AppSettings) -> None:
    level = settings.observability.log_level.upper()
    if level not in _LOG_LEVELS:
        log.warning("Unknown log level %r; falling back to INFO.", settings.observability.log_level)
