"""Structured diagnostics and the reporters that receive them."""

from __future__ import annotations

from docsort.diagnostics.models import (
    Diagnostic,
    DiagnosticCode,
    file_read_failure,
    unmatched_toc_entry,
)
from docsort.diagnostics.reporters import (
    CollectingReporter,
    ConsoleReporter,
    DiagnosticReporter,
    FanOutReporter,
    LoggingReporter,
)

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticReporter",
    "CollectingReporter",
    "ConsoleReporter",
    "FanOutReporter",
    "LoggingReporter",
    "file_read_failure",
    "unmatched_toc_entry",
]
