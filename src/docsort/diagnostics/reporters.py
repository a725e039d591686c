"""Diagnostic reporters: sinks that receive warnings from the sorter.

The sorter never writes to a stream directly; it hands each ``Diagnostic`` to
an injected reporter.  ``LoggingReporter`` is the default.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Protocol, runtime_checkable

from rich.console import Console

from docsort.diagnostics.models import Diagnostic, DiagnosticCode

log = logging.getLogger(__name__)


@runtime_checkable
class DiagnosticReporter(Protocol):
    """Protocol for diagnostic sinks."""

    def report(self, diagnostic: Diagnostic) -> None:
        """Record a diagnostic.  Must not raise."""
        ...


class LoggingReporter:
    """Logs each diagnostic as a warning through the package logger."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or log

    def report(self, diagnostic: Diagnostic) -> None:
        self._log.warning(
            diagnostic.message,
            extra={"code": diagnostic.code.value, "subject": diagnostic.subject},
        )


class CollectingReporter:
    """Keeps diagnostics in memory, in the order they were reported."""

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def by_code(self, code: DiagnosticCode) -> list[Diagnostic]:
        """Return the collected diagnostics with the given code."""
        return [d for d in self.diagnostics if d.code == code]

    @property
    def messages(self) -> list[str]:
        return [d.message for d in self.diagnostics]

    def __len__(self) -> int:
        return len(self.diagnostics)


class ConsoleReporter:
    """Prints diagnostics in red on stderr, one per line."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self._console = console or Console(stderr=True)

    def report(self, diagnostic: Diagnostic) -> None:
        self._console.print(diagnostic.message, style="red", markup=False, highlight=False)


class FanOutReporter:
    """Forwards every diagnostic to several reporters."""

    def __init__(self, reporters: Iterable[DiagnosticReporter]) -> None:
        self._reporters = list(reporters)

    def report(self, diagnostic: Diagnostic) -> None:
        for reporter in self._reporters:
            reporter.report(diagnostic)
