"""Structured diagnostics emitted while ordering documentation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DiagnosticCode(str, Enum):
    """Kind of a non-fatal problem found during a sort."""

    FILE_READ_FAILURE = "file_read_failure"
    UNMATCHED_TOC_ENTRY = "unmatched_toc_entry"


@dataclass(frozen=True)
class Diagnostic:
    """A single warning about the TOC or its note files.

    ``subject`` is the resolved file path for read failures and the TOC name
    for unmatched entries.
    """

    code: DiagnosticCode
    message: str
    subject: str = ""


def file_read_failure(path: str) -> Diagnostic:
    return Diagnostic(
        code=DiagnosticCode.FILE_READ_FAILURE,
        message=f"Failed to read file {path}",
        subject=path,
    )


def unmatched_toc_entry(name: str) -> Diagnostic:
    return Diagnostic(
        code=DiagnosticCode.UNMATCHED_TOC_ENTRY,
        message=(
            f"Table of contents defined sorting of {name} "
            "but no documentation with that namepath was found"
        ),
        subject=name,
    )
