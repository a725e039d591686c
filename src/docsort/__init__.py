"""docsort: order documentation comments against a table of contents.

Usage::

    from docsort import Comment, SortOptions, sort_docs

    options = SortOptions(toc=[{"name": "Intro", "children": ["Foo"]}, "Bar"])
    ordered = sort_docs(comments, options)
"""

from __future__ import annotations

from docsort.core.config import AppSettings
from docsort.diagnostics import (
    CollectingReporter,
    ConsoleReporter,
    Diagnostic,
    DiagnosticCode,
    DiagnosticReporter,
    LoggingReporter,
)
from docsort.exceptions import (
    ConfigFileError,
    DocSortError,
    NoteFileError,
    TocConfigurationError,
)
from docsort.models import (
    Comment,
    CommentContext,
    PathSegment,
    SortOptions,
    TocEntry,
    TocNote,
    TocReference,
    parse_toc,
)
from docsort.ordering import (
    TocIndex,
    TocWalker,
    compare_by_name,
    compare_by_source_location,
    sort_comments,
    sort_docs,
)

__all__ = [
    "AppSettings",
    "Comment",
    "CommentContext",
    "PathSegment",
    "SortOptions",
    "TocEntry",
    "TocNote",
    "TocReference",
    "parse_toc",
    "TocIndex",
    "TocWalker",
    "sort_docs",
    "sort_comments",
    "compare_by_name",
    "compare_by_source_location",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticReporter",
    "CollectingReporter",
    "ConsoleReporter",
    "LoggingReporter",
    "DocSortError",
    "TocConfigurationError",
    "ConfigFileError",
    "NoteFileError",
]
