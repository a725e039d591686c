"""TocWalker: assigns order indices and paths from a table of contents.

The walk is pre-order, depth-first and left-to-right.  A running counter hands
out indices at visit time, so a note always precedes its children and its
children precede the note's later siblings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional, Sequence

from docsort.diagnostics import DiagnosticReporter, LoggingReporter, file_read_failure
from docsort.exceptions import NoteFileError
from docsort.models import (
    NOTE_KIND,
    STATIC_SCOPE,
    PathSegment,
    TocEntry,
    TocNote,
    TocReference,
)
from docsort.notes import read_note_file, render_markdown, resolve_note_path

log = logging.getLogger(__name__)


@dataclass
class TocIndex:
    """Lookup tables produced by one walk of a table of contents."""

    order: dict[str, int] = field(default_factory=dict)
    paths: dict[str, list[PathSegment]] = field(default_factory=dict)
    pending: dict[str, bool] = field(default_factory=dict)
    notes: list[TocNote] = field(default_factory=list)

    def index_of(self, name: Optional[str]) -> Optional[int]:
        """Return the order index for *name*, or None when it is not in the TOC."""
        if name is None:
            return None
        return self.order.get(name)

    def unmatched(self) -> list[str]:
        """TOC references that no top-level comment claimed, in TOC order."""
        return [name for name, matched in self.pending.items() if not matched]


class TocWalker:
    """Walks a TOC, loading and rendering note descriptions along the way."""

    def __init__(
        self,
        *,
        reader: Callable[[Path], str] = read_note_file,
        renderer: Callable[[str], Any] = render_markdown,
        reporter: Optional[DiagnosticReporter] = None,
        cwd: Optional[Path] = None,
    ) -> None:
        self._reader = reader
        self._renderer = renderer
        self._reporter = reporter if reporter is not None else LoggingReporter()
        self._cwd = cwd

    def walk(self, toc: Sequence[TocEntry]) -> TocIndex:
        """Traverse *toc* once and return its index, path and note tables."""
        index = TocIndex()
        counter = 0

        def visit(entry: TocEntry, parent: list[PathSegment]) -> None:
            nonlocal counter
            if isinstance(entry, TocNote):
                entry.kind = NOTE_KIND
                index.order[entry.name] = counter
                counter += 1
                self._load_description(entry)
                entry.path = [*parent, PathSegment(scope=STATIC_SCOPE, name=entry.name)]
                for child in entry.children:
                    visit(child, entry.path)
                index.notes.append(entry)
            elif isinstance(entry, TocReference):
                index.order[entry.name] = counter
                counter += 1
                index.pending[entry.name] = False
                index.paths[entry.name] = [
                    *parent,
                    PathSegment(scope=STATIC_SCOPE, name=entry.name, toc=True),
                ]
            else:
                raise TypeError(f"Unsupported TOC entry: {entry!r}")

        for entry in toc:
            visit(entry, [])

        log.debug(
            "Walked TOC: %d entries, %d notes, %d references",
            counter,
            len(index.notes),
            len(index.pending),
        )
        return index

    def _load_description(self, note: TocNote) -> None:
        """Fill in and render the description of *note*.

        A ``file`` is read relative to the working directory and then removed
        from the note.  Unreadable files are reported and leave the previous
        description in place.
        """
        if isinstance(note.file, str):
            path = resolve_note_path(note.file, self._cwd)
            try:
                note.description = self._reader(path)
                note.file = None
            except (NoteFileError, OSError):
                log.debug("Note file %s for %r could not be read", path, note.name)
                self._reporter.report(file_read_failure(str(path)))
        elif not note.description:
            note.description = ""

        if isinstance(note.description, str):
            note.description = self._renderer(note.description)
