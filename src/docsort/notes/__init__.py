"""Note collaborators: file loading and markdown rendering."""

from __future__ import annotations

from docsort.notes.loader import read_note_file, resolve_note_path
from docsort.notes.markdown import RenderedMarkdown, render_markdown

__all__ = [
    "RenderedMarkdown",
    "read_note_file",
    "render_markdown",
    "resolve_note_path",
]
