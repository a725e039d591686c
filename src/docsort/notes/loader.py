"""Filesystem access for TOC notes backed by a ``file`` field."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from docsort.exceptions import NoteFileError


def resolve_note_path(file: str, cwd: Optional[Path] = None) -> Path:
    """Return *file* as an absolute path, relative to *cwd* when not absolute."""
    path = Path(file)
    if path.is_absolute():
        return path
    return (cwd or Path.cwd()) / path


def read_note_file(path: Path, encoding: str = "utf-8") -> str:
    """Read a note file.  Undecodable bytes are replaced rather than rejected."""
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise NoteFileError(f"Failed to read file {path}: {exc}", path=str(path)) from exc
    return data.decode(encoding, errors="replace")
