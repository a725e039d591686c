"""Pydantic data models for docsort.

``Comment`` is the documentation entry produced by an upstream extraction
pipeline.  Entries are mutated in place while sorting (``path``, ``kind`` and
``description`` are written), so callers must not assume immutability.

A table of contents is a list of ``TocEntry`` values: either a bare
``TocReference`` naming an existing comment, or a ``TocNote`` that carries its
own documentation and may nest further entries.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from docsort.exceptions import TocConfigurationError

NOTE_KIND = "note"
STATIC_SCOPE = "static"

# Sort orders understood by the fallback comparator.  Anything other than
# ``alpha`` sorts by source location.
ALPHA = "alpha"
SOURCE = "source"


# ── Comment models ───────────────────────────────────────────────────


class PathSegment(BaseModel):
    """One step of a comment's hierarchical location."""

    scope: str = STATIC_SCOPE
    name: str
    toc: Optional[bool] = None


class CommentContext(BaseModel):
    """Source context of a comment."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    sort_key: str = Field(default="", alias="sortKey")


class Comment(BaseModel):
    """A documentation entry extracted from a source annotation."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: Optional[str] = None
    memberof: Optional[str] = None
    kind: Optional[str] = None
    description: Any = None
    path: list[PathSegment] = Field(default_factory=list)
    context: CommentContext = Field(default_factory=CommentContext)

    @property
    def is_top_level(self) -> bool:
        """True when the comment is not a member of another documented entity."""
        return not self.memberof

    @property
    def is_note(self) -> bool:
        return self.kind == NOTE_KIND


# ── Table of contents ────────────────────────────────────────────────


class TocReference(BaseModel):
    """A bare TOC name pinning the top-level comment with the same name."""

    model_config = ConfigDict(frozen=True)

    name: str


class TocNote(Comment):
    """An inline note authored in the TOC rather than extracted from source."""

    name: str
    file: Any = None
    children: list[TocEntry] = Field(default_factory=list)

    @field_validator("children", mode="before")
    @classmethod
    def _parse_children(cls, value: Any) -> Any:
        if value is None:
            return []
        return parse_toc(value)


TocEntry = Union[TocReference, TocNote]

TocNote.model_rebuild()


def parse_toc_entry(raw: Any) -> TocEntry:
    """Resolve one raw TOC value into its tagged variant.

    Strings become ``TocReference``; mappings with a non-empty ``name`` become
    ``TocNote``.  Anything else raises ``TocConfigurationError``.
    """
    if isinstance(raw, (TocReference, TocNote)):
        return raw
    if isinstance(raw, str):
        return TocReference(name=raw)
    if isinstance(raw, Mapping):
        name = raw.get("name")
        if isinstance(name, str) and name:
            try:
                return TocNote.model_validate(dict(raw))
            except ValidationError as exc:
                raise TocConfigurationError(
                    f"Invalid TOC note {name!r}: {exc}", entry=raw
                ) from exc
        raise TocConfigurationError(
            f"TOC entry must have a non-empty string 'name', got {name!r}", entry=raw
        )
    raise TocConfigurationError(
        f"TOC entry must be a name or a mapping with a 'name', got {type(raw).__name__}",
        entry=raw,
    )


def parse_toc(raw: Any) -> list[TocEntry]:
    """Parse a raw TOC list (e.g. loaded from YAML) into ``TocEntry`` values."""
    if isinstance(raw, (str, bytes, Mapping)) or not isinstance(raw, Sequence):
        raise TocConfigurationError(
            f"TOC must be a list of entries, got {type(raw).__name__}", entry=raw
        )
    return [parse_toc_entry(item) for item in raw]


# ── Options ──────────────────────────────────────────────────────────


class SortOptions(BaseModel):
    """Per-call sort options, usually read from ``documentation.yml``."""

    model_config = ConfigDict(populate_by_name=True)

    toc: Optional[list[TocEntry]] = None
    sort_order: str = Field(default=SOURCE, alias="sortOrder")

    @field_validator("toc", mode="before")
    @classmethod
    def _parse_toc(cls, value: Any) -> Any:
        if value is None:
            return None
        return parse_toc(value)

    @field_validator("sort_order", mode="before")
    @classmethod
    def _default_sort_order(cls, value: Any) -> Any:
        return SOURCE if value is None else value
