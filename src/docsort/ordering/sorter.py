"""Entry point: order documentation comments for presentation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import partial
from typing import TYPE_CHECKING, Any, Optional, Sequence, Union

from pydantic import ValidationError

from docsort.diagnostics import DiagnosticReporter, LoggingReporter
from docsort.exceptions import TocConfigurationError
from docsort.models import Comment, SortOptions
from docsort.notes import read_note_file
from docsort.ordering.comparators import sorted_comments
from docsort.ordering.merger import merge
from docsort.ordering.toc_walker import TocWalker

if TYPE_CHECKING:
    from docsort.core.config import AppSettings

log = logging.getLogger(__name__)


def coerce_options(options: Union[SortOptions, Mapping[str, Any], None]) -> SortOptions:
    """Accept ``SortOptions``, a raw mapping (e.g. parsed YAML) or None."""
    if options is None:
        return SortOptions()
    if isinstance(options, SortOptions):
        return options
    try:
        return SortOptions.model_validate(dict(options))
    except ValidationError as exc:
        raise TocConfigurationError(f"Invalid sort options: {exc}") from exc


def sort_docs(
    comments: Sequence[Comment],
    options: Union[SortOptions, Mapping[str, Any], None] = None,
    *,
    reporter: Optional[DiagnosticReporter] = None,
    walker: Optional[TocWalker] = None,
) -> list[Comment]:
    """Return *comments* in presentation order.

    Without a TOC the whole list is ordered by the fallback comparator.  With
    one, TOC notes are injected and TOC-named top-level comments are pinned in
    TOC order ahead of everything else.  The comment objects themselves are
    updated in place (``path``, and ``kind``/``description`` on notes).

    Raises ``TocConfigurationError`` if a raw TOC entry has an unsupported
    shape.  Unreadable note files and unmatched TOC names are reported to
    *reporter* and never abort the sort.
    """
    opts = coerce_options(options)
    if not opts.toc:
        log.debug("No TOC configured; sorting %d comments by %s", len(comments), opts.sort_order)
        return sorted_comments(comments, opts.sort_order)

    if reporter is None:
        reporter = LoggingReporter()
    if walker is None:
        walker = TocWalker(reporter=reporter)
    index = walker.walk(opts.toc)
    return merge(comments, index, opts.sort_order, reporter)


def create_walker(settings: AppSettings, reporter: Optional[DiagnosticReporter] = None) -> TocWalker:
    """Build a ``TocWalker`` that reads note files as configured in *settings*."""
    return TocWalker(
        reader=partial(read_note_file, encoding=settings.notes.encoding),
        reporter=reporter,
        cwd=settings.notes.root,
    )
