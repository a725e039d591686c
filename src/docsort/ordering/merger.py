"""Partition comments into TOC-pinned and free entries, then merge them."""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Optional, Sequence

from docsort.diagnostics import DiagnosticReporter, LoggingReporter, unmatched_toc_entry
from docsort.models import Comment
from docsort.ordering.comparators import Comparator, sort_comments
from docsort.ordering.toc_walker import TocIndex

log = logging.getLogger(__name__)


def _by_order_index(index: TocIndex) -> Comparator:
    def compare(a: Comment, b: Comment) -> int:
        ia = index.index_of(a.name)
        ib = index.index_of(b.name)
        if ia is not None and ib is not None:
            return ia - ib
        return 0

    return compare


def partition(
    comments: Sequence[Comment], index: TocIndex
) -> tuple[list[Comment], list[Comment]]:
    """Split *comments* into ``(fixed, unfixed)``, attaching TOC paths.

    ``fixed`` starts with the walker's notes.  Notes already present in
    *comments* (from an earlier sort) are dropped so they are not duplicated.
    Matched references are flipped to True in ``index.pending``.
    """
    fixed: list[Comment] = list(index.notes)
    unfixed: list[Comment] = []

    for comment in comments:
        name = comment.name
        if name is not None and name in index.paths:
            comment.path = list(index.paths[name])

        if comment.is_note:
            continue

        if comment.is_top_level and index.index_of(name) is not None:
            fixed.append(comment)
            index.pending[name] = True
        else:
            unfixed.append(comment)

    return fixed, unfixed


def merge(
    comments: Sequence[Comment],
    index: TocIndex,
    sort_order: Optional[str],
    reporter: Optional[DiagnosticReporter] = None,
) -> list[Comment]:
    """Order *comments* against a walked TOC: pinned entries first, then the rest."""
    if reporter is None:
        reporter = LoggingReporter()
    fixed, unfixed = partition(comments, index)

    fixed.sort(key=cmp_to_key(_by_order_index(index)))
    sort_comments(unfixed, sort_order)

    for name in index.unmatched():
        reporter.report(unmatched_toc_entry(name))

    log.debug("Merged %d fixed and %d unfixed entries", len(fixed), len(unfixed))
    return fixed + unfixed
