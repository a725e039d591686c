"""TOC-aware ordering of documentation comments."""

from __future__ import annotations

from docsort.ordering.comparators import (
    collation_key,
    comparator_for,
    compare_by_name,
    compare_by_source_location,
    sort_comments,
    sorted_comments,
)
from docsort.ordering.merger import merge, partition
from docsort.ordering.sorter import coerce_options, create_walker, sort_docs
from docsort.ordering.toc_walker import TocIndex, TocWalker

__all__ = [
    "TocIndex",
    "TocWalker",
    "coerce_options",
    "collation_key",
    "comparator_for",
    "create_walker",
    "compare_by_name",
    "compare_by_source_location",
    "merge",
    "partition",
    "sort_comments",
    "sort_docs",
    "sorted_comments",
]
