"""Fallback comparators for comments not placed by the table of contents.

Both comparators are stateless and pairwise; ``sort_comments`` applies one of
them with Python's stable sort so ties keep their input order.
"""

from __future__ import annotations

import unicodedata
from functools import cmp_to_key, lru_cache
from typing import Callable, Sequence, TypeVar

from docsort.models import ALPHA, Comment

Comparator = Callable[[Comment, Comment], int]
CollationKey = tuple[tuple[tuple[int, int, str], ...], tuple[str, ...], tuple[int, ...]]

_PUNCTUATION, _DIGIT, _LETTER = 0, 1, 2

# Root-locale (CLDR) order of ASCII whitespace, punctuation and symbols.
# Characters not listed sort after these by code point, still ahead of digits.
_SYMBOL_ORDER = "\t\n\v\f\r _-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$"
_SYMBOL_RANK = {ch: rank for rank, ch in enumerate(_SYMBOL_ORDER)}


def _primary_weight(ch: str) -> tuple[int, int, str]:
    if ch.isalpha():
        return _LETTER, 0, ch
    if ch.isdigit():
        return _DIGIT, 0, ch
    return _PUNCTUATION, _SYMBOL_RANK.get(ch, len(_SYMBOL_ORDER)), ch


@lru_cache(maxsize=4096)
def collation_key(text: str) -> CollationKey:
    """Build a three-level collation key for *text*.

    Level one compares base characters case- and accent-insensitively:
    symbols in root-locale order, then digits, then letters.  Level two
    compares accents, unaccented first.  Level three compares case,
    uppercase first.
    """
    primary: list[tuple[int, int, str]] = []
    secondary: list[str] = []
    tertiary: list[int] = []
    for ch in text:
        decomposed = unicodedata.normalize("NFKD", ch)
        base = "".join(c for c in decomposed if not unicodedata.combining(c))
        secondary.append("".join(c for c in decomposed if unicodedata.combining(c)))
        tertiary.append(0 if ch.isupper() else 1)
        primary.extend(_primary_weight(c) for c in base.casefold())
    return tuple(primary), tuple(secondary), tuple(tertiary)


_Key = TypeVar("_Key", str, CollationKey)


def _cmp(a: _Key, b: _Key) -> int:
    return (a > b) - (a < b)


def compare_by_name(a: Comment, b: Comment) -> int:
    """Order by name; entries without a name are unordered (compare equal)."""
    if a.name and b.name:
        return _cmp(collation_key(a.name), collation_key(b.name))
    return 0


def compare_by_source_location(a: Comment, b: Comment) -> int:
    """Order by ``context.sort_key`` as plain strings, not by line number."""
    return _cmp(a.context.sort_key, b.context.sort_key)


def comparator_for(sort_order: str | None) -> Comparator:
    """Return the comparator for *sort_order* (``alpha`` or source location)."""
    return compare_by_name if sort_order == ALPHA else compare_by_source_location


def sort_comments(comments: list[Comment], sort_order: str | None) -> list[Comment]:
    """Stable in-place sort of *comments*; the same list is returned."""
    comments.sort(key=cmp_to_key(comparator_for(sort_order)))
    return comments


def sorted_comments(comments: Sequence[Comment], sort_order: str | None) -> list[Comment]:
    """Like ``sort_comments`` but leaves *comments* untouched."""
    return sort_comments(list(comments), sort_order)
