"""Tests for partitioning comments into pinned and free groups."""

from __future__ import annotations

import pytest

from docsort.diagnostics import CollectingReporter, DiagnosticCode
from docsort.models import Comment, PathSegment, parse_toc
from docsort.ordering import TocIndex, TocWalker, merge, partition
from tests.fakes.fake_comments import make_comment, names


@pytest.fixture
def index(walker: TocWalker) -> TocIndex:
    return walker.walk(parse_toc([{"name": "Intro", "children": ["Alpha"]}, "zeta", "Ghost"]))


class TestPartition:
    def test_notes_lead_fixed_group(self, index: TocIndex, sample_comments: list[Comment]) -> None:
        fixed, unfixed = partition(sample_comments, index)
        assert names(fixed) == ["Intro", "zeta", "Alpha"]
        assert names(unfixed) == ["beta", "method", "Gamma"]

    def test_matches_flip_pending(self, index: TocIndex, sample_comments: list[Comment]) -> None:
        partition(sample_comments, index)
        assert index.pending == {"Alpha": True, "zeta": True, "Ghost": False}

    def test_members_never_pinned(self, index: TocIndex) -> None:
        member = make_comment("zeta", "a.js:1", memberof="Other")
        fixed, unfixed = partition([member], index)
        assert member in unfixed
        assert index.pending["zeta"] is False
        # The path is attached even though the member stays unfixed.
        assert member.path == [PathSegment(name="zeta", toc=True)]

    def test_unnamed_comments_unfixed(self, index: TocIndex) -> None:
        unnamed = make_comment(None, "a.js:1")
        _, unfixed = partition([unnamed], index)
        assert unfixed == [unnamed]
        assert unnamed.path == []

    def test_path_attached(self, index: TocIndex, sample_comments: list[Comment]) -> None:
        partition(sample_comments, index)
        alpha = next(c for c in sample_comments if c.name == "Alpha")
        assert alpha.path == [PathSegment(name="Intro"), PathSegment(name="Alpha", toc=True)]

    def test_existing_notes_skipped(self, index: TocIndex) -> None:
        stale = make_comment("Intro", kind="note")
        fixed, unfixed = partition([stale], index)
        assert stale not in fixed
        assert stale not in unfixed

    def test_comment_named_like_note_is_pinned(self, index: TocIndex) -> None:
        twin = make_comment("Intro", "a.js:1")
        fixed, _ = partition([twin], index)
        assert fixed[-1] is twin


class TestMerge:
    def test_fixed_then_unfixed_by_location(
        self, index: TocIndex, sample_comments: list[Comment], reporter: CollectingReporter
    ) -> None:
        result = merge(sample_comments, index, "source", reporter)
        # "a.js:25" sorts before "a.js:3" as plain strings.
        assert names(result) == ["Intro", "Alpha", "zeta", "method", "beta", "Gamma"]

    def test_unfixed_alpha(
        self, index: TocIndex, sample_comments: list[Comment], reporter: CollectingReporter
    ) -> None:
        result = merge(sample_comments, index, "alpha", reporter)
        assert names(result) == ["Intro", "Alpha", "zeta", "beta", "Gamma", "method"]

    def test_toc_order_beats_input_order(self, walker: TocWalker, reporter: CollectingReporter) -> None:
        index = walker.walk(parse_toc(["B", "A"]))
        a, b = make_comment("A", "a.js:1"), make_comment("B", "z.js:1")
        assert names(merge([a, b], index, "alpha", reporter)) == ["B", "A"]

    def test_unmatched_reported_once(
        self, index: TocIndex, sample_comments: list[Comment], reporter: CollectingReporter
    ) -> None:
        merge(sample_comments, index, "source", reporter)
        assert len(reporter) == 1
        diagnostic = reporter.diagnostics[0]
        assert diagnostic.code == DiagnosticCode.UNMATCHED_TOC_ENTRY
        assert diagnostic.subject == "Ghost"
        assert diagnostic.message == (
            "Table of contents defined sorting of Ghost "
            "but no documentation with that namepath was found"
        )

    def test_twin_sorts_after_its_note(self, index: TocIndex, reporter: CollectingReporter) -> None:
        twin = make_comment("Intro", "a.js:1")
        result = merge([twin], index, "source", reporter)
        assert result[0].kind == "note"
        assert result[1] is twin

    def test_no_comments(self, index: TocIndex, reporter: CollectingReporter) -> None:
        result = merge([], index, "source", reporter)
        assert names(result) == ["Intro"]
        assert sorted(d.subject for d in reporter.diagnostics) == ["Alpha", "Ghost", "zeta"]

    def test_empty_collector_receives_unmatched(self, index: TocIndex) -> None:
        collector = CollectingReporter()
        merge([make_comment("zeta", "b.js:1")], index, "source", collector)
        assert [d.subject for d in collector.diagnostics] == ["Alpha", "Ghost"]
