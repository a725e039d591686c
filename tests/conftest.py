"""Shared fixtures for docsort tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from docsort.diagnostics import CollectingReporter
from docsort.models import Comment
from docsort.ordering import TocWalker
from tests.fakes.fake_comments import make_comment
from tests.fakes.fake_notes import FakeNoteReader, FakeRenderer


@pytest.fixture
def reporter() -> CollectingReporter:
    return CollectingReporter()


@pytest.fixture
def renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    """A working directory with two markdown note files."""
    (tmp_path / "guide.md").write_text("# Guide\n\nRead me first.\n", encoding="utf-8")
    sub = tmp_path / "notes"
    sub.mkdir()
    (sub / "faq.md").write_text("*FAQ*", encoding="utf-8")
    return tmp_path


@pytest.fixture
def walker(reporter: CollectingReporter, renderer: FakeRenderer, notes_dir: Path) -> TocWalker:
    """Walker reading real files under ``notes_dir`` with a fake renderer."""
    return TocWalker(reporter=reporter, renderer=renderer, cwd=notes_dir)


@pytest.fixture
def fake_reader() -> FakeNoteReader:
    return FakeNoteReader({"/docs/intro.md": "Intro *text*"})


@pytest.fixture
def sample_comments() -> list[Comment]:
    """Five comments across two files, one of them a class member."""
    return [
        make_comment("zeta", "b.js:1"),
        make_comment("Alpha", "a.js:20"),
        make_comment("beta", "a.js:3"),
        make_comment("method", "a.js:25", memberof="Alpha"),
        make_comment("Gamma", "c.js:7"),
    ]
