"""Markdown rendering for TOC note descriptions, via markdown-it-py."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

from markdown_it import MarkdownIt
from markdown_it.token import Token


@dataclass(frozen=True)
class RenderedMarkdown:
    """A note description after rendering.

    ``tokens`` is the markdown-it block token stream for renderers that walk
    the structure; ``html`` is the CommonMark HTML output.
    """

    source: str
    html: str
    tokens: tuple[Token, ...] = field(default=(), compare=False, repr=False)

    def __str__(self) -> str:
        return self.html


@lru_cache(maxsize=1)
def _parser() -> MarkdownIt:
    return MarkdownIt("commonmark")


def render_markdown(text: str) -> RenderedMarkdown:
    """Parse and render *text* as CommonMark."""
    md = _parser()
    tokens = md.parse(text)
    html = md.renderer.render(tokens, md.options, {})
    return RenderedMarkdown(source=text, html=html, tokens=tuple(tokens))
