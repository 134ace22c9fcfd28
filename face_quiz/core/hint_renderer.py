"""Markdown rendering for contact hints shown in place of a photo.

Qt labels understand a subset of HTML, so hints are rendered with
markdown-it in commonmark mode and raw HTML in the source is escaped.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class HintRenderer:
    """Converts hint markdown into an HTML fragment for rich-text labels."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": self.enable_html}).enable("strikethrough")

    def render_fragment(self, hint_text: str | None) -> str:
        sanitized = (hint_text or "").strip()
        if not sanitized:
            return ""
        return self._markdown.render(sanitized).strip()


renderer = HintRenderer()


def render_hint_html(hint_text: str | None) -> str:
    return renderer.render_fragment(hint_text)
