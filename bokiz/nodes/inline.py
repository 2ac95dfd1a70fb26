"""Inline and grouping functions: bold, monospace, paragraph, group, link."""

from __future__ import annotations

import re
from html import escape

from bokiz.nodes.base import MarkupNode
from bokiz.renderer import Target

URL_SPECIAL_PATTERN = re.compile(r"([\\%#{}])")


class BoldText(MarkupNode):
    name = "bold"

    def html(self) -> str:
        return f"<b>{self.render_children(Target.HTML)}</b>"

    def latex(self) -> str:
        return f"\\textbf{{{self.render_children(Target.LATEX)}}}"


class Monospace(MarkupNode):
    name = "monospace"

    def html(self) -> str:
        return f"<code>{self.render_children(Target.HTML)}</code>"

    def latex(self) -> str:
        return f"\\texttt{{{self.render_children(Target.LATEX)}}}"


class Paragraph(MarkupNode):
    name = "paragraph"

    def html(self) -> str:
        return f"<p>{self.render_children(Target.HTML)}</p>\n"

    def latex(self) -> str:
        return f"{self.render_children(Target.LATEX)}\n\n"


class Group(MarkupNode):
    """Wrap content without adding any HTML markup of its own."""

    name = "group"

    def html(self) -> str:
        return self.render_children(Target.HTML)

    def latex(self) -> str:
        return f"{{{self.render_children(Target.LATEX)}}}"


class Link(MarkupNode):
    """Hyperlink whose argument is the URL and whose scope is the label.

    ``[link[https://example.org] Example]`` renders the label ``Example``;
    ``[link https://example.org]`` uses the scope text as both URL and label.
    """

    name = "link"

    @property
    def url(self) -> str:
        if self.argument:
            return self.argument
        return self.text().strip()

    def html(self) -> str:
        label = self.render_children(Target.HTML) if self.argument else None
        href = escape(self.url, quote=True)
        return f'<a href="{href}">{label or href}</a>'

    def latex(self) -> str:
        url = URL_SPECIAL_PATTERN.sub(r"\\\1", self.url)
        if not self.argument:
            return f"\\url{{{url}}}"
        return f"\\href{{{url}}}{{{self.render_children(Target.LATEX)}}}"


__all__ = ["BoldText", "Group", "Link", "Monospace", "Paragraph"]
