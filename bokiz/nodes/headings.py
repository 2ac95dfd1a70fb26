"""Heading functions that feed the section index."""

from __future__ import annotations

import typing as typ
from html import escape

from bokiz.nodes.base import MarkupNode, NodeContext
from bokiz.renderer import Target, escape_text


class SectionFunction(MarkupNode):
    """Top-level heading; the argument is the heading title.

    The anchor is claimed once at construction so that repeated render passes
    link to the same ids. Registration with the section index happens on every
    render because each pass starts from an empty index.
    """

    name = "section"
    requires_argument = True
    level: typ.ClassVar[int] = 1
    html_tag: typ.ClassVar[str] = "h2"
    latex_command: typ.ClassVar[str] = "section"

    def __init__(self, context: NodeContext, argument: str | None = None) -> None:
        super().__init__(context, argument)
        self.title = typ.cast("str", argument).strip()
        self.anchor = context.claim_anchor(self.title)

    def register(self) -> None:
        self.context.sections.add_heading(self.level, self.anchor, self.title)

    def html(self) -> str:
        self.register()
        title = escape(self.title, quote=False)
        heading = f'<{self.html_tag} id="{self.anchor}">{title}</{self.html_tag}>\n'
        return heading + self.render_children(Target.HTML)

    def latex(self) -> str:
        self.register()
        title = escape_text(self.title, Target.LATEX)
        heading = f"\\{self.latex_command}{{{title}}}\\label{{{self.anchor}}}\n"
        return heading + self.render_children(Target.LATEX)


class SubsectionFunction(SectionFunction):
    name = "subsection"
    level = 2
    html_tag = "h3"
    latex_command = "subsection"


class SubsubsectionFunction(SectionFunction):
    name = "subsubsection"
    level = 3
    html_tag = "h4"
    latex_command = "subsubsection"


__all__ = ["SectionFunction", "SubsectionFunction", "SubsubsectionFunction"]
