"""Container functions: lists, enumerations, and tables.

Containers only hold their designated child functions. Whitespace between
children is dropped; any other text inside a container is a structure error.
"""

from __future__ import annotations

import typing as typ

from bokiz.nodes.base import MarkupNode
from bokiz.renderer import Target


class Element(MarkupNode):
    name = "element"

    def html(self) -> str:
        return f"<li>{self.render_children(Target.HTML)}</li>\n"

    def latex(self) -> str:
        return f"\\item {self.render_children(Target.LATEX)}\n"


class List(MarkupNode):
    name = "list"
    html_tag: typ.ClassVar[str] = "ul"
    latex_environment: typ.ClassVar[str] = "itemize"

    def html(self) -> str:
        items = "".join(
            child.html() for child in self.structural_children((Element,))
        )
        return f"<{self.html_tag}>\n{items}</{self.html_tag}>\n"

    def latex(self) -> str:
        items = "".join(
            child.latex() for child in self.structural_children((Element,))
        )
        env = self.latex_environment
        return f"\\begin{{{env}}}\n{items}\\end{{{env}}}\n"


class Enumeration(List):
    name = "enumeration"
    html_tag = "ol"
    latex_environment = "enumerate"


class Column(MarkupNode):
    name = "column"

    def html(self) -> str:
        return f"<td>{self.render_children(Target.HTML)}</td>"

    def latex(self) -> str:
        return self.render_children(Target.LATEX).strip()


class Row(MarkupNode):
    name = "row"

    def columns(self) -> list[Column]:
        return typ.cast("list[Column]", list(self.structural_children((Column,))))

    def html(self) -> str:
        cells = "".join(column.html() for column in self.columns())
        return f"<tr>{cells}</tr>\n"

    def latex(self) -> str:
        cells = " & ".join(column.latex() for column in self.columns())
        return f"{cells} \\\\\n"


class Table(MarkupNode):
    """Tabular data built from rows of columns.

    The optional argument is used verbatim as the LaTeX column specification,
    for example ``[table[lr] ...]``. Without it every column is left aligned
    and ruled.
    """

    name = "table"

    def rows(self) -> list[Row]:
        return typ.cast("list[Row]", list(self.structural_children((Row,))))

    def column_spec(self, rows: list[Row]) -> str:
        if self.argument:
            return self.argument
        width = max((len(row.columns()) for row in rows), default=1)
        return "|" + "l|" * max(width, 1)

    def html(self) -> str:
        body = "".join(row.html() for row in self.rows())
        return f"<table>\n{body}</table>\n"

    def latex(self) -> str:
        rows = self.rows()
        spec = self.column_spec(rows)
        ruled = "|" in spec
        rule = "\\hline\n" if ruled else ""
        body = "".join(row.latex() + rule for row in rows)
        return f"\\begin{{tabular}}{{{spec}}}\n{rule}{body}\\end{{tabular}}\n"


__all__ = ["Column", "Element", "Enumeration", "List", "Row", "Table"]
