"""Functions whose content is emitted without LaTeX escaping."""

from __future__ import annotations

from html import escape

from bokiz.exceptions import MarkupStructureError
from bokiz.nodes.base import MarkupNode

VERBATIM_END = "\\end{verbatim}"


class Code(MarkupNode):
    """Verbatim code scope; the optional argument names the Pygments lexer.

    Function headers are not recognised inside the scope and a ``]`` only
    closes it at the start of a line.

    The LaTeX rendition is a ``verbatim`` environment, so the code itself
    must not contain ``\\end{verbatim}``.
    """

    name = "code"
    is_code = True

    @property
    def code(self) -> str:
        text = self.text()
        if text.startswith("\n"):
            text = text[1:]
        return text

    def html(self) -> str:
        return self.context.highlighter.code_block(self.code, self.argument)

    def latex(self) -> str:
        code = self.code
        if VERBATIM_END in code:
            msg = f"Code scope cannot contain {VERBATIM_END}"
            raise MarkupStructureError(msg, line=self.line)
        if not code.endswith("\n"):
            code += "\n"
        return f"\\begin{{verbatim}}\n{code}\\end{{verbatim}}\n"


class LaTeXMath(MarkupNode):
    name = "math"

    def html(self) -> str:
        return f'<span class="math">\\({escape(self.text(), quote=False)}\\)</span>'

    def latex(self) -> str:
        return f"${self.text()}$"


class CenteredLaTeXMath(MarkupNode):
    name = "center-math"

    def html(self) -> str:
        return f'<div class="math">\\[{escape(self.text(), quote=False)}\\]</div>\n'

    def latex(self) -> str:
        return f"\\[{self.text()}\\]\n"


__all__ = ["CenteredLaTeXMath", "Code", "LaTeXMath"]
