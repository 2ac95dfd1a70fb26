"""Shared node contract and the context handed to node constructors."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from bokiz.exceptions import MarkupStructureError, MissingArgumentError
from bokiz.highlight import CodeHighlighter
from bokiz.renderer import Target, render_sequence, resolve_target
from bokiz.sections import SectionIndex, slugify, unique_anchor

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(slots=True)
class NodeContext:
    """Services a node may use while it is constructed or rendered.

    Attributes
    ----------
    sections : SectionIndex
        Table-of-contents collector that heading nodes register with.
    highlighter : CodeHighlighter
        Pygments wrapper used by code scopes in HTML output.
    anchors : set[str]
        Anchor ids already claimed in the document.
    line : int
        Line of the header currently being constructed; maintained by the
        parser for error reporting.
    """

    sections: SectionIndex = dc.field(default_factory=SectionIndex)
    highlighter: CodeHighlighter = dc.field(default_factory=CodeHighlighter)
    anchors: set[str] = dc.field(default_factory=set)
    line: int | None = None

    def claim_anchor(self, title: str) -> str:
        """Return a document-unique anchor derived from ``title``."""
        return unique_anchor(slugify(title), self.anchors)


Child: typ.TypeAlias = "str | MarkupNode"


class MarkupNode:
    """Base class for every registered markup function.

    Subclasses override :meth:`html` and :meth:`latex`. The parser reads
    :attr:`is_code` before parsing the node's scope and :attr:`printable` after
    assigning :attr:`children`.
    """

    name: typ.ClassVar[str] = "node"
    is_code: typ.ClassVar[bool] = False
    printable: typ.ClassVar[bool] = True
    requires_argument: typ.ClassVar[bool] = False

    def __init__(self, context: NodeContext, argument: str | None = None) -> None:
        self.line = context.line
        if self.requires_argument and not argument:
            msg = f"The {self.name} function requires an argument"
            raise MissingArgumentError(msg, line=self.line)
        self.context = context
        self.argument = argument
        self.children: list[Child] = []

    def render(self, target: Target | str) -> str:
        """Render the node for ``target``."""
        match resolve_target(target):
            case Target.HTML:
                return self.html()
            case Target.LATEX:
                return self.latex()

    def html(self) -> str:
        raise NotImplementedError

    def latex(self) -> str:
        raise NotImplementedError

    def render_children(self, target: Target | str) -> str:
        """Render child text runs and nodes in order."""
        return render_sequence(self.children, target)

    def text(self) -> str:
        """Return the raw text of every descendant text run."""
        parts: list[str] = []
        for child in self.children:
            if isinstance(child, str):
                parts.append(child)
            else:
                parts.append(child.text())
        return "".join(parts)

    def structural_children(
        self, allowed: tuple[type[MarkupNode], ...] | None = None
    ) -> cabc.Iterator[MarkupNode]:
        """Yield child nodes, skipping whitespace between them.

        Raises
        ------
        MarkupStructureError
            If a non-blank text run or a node outside ``allowed`` appears.
        """
        for child in self.children:
            if isinstance(child, str):
                if child.strip():
                    msg = f"Unexpected text {child.strip()!r} inside {self.name}"
                    raise MarkupStructureError(msg, line=self.line)
                continue
            if allowed is not None and not isinstance(child, allowed):
                msg = f"Unexpected {child.name} inside {self.name}"
                raise MarkupStructureError(msg, line=child.line)
            yield child


__all__ = ["Child", "MarkupNode", "NodeContext"]
