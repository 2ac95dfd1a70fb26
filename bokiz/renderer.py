"""Escape text runs and assemble rendered output for each target."""

from __future__ import annotations

import enum
import re
import typing as typ
from html import escape

from bokiz._constants import NBSP, OVERVIEW_TEMPLATE
from bokiz.exceptions import UnsupportedTargetError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from bokiz.nodes.base import MarkupNode
    from bokiz.sections import SectionIndex

LATEX_SPECIAL_PATTERN = re.compile(r"([\\_&^|{}])")


class Target(enum.StrEnum):
    """Output formats a document can be rendered to."""

    HTML = "html"
    LATEX = "latex"


def resolve_target(target: Target | str) -> Target:
    """Coerce ``target`` into a :class:`Target`, rejecting unknown values."""
    try:
        return Target(target)
    except ValueError as exc:
        msg = f"Invalid type: {target!r}"
        raise UnsupportedTargetError(msg) from exc


def fix_whitespace(text: str) -> str:
    """Keep runs of spaces visible once HTML collapses whitespace."""
    if text == " ":
        return NBSP
    return text.replace("  ", f"{NBSP} ")


def escape_text(text: str, target: Target | str) -> str:
    """Escape a plain text run for ``target``.

    Parameters
    ----------
    text : str
        Text run taken verbatim from the parsed markup.
    target : Target or str
        ``"html"`` or ``"latex"``.

    Returns
    -------
    str
        For HTML, entity-encoded text (apostrophes as ``&apos;``) with
        repeated spaces preserved via non-breaking spaces. For LaTeX, text with ``\\ _ & ^ | { }`` each
        prefixed by a single backslash.

    Raises
    ------
    UnsupportedTargetError
        If ``target`` is neither HTML nor LaTeX.
    """
    match resolve_target(target):
        case Target.HTML:
            return fix_whitespace(escape(text, quote=True).replace("&#x27;", "&apos;"))
        case Target.LATEX:
            return LATEX_SPECIAL_PATTERN.sub(r"\\\1", text)


def render_sequence(
    items: cabc.Iterable[str | MarkupNode], target: Target | str
) -> str:
    """Render a mixed sequence of text runs and nodes for ``target``."""
    resolved = resolve_target(target)
    parts: list[str] = []
    for item in items:
        if isinstance(item, str):
            parts.append(escape_text(item, resolved))
        else:
            parts.append(item.render(resolved))
    return "".join(parts)


class DocumentRenderer:
    """Walk a parsed document and produce the final text for one target."""

    def __init__(
        self, nodes: cabc.Sequence[str | MarkupNode], sections: SectionIndex
    ) -> None:
        self.nodes = nodes
        self.sections = sections

    def render(self, target: Target | str, header: str | None = None) -> str:
        """Render the whole document.

        Parameters
        ----------
        target : Target or str
            Output format to produce.
        header : str, optional
            Text prepended to the body, typically the LaTeX preamble. Ignored
            for HTML.

        Returns
        -------
        str
            The rendered document. HTML output is prefixed with an overview
            block when any heading registered itself during the walk.
        """
        resolved = resolve_target(target)
        self.sections.clear()
        output = header if header is not None and resolved is Target.LATEX else ""
        output += render_sequence(self.nodes, resolved)
        if resolved is Target.HTML and len(self.sections):
            output = OVERVIEW_TEMPLATE.format(index=self.sections.markup()) + output
        return output


__all__ = [
    "DocumentRenderer",
    "LATEX_SPECIAL_PATTERN",
    "Target",
    "escape_text",
    "fix_whitespace",
    "render_sequence",
    "resolve_target",
]
