r"""Collect heading entries and render the numbered table of contents.

Heading nodes register themselves in a :class:`SectionIndex` while they are
rendered. After the HTML pass the document turns the collected entries into a
nested ``<ul>`` overview with dotted numbering.

Example
-------
>>> from bokiz.sections import SectionIndex
>>> index = SectionIndex()
>>> intro = index.append("intro", "Intro")
>>> _ = intro.append("detail", "Detail")
>>> print(index.markup(), end="")
<ul>
<li><a href="#intro">1. Intro</a></li>
<li>
<ul>
<li><a href="#detail">1.1 Detail</a></li>
</ul>
</li>
</ul>
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ
from html import escape

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(slots=True)
class SectionEntry:
    """A single heading in the table of contents.

    Attributes
    ----------
    anchor : str
        Fragment identifier the entry links to.
    name : str
        Heading title shown next to the entry number.
    children : list[SectionEntry]
        Headings nested below this one, in document order.
    """

    anchor: str
    name: str
    children: list[SectionEntry] = dc.field(default_factory=list)

    def append(self, anchor: str, name: str) -> SectionEntry:
        """Add a nested heading and return its entry."""
        entry = SectionEntry(anchor, name)
        self.children.append(entry)
        return entry


class SectionIndex:
    """Ordered, mutable collection of top-level section entries."""

    def __init__(self) -> None:
        self.entries: list[SectionEntry] = []

    def __iter__(self) -> cabc.Iterator[SectionEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def append(self, anchor: str, name: str) -> SectionEntry:
        """Add a top-level heading and return its entry."""
        entry = SectionEntry(anchor, name)
        self.entries.append(entry)
        return entry

    def add_heading(self, level: int, anchor: str, name: str) -> SectionEntry:
        """Register a heading under the nearest enclosing entry for ``level``.

        Level 1 headings are appended at the top. Deeper headings attach to the
        most recent entry one level up; when no such entry exists yet, the
        heading is attached to the deepest level that does exist.
        """
        siblings = self.entries
        for _ in range(level - 1):
            if not siblings:
                break
            siblings = siblings[-1].children
        entry = SectionEntry(anchor, name)
        siblings.append(entry)
        return entry

    def clear(self) -> None:
        """Drop every entry so a new render pass starts from scratch."""
        self.entries.clear()

    def markup(self) -> str:
        """Return the HTML overview list for the collected entries."""
        return index_markup(self.entries)


def index_markup(
    entries: cabc.Sequence[SectionEntry], prefix: tuple[int, ...] = ()
) -> str:
    """Render ``entries`` as nested HTML lists with dotted numbering.

    Parameters
    ----------
    entries : Sequence[SectionEntry]
        Entries of one nesting level.
    prefix : tuple[int, ...], optional
        Numbers of the enclosing entries; empty for the top level.

    Returns
    -------
    str
        ``<ul>`` markup where top-level entries are numbered ``1.``, ``2.``
        and nested entries ``1.1``, ``1.2.3`` and so on.
    """
    output = "<ul>\n"
    for counter, entry in enumerate(entries, start=1):
        identifiers = (*prefix, counter)
        if len(identifiers) == 1:
            number = f"{counter}."
        else:
            number = ".".join(str(value) for value in identifiers)
        name = escape(entry.name, quote=False)
        output += f'<li><a href="#{entry.anchor}">{number} {name}</a></li>\n'
        if entry.children:
            output += f"<li>\n{index_markup(entry.children, identifiers)}</li>\n"
    output += "</ul>\n"
    return output


def slugify(title: str) -> str:
    """Convert a heading title into a lowercase hyphen-separated anchor."""
    slug = re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")
    return slug or "section"


def unique_anchor(base: str, used: set[str]) -> str:
    """Return a unique anchor, appending numeric suffixes and mutating ``used``."""
    candidate = base
    suffix = 2
    while candidate in used:
        candidate = f"{base}-{suffix}"
        suffix += 1
    used.add(candidate)
    return candidate


__all__ = [
    "SectionEntry",
    "SectionIndex",
    "index_markup",
    "slugify",
    "unique_anchor",
]
