"""Node classes for every markup function and the registry that names them."""

from .base import Child, MarkupNode, NodeContext
from .blocks import Column, Element, Enumeration, List, Row, Table
from .headings import SectionFunction, SubsectionFunction, SubsubsectionFunction
from .inline import BoldText, Group, Link, Monospace, Paragraph
from .registry import NODE_REGISTRY, NodeRegistry
from .verbatim import CenteredLaTeXMath, Code, LaTeXMath

__all__ = [
    "NODE_REGISTRY",
    "BoldText",
    "CenteredLaTeXMath",
    "Child",
    "Code",
    "Column",
    "Element",
    "Enumeration",
    "Group",
    "LaTeXMath",
    "Link",
    "List",
    "MarkupNode",
    "Monospace",
    "NodeContext",
    "NodeRegistry",
    "Paragraph",
    "Row",
    "SectionFunction",
    "SubsectionFunction",
    "SubsubsectionFunction",
    "Table",
]
