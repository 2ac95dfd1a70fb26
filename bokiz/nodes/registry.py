"""Fixed mapping from markup function names to node classes."""

from __future__ import annotations

import types
import typing as typ

from bokiz.nodes.blocks import Column, Element, Enumeration, List, Row, Table
from bokiz.nodes.headings import (
    SectionFunction,
    SubsectionFunction,
    SubsubsectionFunction,
)
from bokiz.nodes.inline import BoldText, Group, Link, Monospace, Paragraph
from bokiz.nodes.verbatim import CenteredLaTeXMath, Code, LaTeXMath

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from bokiz.nodes.base import MarkupNode

NodeRegistry: typ.TypeAlias = "cabc.Mapping[str, type[MarkupNode]]"

NODE_REGISTRY: NodeRegistry = types.MappingProxyType(
    {
        node_class.name: node_class
        for node_class in (
            BoldText,
            SectionFunction,
            SubsectionFunction,
            SubsubsectionFunction,
            Paragraph,
            List,
            Element,
            Monospace,
            Table,
            Row,
            Column,
            Group,
            Code,
            LaTeXMath,
            CenteredLaTeXMath,
            Link,
            Enumeration,
        )
    }
)

__all__ = ["NODE_REGISTRY", "NodeRegistry"]
