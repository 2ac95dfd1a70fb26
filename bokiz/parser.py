r"""Parse bokiz markup into a tree of text runs and function nodes.

A function opens with a header, ``[name `` or ``[name[argument] `` (the header
ends with a single space or newline), and its scope runs until the matching
``]``. ``@`` escapes the following character so ``@[``, ``@]`` and ``@@`` print
literally. Inside a code scope headers are not recognised and ``]`` only closes
the scope when it starts a line.

Example
-------
>>> from bokiz.parser import parse_markup
>>> tree = parse_markup("Hello [bold world]!")
>>> tree[0], tree[1].name, tree[1].children, tree[2]
('Hello ', 'bold', ['world'], '!')
"""

from __future__ import annotations

import logging
import re
import typing as typ

from bokiz.exceptions import (
    DanglingEscapeError,
    MalformedHeaderError,
    UnbalancedBracketError,
    UnknownFunctionError,
    UnterminatedScopeError,
)
from bokiz.nodes.base import NodeContext
from bokiz.nodes.registry import NODE_REGISTRY

if typ.TYPE_CHECKING:
    from bokiz.nodes.base import Child
    from bokiz.nodes.registry import NodeRegistry

logger = logging.getLogger(__name__)

NO_ARGUMENT_PATTERN = re.compile(r"\[([a-z\-]+)[ \n]")
ARGUMENT_PATTERN = re.compile(r"\[([a-z\-]+)\[(.+?)\][ \n]")
ESCAPE_CHARACTER = "@"
PREVIEW_LENGTH = 20


class MarkupParser:
    """Recursive-descent parser over an in-memory markup string.

    The parser owns the offset and line counter for a single pass; build a new
    instance for every document.
    """

    def __init__(
        self,
        markup: str,
        context: NodeContext | None = None,
        *,
        registry: NodeRegistry = NODE_REGISTRY,
    ) -> None:
        self.markup = markup
        self.context = context or NodeContext()
        self.registry = registry
        self.offset = 0
        self.line = 1
        self._last_line: int | None = None

    def parse(self) -> list[Child]:
        """Parse the whole input and return the top-level sequence.

        Raises
        ------
        MalformedHeaderError
            If a ``[`` outside a code scope does not start a valid header.
        UnknownFunctionError
            If a header names a function missing from the registry.
        UnterminatedScopeError
            If the input ends while a function scope is still open.
        UnbalancedBracketError
            If a ``]`` appears at the top level.
        DanglingEscapeError
            If the input ends with the escape character.
        """
        return self.parse_scope()

    def parse_scope(
        self, is_code: bool = False, opened_at: int | None = None
    ) -> list[Child]:
        """Consume one scope and return its text runs and nodes.

        Parameters
        ----------
        is_code : bool, optional
            Parse under code-scope rules.
        opened_at : int, optional
            Line of the header that opened this scope; ``None`` for the
            document itself.
        """
        contents: list[Child] = []
        current = ""
        markup = self.markup
        while self.offset < len(markup):
            self._trace_line()
            char = markup[self.offset]
            if char == "[" and not is_code:
                if current:
                    contents.append(current)
                    current = ""
                node = self._parse_function()
                if node is not None:
                    contents.append(node)
                continue
            if char == "]" and not (is_code and markup[self.offset - 1] != "\n"):
                if opened_at is None:
                    msg = "Closing bracket without a matching function"
                    raise UnbalancedBracketError(msg, line=self.line)
                self.offset += 1
                if current:
                    contents.append(current)
                return contents
            if char == ESCAPE_CHARACTER:
                self.offset += 1
                if self.offset >= len(markup):
                    msg = "The escape character must be followed by a character"
                    raise DanglingEscapeError(msg, line=self.line)
                char = markup[self.offset]
            if char == "\n":
                self.line += 1
            current += char
            self.offset += 1

        if opened_at is not None:
            msg = f"Function opened on line {opened_at} is never closed"
            raise UnterminatedScopeError(msg, line=self.line)
        if current:
            contents.append(current)
        return contents

    def _parse_function(self) -> Child | None:
        """Parse a header at the current offset plus the scope it opens."""
        argument: str | None = None
        match = NO_ARGUMENT_PATTERN.match(self.markup, self.offset)
        if match is None:
            match = ARGUMENT_PATTERN.match(self.markup, self.offset)
            if match is None:
                msg = "Unable to parse the name of a function"
                raise MalformedHeaderError(msg, line=self.line)
            argument = match.group(2)
        name = match.group(1)
        header_line = self.line
        self.offset = match.end()
        if "\n" in match.group(0):
            self.line += 1

        node_class = self.registry.get(name)
        if node_class is None:
            raise UnknownFunctionError(name, line=header_line)
        self.context.line = header_line
        node = node_class(self.context, argument)
        node.children = self.parse_scope(node.is_code, header_line)
        if not node.printable:
            return None
        return node

    def _trace_line(self) -> None:
        if self._last_line != self.line:
            self._last_line = self.line
            logger.debug(
                "line %d: %r",
                self.line,
                self.markup[self.offset : self.offset + PREVIEW_LENGTH],
            )


def parse_markup(
    markup: str,
    context: NodeContext | None = None,
    *,
    registry: NodeRegistry = NODE_REGISTRY,
) -> list[Child]:
    """Parse ``markup`` with a fresh :class:`MarkupParser`."""
    return MarkupParser(markup, context, registry=registry).parse()


__all__ = [
    "ARGUMENT_PATTERN",
    "ESCAPE_CHARACTER",
    "NO_ARGUMENT_PATTERN",
    "MarkupParser",
    "parse_markup",
]
