"""Exceptions raised while parsing, rendering, and generating documents."""

from __future__ import annotations


class BokizError(Exception):
    """Base exception for bokiz operations."""


class MarkupError(BokizError):
    """Error in the markup source, optionally tied to a 1-based line."""

    def __init__(self, message: str, *, line: int | None = None) -> None:
        self.message = message
        self.line = line
        if line is None:
            super().__init__(message)
        else:
            super().__init__(f"Error on line {line}: {message}")


class MalformedHeaderError(MarkupError):
    """A ``[`` was not followed by a valid function header."""


class UnknownFunctionError(MarkupError):
    """A function header named a node that is not registered."""

    def __init__(self, name: str, *, line: int | None = None) -> None:
        self.name = name
        super().__init__(f"Invalid node name: {name}", line=line)


class UnterminatedScopeError(MarkupError):
    """Input ended while a function scope was still open."""


class UnbalancedBracketError(MarkupError):
    """A closing bracket appeared with no open scope."""


class DanglingEscapeError(MarkupError):
    """The escape character was the last character of the input."""


class MissingArgumentError(MarkupError):
    """A node that requires a header argument was used without one."""


class MarkupStructureError(MarkupError):
    """A container node received content it cannot hold."""


class UnsupportedTargetError(BokizError, ValueError):
    """Rendering or escaping was requested for an unknown target."""


class InvalidSourceError(BokizError):
    """The source path does not name a bokiz document."""


class LatexCompilationError(BokizError):
    """The LaTeX toolchain failed to build a PDF."""


class ConfigError(BokizError, ValueError):
    """Raised when the build configuration is invalid or incomplete."""
