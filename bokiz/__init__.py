"""Parse bokiz markup and render it to HTML and LaTeX.

This package exposes the markup parser, the dual-target renderer, and the
``bokiz`` console script.

Exports
-------
- ``Document``: parsed document that renders and writes both targets.
- ``parse_markup``: parse a markup string into text runs and nodes.
- ``escape_text``: escape a plain text run for a target.
- ``Target``: enumeration of the supported output formats.
- ``app`` / ``main``: Cyclopts application entry points.

Examples
--------
>>> from bokiz import Document
>>> document = Document("[section[Intro] Hello]")
>>> print(document.render("latex"), end="")
\\section{Intro}\\label{intro}
Hello
"""

from __future__ import annotations

from .cli import app, main
from .document import Document
from .exceptions import (
    BokizError,
    ConfigError,
    DanglingEscapeError,
    InvalidSourceError,
    LatexCompilationError,
    MalformedHeaderError,
    MarkupError,
    MarkupStructureError,
    MissingArgumentError,
    UnbalancedBracketError,
    UnknownFunctionError,
    UnsupportedTargetError,
    UnterminatedScopeError,
)
from .parser import MarkupParser, parse_markup
from .renderer import Target, escape_text

__all__ = [
    "BokizError",
    "ConfigError",
    "DanglingEscapeError",
    "Document",
    "InvalidSourceError",
    "LatexCompilationError",
    "MalformedHeaderError",
    "MarkupError",
    "MarkupParser",
    "MarkupStructureError",
    "MissingArgumentError",
    "Target",
    "UnbalancedBracketError",
    "UnknownFunctionError",
    "UnsupportedTargetError",
    "UnterminatedScopeError",
    "app",
    "escape_text",
    "main",
    "parse_markup",
]
