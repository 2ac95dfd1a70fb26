"""Cyclopts CLI entrypoint for rendering bokiz documents.

The ``bokiz`` console script turns ``.bokiz`` markup into an HTML fragment and
a LaTeX document. ``bokiz render`` handles a single source file given on the
command line, while ``bokiz generate`` builds every document listed in a
``bokiz.yaml`` configuration file.

Examples
--------
Render one document into ``public/``:

>>> from bokiz.cli import app
>>> app.run(["render", "guide.bokiz", "--output-dir", "public"])  # doctest: +SKIP

Build every configured document:

>>> from bokiz.cli import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import DocumentConfig, load_build_config
from .document import Document
from .highlight import CodeHighlighter
from .nodes.base import NodeContext

DEFAULT_CONFIG = Path("bokiz.yaml")

app = App(name="bokiz", config=cyclopts.config.Env("BOKIZ_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr at DEBUG when ``verbose`` else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def load_document(document_config: DocumentConfig) -> Document:
    """Parse the source of one configured document."""
    context = NodeContext(highlighter=CodeHighlighter(document_config.pygments_style))
    return Document.from_path(document_config.source, context=context)


def write_document(document: Document, document_config: DocumentConfig) -> list[Path]:
    """Write the artifacts of a parsed document, returning written paths."""
    return document.generate_output(
        document_config.output_dir,
        latex_header=document_config.latex_header,
        compile_pdf=document_config.compile_pdf,
        latex_command=document_config.latex_command,
        stylesheet=document_config.stylesheet,
    )


def build_document(document_config: DocumentConfig) -> list[Path]:
    """Parse and render one configured document, returning written paths."""
    return write_document(load_document(document_config), document_config)


@app.command(help="Render a single .bokiz file to HTML and LaTeX.")
def render(
    source: typ.Annotated[Path, Parameter(help="Path to the .bokiz source")],
    *,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Output folder (defaults to the source folder)"),
    ] = None,
    latex_header: typ.Annotated[
        Path | None, Parameter(help="File prepended to the LaTeX output")
    ] = None,
    pdf: typ.Annotated[
        bool, Parameter(help="Compile the LaTeX output into a PDF")
    ] = False,
    latex_command: typ.Annotated[
        str, Parameter(help="LaTeX executable used with --pdf")
    ] = "pdflatex",
    pygments_style: typ.Annotated[
        str, Parameter(help="Pygments style for highlighted code")
    ] = "monokai",
    stylesheet: typ.Annotated[
        bool, Parameter(help="Also write the code highlighting CSS")
    ] = False,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Render ``source`` into ``<basename>.html`` and ``<basename>.tex``.

    Parameters
    ----------
    source : Path
        Markup file; must use the ``.bokiz`` extension.
    output_dir : Path or None, optional
        Destination directory; defaults to the directory holding ``source``.
    latex_header : Path or None, optional
        Preamble prepended to the LaTeX output.
    pdf : bool, optional
        Compile the LaTeX output with ``latex_command``.
    latex_command : str, optional
        LaTeX executable, ``pdflatex`` by default.
    pygments_style : str, optional
        Style used when highlighting code scopes.
    stylesheet : bool, optional
        Write ``<basename>.css`` with the highlighting styles.
    verbose : bool, optional
        Log parser and generator activity at DEBUG level.

    Returns
    -------
    None
        Writes the rendered artifacts and prints their paths.
    """
    _configure_logging(verbose)
    document_config = DocumentConfig(
        key=source.stem,
        source=source,
        output_dir=output_dir or source.parent,
        latex_header=latex_header,
        pygments_style=pygments_style,
        compile_pdf=pdf,
        latex_command=latex_command,
        stylesheet=stylesheet,
    )
    for path in build_document(document_config):
        print(f"wrote {_format_path(path)}")


@app.command(help="Render documents listed in a bokiz.yaml configuration.")
def generate(
    *,
    document: typ.Annotated[
        str | None, Parameter(help="Document identifier", env_var="BOKIZ_DOCUMENT")
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to build config", env_var="BOKIZ_CONFIG")
    ] = DEFAULT_CONFIG,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Render the configured documents.

    Parameters
    ----------
    document : str or None, optional
        Specific document key to render; when ``None`` (default) every
        document is rendered. All selected documents are parsed before any
        output is written.
    config : Path, optional
        Path to the ``bokiz.yaml`` configuration file (overridable via
        ``BOKIZ_CONFIG``).
    verbose : bool, optional
        Log parser and generator activity at DEBUG level.

    Returns
    -------
    None
        Writes rendered artifacts and prints the generated paths.
    """
    _configure_logging(verbose)
    build_config = load_build_config(config)

    if document:
        targets = [build_config.get_document(document)]
    else:
        targets = list(build_config.documents.values())

    parsed = [(load_document(target), target) for target in targets]
    for parsed_document, document_config in parsed:
        for path in write_document(parsed_document, document_config):
            print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``bokiz`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
