"""Load bokiz documents and write their HTML and LaTeX renditions.

A :class:`Document` parses its markup once and can then be rendered any number
of times. :meth:`Document.generate_output` renders both targets before anything
touches the output directory, stages the artifacts inside a temporary working
directory (where the optional PDF build also runs), and only then moves them
into place, so a failure never leaves partial output behind.

Example
-------
>>> from pathlib import Path
>>> from bokiz.document import Document
>>> document = Document.from_path(Path("guide.bokiz"))  # doctest: +SKIP
>>> document.generate_output(Path("public"))  # doctest: +SKIP
[PosixPath('public/guide.html'), PosixPath('public/guide.tex')]
"""

from __future__ import annotations

import logging
import os
import subprocess
import tempfile
import typing as typ
from pathlib import Path

from bokiz._constants import (
    HTML_SUFFIX,
    LATEX_SUFFIX,
    PDF_SUFFIX,
    SOURCE_SUFFIX,
    TEMPORARY_PREFIX,
)
from bokiz.exceptions import InvalidSourceError, LatexCompilationError
from bokiz.nodes.base import NodeContext
from bokiz.nodes.registry import NODE_REGISTRY
from bokiz.parser import MarkupParser
from bokiz.renderer import DocumentRenderer, Target

if typ.TYPE_CHECKING:
    from bokiz.nodes.base import Child
    from bokiz.nodes.registry import NodeRegistry
    from bokiz.sections import SectionIndex

logger = logging.getLogger(__name__)


def source_basename(path: Path) -> str:
    """Return the output basename for a ``.bokiz`` source path.

    Raises
    ------
    InvalidSourceError
        If the file name does not use the ``.bokiz`` extension.
    """
    if path.suffix != SOURCE_SUFFIX or not path.stem:
        msg = (
            f"The file must use the {SOURCE_SUFFIX.lstrip('.')} extension - "
            f"{path.name!r} is invalid"
        )
        raise InvalidSourceError(msg)
    return path.stem


class Document:
    """A parsed markup document together with its section index."""

    def __init__(
        self,
        markup: str,
        *,
        basename: str = "document",
        context: NodeContext | None = None,
        registry: NodeRegistry = NODE_REGISTRY,
    ) -> None:
        """Parse ``markup`` into the document tree.

        Parameters
        ----------
        markup : str
            Complete markup text.
        basename : str, optional
            Stem used to name generated files.
        context : NodeContext, optional
            Node services; a fresh context with default highlighting is used
            when omitted.
        registry : Mapping[str, type[MarkupNode]], optional
            Function names available to the markup.
        """
        self.basename = basename
        self.context = context or NodeContext()
        parser = MarkupParser(markup, self.context, registry=registry)
        self.nodes: list[Child] = parser.parse()
        self.line_count = parser.line
        self.renderer = DocumentRenderer(self.nodes, self.context.sections)

    @classmethod
    def from_path(cls, path: Path, *, context: NodeContext | None = None) -> Document:
        """Read and parse the ``.bokiz`` file at ``path``."""
        basename = source_basename(path)
        markup = path.read_text(encoding="utf-8")
        logger.debug("parsing %s", path)
        return cls(markup, basename=basename, context=context)

    @property
    def sections(self) -> SectionIndex:
        """Return the section index filled by the most recent render."""
        return self.context.sections

    def render(self, target: Target | str, header: str | None = None) -> str:
        """Render the document for ``target``; see :class:`DocumentRenderer`."""
        return self.renderer.render(target, header)

    def generate_output(
        self,
        output_dir: Path,
        *,
        latex_header: Path | None = None,
        compile_pdf: bool = False,
        latex_command: str = "pdflatex",
        stylesheet: bool = False,
    ) -> list[Path]:
        """Render both targets and write them into ``output_dir``.

        Parameters
        ----------
        output_dir : Path
            Directory receiving ``<basename>.html`` and ``<basename>.tex``;
            created when missing.
        latex_header : Path, optional
            File whose content is prepended to the LaTeX output.
        compile_pdf : bool, optional
            Run ``latex_command`` on the LaTeX output and keep the PDF.
        latex_command : str, optional
            Executable used to build the PDF.
        stylesheet : bool, optional
            Also write ``<basename>.css`` with the code highlighting styles.

        Returns
        -------
        list[Path]
            Paths of the written artifacts.

        Raises
        ------
        OSError
            If the LaTeX header cannot be read or the output cannot be written.
        LatexCompilationError
            If ``compile_pdf`` is set and the LaTeX build fails.
        """
        header = latex_header.read_text(encoding="utf-8") if latex_header else None
        artifacts = {
            f"{self.basename}{HTML_SUFFIX}": self.render(Target.HTML),
            f"{self.basename}{LATEX_SUFFIX}": self.render(Target.LATEX, header),
        }
        if stylesheet:
            artifacts[f"{self.basename}.css"] = self.context.highlighter.stylesheet

        output_dir.mkdir(parents=True, exist_ok=True)
        with tempfile.TemporaryDirectory(
            prefix=TEMPORARY_PREFIX, dir=output_dir
        ) as tmp_name:
            workdir = Path(tmp_name)
            logger.debug("staging output in %s", workdir)
            for filename, content in artifacts.items():
                (workdir / filename).write_text(content, encoding="utf-8")
            staged = list(artifacts)
            if compile_pdf:
                staged.append(
                    compile_latex(
                        workdir / f"{self.basename}{LATEX_SUFFIX}", latex_command
                    ).name
                )
            written: list[Path] = []
            for filename in staged:
                destination = output_dir / filename
                os.replace(workdir / filename, destination)
                logger.info("wrote %s", destination)
                written.append(destination)
        return written


def compile_latex(tex_path: Path, latex_command: str = "pdflatex") -> Path:
    """Build a PDF from ``tex_path`` inside its own directory.

    Parameters
    ----------
    tex_path : Path
        LaTeX source to compile; auxiliary files land next to it.
    latex_command : str, optional
        LaTeX executable, run non-interactively.

    Returns
    -------
    Path
        Path of the generated PDF.

    Raises
    ------
    LatexCompilationError
        If the command exits with a non-zero status or produces no PDF.
    """
    result = subprocess.run(  # noqa: S603
        [latex_command, "-interaction=nonstopmode", "-halt-on-error", tex_path.name],
        cwd=tex_path.parent,
        capture_output=True,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        msg = f"{latex_command} failed for {tex_path.name}: {result.stdout[-2000:]}"
        raise LatexCompilationError(msg)
    pdf_path = tex_path.with_suffix(PDF_SUFFIX)
    if not pdf_path.exists():
        msg = f"{latex_command} did not produce {pdf_path.name}"
        raise LatexCompilationError(msg)
    return pdf_path


__all__ = ["Document", "compile_latex", "source_basename"]
