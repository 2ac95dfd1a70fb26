"""Typed dataclasses describing bokiz build configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path  # noqa: TC003 - used for runtime type metadata

from bokiz.exceptions import ConfigError


@dc.dataclass(slots=True)
class DocumentConfig:
    """A fully resolved document definition sourced from YAML config."""

    key: str
    source: Path
    output_dir: Path
    latex_header: Path | None = None
    pygments_style: str = "monokai"
    compile_pdf: bool = False
    latex_command: str = "pdflatex"
    stylesheet: bool = False


@dc.dataclass(slots=True)
class BuildConfig:
    """Collection of document configs keyed by their identifier."""

    documents: dict[str, DocumentConfig]

    def get_document(self, key: str) -> DocumentConfig:
        """Return the document registered under ``key``."""
        try:
            return self.documents[key]
        except KeyError as exc:
            available = ", ".join(sorted(self.documents))
            msg = f"Unknown document '{key}'. Known documents: {available}"
            raise KeyError(msg) from exc


__all__ = ["BuildConfig", "ConfigError", "DocumentConfig"]
