"""Load build configuration YAML into typed dataclasses."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .models import BuildConfig, ConfigError, DocumentConfig


def load_build_config(path: Path) -> BuildConfig:
    """Load the YAML configuration describing which documents to build.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``bokiz.yaml``). Relative paths inside the file resolve against its
        directory.

    Returns
    -------
    BuildConfig
        Parsed configuration with defaults merged into every document.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    ConfigError
        If no documents are defined or a document lacks a ``source``.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from bokiz.config import load_build_config
    >>> config = load_build_config(Path("bokiz.yaml"))  # doctest: +SKIP
    >>> sorted(config.documents)[:1]  # doctest: +SKIP
    ['guide']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}
    base_dir = path.parent

    document_defaults = _DocumentDefaults(
        output_dir=_resolve(base_dir, defaults.get("output_dir", "public")),
        latex_header=_optional_path(base_dir, defaults.get("latex_header")),
        pygments_style=defaults.get("pygments_style", "monokai"),
        compile_pdf=bool(defaults.get("compile_pdf", False)),
        latex_command=defaults.get("latex_command", "pdflatex"),
        stylesheet=bool(defaults.get("stylesheet", False)),
    )

    documents_raw = raw.get("documents") or {}
    if not documents_raw:
        msg = "No documents defined in build configuration."
        raise ConfigError(msg)

    documents: dict[str, DocumentConfig] = {}
    for key, payload in documents_raw.items():
        match payload:
            case dict():
                documents[key] = _build_document_config(
                    key=key, payload=payload, base_dir=base_dir, defaults=document_defaults
                )
            case str() as source:
                documents[key] = _build_document_config(
                    key=key,
                    payload={"source": source},
                    base_dir=base_dir,
                    defaults=document_defaults,
                )
            case _:
                continue

    return BuildConfig(documents=documents)


@dc.dataclass(slots=True)
class _DocumentDefaults:
    """Internal container for document default configuration values."""

    output_dir: Path
    latex_header: Path | None
    pygments_style: str
    compile_pdf: bool
    latex_command: str
    stylesheet: bool


def _resolve(base_dir: Path, value: str | Path) -> Path:
    """Return ``value`` as a path, anchoring relative paths at ``base_dir``."""
    candidate = Path(value).expanduser()
    if candidate.is_absolute():
        return candidate
    return base_dir / candidate


def _optional_path(base_dir: Path, value: str | Path | None) -> Path | None:
    """Resolve ``value`` like :func:`_resolve`, passing through empty values."""
    if value is None or not str(value).strip():
        return None
    return _resolve(base_dir, value)


def _build_document_config(
    *,
    key: str,
    payload: typ.Mapping[str, typ.Any],
    base_dir: Path,
    defaults: _DocumentDefaults,
) -> DocumentConfig:
    """Build a DocumentConfig for a single entry using defaults and overrides."""
    source = payload.get("source")
    if not source:
        msg = f"Document '{key}' is missing 'source'."
        raise ConfigError(msg)

    output_dir = payload.get("output_dir")
    if "latex_header" in payload:
        latex_header = _optional_path(base_dir, payload["latex_header"])
    else:
        latex_header = defaults.latex_header

    return DocumentConfig(
        key=key,
        source=_resolve(base_dir, source),
        output_dir=_resolve(base_dir, output_dir) if output_dir else defaults.output_dir,
        latex_header=latex_header,
        pygments_style=payload.get("pygments_style", defaults.pygments_style),
        compile_pdf=bool(payload.get("compile_pdf", defaults.compile_pdf)),
        latex_command=payload.get("latex_command", defaults.latex_command),
        stylesheet=bool(payload.get("stylesheet", defaults.stylesheet)),
    )


__all__ = ["load_build_config"]
