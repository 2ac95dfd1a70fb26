"""Load and validate the bokiz build configuration.

This subpackage parses a ``bokiz.yaml`` file, merges global defaults with
per-document overrides, resolves paths relative to the configuration file, and
produces typed dataclasses (:class:`BuildConfig`, :class:`DocumentConfig`)
that the CLI consumes.

Examples
--------
>>> from pathlib import Path
>>> from bokiz.config import load_build_config
>>> config = load_build_config(Path("bokiz.yaml"))  # doctest: +SKIP
>>> config.get_document("guide").source  # doctest: +SKIP
PosixPath('docs/guide.bokiz')
"""

from .loader import load_build_config
from .models import BuildConfig, ConfigError, DocumentConfig

__all__ = ["BuildConfig", "ConfigError", "DocumentConfig", "load_build_config"]
