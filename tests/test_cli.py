"""Tests for the ``bokiz`` CLI commands.

The command functions are called directly; Cyclopts only adds argument parsing
on top of them.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from bokiz import cli
from bokiz.exceptions import UnknownFunctionError


def _write_source(path: Path, markup: str = "[section[Intro] Hi]\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(markup, encoding="utf-8")
    return path


def test_render_writes_next_to_source(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.chdir(tmp_path)
    source = _write_source(tmp_path / "guide.bokiz")
    cli.render(source)
    assert (tmp_path / "guide.html").exists()
    assert (tmp_path / "guide.tex").exists()
    out = capsys.readouterr().out.splitlines()
    assert out == ["wrote guide.html", "wrote guide.tex"], (
        f"expected cwd-relative paths, got {out!r}"
    )


def test_render_honours_options(tmp_path: Path) -> None:
    source = _write_source(tmp_path / "src" / "guide.bokiz", "[code[python]\nx = 1\n]\n")
    header = tmp_path / "header.tex"
    header.write_text("% header\n", encoding="utf-8")
    output_dir = tmp_path / "public"
    cli.render(
        source,
        output_dir=output_dir,
        latex_header=header,
        pygments_style="friendly",
        stylesheet=True,
    )
    assert (output_dir / "guide.tex").read_text(encoding="utf-8").startswith("% header\n")
    assert (output_dir / "guide.css").exists()
    assert 'data-language="python"' in (output_dir / "guide.html").read_text(
        encoding="utf-8"
    )


def test_render_propagates_markup_errors(tmp_path: Path) -> None:
    source = _write_source(tmp_path / "bad.bokiz", "ok\n[frobnicate text]\n")
    with pytest.raises(UnknownFunctionError, match="Error on line 2"):
        cli.render(source)
    assert not (tmp_path / "bad.html").exists()


def test_generate_builds_configured_documents(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _write_source(tmp_path / "docs" / "one.bokiz")
    _write_source(tmp_path / "docs" / "two.bokiz", "[bold two]")
    config = tmp_path / "bokiz.yaml"
    config.write_text(
        "defaults:\n"
        "  output_dir: public\n"
        "documents:\n"
        "  one:\n"
        "    source: docs/one.bokiz\n"
        "  two: docs/two.bokiz\n",
        encoding="utf-8",
    )
    cli.generate(config=config)
    public = tmp_path / "public"
    assert sorted(p.name for p in public.iterdir()) == [
        "one.html",
        "one.tex",
        "two.html",
        "two.tex",
    ]
    assert capsys.readouterr().out.count("wrote ") == 4


def test_generate_single_document(tmp_path: Path) -> None:
    _write_source(tmp_path / "one.bokiz")
    _write_source(tmp_path / "two.bokiz")
    config = tmp_path / "bokiz.yaml"
    config.write_text(
        "documents:\n  one: one.bokiz\n  two: two.bokiz\n", encoding="utf-8"
    )
    cli.generate(document="two", config=config)
    assert sorted(p.name for p in (tmp_path / "public").iterdir()) == [
        "two.html",
        "two.tex",
    ]


def test_generate_parses_every_document_before_writing(tmp_path: Path) -> None:
    _write_source(tmp_path / "one.bokiz")
    _write_source(tmp_path / "two.bokiz", "fine\n[frobnicate text]\n")
    config = tmp_path / "bokiz.yaml"
    config.write_text(
        "documents:\n  one: one.bokiz\n  two: two.bokiz\n", encoding="utf-8"
    )
    with pytest.raises(UnknownFunctionError, match="Error on line 2"):
        cli.generate(config=config)
    assert not (tmp_path / "public").exists(), (
        "a malformed document should stop the build before any output is written"
    )


def test_format_path_prefers_relative(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    assert cli._format_path(tmp_path / "a" / "b.html") == os.path.join("a", "b.html")
    assert cli._format_path(Path("rel.html")) == "rel.html"
