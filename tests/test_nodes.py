"""Rendering tests for every registered markup function.

Each test parses a small snippet through ``Document`` and compares the HTML
and LaTeX renditions. HTML produced by Pygments is inspected with
BeautifulSoup rather than compared verbatim.
"""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from bokiz.document import Document
from bokiz.exceptions import MarkupStructureError
from bokiz.highlight import CodeHighlighter
from bokiz.nodes import NODE_REGISTRY, NodeContext
from bokiz.renderer import Target

EXPECTED_FUNCTIONS = {
    "bold",
    "section",
    "subsection",
    "subsubsection",
    "paragraph",
    "list",
    "element",
    "monospace",
    "table",
    "row",
    "column",
    "group",
    "code",
    "math",
    "center-math",
    "link",
    "enumeration",
}


def _render(markup: str, target: Target) -> str:
    return Document(markup).render(target)


def test_registry_contains_every_function() -> None:
    assert set(NODE_REGISTRY) == EXPECTED_FUNCTIONS


def test_registry_is_read_only() -> None:
    with pytest.raises(TypeError):
        NODE_REGISTRY["extra"] = NODE_REGISTRY["bold"]  # type: ignore[index]


@pytest.mark.parametrize(
    ("markup", "html", "latex"),
    [
        ("[bold a_b]", "<b>a_b</b>", "\\textbf{a\\_b}"),
        ("[monospace x & y]", "<code>x &amp; y</code>", "\\texttt{x \\& y}"),
        ("[paragraph Hi]", "<p>Hi</p>\n", "Hi\n\n"),
        ("[group a [bold b]]", "a <b>b</b>", "{a \\textbf{b}}"),
        (
            "[math x_1^2 < y]",
            '<span class="math">\\(x_1^2 &lt; y\\)</span>',
            "$x_1^2 < y$",
        ),
        (
            "[center-math E=mc^2]",
            '<div class="math">\\[E=mc^2\\]</div>\n',
            "\\[E=mc^2\\]\n",
        ),
    ],
)
def test_inline_functions(markup: str, html: str, latex: str) -> None:
    assert _render(markup, Target.HTML) == html
    assert _render(markup, Target.LATEX) == latex


def test_link_with_url_argument() -> None:
    markup = "[link[https://example.org/docs?a=1&b=2#top] The [bold docs]]"
    assert _render(markup, Target.HTML) == (
        '<a href="https://example.org/docs?a=1&amp;b=2#top">The <b>docs</b></a>'
    )
    assert _render(markup, Target.LATEX) == (
        "\\href{https://example.org/docs?a=1&b=2\\#top}{The \\textbf{docs}}"
    )


def test_link_without_argument_uses_label_as_url() -> None:
    markup = "[link https://example.org]"
    assert _render(markup, Target.HTML) == (
        '<a href="https://example.org">https://example.org</a>'
    )
    assert _render(markup, Target.LATEX) == "\\url{https://example.org}"


def test_link_latex_escapes_braces_in_url() -> None:
    markup = "[link[https://x.org/a_b?q={1}] A_B]"
    assert _render(markup, Target.LATEX) == (
        "\\href{https://x.org/a_b?q=\\{1\\}}{A\\_B}"
    )
    assert _render("[link https://x.org/{a]", Target.LATEX) == (
        "\\url{https://x.org/\\{a}"
    )


@pytest.mark.parametrize(
    ("name", "html_tag", "environment"),
    [("list", "ul", "itemize"), ("enumeration", "ol", "enumerate")],
)
def test_lists(name: str, html_tag: str, environment: str) -> None:
    markup = f"[{name}\n[element one]\n[element two [bold 2]]\n]"
    assert _render(markup, Target.HTML) == (
        f"<{html_tag}>\n<li>one</li>\n<li>two <b>2</b></li>\n</{html_tag}>\n"
    )
    assert _render(markup, Target.LATEX) == (
        f"\\begin{{{environment}}}\n\\item one\n\\item two \\textbf{{2}}\n"
        f"\\end{{{environment}}}\n"
    )


def test_list_rejects_loose_text() -> None:
    document = Document("[list stray [element x]]")
    with pytest.raises(MarkupStructureError, match="Unexpected text 'stray'"):
        document.render(Target.HTML)


def test_list_rejects_foreign_functions() -> None:
    document = Document("[list [bold x]]")
    with pytest.raises(MarkupStructureError, match="Unexpected bold inside list"):
        document.render(Target.LATEX)


TABLE = "[table\n[row [column a] [column b]]\n[row [column c] [column d_1]]\n]"


def test_table_html() -> None:
    assert _render(TABLE, Target.HTML) == (
        "<table>\n"
        "<tr><td>a</td><td>b</td></tr>\n"
        "<tr><td>c</td><td>d_1</td></tr>\n"
        "</table>\n"
    )


def test_table_latex_with_default_column_spec() -> None:
    assert _render(TABLE, Target.LATEX) == (
        "\\begin{tabular}{|l|l|}\n"
        "\\hline\n"
        "a & b \\\\\n"
        "\\hline\n"
        "c & d\\_1 \\\\\n"
        "\\hline\n"
        "\\end{tabular}\n"
    )


def test_table_latex_with_explicit_column_spec() -> None:
    markup = "[table[lr]\n[row [column a] [column b]]\n]"
    assert _render(markup, Target.LATEX) == (
        "\\begin{tabular}{lr}\na & b \\\\\n\\end{tabular}\n"
    )


def test_row_rejects_text_between_columns() -> None:
    document = Document("[table [row [column a] oops]]")
    with pytest.raises(MarkupStructureError):
        document.render(Target.HTML)


def test_headings_html_and_latex() -> None:
    markup = "[section[A & B] x][subsubsection[Deep] y]"
    html = _render(markup, Target.HTML)
    assert '<h2 id="a-b">A &amp; B</h2>\nx' in html
    assert '<h4 id="deep">Deep</h4>\ny' in html
    latex = _render(markup, Target.LATEX)
    assert latex == (
        "\\section{A \\& B}\\label{a-b}\nx\\subsubsection{Deep}\\label{deep}\ny"
    )


def test_duplicate_heading_titles_get_unique_anchors() -> None:
    document = Document("[section[Intro] a][section[Intro] b]")
    html = document.render(Target.HTML)
    assert '<h2 id="intro">' in html
    assert '<h2 id="intro-2">' in html
    assert [entry.anchor for entry in document.sections] == ["intro", "intro-2"]


def test_code_latex_is_verbatim() -> None:
    markup = "[code[python]\ndef f(x):\n    return x_1 & {x}\n]"
    assert _render(markup, Target.LATEX) == (
        "\\begin{verbatim}\ndef f(x):\n    return x_1 & {x}\n\\end{verbatim}\n"
    )


def test_code_containing_verbatim_terminator_is_rejected_for_latex() -> None:
    document = Document("text\n[code\nx\n\\end{verbatim}\n]")
    with pytest.raises(MarkupStructureError, match="Error on line 2") as excinfo:
        document.render(Target.LATEX)
    assert "\\end{verbatim}" in excinfo.value.message
    assert "\\end{verbatim}" in document.render(Target.HTML)


def test_code_html_is_highlighted() -> None:
    html = _render("[code[python]\ndef f():\n    return 1 < 2\n]", Target.HTML)
    soup = BeautifulSoup(html, "html.parser")
    block = soup.select_one("div.codehilite")
    assert block is not None, f"expected a codehilite block, got {html!r}"
    assert block.get("data-language") == "python"
    assert "def f():" in block.get_text()
    assert "1 < 2" in block.get_text()
    assert "&lt;" in html, "code should be HTML-escaped by the highlighter"


def test_code_with_unknown_language_falls_back_to_text() -> None:
    html = _render("[code[not-a-lexer]\nx\n]", Target.HTML)
    soup = BeautifulSoup(html, "html.parser")
    block = soup.select_one("div.codehilite")
    assert block is not None
    assert block.get("data-language") == "text"


def test_code_uses_context_highlighter_style() -> None:
    context = NodeContext(highlighter=CodeHighlighter("friendly"))
    document = Document("[code\nx\n]", context=context)
    assert document.context.highlighter.pygments_style == "friendly"
    assert "codehilite" in document.render(Target.HTML)
    assert ".codehilite" in context.highlighter.stylesheet
