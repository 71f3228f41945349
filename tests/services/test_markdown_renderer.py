import pytest

from mdblog.services import markdown_renderer
from mdblog.services.markdown_renderer import render
from mdblog.settings import Settings


def test_render_converts_headings_and_paragraphs():
    html = render("# Title\n\nSome **bold** text.")

    assert html == "<h1>Title</h1>\n<p>Some <strong>bold</strong> text.</p>"


def test_render_supports_fenced_code_by_default():
    html = render("```\nprint('hi')\n```")

    assert "<pre><code>" in html
    assert "print(&#x27;hi&#x27;)" in html or "print('hi')" in html


def test_render_uses_configured_extensions(monkeypatch):
    monkeypatch.setattr(
        markdown_renderer, "settings", Settings(MARKDOWN_EXTENSIONS=["tables"])
    )

    html = render("| a | b |\n|---|---|\n| 1 | 2 |")

    assert "<table>" in html


def test_render_explicit_extensions_override_settings():
    html = render("| a | b |\n|---|---|\n| 1 | 2 |", extensions=[])

    assert "<table>" not in html


def test_render_empty_text_is_empty():
    assert render("") == ""


@pytest.mark.parametrize(
    "text", ["**unclosed", "<div>dangling", "[link](", "```\nnever closed"]
)
def test_render_degrades_gracefully_on_malformed_markdown(text):
    assert isinstance(render(text), str)
