"""Tests for the Pygments-backed HighlighterEngine."""

import html
import re

import pytest

from content_pipeline_core.exceptions import HighlighterConstructionError, UnsupportedLanguageError
from content_pipeline_core.highlight import HighlighterEngine, ThemePair
from tests.support.helpers import TEST_THEMES, build_test_engine

_TAG_RE = re.compile(r"<[^>]+>")


def text_content(markup: str) -> str:
    return html.unescape(_TAG_RE.sub("", markup))


@pytest.fixture(scope="module")
def engine() -> HighlighterEngine:
    return build_test_engine()


class TestBuild:
    def test_themes_and_languages(self, engine: HighlighterEngine):
        assert engine.themes == TEST_THEMES
        assert engine.languages == frozenset({"python", "bash", "mermaid"})

    def test_unknown_theme(self):
        with pytest.raises(HighlighterConstructionError, match="theme"):
            HighlighterEngine.build(ThemePair(light="no-such-style", dark="github-dark"), ("python",))

    def test_language_without_grammar_falls_back_to_text(self):
        engine = HighlighterEngine.build(TEST_THEMES, ("no-such-language",))
        markup = engine.code_to_html("a < b", "no-such-language")
        assert text_content(markup) == "a < b"

    def test_aliased_tag(self):
        engine = HighlighterEngine.build(TEST_THEMES, ("c#",))
        assert text_content(engine.code_to_html("var x = 1;", "c#")) == "var x = 1;"


class TestCodeToHtml:
    def test_keyword_is_classified(self, engine: HighlighterEngine):
        markup = engine.code_to_html("def f():\n    return 1", "python")
        assert re.search(r'<span class="k"[^>]*>def</span>', markup)

    def test_both_themes_in_style(self, engine: HighlighterEngine):
        markup = engine.code_to_html("def f(): pass", "python")
        assert "--hl-light:#" in markup
        assert "--hl-dark:#" in markup

    def test_one_row_per_line(self, engine: HighlighterEngine):
        markup = engine.code_to_html("a = 1\nb = 2\nc = 3", "python")
        assert markup.count('<span class="line">') == 3
        assert "<pre" not in markup
        assert "<code" not in markup

    @pytest.mark.parametrize(
        "code",
        [
            "def f():\n    return 1",
            "x = '<tag>' & \"quoted\"\n",
            'echo "$HOME" > out.txt',
            "",
            "\n\nleading and trailing\n\n",
        ],
    )
    def test_text_content_is_preserved(self, engine: HighlighterEngine, code: str):
        language = "bash" if code.startswith("echo") else "python"
        assert text_content(engine.code_to_html(code, language)) == code

    def test_markup_is_escaped(self, engine: HighlighterEngine):
        markup = engine.code_to_html("x = '<script>'", "python")
        assert "<script>" not in markup

    def test_unloaded_language(self, engine: HighlighterEngine):
        with pytest.raises(UnsupportedLanguageError):
            engine.code_to_html("fn main() {}", "rust")


class TestStylesheet:
    def test_contains_both_schemes(self, engine: HighlighterEngine):
        css = engine.stylesheet()
        assert ".hl span[style]" in css
        assert ".dark .hl" in css
        assert "@media (prefers-color-scheme: dark)" in css
        assert ":root:not(.light) .hl" in css
        assert "var(--hl-light)" in css
        assert "var(--hl-dark)" in css

    def test_custom_selector(self, engine: HighlighterEngine):
        assert "pre.code span[style]" in engine.stylesheet("pre.code")

    def test_backgrounds(self, engine: HighlighterEngine):
        assert engine.background("light").startswith("#")
        assert engine.background("dark").startswith("#")
        assert engine.background("light") in engine.stylesheet()
