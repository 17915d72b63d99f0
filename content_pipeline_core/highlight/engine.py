"""Dual-theme syntax highlighting engine built on Pygments.

The engine tokenizes code once and writes both the light and the dark theme
into every token as CSS custom properties::

    <span class="line"><span class="k" style="--hl-light:#007020;--hl-dark:#ff7b72">def</span> ...</span>

The consumer's stylesheet (see ``HighlighterEngine.stylesheet``) decides which
set of properties is visible, so one rendering serves both color schemes.
"""

import html
from collections.abc import Iterable, Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.lexers.special import TextLexer
from pygments.style import StyleMeta
from pygments.styles import get_style_by_name
from pygments.token import STANDARD_TYPES, _TokenType
from pygments.util import ClassNotFound

from content_pipeline_core.exceptions import HighlighterConstructionError, UnsupportedLanguageError
from content_pipeline_core.highlight.languages import SUPPORTED_LANGUAGES, lexer_name
from content_pipeline_core.logging import get_pipeline_logger
from content_pipeline_core.settings import Settings

logger = get_pipeline_logger(__name__)

Theme = Literal["light", "dark"]

CSS_VAR_PREFIX = "--hl"


class ThemePair(BaseModel):
    """Pygments style names rendered for the light and dark color schemes."""

    model_config = ConfigDict(frozen=True)

    light: str
    dark: str

    @classmethod
    def from_settings(cls, settings: Settings) -> "ThemePair":
        return cls(light=settings.highlight_light_theme, dark=settings.highlight_dark_theme)


def _resolve_lexer(tag: str) -> Lexer:
    name = lexer_name(tag)
    try:
        return get_lexer_by_name(name, stripnl=False, ensurenl=False)
    except ClassNotFound:
        logger.warning(f"No grammar for language '{tag}', rendering it as plain text")
        return TextLexer(stripnl=False, ensurenl=False)


def _standard_type(ttype: _TokenType) -> _TokenType:
    while ttype not in STANDARD_TYPES:
        ttype = ttype.parent
    return ttype


class HighlighterEngine:
    """Loaded grammars and themes. Immutable once built; safe to share."""

    def __init__(self, themes: ThemePair, lexers: Mapping[str, Lexer], light: StyleMeta, dark: StyleMeta) -> None:
        self._themes = themes
        self._lexers = dict(lexers)
        self._styles: dict[Theme, StyleMeta] = {"light": light, "dark": dark}
        self._token_attrs: dict[_TokenType, tuple[str, str]] = {}

    @classmethod
    def build(cls, themes: ThemePair, languages: Iterable[str] = SUPPORTED_LANGUAGES) -> "HighlighterEngine":
        """Resolve every grammar and both themes. Slow; run it off the event loop.

        Raises:
            HighlighterConstructionError: If a theme name is unknown to Pygments.
        """
        try:
            light = get_style_by_name(themes.light)
            dark = get_style_by_name(themes.dark)
        except ClassNotFound as e:
            raise HighlighterConstructionError(f"Unknown highlighter theme: {e}") from e

        lexers = {tag: _resolve_lexer(tag) for tag in languages}
        return cls(themes, lexers, light, dark)

    @property
    def themes(self) -> ThemePair:
        return self._themes

    @property
    def languages(self) -> frozenset[str]:
        return frozenset(self._lexers)

    def code_to_html(self, code: str, language: str) -> str:
        """Render code as ``<span class="line">`` rows joined by newlines.

        No ``<pre>``/``<code>`` wrapper is emitted; the caller provides it.
        """
        lexer = self._lexers.get(language)
        if lexer is None:
            raise UnsupportedLanguageError(f"Language not loaded: {language!r}")

        lines: list[list[str]] = [[]]
        for ttype, value in lexer.get_tokens(code):
            css_class, style = self._attrs_for(ttype)
            for index, part in enumerate(value.split("\n")):
                if index:
                    lines.append([])
                if part:
                    lines[-1].append(self._span(css_class, style, part))
        return "\n".join(f'<span class="line">{"".join(parts)}</span>' for parts in lines)

    def background(self, theme: Theme) -> str:
        """Background color of the given theme."""
        return self._styles[theme].background_color

    def stylesheet(self, selector: str = ".hl") -> str:
        """CSS binding the per-token custom properties for each color scheme.

        Light applies by default, dark under a ``.dark`` ancestor or when the
        user agent prefers a dark scheme and no ``.light`` ancestor is set.
        """
        light = self._theme_rules("light", selector)
        dark = self._theme_rules("dark", f".dark {selector}")
        media_dark = self._theme_rules("dark", f":root:not(.light) {selector}")
        return f"{light}\n{dark}\n@media (prefers-color-scheme: dark) {{\n{media_dark}\n}}\n"

    def _theme_rules(self, theme: Theme, selector: str) -> str:
        prefix = f"{CSS_VAR_PREFIX}-{theme}"
        return (
            f"{selector} {{ background-color: {self.background(theme)}; }}\n"
            f"{selector} span[style] {{ color: var({prefix}); "
            f"font-style: var({prefix}-font-style, inherit); "
            f"font-weight: var({prefix}-font-weight, inherit); "
            f"text-decoration: var({prefix}-text-decoration, inherit); }}"
        )

    def _attrs_for(self, ttype: _TokenType) -> tuple[str, str]:
        cached = self._token_attrs.get(ttype)
        if cached is not None:
            return cached
        standard = _standard_type(ttype)
        declarations: list[str] = []
        for theme, style in self._styles.items():
            token_style = style.style_for_token(standard)
            prefix = f"{CSS_VAR_PREFIX}-{theme}"
            if token_style["color"]:
                declarations.append(f"{prefix}:#{token_style['color']}")
            if token_style["italic"]:
                declarations.append(f"{prefix}-font-style:italic")
            if token_style["bold"]:
                declarations.append(f"{prefix}-font-weight:bold")
            if token_style["underline"]:
                declarations.append(f"{prefix}-text-decoration:underline")
        attrs = (STANDARD_TYPES[standard], ";".join(declarations))
        self._token_attrs[ttype] = attrs
        return attrs

    @staticmethod
    def _span(css_class: str, style: str, text: str) -> str:
        escaped = html.escape(text)
        if not css_class and not style:
            return escaped
        class_attr = f' class="{css_class}"' if css_class else ""
        style_attr = f' style="{style}"' if style else ""
        return f"<span{class_attr}{style_attr}>{escaped}</span>"
