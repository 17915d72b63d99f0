"""Shared syntax highlighter cache, engine, and code rendering."""

from .cache import (
    EngineLoader,
    HighlighterCache,
    HighlighterState,
    get_highlighter_cache,
    load_highlighter_engine,
    set_highlighter_cache,
)
from .code import CodeFragment, extract_code_fragments, render_code, render_code_listing, render_plain_code
from .engine import HighlighterEngine, ThemePair
from .languages import SUPPORTED_LANGUAGES, is_supported_language

__all__ = [
    "SUPPORTED_LANGUAGES",
    "CodeFragment",
    "EngineLoader",
    "HighlighterCache",
    "HighlighterEngine",
    "HighlighterState",
    "ThemePair",
    "extract_code_fragments",
    "get_highlighter_cache",
    "is_supported_language",
    "load_highlighter_engine",
    "render_code",
    "render_code_listing",
    "render_plain_code",
    "set_highlighter_cache",
]
