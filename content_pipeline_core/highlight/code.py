"""Code blocks: extraction from Markdown and rendering with plain-text fallback."""

import html
import re
from dataclasses import dataclass

from content_pipeline_core.highlight.cache import HighlighterCache, get_highlighter_cache
from content_pipeline_core.highlight.languages import is_supported_language

__all__ = [
    "CodeFragment",
    "extract_code_fragments",
    "render_code",
    "render_code_listing",
    "render_plain_code",
]

_FENCE_RE = re.compile(r"^(?P<indent> {0,3})(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
_LINE_RE = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+\Z")
_LINE_END_RE = re.compile(r"(?:\r\n|\r|\n)\Z")


@dataclass(frozen=True, slots=True)
class CodeFragment:
    """A fenced code block found in a Markdown body."""

    language: str | None
    code: str
    info: str = ""


def _strip_indent(line: str, width: int) -> str:
    removable = len(line) - len(line.lstrip(" "))
    return line[min(width, removable) :]


def _split_lines(text: str) -> list[str]:
    """Split on Markdown line endings only, keeping each line's ending."""
    return _LINE_RE.findall(text)


def extract_code_fragments(markdown: str) -> list[CodeFragment]:
    """Find fenced code blocks (``` or ~~~) in document order.

    The language is the first word of the info string. A fence left open
    runs to the end of the document. Code keeps the source's own line
    endings, minus the one before the closing fence.
    """
    fragments: list[CodeFragment] = []
    lines = _split_lines(markdown)
    i = 0
    while i < len(lines):
        opening = _FENCE_RE.match(_LINE_END_RE.sub("", lines[i]))
        i += 1
        if opening is None:
            continue
        fence, info = opening["fence"], opening["info"].strip()
        if fence[0] == "`" and "`" in info:
            continue

        body: list[str] = []
        while i < len(lines):
            closing = _FENCE_RE.match(_LINE_END_RE.sub("", lines[i]))
            i += 1
            if closing and closing["fence"][0] == fence[0] and len(closing["fence"]) >= len(fence) and not closing["info"].strip():
                break
            body.append(_strip_indent(lines[i - 1], len(opening["indent"])))

        language = info.split()[0] if info else None
        code = _LINE_END_RE.sub("", "".join(body))
        fragments.append(CodeFragment(language=language, code=code, info=info))
    return fragments


def render_plain_code(code: str) -> str:
    """Unstyled ``<code>`` element whose text content is exactly ``code``."""
    return f"<code>{html.escape(code, quote=False)}</code>"


def render_code(code: str, language: str | None = None, *, cache: HighlighterCache | None = None) -> str:
    """Render a code element, highlighted when possible.

    Unsupported or missing languages, and languages the loaded engine was
    not built with, render as plain text. Supported languages render as
    plain text until the highlighter is ready; the first such render asks
    the cache to start loading.
    """
    if language is None or not is_supported_language(language):
        return render_plain_code(code)

    cache = cache or get_highlighter_cache()
    engine = cache.current_instance()
    if engine is None:
        cache.request()
        return render_plain_code(code)
    if language not in engine.languages:
        return render_plain_code(code)

    markup = cache.render_to_markup(code, language)
    return f'<code class="hl language-{html.escape(language)}">{markup}</code>'


def render_code_listing(
    code: str,
    language: str | None = None,
    *,
    title: str | None = None,
    cache: HighlighterCache | None = None,
) -> str:
    """Render a titled ``<pre>`` block around ``render_code``."""
    header = f'<h3 class="code-listing-title">{html.escape(title)}</h3>' if title else ""
    return f'<div class="code-listing">{header}<pre>{render_code(code, language, cache=cache)}</pre></div>'
