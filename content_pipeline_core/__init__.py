"""Content Pipeline Core - the read side of a Markdown-backed personal site.

@public

Two components feed the site's pages:

    - **Content repository**: discovers ``<identifier>.md`` files, parses their
      YAML front-matter, validates the publication date, and returns summaries
      for listings or full documents for detail pages.
    - **Highlighter cache**: builds a dual-theme Pygments engine once per
      process, tells subscribers when it is ready, and renders code blocks;
      until then code renders as plain text.

Quick Start:
    >>> from pathlib import Path
    >>> from content_pipeline_core import LocalContentRepository, HighlighterCache
    >>> from content_pipeline_core.highlight import extract_code_fragments, render_code
    >>>
    >>> repository = LocalContentRepository(Path("content/posts"))
    >>> posts = await repository.list_summaries()
    >>> post = await repository.get_by_identifier(posts[0].identifier)
    >>>
    >>> cache = HighlighterCache()
    >>> await cache.get()
    >>> for fragment in extract_code_fragments(post.body):
    ...     print(render_code(fragment.code, fragment.language, cache=cache))

Environment Variables:
    - CONTENT_DIRECTORY: Directory holding the Markdown documents
    - HIGHLIGHT_LIGHT_THEME / HIGHLIGHT_DARK_THEME: Pygments style names
"""

from .content import (
    ContentRepository,
    Document,
    DocumentAttributes,
    DocumentIdentifier,
    DocumentSummary,
    create_content_repository,
    get_content_repository,
    set_content_repository,
)
from .content.local import LocalContentRepository
from .content.memory import MemoryContentRepository
from .exceptions import (
    ContentPipelineError,
    DocumentNotFoundError,
    DocumentValidationError,
    DuplicateIdentifierError,
    HighlighterConstructionError,
    HighlighterError,
    HighlighterNotReadyError,
    InvalidIdentifierError,
    UnsupportedLanguageError,
)
from .highlight import (
    HighlighterCache,
    HighlighterEngine,
    HighlighterState,
    ThemePair,
    get_highlighter_cache,
    is_supported_language,
    set_highlighter_cache,
)
from .logging import get_pipeline_logger, setup_logging
from .settings import Settings, settings

__version__ = "0.1.0"

__all__ = [
    "ContentPipelineError",
    "ContentRepository",
    "Document",
    "DocumentAttributes",
    "DocumentIdentifier",
    "DocumentNotFoundError",
    "DocumentSummary",
    "DocumentValidationError",
    "DuplicateIdentifierError",
    "HighlighterCache",
    "HighlighterConstructionError",
    "HighlighterEngine",
    "HighlighterError",
    "HighlighterNotReadyError",
    "HighlighterState",
    "InvalidIdentifierError",
    "LocalContentRepository",
    "MemoryContentRepository",
    "Settings",
    "ThemePair",
    "UnsupportedLanguageError",
    "create_content_repository",
    "get_content_repository",
    "get_highlighter_cache",
    "get_pipeline_logger",
    "is_supported_language",
    "set_content_repository",
    "set_highlighter_cache",
    "settings",
    "setup_logging",
]
