"""Core configuration settings for the content pipeline.

@public

This module provides centralized configuration for Content Pipeline Core:
where content lives on disk and which themes the syntax highlighter uses.
Settings are loaded from environment variables with .env file support via
pydantic-settings.

Environment variables:
    CONTENT_DIRECTORY: Directory holding ``<identifier>.md`` files
    CONTENT_EXTENSION: File extension of content documents (default ".md")
    HIGHLIGHT_LIGHT_THEME: Pygments style used for the light color scheme
    HIGHLIGHT_DARK_THEME: Pygments style used for the dark color scheme

Configuration precedence:
    1. Environment variables (highest priority)
    2. .env file in current directory
    3. Default values

Example:
    >>> from content_pipeline_core.settings import settings
    >>>
    >>> print(settings.content_directory)
    >>> print(settings.highlight_dark_theme)

Note:
    Settings are loaded once at module import and frozen. The process must
    be restarted to pick up changes to environment variables or .env file.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Core configuration for the content repository and highlighter.

    @public

    Attributes:
        content_directory: Root directory scanned for content documents.
                           Relative paths resolve against the working directory.

        content_extension: Extension (with leading dot) that marks a file as
                           a content document.

        highlight_light_theme: Pygments style name rendered for light mode.

        highlight_dark_theme: Pygments style name rendered for dark mode.

    Example:
        >>> s = Settings(content_directory=Path("/srv/site/posts"))
        >>> s.content_extension
        '.md'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,  # Settings are immutable after initialization
    )

    # Content repository
    content_directory: Path = Path("content/posts")
    content_extension: str = ".md"

    # Syntax highlighting
    highlight_light_theme: str = "friendly"
    highlight_dark_theme: str = "github-dark"


# Create a single, importable instance of the settings
settings = Settings()
"""Global settings instance for the entire application.

@public

Example:
    >>> from content_pipeline_core.settings import settings
    >>> print(f"Reading posts from {settings.content_directory}")
"""
