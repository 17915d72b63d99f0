"""Test helpers for building content files and highlighter engines."""

import asyncio
from pathlib import Path

from content_pipeline_core.highlight import HighlighterEngine, ThemePair

TEST_THEMES = ThemePair(light="friendly", dark="github-dark")


def make_post(
    title: str | None = "Hello",
    description: str | None = "First post",
    date: str | None = "2024-01-05",
    body: str = "# Hi",
) -> str:
    """Build raw file text with front-matter. None omits the key."""
    lines = ["---"]
    if title is not None:
        lines.append(f"title: {title}")
    if description is not None:
        lines.append(f"description: {description}")
    if date is not None:
        lines.append(f"date: {date}")
    lines.append("---")
    return "\n".join(lines) + "\n" + body


def write_post(directory: Path, identifier: str, text: str | None = None, *, extension: str = ".md") -> Path:
    """Write a content file and return its path."""
    path = directory / f"{identifier}{extension}"
    path.write_text(make_post() if text is None else text, encoding="utf-8")
    return path


def build_test_engine(languages: tuple[str, ...] = ("python", "bash", "mermaid")) -> HighlighterEngine:
    """Small real engine; fast enough to build inline."""
    return HighlighterEngine.build(TEST_THEMES, languages)


class CountingLoader:
    """Engine loader that records how often construction runs."""

    def __init__(self, engine: HighlighterEngine | None = None, *, delay: float = 0.01, error: Exception | None = None) -> None:
        self.engine = engine
        self.delay = delay
        self.error = error
        self.calls = 0

    async def __call__(self) -> HighlighterEngine:
        self.calls += 1
        await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        if self.engine is None:
            self.engine = build_test_engine()
        return self.engine
