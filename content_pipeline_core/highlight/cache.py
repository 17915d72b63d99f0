"""Process-wide, lazily built syntax highlighter.

The cache moves through ``UNINITIALIZED -> LOADING -> READY`` exactly once.
The first request starts a single background construction; every request
made while it is in flight shares that construction. Subscribers are
notified once when the engine becomes ready, and the engine is kept for
the lifetime of the process.

A failed construction is logged and returns the cache to ``UNINITIALIZED``
so callers keep rendering plain text and a later request may try again.
"""

import asyncio
import threading
from collections.abc import Awaitable, Callable, Iterable
from enum import StrEnum
from typing import TypeAlias

from content_pipeline_core.exceptions import (
    HighlighterConstructionError,
    HighlighterNotReadyError,
    UnsupportedLanguageError,
)
from content_pipeline_core.highlight.engine import HighlighterEngine, ThemePair
from content_pipeline_core.highlight.languages import SUPPORTED_LANGUAGES, is_supported_language
from content_pipeline_core.logging import get_pipeline_logger
from content_pipeline_core.settings import settings

logger = get_pipeline_logger(__name__)

EngineLoader: TypeAlias = Callable[[], Awaitable[HighlighterEngine]]
"""Async callable that builds a HighlighterEngine. Called at most once per successful load."""

Listener: TypeAlias = Callable[[], None]


class HighlighterState(StrEnum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"


async def load_highlighter_engine(themes: ThemePair, languages: Iterable[str] = SUPPORTED_LANGUAGES) -> HighlighterEngine:
    """Build the engine in a worker thread so the event loop keeps running."""
    return await asyncio.to_thread(HighlighterEngine.build, themes, tuple(languages))


class HighlighterCache:
    """Holds the shared engine, its pending construction, and the waiting subscribers.

    Pass an instance to the components that render code; use
    ``get_highlighter_cache()`` only where no instance is injected.
    """

    def __init__(self, themes: ThemePair | None = None, *, loader: EngineLoader | None = None) -> None:
        self._themes = themes or ThemePair.from_settings(settings)
        self._loader: EngineLoader = loader or (lambda: load_highlighter_engine(self._themes))
        self._lock = threading.Lock()  # guards _instance, _pending, _listeners
        self._instance: HighlighterEngine | None = None
        self._pending: asyncio.Task[HighlighterEngine] | None = None
        self._listeners: dict[object, Listener] = {}

    @property
    def themes(self) -> ThemePair:
        return self._themes

    @property
    def state(self) -> HighlighterState:
        with self._lock:
            if self._instance is not None:
                return HighlighterState.READY
            if self._pending is not None:
                return HighlighterState.LOADING
            return HighlighterState.UNINITIALIZED

    def current_instance(self) -> HighlighterEngine | None:
        """Return the engine if ready, else None. Never blocks and never starts a load."""
        return self._instance

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback for the READY transition.

        The listener runs once when the engine becomes ready, or right away
        if it already is. The returned function cancels a pending registration.
        """
        with self._lock:
            if self._instance is None:
                token = object()
                self._listeners[token] = listener

                def unsubscribe() -> None:
                    with self._lock:
                        self._listeners.pop(token, None)

                return unsubscribe

        self._notify(listener)
        return lambda: None

    def request(self) -> None:
        """Start construction in the background if nothing is loaded or loading.

        Outside a running event loop this is a no-op.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop, highlighter construction deferred")
            return
        self._ensure_pending(loop)

    async def get(self) -> HighlighterEngine:
        """Return the engine, starting and awaiting construction if needed.

        Raises:
            HighlighterConstructionError: If the engine fails to load.
        """
        instance = self._instance
        if instance is not None:
            return instance
        pending = self._ensure_pending(asyncio.get_running_loop())
        if isinstance(pending, HighlighterEngine):
            return pending
        return await asyncio.shield(pending)

    def render_to_markup(self, code: str, language: str, themes: ThemePair | None = None) -> str:
        """Render code to dual-theme markup with the loaded engine.

        Raises:
            HighlighterNotReadyError: If the engine is not loaded yet. Callers
                are expected to check ``current_instance()`` and render plain
                text instead.
            UnsupportedLanguageError: If language is not in the allow-list.
            ValueError: If themes differ from the pair the engine was built with.
        """
        engine = self._instance
        if engine is None:
            raise HighlighterNotReadyError("Syntax highlighter is not ready")
        if not is_supported_language(language):
            raise UnsupportedLanguageError(f"Unsupported language: {language!r}")
        if themes is not None and themes != engine.themes:
            raise ValueError(f"Highlighter was built for {engine.themes!r}, not {themes!r}")
        return engine.code_to_html(code, language)

    def _ensure_pending(self, loop: asyncio.AbstractEventLoop) -> asyncio.Task[HighlighterEngine] | HighlighterEngine:
        """Return the loaded engine, or the construction task, starting one if none is pending."""
        with self._lock:
            if self._instance is not None:
                return self._instance
            if self._pending is not None and self._pending.get_loop().is_closed():
                logger.warning("Discarding highlighter construction left on a closed event loop")
                self._pending = None
            if self._pending is None:
                logger.info("Loading syntax highlighter")
                self._pending = loop.create_task(self._construct(), name="highlighter-construction")
                self._pending.add_done_callback(self._on_construction_done)
            return self._pending

    async def _construct(self) -> HighlighterEngine:
        try:
            engine = await self._loader()
        except Exception as e:
            with self._lock:
                self._pending = None
            logger.warning(f"Syntax highlighter failed to load: {e}")
            if isinstance(e, HighlighterConstructionError):
                raise
            raise HighlighterConstructionError(f"Syntax highlighter failed to load: {e}") from e

        with self._lock:
            self._instance = engine
            self._pending = None
            listeners = list(self._listeners.values())
            self._listeners.clear()

        logger.info(f"Syntax highlighter ready ({len(engine.languages)} languages, {len(listeners)} subscribers)")
        for listener in listeners:
            self._notify(listener)
        return engine

    def _on_construction_done(self, task: asyncio.Task[HighlighterEngine]) -> None:
        if task.cancelled():
            with self._lock:
                if self._pending is task:
                    self._pending = None
            return
        # Marks the exception as retrieved; _construct already logged it.
        task.exception()

    @staticmethod
    def _notify(listener: Listener) -> None:
        try:
            listener()
        except Exception as e:
            logger.warning(f"Highlighter listener {listener!r} failed: {e}")


_highlighter_cache: HighlighterCache | None = None


def get_highlighter_cache() -> HighlighterCache:
    """Get the process-global highlighter cache, creating it from settings on first use."""
    global _highlighter_cache
    if _highlighter_cache is None:
        _highlighter_cache = HighlighterCache()
    return _highlighter_cache


def set_highlighter_cache(cache: HighlighterCache | None) -> None:
    """Set or clear the process-global highlighter cache."""
    global _highlighter_cache
    _highlighter_cache = cache
