"""
Lazy stand-in for `RealDocument`.

`DocumentProxy` is cheap to create: it keeps the content and the output
settings, and builds the real document the first time it is rendered.
Afterwards every render is forwarded to that same instance.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Optional

from rich.console import Console

from .document_iface import Document
from .options import RenderConfig
from .real_document import RealDocument

LOGGER = logging.getLogger(__name__)


class ProxyState(Enum):
    UNLOADED = "unloaded"
    LOADED = "loaded"


class DocumentProxy(Document):
    """Defers loading of a `RealDocument` until the first ``render``."""

    def __init__(
        self,
        content: str,
        *,
        console: Optional[Console] = None,
        config: Optional[RenderConfig] = None,
    ):
        self._content = content
        self._console = console
        self._config = config
        # Set at most once, on first render.
        self._real: Optional[RealDocument] = None
        self._lock = threading.Lock()

    @property
    def content(self) -> str:
        return self._content

    @property
    def subject(self) -> Optional[RealDocument]:
        """The loaded document, or ``None`` before the first render."""
        return self._real

    @property
    def state(self) -> ProxyState:
        return ProxyState.UNLOADED if self._real is None else ProxyState.LOADED

    @property
    def is_loaded(self) -> bool:
        return self._real is not None

    def _ensure_loaded(self) -> RealDocument:
        real = self._real
        if real is None:
            with self._lock:
                real = self._real
                if real is None:
                    LOGGER.debug("documents.proxy.loading")
                    real = RealDocument(
                        self._content, console=self._console, config=self._config
                    )
                    self._real = real
        return real

    def render(self) -> None:
        self._ensure_loaded().render()

    def __repr__(self) -> str:
        return f"DocumentProxy(content={self._content!r}, state={self.state.value})"
