"""
The real document: holds its content and pays the load cost up front.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console

from .document_iface import Document
from .options import DEFAULT_CONFIG, RenderConfig

default_console = Console()

LOGGER = logging.getLogger(__name__)


def emit(console: Console, line: str) -> None:
    """Write ``line`` verbatim: no markup, emoji or highlighting."""
    console.print(line, markup=False, emoji=False, highlight=False, soft_wrap=True)


class RealDocument(Document):
    """
    Fully loaded document.

    Construction performs the (expensive) load step immediately; every
    ``render`` afterwards only displays the stored content.
    """

    def __init__(
        self,
        content: str,
        *,
        console: Optional[Console] = None,
        config: Optional[RenderConfig] = None,
    ):
        self._content = content
        self._console = console if console is not None else default_console
        self._config = config if config is not None else DEFAULT_CONFIG
        self._load()

    @property
    def content(self) -> str:
        return self._content

    def _load(self) -> None:
        LOGGER.debug("documents.load len=%d", len(self._content))
        emit(self._console, self._config.format_load(self._content))

    def render(self) -> None:
        LOGGER.debug("documents.render len=%d", len(self._content))
        emit(self._console, self._config.format_display(self._content))

    def __repr__(self) -> str:
        return f"RealDocument(content={self._content!r})"
