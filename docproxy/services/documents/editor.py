"""Editor-side helpers that only ever see the `Document` contract."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console

from .document_iface import Document
from .options import RenderConfig
from .proxy import DocumentProxy
from .real_document import RealDocument

LOGGER = logging.getLogger(__name__)

DEMO_CONTENT = "Hello, Proxy Pattern!"


def open_document(
    content: str,
    *,
    lazy: bool = True,
    console: Optional[Console] = None,
    config: Optional[RenderConfig] = None,
) -> Document:
    """Return a document for ``content``; loading is deferred when ``lazy``."""
    if lazy:
        return DocumentProxy(content, console=console, config=config)
    return RealDocument(content, console=console, config=config)


def show(document: Document, times: int = 1) -> None:
    """Render ``document`` ``times`` times."""
    if times < 1:
        raise ValueError(f"times must be at least 1, got {times}")
    LOGGER.debug("documents.show times=%d doc=%r", times, document)
    for _ in range(times):
        document.render()


def run_demo(console: Optional[Console] = None) -> Document:
    document = open_document(DEMO_CONTENT, console=console)
    show(document)
    return document
