"""Public API for docproxy."""

from docproxy.services.documents import (
    Document,
    DocumentProxy,
    ProxyState,
    RealDocument,
    RenderConfig,
    open_document,
    show,
)

__all__ = [
    "Document",
    "DocumentProxy",
    "ProxyState",
    "RealDocument",
    "RenderConfig",
    "open_document",
    "show",
]
