"""Public API for the documents service."""

from .document_iface import Document
from .editor import DEMO_CONTENT, open_document, run_demo, show
from .options import RenderConfig
from .proxy import DocumentProxy, ProxyState
from .real_document import RealDocument

__all__ = [
    "Document",
    "RealDocument",
    "DocumentProxy",
    "ProxyState",
    "RenderConfig",
    "open_document",
    "show",
    "run_demo",
    "DEMO_CONTENT",
]
