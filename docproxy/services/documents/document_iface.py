"""
Document contract shared by the real document and its proxy.

Defines the single seam (`Document`) that editor code depends on. Callers
hold a `Document` and never need to know whether the content behind it has
been loaded yet.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Document(Protocol):
    """Anything that can render itself to the console."""

    def render(self) -> None: ...
