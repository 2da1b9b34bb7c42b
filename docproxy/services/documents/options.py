"""
Render configuration for documents.

Centralizes the output wording so callers can tune it without touching the
document classes. All fields have defaults; a bare ``RenderConfig()`` gives
the standard editor messages.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    # Emitted once, when the real document is loaded.
    load_template: str = "Loading Document: {content}"

    # Emitted on every render.
    display_template: str = "Displaying Document: {content}"

    def format_load(self, content: str) -> str:
        return self.load_template.format(content=content)

    def format_display(self, content: str) -> str:
        return self.display_template.format(content=content)


DEFAULT_CONFIG = RenderConfig()
