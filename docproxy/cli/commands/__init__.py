"""Command modules for the docproxy CLI."""

from docproxy.cli.commands import demo, render

__all__ = ["demo", "render"]
