#!/usr/bin/env python
"""Command line interface for docproxy."""

import typer

from docproxy.cli.commands import demo, render
from docproxy.cli.utils.log import setup_logging

app = typer.Typer(help="Command Line Interface for docproxy")

# Register commands
app.command("demo", help="Run the lazy-loading document demo")(demo.main)
app.command("render", help="Render a document")(render.main)


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Lazy-loading document editor."""
    setup_logging(verbose)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
