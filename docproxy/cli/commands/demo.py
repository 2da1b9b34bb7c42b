"""Demo command for the docproxy CLI."""

import typer
from rich.console import Console

from docproxy.services.documents import run_demo

console = Console()


def main():
    """Open a document through its proxy and render it once."""
    try:
        run_demo(console=console)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)
