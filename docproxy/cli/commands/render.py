"""Render command for the docproxy CLI."""

import typer
from rich.console import Console

from docproxy.services.documents import open_document, show

console = Console()


def main(
    content: str = typer.Argument(..., help="Text content of the document"),
    times: int = typer.Option(
        1, "--times", "-n", min=1, help="How many times to render the document"
    ),
    eager: bool = typer.Option(
        False,
        "--eager",
        help="Load the document up front instead of on first render",
    ),
):
    """Render a document, loading it lazily unless --eager is given."""
    try:
        document = open_document(content, lazy=not eager, console=console)
        show(document, times=times)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)
