"""Example of how to use the documents service."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from docproxy import Document, DocumentProxy, RealDocument, show

console = Console()

logger = logging.getLogger("docproxy.example")


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(show_time=True, log_time_format="%H:%M:%S")],
    )

    logger.info("Opening document through its proxy (nothing loaded yet)")
    document: Document = DocumentProxy("Hello, Proxy Pattern!", console=console)

    logger.info("First render loads, then displays")
    show(document)

    logger.info("Second render only displays")
    show(document)

    logger.info("A real document loads as soon as it is created")
    eager: Document = RealDocument("Hello, Proxy Pattern!", console=console)
    show(eager, times=2)


if __name__ == "__main__":
    main()
