"""Logging setup for the docproxy CLI."""

import logging

from rich.logging import RichHandler


def setup_logging(verbose: bool = False) -> None:
    """Route log records through rich; DEBUG when ``verbose``."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[
            RichHandler(
                rich_tracebacks=True,
                show_time=True,
                log_time_format="%H:%M:%S",
            )
        ],
    )
    if verbose:
        logging.getLogger("docproxy").setLevel(logging.DEBUG)
