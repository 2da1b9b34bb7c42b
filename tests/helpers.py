"""Shared helpers for the docproxy tests."""

import io

from rich.console import Console


def capture_console():
    """Return a console writing into a buffer, plus the buffer."""
    buf = io.StringIO()
    return Console(file=buf, width=200), buf


def lines(buf):
    return buf.getvalue().splitlines()
