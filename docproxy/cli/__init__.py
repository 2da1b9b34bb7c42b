"""Command line interface for docproxy."""
