"""Shared helpers for the docproxy CLI."""
