"""
CLI package for wkt_parser.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from wkt_parser.cli.app import app, main

__all__ = [
    "app",
    "main",
]
