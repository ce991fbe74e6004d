"""
CLI package for famtree.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from famtree.cli.app import app, main

__all__ = [
    "app",
    "main",
]
