
"""
CLI package for gedcom_json.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from gedcom_json.cli.app import app, main

__all__ = [
    "app",
    "main",
]
