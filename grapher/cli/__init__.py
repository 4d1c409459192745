"""Command-line interface for Grapher."""

from .app import app

__all__ = ["app"]
