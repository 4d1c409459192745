"""Entry point for ``python -m grapher``."""

from .cli import app

app()
