"""CLI commands for Grapher."""

from . import render, config_cmd

__all__ = ["render", "config_cmd"]
