"""Core models shared across Grapher."""
