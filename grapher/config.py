"""Configuration management for Grapher.

Two config sections:
- render: pad length, pad character, legacy key-cell padding
- output: delimiter between tables, header template

Config resolution order (highest priority first):
1. Programmatic (GrapherConfig constructed in code, CLI options)
2. Environment variables (GRAPHER_PAD_LENGTH, GRAPHER_PAD_CHAR, etc.)
3. Config file (~/.config/grapher/config.json, managed by `grapher config`)
4. Hardcoded defaults
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict, replace
from pathlib import Path
from typing import Any


logger = logging.getLogger(__name__)


# =============================================================================
# Config file location
# =============================================================================

CONFIG_DIR = Path.home() / ".config" / "grapher"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_PAD_LENGTH = 12
DEFAULT_PAD_CHAR = "="

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


# =============================================================================
# Validation helpers
# =============================================================================


def validate_pad_length(value: int) -> int:
    """Return ``value`` if it is a usable cell width.

    Raises:
        ValueError: If the value is not an integer of at least 1.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Pad length must be an integer, got {value!r}")
    if value < 1:
        raise ValueError(f"Pad length must be at least 1, got {value}")
    return value


def validate_pad_char(value: str) -> str:
    """Return ``value`` if it is exactly one character.

    Raises:
        ValueError: Otherwise.
    """
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"Pad character must be a single character, got {value!r}")
    return value


def parse_bool(value: str) -> bool:
    """Parse a boolean from config/env text.

    Raises:
        ValueError: If the text is not a recognized boolean.
    """
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


# =============================================================================
# Config dataclasses
# =============================================================================


@dataclass
class RenderConfig:
    """Cell layout settings.

    - pad_length: width of each input/output cell
    - pad_char: filler used to reach the width
    - unpadded_keys: reproduce the legacy output where input cells were
      never padded
    """

    pad_length: int = DEFAULT_PAD_LENGTH
    pad_char: str = DEFAULT_PAD_CHAR
    unpadded_keys: bool = False

    def validate(self) -> "RenderConfig":
        validate_pad_length(self.pad_length)
        validate_pad_char(self.pad_char)
        return self

    def copy(self) -> "RenderConfig":
        return replace(self)


@dataclass
class OutputConfig:
    """Presentation defaults for printing a whole store."""

    delimiter: str = ""
    header: str | None = None


@dataclass
class GrapherConfig:
    """Top-level grapher configuration.

    Examples:
        # Package use, no files needed
        config = GrapherConfig(render=RenderConfig(pad_length=8, pad_char="."))

        # CLI use: loads from ~/.config/grapher/config.json
        config = GrapherConfig.load()
    """

    render: RenderConfig = field(default_factory=RenderConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def load(cls) -> "GrapherConfig":
        """Load config from file + env vars.

        Priority: env var values > config.json values > defaults.
        """
        config = cls()

        # Layer 1: Load from config file if it exists
        if CONFIG_FILE.exists():
            try:
                with open(CONFIG_FILE) as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    _apply_dict(config, data)
                else:
                    logger.warning("Ignoring config file %s: not an object", CONFIG_FILE)
            except (json.JSONDecodeError, OSError) as exc:
                logger.warning("Failed to load config from %s: %s", CONFIG_FILE, exc)

        # Layer 2: Env var overrides
        if val := os.environ.get("GRAPHER_PAD_LENGTH"):
            try:
                config.render.pad_length = validate_pad_length(int(val))
            except ValueError:
                logger.warning("Invalid GRAPHER_PAD_LENGTH=%r, ignoring", val)
        if val := os.environ.get("GRAPHER_PAD_CHAR"):
            try:
                config.render.pad_char = validate_pad_char(val)
            except ValueError:
                logger.warning("Invalid GRAPHER_PAD_CHAR=%r, ignoring", val)
        if val := os.environ.get("GRAPHER_UNPADDED_KEYS"):
            try:
                config.render.unpadded_keys = parse_bool(val)
            except ValueError:
                logger.warning("Invalid GRAPHER_UNPADDED_KEYS=%r, ignoring", val)
        if (val := os.environ.get("GRAPHER_DELIMITER")) is not None:
            try:
                config.output.delimiter = unescape(val)
            except ValueError:
                logger.warning("Invalid GRAPHER_DELIMITER=%r, ignoring", val)
        if val := os.environ.get("GRAPHER_HEADER"):
            config.output.header = val

        return config

    def save(self) -> None:
        """Save config to ~/.config/grapher/config.json."""
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for display."""
        return {
            "render": asdict(self.render),
            "output": asdict(self.output),
        }


# =============================================================================
# Config dict application
# =============================================================================


def _apply_dict(config: GrapherConfig, data: dict) -> None:
    """Apply a dict of values onto a GrapherConfig, skipping invalid entries."""
    render = data.get("render")
    if isinstance(render, dict):
        if "pad_length" in render:
            try:
                config.render.pad_length = validate_pad_length(render["pad_length"])
            except ValueError as exc:
                logger.warning("Ignoring render.pad_length from config: %s", exc)
        if "pad_char" in render:
            try:
                config.render.pad_char = validate_pad_char(render["pad_char"])
            except ValueError as exc:
                logger.warning("Ignoring render.pad_char from config: %s", exc)
        if isinstance(render.get("unpadded_keys"), bool):
            config.render.unpadded_keys = render["unpadded_keys"]

    output = data.get("output")
    if isinstance(output, dict):
        if isinstance(output.get("delimiter"), str):
            config.output.delimiter = output["delimiter"]
        if "header" in output and (
            output["header"] is None or isinstance(output["header"], str)
        ):
            config.output.header = output["header"]


def unescape(value: str) -> str:
    """Expand backslash escapes typed on a shell (``\\n`` → newline).

    Raises:
        ValueError: If the text ends in a lone backslash or holds a truncated
            escape such as ``\\x4``.
    """
    try:
        return value.encode("latin-1", "backslashreplace").decode("unicode_escape")
    except UnicodeDecodeError as e:
        raise ValueError(f"Invalid escape sequence in {value!r}: {e.reason}") from None


# =============================================================================
# Global config singleton
# =============================================================================

_config: GrapherConfig | None = None


def get_config() -> GrapherConfig:
    """Get the global GrapherConfig instance.

    First call loads from file + env vars. Subsequent calls return cached instance.
    Use configure() to replace the global config programmatically.
    """
    global _config
    if _config is None:
        _config = GrapherConfig.load()
    return _config


def configure(config: GrapherConfig) -> None:
    """Set the global GrapherConfig programmatically."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global config (forces reload on next get_config())."""
    global _config
    _config = None
