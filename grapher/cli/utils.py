"""CLI utilities for dual-mode output (human-friendly + machine-readable).

Commands support both:
- Human mode (default): text tables on stdout, Rich-formatted status messages
- Machine mode (--json): structured JSON output collected and printed at the end

Example:
    from ..cli.utils import Output, ExitCode

    @app.command()
    def my_command():
        out = Output(console=console, json_mode=get_json_mode())
        out.warning("Table 1 is empty", suggestion="check --min and --max")
        return out.finish()
"""

from __future__ import annotations

import json
import math
from typing import Any

from pydantic import BaseModel, PrivateAttr, ConfigDict
from rich.console import Console
from rich.markup import escape


class ExitCode:
    """Standardized exit codes for CLI commands.

    0 = Success
    1 = Validation error (bad option, function text or plan)
    3 = File not found
    4 = Sampling error (invalid range or evaluation failure)
    5 = Format error
    """

    SUCCESS = 0
    VALIDATION_ERROR = 1
    FILE_NOT_FOUND = 3
    SAMPLING_ERROR = 4
    FORMAT_ERROR = 5


class Output(BaseModel):
    """Dual-mode output handler for CLI commands.

    In human mode: status messages go to the (stderr) status console so the
    rendered tables on stdout stay byte-exact.
    In JSON mode: collects structured data and outputs JSON at the end.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    console: Console
    json_mode: bool = False

    _data: dict[str, Any] = PrivateAttr()
    _exit_code: int = PrivateAttr(default=ExitCode.SUCCESS)

    def model_post_init(self, __context: Any) -> None:
        # Ensure _data is a fresh dict for each instance
        self._data = {
            "status": "success",
            "warnings": [],
            "errors": [],
        }

    def warning(self, message: str, *, suggestion: str | None = None) -> None:
        """Output a warning message."""
        if self.json_mode:
            warning_obj: dict[str, Any] = {"message": message}
            if suggestion:
                warning_obj["suggestion"] = suggestion
            self._data["warnings"].append(warning_obj)
        else:
            self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")
            if suggestion:
                self.console.print(f"  [dim]→ {suggestion}[/dim]")

    def error(
        self,
        message: str,
        *,
        category: str | None = None,
        suggestion: str | None = None,
        exit_code: int = ExitCode.VALIDATION_ERROR,
    ) -> None:
        """Output an error message and set exit code."""
        self._exit_code = exit_code
        self._data["status"] = "error"

        if self.json_mode:
            error_obj: dict[str, Any] = {"message": message}
            if category:
                error_obj["category"] = category
            if suggestion:
                error_obj["suggestion"] = suggestion
            self._data["errors"].append(error_obj)
        else:
            prefix = f"{category}: " if category else ""
            self.console.print(f"[red]✗[/red] {escape(prefix + message)}")
            if suggestion:
                self.console.print(f"  [dim]→ {suggestion}[/dim]")

    def set_data(self, key: str, value: Any) -> None:
        """Set arbitrary data in JSON output."""
        self._data[key] = value

    def finish(self) -> int:
        """Finalize output and return exit code.

        In JSON mode, prints the accumulated data as JSON to stdout.
        Returns the exit code that should be passed to sys.exit().
        """
        if self.json_mode:
            # Add exit_code to JSON for programmatic access
            self._data["exit_code"] = self._exit_code
            print(json.dumps(self._data, indent=2, default=str))

        return self._exit_code


def _json_number(value: float) -> float | None:
    # NaN and infinities have no JSON representation
    return value if math.isfinite(value) else None


def format_tables_for_json(tables) -> list[dict[str, Any]]:
    """Convert a table snapshot to JSON-serializable dicts (1-based numbers).

    Non-finite inputs or outputs become ``null``.
    """
    return [
        {
            "number": i + 1,
            "label": table.label,
            "rows": [[_json_number(x), _json_number(y)] for x, y in table.rows],
        }
        for i, table in enumerate(tables)
    ]


def count_non_finite(tables) -> int:
    """Number of rows holding a NaN or infinite value."""
    return sum(
        1
        for table in tables
        for x, y in table.rows
        if not (math.isfinite(x) and math.isfinite(y))
    )
