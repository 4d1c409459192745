"""Config command for viewing and managing grapher configuration."""

import typer
from rich.markup import escape

from ..app import app, console
from ...config import (
    get_config,
    reset_config,
    parse_bool,
    validate_pad_char,
    validate_pad_length,
    CONFIG_FILE,
)


VALID_KEYS = {
    "render.pad_length",
    "render.pad_char",
    "render.unpadded_keys",
    "output.delimiter",
    "output.header",
}


@app.command("config")
def config_command(
    action: str = typer.Argument(
        ...,
        help="Action: show, set, reset",
    ),
    key: str | None = typer.Argument(
        None,
        help="Config key (e.g. render.pad_length, output.header)",
    ),
    value: str | None = typer.Argument(
        None,
        help="Value to set",
    ),
):
    """View or modify grapher configuration.

    Examples:
        grapher config show
        grapher config set render.pad_length 16
        grapher config set render.pad_char "."
        grapher config set output.header "Table {n}"
        grapher config reset
    """
    if action == "show":
        _show_config()
    elif action == "set":
        if not key or value is None:
            console.print("[red]Usage:[/red] grapher config set <key> <value>")
            console.print()
            console.print("Available keys:")
            for k in sorted(VALID_KEYS):
                console.print(f"  {k}")
            raise typer.Exit(1)
        _set_config(key, value)
    elif action == "reset":
        _reset_config()
    else:
        console.print(f"[red]Unknown action:[/red] {escape(action)}")
        console.print("Valid actions: show, set, reset")
        raise typer.Exit(1)


def _show_config():
    """Display current resolved configuration."""
    config = get_config()

    console.print()
    console.print("[bold]Grapher Configuration[/bold]")
    console.print("─" * 40)

    console.print()
    console.print("[bold cyan]Render[/bold cyan] (cell layout)")
    console.print(f"  pad_length    = {config.render.pad_length}")
    console.print(f"  pad_char      = {escape(repr(config.render.pad_char))}")
    console.print(f"  unpadded_keys = {config.render.unpadded_keys}")

    console.print()
    console.print("[bold cyan]Output[/bold cyan] (between and above tables)")
    console.print(f"  delimiter     = {escape(repr(config.output.delimiter))}")
    header = config.output.header
    header_val = escape(repr(header)) if header is not None else "[dim](none)[/dim]"
    console.print(f"  header        = {header_val}")

    console.print()
    if CONFIG_FILE.exists():
        console.print(f"Config file: {CONFIG_FILE}")
    else:
        console.print(f"Config file: [dim]not created yet[/dim] ({CONFIG_FILE})")
    console.print()


def _set_config(key: str, value: str):
    """Set a config value and save."""
    if key not in VALID_KEYS:
        console.print(f"[red]Unknown key:[/red] {escape(key)}")
        console.print()
        console.print("Available keys:")
        for k in sorted(VALID_KEYS):
            console.print(f"  {k}")
        raise typer.Exit(1)

    config = get_config()
    section, field_name = key.split(".", 1)

    # Type coercion
    try:
        if field_name == "pad_length":
            try:
                parsed = int(value)
            except ValueError:
                raise ValueError(f"Invalid integer value: {value}") from None
            config.render.pad_length = validate_pad_length(parsed)
        elif field_name == "pad_char":
            config.render.pad_char = validate_pad_char(value)
        elif field_name == "unpadded_keys":
            config.render.unpadded_keys = parse_bool(value)
        elif field_name == "header":
            config.output.header = value or None
        else:
            config.output.delimiter = value
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    config.save()
    reset_config()  # Clear cached singleton so next get_config() reloads

    console.print(f"[green]✓[/green] Set {key} = {escape(repr(value))}")
    console.print(f"  Saved to {CONFIG_FILE}")


def _reset_config():
    """Reset config to defaults."""
    if CONFIG_FILE.exists():
        CONFIG_FILE.unlink()
        reset_config()
        console.print("[green]✓[/green] Config reset to defaults")
        console.print(f"  Removed {CONFIG_FILE}")
    else:
        console.print("Config already at defaults (no config file exists)")
