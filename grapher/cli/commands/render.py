"""Render command: sample functions into tables and print them."""

import logging
import math
import sys
from pathlib import Path

import typer
import yaml
from pydantic import ValidationError

from ...config import get_config, unescape
from ...core.models import RenderPlan, parse_function
from ...rendering import FormatError
from ...tables import InvalidRange, SamplingError, TableStore
from ...utils.eval_safe import FormulaError
from ..app import app, err_console, get_json_mode
from ..utils import ExitCode, Output, count_non_finite, format_tables_for_json

logger = logging.getLogger(__name__)

# Demo tabulation used when no function or plan is given
DEMO_FUNCTION = "sin(x)"
DEMO_MIN = 0.0
DEMO_MAX = 2 * math.pi
DEMO_STEP = math.pi / 16
DEMO_HEADER = "Table {n}"
DEMO_DELIMITER = "\n"


@app.command("render")
def render_command(
    functions: list[str] | None = typer.Option(
        None,
        "--function",
        "-f",
        help="Function to tabulate: 'const:<v>', 'linear:<m>,<b>' or an expression in x (repeatable)",
    ),
    min_x: float = typer.Option(0.0, "--min", help="First input for --function tables"),
    max_x: float | None = typer.Option(
        None, "--max", help="Inclusive upper bound for --function tables"
    ),
    step: float = typer.Option(1.0, "--step", help="Input increment, must be positive"),
    plan: Path | None = typer.Option(
        None, "--plan", "-p", help="YAML render plan with per-function ranges"
    ),
    pad_length: int | None = typer.Option(
        None, "--pad-length", "-l", help="Cell width (default from config: 12)"
    ),
    pad_char: str | None = typer.Option(
        None, "--pad-char", "-c", help="Single pad character (default from config: '=')"
    ),
    delimiter: str | None = typer.Option(
        None, "--delimiter", "-d", help="Text printed between tables (escapes like \\n allowed)"
    ),
    header: str | None = typer.Option(
        None, "--header", "-H", help="Header above each table; {n} becomes the table number"
    ),
    unpadded_keys: bool | None = typer.Option(
        None,
        "--unpadded-keys/--padded-keys",
        help="Reproduce the legacy output where input cells are not padded",
    ),
):
    """
    Sample functions over a range and print them as fixed-width tables.

    Without --function or --plan, prints the demo: sin(x) over [0, 2π] in
    steps of π/16, with "Table {n}" headers.

    EXIT CODES:
        0 = Success
        1 = Validation error
        3 = Plan file not found
        4 = Sampling error
        5 = Format error

    Examples:
        grapher render -f "const:6" --min 4 --max 17
        grapher render -f "linear:-22,0" -f "x ** 2" --max 5 --step 0.5
        grapher render --plan tables.yaml --header "Table {n}" -d "\\n"
        grapher --json render -f "sin(x)" --max 3.2 --step 0.4
    """
    out = Output(console=err_console, json_mode=get_json_mode())
    config = get_config()

    # Load the plan first so its presentation settings can be overridden
    render_plan = None
    if plan is not None:
        try:
            render_plan = RenderPlan.from_yaml(plan)
        except FileNotFoundError:
            out.error(f"Plan file not found: {plan}", exit_code=ExitCode.FILE_NOT_FOUND)
            raise typer.Exit(out.finish())
        except OSError as e:
            out.error(f"Cannot read plan file {plan}: {e}", exit_code=ExitCode.FILE_NOT_FOUND)
            raise typer.Exit(out.finish())
        except (yaml.YAMLError, ValidationError) as e:
            out.error(f"Invalid render plan {plan}: {e}", category="plan")
            raise typer.Exit(out.finish())

    if functions and max_x is None:
        out.error(
            "--max is required with --function",
            suggestion="e.g. grapher render -f 'sin(x)' --max 6.28 --step 0.2",
        )
        raise typer.Exit(out.finish())

    demo = not functions and render_plan is None

    # Resolve presentation: CLI option > plan > demo > config
    if delimiter is not None:
        try:
            resolved_delimiter = unescape(delimiter)
        except ValueError as e:
            out.error(f"--delimiter: {e}", category="options")
            raise typer.Exit(out.finish())
    elif render_plan is not None and render_plan.delimiter is not None:
        resolved_delimiter = render_plan.delimiter
    elif demo:
        resolved_delimiter = DEMO_DELIMITER
    else:
        resolved_delimiter = config.output.delimiter

    if header is not None:
        resolved_header = header
    elif render_plan is not None and render_plan.header is not None:
        resolved_header = render_plan.header
    elif demo:
        resolved_header = DEMO_HEADER
    else:
        resolved_header = config.output.header

    try:
        store = TableStore(
            pad_length=pad_length if pad_length is not None else config.render.pad_length,
            pad_char=pad_char if pad_char is not None else config.render.pad_char,
            unpadded_keys=(
                unpadded_keys
                if unpadded_keys is not None
                else config.render.unpadded_keys
            ),
        )
    except ValueError as e:
        out.error(str(e), category="options")
        raise typer.Exit(out.finish())

    # (function text, min, max, step) in print order
    requests: list[tuple[str, float, float, float]] = []
    if demo:
        requests.append((DEMO_FUNCTION, DEMO_MIN, DEMO_MAX, DEMO_STEP))
    for text in functions or []:
        requests.append((text, min_x, max_x, step))
    if render_plan is not None:
        for entry in render_plan.tables:
            requests.append((entry.function, entry.min, entry.max, entry.step))

    for text, lo, hi, inc in requests:
        try:
            function = parse_function(text)
        except FormulaError as e:
            out.error(str(e), category="function")
            raise typer.Exit(out.finish())

        try:
            store.add_function(function, lo, hi, inc)
        except InvalidRange as e:
            out.error(
                f"{text}: {e}",
                category="range",
                exit_code=ExitCode.SAMPLING_ERROR,
            )
            raise typer.Exit(out.finish())
        except SamplingError as e:
            out.error(
                f"{text}: {e}",
                category="sampling",
                exit_code=ExitCode.SAMPLING_ERROR,
            )
            raise typer.Exit(out.finish())

    tables = store.tables()
    for i, table in enumerate(tables):
        if len(table) == 0:
            out.warning(
                f"Table {i + 1} ({table.label}) is empty",
                suggestion="the range minimum is greater than its maximum",
            )

    if out.json_mode:
        if skipped := count_non_finite(tables):
            out.warning(f"{skipped} row(s) hold NaN or infinite values, written as null")
        out.set_data("tables", format_tables_for_json(tables))
        raise typer.Exit(out.finish())

    try:
        text = store.render(delimiter=resolved_delimiter, header=resolved_header)
    except FormatError as e:
        out.error(str(e), category="format", exit_code=ExitCode.FORMAT_ERROR)
        raise typer.Exit(out.finish())

    sys.stdout.write(text)
    sys.stdout.flush()
    logger.info("Printed %d table(s)", len(store))
