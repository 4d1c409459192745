"""Grapher: tabulate functions over a range and print fixed-width tables.

Example:
    import math
    from grapher import TableStore, ConstantFunction

    store = TableStore()
    store.add_function(ConstantFunction(value=6.0), 4, 17)
    store.add_function(math.sin, 0.0, 2 * math.pi, math.pi / 16)
    store.print_tables(delimiter="\\n", header="Table {n}")
"""

__version__ = "1.0.0"

from .config import GrapherConfig, RenderConfig, OutputConfig, get_config, configure
from .core.models import (
    ConstantFunction,
    LinearFunction,
    ExpressionFunction,
    ClosureFunction,
    Table,
    RenderPlan,
    PlanEntry,
    sine,
    parse_function,
)
from .tables import (
    TableStore,
    sample,
    InvalidRange,
    SamplingError,
    IndexOutOfRange,
)
from .rendering import (
    FormatError,
    format_cell,
    format_header,
    print_tables,
    render_tables,
)
from .utils import FormulaError, canonical_text

__all__ = [
    "__version__",
    # Config
    "GrapherConfig",
    "RenderConfig",
    "OutputConfig",
    "get_config",
    "configure",
    # Functions
    "ConstantFunction",
    "LinearFunction",
    "ExpressionFunction",
    "ClosureFunction",
    "sine",
    "parse_function",
    # Tables
    "Table",
    "TableStore",
    "sample",
    # Plans
    "RenderPlan",
    "PlanEntry",
    # Rendering
    "format_cell",
    "format_header",
    "print_tables",
    "render_tables",
    "canonical_text",
    # Errors
    "InvalidRange",
    "SamplingError",
    "IndexOutOfRange",
    "FormatError",
    "FormulaError",
]
