"""All Pydantic models for Grapher.

- functions.py: Function variants (constant, linear, expression) and closures
- table.py: Sampled tables
- plan.py: Render plans loaded from YAML
"""

from .functions import (
    Function,
    ConstantFunction,
    LinearFunction,
    ExpressionFunction,
    ClosureFunction,
    SerializableFunction,
    sine,
    as_function,
    parse_function,
)
from .table import Table
from .plan import PlanEntry, RenderPlan

__all__ = [
    # Functions
    "Function",
    "ConstantFunction",
    "LinearFunction",
    "ExpressionFunction",
    "ClosureFunction",
    "SerializableFunction",
    "sine",
    "as_function",
    "parse_function",
    # Tables
    "Table",
    # Plans
    "PlanEntry",
    "RenderPlan",
]
