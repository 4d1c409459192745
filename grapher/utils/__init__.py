"""Pure utility functions for Grapher.

These modules have no dependencies on grapher models and can be imported
from anywhere without circular import risk.

Modules:
- eval_safe: Safe arithmetic expression evaluation
- numbers: Canonical decimal text for floats
"""

from .eval_safe import (
    eval_safe,
    eval_formula,
    parse_expression,
    FormulaError,
    SAFE_NAMES,
)
from .numbers import canonical_text

__all__ = [
    # Eval
    "eval_safe",
    "eval_formula",
    "parse_expression",
    "FormulaError",
    "SAFE_NAMES",
    # Numbers
    "canonical_text",
]
