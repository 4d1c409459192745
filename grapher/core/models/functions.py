"""Function variants that can be sampled into tables.

Every variant exposes ``evaluate(x) -> float``. The serializable variants are
Pydantic models discriminated by ``kind``; ``ClosureFunction`` wraps an
arbitrary Python callable such as ``math.sin``.
"""

import ast
import math
from typing import Any, Callable, Literal, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from ...utils.eval_safe import FormulaError, eval_formula, parse_expression


@runtime_checkable
class Function(Protocol):
    """Anything with a single-argument ``evaluate``."""

    def evaluate(self, x: float) -> float: ...


# =============================================================================
# Serializable variants
# =============================================================================


class ConstantFunction(BaseModel):
    """Output is fixed regardless of input."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["constant"] = "constant"
    value: float

    def evaluate(self, x: float) -> float:
        return self.value

    def __str__(self) -> str:
        return f"const:{self.value}"


class LinearFunction(BaseModel):
    """``slope * x + intercept``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["linear"] = "linear"
    slope: float
    intercept: float = 0.0

    def evaluate(self, x: float) -> float:
        return (self.slope * x) + self.intercept

    def __str__(self) -> str:
        return f"linear:{self.slope},{self.intercept}"


class ExpressionFunction(BaseModel):
    """Arithmetic expression of ``x`` evaluated with the safe evaluator.

    The expression is parsed once at construction so syntax errors surface
    before sampling starts. Names outside the whitelist are only detected
    when the expression is evaluated.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["expression"] = "expression"
    expression: str = Field(description="Expression in x, e.g. 'sin(x) * 2'")

    _tree: ast.Expression = PrivateAttr()

    @field_validator("expression")
    @classmethod
    def _check_syntax(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("expression must not be empty")
        parse_expression(value)
        return value.strip()

    def model_post_init(self, __context: Any) -> None:
        self._tree = parse_expression(self.expression)

    def evaluate(self, x: float) -> float:
        return eval_formula(self._tree, x)

    def __str__(self) -> str:
        return self.expression


SerializableFunction = ConstantFunction | LinearFunction | ExpressionFunction


# =============================================================================
# Closures
# =============================================================================


class ClosureFunction:
    """Wraps a plain ``float -> float`` callable."""

    def __init__(self, func: Callable[[float], float], name: str | None = None):
        if not callable(func):
            raise TypeError(f"Expected a callable, got {type(func).__name__}")
        self.func = func
        self.name = name or getattr(func, "__name__", "closure")

    def evaluate(self, x: float) -> float:
        return float(self.func(x))

    def __repr__(self) -> str:
        return f"ClosureFunction({self.name})"

    __str__ = __repr__


def sine() -> ClosureFunction:
    """The sine function, input in radians."""
    return ClosureFunction(math.sin, name="sin")


def as_function(obj: Any) -> Function:
    """Return ``obj`` as something exposing ``evaluate``.

    Accepts any object with an ``evaluate`` method or a plain callable.
    """
    if isinstance(obj, Function):
        return obj
    if callable(obj):
        return ClosureFunction(obj)
    raise TypeError(f"Cannot use {type(obj).__name__} as a function")


def _parse_float(text: str, source: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise FormulaError(f"Invalid number {text!r} in function '{source}'") from None


def parse_function(source: str) -> SerializableFunction:
    """Build a function from its command-line text.

    Examples:
        "const:6" → ConstantFunction(value=6.0)
        "linear:-22,0" → LinearFunction(slope=-22.0, intercept=0.0)
        "sin(x) / 2" → ExpressionFunction(expression="sin(x) / 2")

    Raises:
        FormulaError: If the text is malformed.
    """
    text = source.strip()
    prefix, sep, rest = text.partition(":")
    prefix = prefix.strip().lower()

    if sep and prefix == "const":
        return ConstantFunction(value=_parse_float(rest.strip(), source))

    if sep and prefix == "linear":
        parts = [p.strip() for p in rest.split(",")]
        if len(parts) not in (1, 2) or not parts[0]:
            raise FormulaError(
                f"Invalid linear function '{source}'. Expected 'linear:<slope>,<intercept>'"
            )
        slope = _parse_float(parts[0], source)
        intercept = _parse_float(parts[1], source) if len(parts) == 2 else 0.0
        return LinearFunction(slope=slope, intercept=intercept)

    try:
        return ExpressionFunction(expression=text)
    except ValueError as e:
        raise FormulaError(f"Invalid function '{source}': {e}") from e
