"""Sampling loop that evaluates a function over an inclusive input range.

The sampler is a generic range walker - it doesn't know what the function
computes, it just evaluates whatever it's given at ``min, min + step, ...``
up to and including the last input that is ``<= max``.
"""

import logging
import math
from typing import Any

from ..core.models import Table, as_function
from ..utils.eval_safe import FormulaError

logger = logging.getLogger(__name__)


class InvalidRange(ValueError):
    """Raised when a sampling range could never terminate."""

    pass


class SamplingError(Exception):
    """Raised when the function fails at one of the sampled inputs."""

    def __init__(self, message: str, x: float):
        super().__init__(message)
        self.x = x


def validate_range(min: float, max: float, step: float) -> None:
    """Check that walking ``[min, max]`` by ``step`` terminates.

    ``min > max`` is valid and simply produces an empty table.

    Raises:
        InvalidRange: If step is not positive, or the walk is unbounded.
    """
    if math.isnan(step) or step <= 0:
        raise InvalidRange(f"Sampling step must be positive, got {step}")
    if math.isinf(step):
        raise InvalidRange("Sampling step must be finite")
    if math.isinf(max) and max > 0 and not math.isnan(min) and min <= max:
        raise InvalidRange(f"Cannot sample an unbounded range [{min}, {max}]")
    if math.isinf(min) and min < 0 and max >= min:
        raise InvalidRange(f"Cannot sample an unbounded range [{min}, {max}]")


def sample(
    function: Any,
    min: float,
    max: float,
    step: float = 1.0,
    *,
    label: str | None = None,
) -> Table:
    """Evaluate ``function`` over ``[min, max]`` and collect the samples.

    Inputs are produced by repeated addition (``x += step``), so the last
    input is subject to the usual floating-point accumulation drift.

    Args:
        function: Function model, or any plain ``float -> float`` callable
        min: First input
        max: Inclusive upper bound
        step: Input increment (default 1)
        label: Optional description stored on the table

    Returns:
        A new, immutable Table

    Raises:
        InvalidRange: If the range would not terminate
        SamplingError: If the function fails at an input
    """
    min, max, step = float(min), float(max), float(step)
    validate_range(min, max, step)
    func = as_function(function)

    rows: list[tuple[float, float]] = []
    x = min
    while x <= max:
        try:
            y = float(func.evaluate(x))
        except (FormulaError, ArithmeticError, ValueError, TypeError) as e:
            raise SamplingError(f"Function failed at x={x}: {e}", x) from e
        rows.append((x, y))
        next_x = x + step
        if next_x == x:
            raise InvalidRange(
                f"Sampling step {step} is too small to advance past x={x}"
            )
        x = next_x

    if label is None:
        label = str(func)

    logger.debug(
        "Sampled %s over [%s, %s] step %s: %d rows", label, min, max, step, len(rows)
    )
    return Table(rows=tuple(rows), label=label)
