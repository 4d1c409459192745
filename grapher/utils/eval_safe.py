"""Safe evaluation of arithmetic expressions in one variable.

Provides a restricted AST evaluator that only allows numeric operations and a
whitelist of math functions, preventing attribute access, imports, and other
dangerous operations.
"""

import ast
import math
import operator
from typing import Any

# Names allowed in expressions besides the caller-supplied variables
SAFE_NAMES: dict[str, Any] = {
    "pi": math.pi,
    "e": math.e,
    "tau": math.tau,
    "abs": abs,
    "min": min,
    "max": max,
    "round": round,
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "asin": math.asin,
    "acos": math.acos,
    "atan": math.atan,
    "atan2": math.atan2,
    "sinh": math.sinh,
    "cosh": math.cosh,
    "tanh": math.tanh,
    "exp": math.exp,
    "log": math.log,
    "log10": math.log10,
    "log2": math.log2,
    "sqrt": math.sqrt,
    "floor": math.floor,
    "ceil": math.ceil,
}


class FormulaError(Exception):
    """Raised when an expression is invalid or its evaluation fails."""

    pass


def _float_pow(base: Any, exponent: Any) -> float:
    # Integer powers like 9 ** 9 ** 9 would grow without bound
    return math.pow(float(base), float(exponent))


_SAFE_BIN_OPS: dict[type[ast.operator], Any] = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.FloorDiv: operator.floordiv,
    ast.Mod: operator.mod,
    ast.Pow: _float_pow,
}
_SAFE_UNARY_OPS: dict[type[ast.unaryop], Any] = {
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
    ast.Not: operator.not_,
}
_SAFE_CMP_OPS: dict[type[ast.cmpop], Any] = {
    ast.Eq: operator.eq,
    ast.NotEq: operator.ne,
    ast.Lt: operator.lt,
    ast.LtE: operator.le,
    ast.Gt: operator.gt,
    ast.GtE: operator.ge,
}


def _eval_ast(node: ast.AST, context: dict[str, Any]) -> Any:
    if isinstance(node, ast.Expression):
        return _eval_ast(node.body, context)

    if isinstance(node, ast.Constant):
        if isinstance(node.value, bool) or not isinstance(node.value, (int, float)):
            raise FormulaError(f"Only numeric constants are allowed: {node.value!r}")
        return node.value

    if isinstance(node, ast.Name):
        if node.id.startswith("__"):
            raise FormulaError("dunder names are not allowed in expressions")
        if node.id in context:
            return context[node.id]
        if node.id in SAFE_NAMES:
            return SAFE_NAMES[node.id]
        raise FormulaError(f"Unknown name '{node.id}' in expression")

    if isinstance(node, ast.UnaryOp):
        op_type = type(node.op)
        if op_type not in _SAFE_UNARY_OPS:
            raise FormulaError(f"Unary operator not allowed: {op_type.__name__}")
        return _SAFE_UNARY_OPS[op_type](_eval_ast(node.operand, context))

    if isinstance(node, ast.BinOp):
        op_type = type(node.op)
        if op_type not in _SAFE_BIN_OPS:
            raise FormulaError(f"Binary operator not allowed: {op_type.__name__}")
        left = _eval_ast(node.left, context)
        right = _eval_ast(node.right, context)
        return _SAFE_BIN_OPS[op_type](left, right)

    if isinstance(node, ast.Compare):
        left = _eval_ast(node.left, context)
        for op, comparator in zip(node.ops, node.comparators):
            op_type = type(op)
            if op_type not in _SAFE_CMP_OPS:
                raise FormulaError(
                    f"Comparison operator not allowed: {op_type.__name__}"
                )
            right = _eval_ast(comparator, context)
            if not _SAFE_CMP_OPS[op_type](left, right):
                return False
            left = right
        return True

    if isinstance(node, ast.IfExp):
        return (
            _eval_ast(node.body, context)
            if _eval_ast(node.test, context)
            else _eval_ast(node.orelse, context)
        )

    if isinstance(node, ast.Call):
        if not isinstance(node.func, ast.Name):
            raise FormulaError("Only direct function calls are allowed")
        func_name = node.func.id
        if func_name.startswith("__"):
            raise FormulaError("Dunder functions are not allowed")
        func = SAFE_NAMES.get(func_name)
        if not callable(func):
            raise FormulaError(f"Function '{func_name}' is not allowed")
        if node.keywords:
            raise FormulaError("Keyword arguments are not allowed")

        args = []
        for arg in node.args:
            if isinstance(arg, ast.Starred):
                raise FormulaError("Star-args are not allowed")
            args.append(_eval_ast(arg, context))

        return func(*args)

    raise FormulaError(f"Unsupported expression element: {type(node).__name__}")


def parse_expression(expression: str) -> ast.Expression:
    """Parse an expression string, raising FormulaError on syntax errors."""
    try:
        return ast.parse(expression.strip(), mode="eval")
    except SyntaxError as e:
        raise FormulaError(f"Invalid expression '{expression}': {e.msg}") from e


def eval_safe(expression: str | ast.Expression, context: dict[str, Any]) -> Any:
    """
    Safely evaluate an arithmetic expression with restricted names.

    Args:
        expression: Expression string (e.g., "2 * x + 1", "sin(x)") or a tree
            previously returned by parse_expression
        context: Dictionary of variable names to values

    Returns:
        Result of evaluating the expression

    Raises:
        FormulaError: If parsing or evaluation fails

    Example:
        >>> eval_safe("max(0, x - 26)", {"x": 45})
        19
        >>> eval_safe("sin(pi / 2)", {})
        1.0
    """
    tree = (
        parse_expression(expression) if isinstance(expression, str) else expression
    )
    try:
        return _eval_ast(tree, context)
    except FormulaError:
        raise
    except (ArithmeticError, ValueError, TypeError) as e:
        raise FormulaError(f"Evaluation failed: {e}") from e


def eval_formula(expression: str | ast.Expression, x: float) -> float:
    """Evaluate an expression of ``x`` and coerce the result to float."""
    result = eval_safe(expression, {"x": x})
    try:
        return float(result)
    except (TypeError, ValueError, OverflowError) as e:
        raise FormulaError(f"Expression did not produce a number: {result!r}") from e
