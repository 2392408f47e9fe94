"""Token parsing and result formatting module.

This module handles:
- Splitting an input line into tokens
- Mapping keyboard spellings onto the registry's operator symbols
- Operand parsing (plain decimals, simple fractions and constants via SymPy)
- Number formatting for display
"""

from __future__ import annotations

import math
from functools import lru_cache
from tokenize import TokenError
from typing import Any

import sympy as sp
from sympy import parse_expr
from sympy.parsing.sympy_parser import standard_transformations

from . import config as _config
from .config import (
    ALLOWED_SYMPY_NAMES,
    CACHE_SIZE_PARSE,
    FORBIDDEN_TOKENS,
    MAX_EXPONENT,
    MAX_EXPRESSION_DEPTH,
    MAX_EXPRESSION_NODES,
    MAX_TOKEN_LENGTH,
    NUMBER_REGEX,
    OPERATOR_SYMBOLS,
    SYMBOL_ALIASES,
)
from .logging_config import get_logger
from .types import ValidationError

logger = get_logger("parser")

# Names the generated SymPy code may reference; anything else becomes a Symbol
_PARSE_GLOBALS = {
    "Integer": sp.Integer,
    "Float": sp.Float,
    "Rational": sp.Rational,
    "Symbol": sp.Symbol,
    "Function": sp.Function,
    "Add": sp.Add,
    "Mul": sp.Mul,
    "Pow": sp.Pow,
}


def tokenize(line: str) -> list[str]:
    """Split an input line into whitespace-separated tokens."""
    return line.split()


def normalize_symbol(token: str) -> str:
    """Map a keyboard spelling onto its registry symbol (e.g. ``-`` -> ``−``)."""
    return SYMBOL_ALIASES.get(token.strip(), token.strip())


def is_operator_token(token: str) -> bool:
    return normalize_symbol(token) in OPERATOR_SYMBOLS


@lru_cache(maxsize=CACHE_SIZE_PARSE)
def parse_operand(token: str) -> float:
    """Parse an operand token into a finite float.

    Accepts decimal literals (``2``, ``-0.5``, ``1e3``), simple rational
    expressions (``1/3``) and the constants ``pi``, ``E`` and ``e``.

    Raises:
        ValidationError: if the token is empty, too long, forbidden, not a
            real number, or not finite.
    """
    token = token.strip()
    if not token:
        raise ValidationError("Empty operand", "EMPTY_INPUT")
    if len(token) > MAX_TOKEN_LENGTH:
        raise ValidationError(
            f"Operand too long (max {MAX_TOKEN_LENGTH} characters)", "TOO_LONG"
        )
    lowered = token.lower()
    for forbidden in FORBIDDEN_TOKENS:
        if forbidden in lowered:
            raise ValidationError(
                f"Input contains forbidden token: {forbidden.strip() or repr(forbidden)}",
                "FORBIDDEN_TOKEN",
            )

    if NUMBER_REGEX.match(token):
        result = float(token)
    else:
        result = _parse_symbolic(token)
    if not math.isfinite(result):
        raise ValidationError(f"Operand is not finite: {token!r}", "NOT_FINITE")
    return result


def _parse_symbolic(token: str) -> float:
    try:
        value = parse_expr(
            token,
            local_dict=dict(ALLOWED_SYMPY_NAMES),
            global_dict=dict(_PARSE_GLOBALS),
            transformations=standard_transformations,
            evaluate=False,
        )
    except (SyntaxError, TokenError, NameError, TypeError, ValueError, AttributeError) as e:
        raise ValidationError(f"Could not parse operand {token!r}: {e}", "PARSE_ERROR") from e
    except Exception as e:
        logger.warning(f"Unexpected error parsing operand {token!r}: {e}", exc_info=True)
        raise ValidationError(f"Could not parse operand {token!r}", "PARSE_ERROR") from e

    _validate_expression_tree(value)

    if not isinstance(value, sp.Basic) or not value.is_number:
        raise ValidationError(f"Not a number: {token!r}", "NOT_A_NUMBER")
    if value.is_real is False:
        raise ValidationError(f"Not a real number: {token!r}", "NOT_A_NUMBER")

    try:
        return float(sp.N(value))
    except OverflowError as e:
        raise ValidationError(f"Operand is not finite: {token!r}", "NOT_FINITE") from e
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Not a real number: {token!r}", "NOT_A_NUMBER") from e


def _validate_expression_tree(expr: Any, depth: int = 0, node_count: list[int] = None) -> None:
    """Reject unevaluated operand trees that are too large to evaluate safely.

    Args:
        expr: Expression parsed with ``evaluate=False``
        depth: Current depth in the tree
        node_count: List to track total node count (modified in place)
    """
    if node_count is None:
        node_count = [0]
    node_count[0] += 1
    if node_count[0] > MAX_EXPRESSION_NODES:
        raise ValidationError(
            f"Expression too complex (>{MAX_EXPRESSION_NODES} nodes)", "TOO_COMPLEX"
        )
    if depth > MAX_EXPRESSION_DEPTH:
        raise ValidationError(
            f"Expression too deeply nested (>{MAX_EXPRESSION_DEPTH} levels)", "TOO_DEEP"
        )
    if not isinstance(expr, sp.Basic):
        return

    for arg in expr.args:
        _validate_expression_tree(arg, depth + 1, node_count)
    # Children first, so any power inside the exponent is already bounded
    if isinstance(expr, sp.Pow):
        _check_exponent(expr.exp)


def _check_exponent(exponent: sp.Basic) -> None:
    if not exponent.is_number:
        return
    try:
        size = abs(float(sp.N(exponent)))
    except OverflowError:
        size = math.inf
    except (TypeError, ValueError):
        return
    if not size <= MAX_EXPONENT:
        raise ValidationError(
            f"Exponent too large (max {MAX_EXPONENT})", "TOO_COMPLEX"
        )


def format_number(val: Any, precision: int | None = None) -> str:
    """Format a numeric value with specified precision.

    Args:
        val: Numeric value to format
        precision: Number of significant digits (default: OUTPUT_PRECISION)

    Returns:
        Formatted string representation of the number
    """
    if precision is None:
        precision = _config.OUTPUT_PRECISION
    try:
        fmt = "{:." + str(int(precision)) + "g}"
        return fmt.format(float(val))
    except (ValueError, TypeError, OverflowError):
        return str(val)
