"""Public API for RPN Brain - returns structured objects without side effects."""

from __future__ import annotations

from typing import Iterable

from .brain import CalculatorBrain
from .config import OPERATOR_SYMBOLS
from .logging_config import get_logger
from .parser import is_operator_token, normalize_symbol, parse_operand, tokenize
from .types import EvalResult, ValidationError

logger = get_logger("api")


def feed(brain: CalculatorBrain, token: str) -> float | None:
    """Push one token onto ``brain``: operators by symbol, anything else as an operand.

    Raises:
        ValidationError: if the token is neither an operator nor a valid operand
    """
    if is_operator_token(token):
        return brain.perform_operation(normalize_symbol(token))
    return brain.push_operand(parse_operand(token))


def evaluate(tokens: str | Iterable[str]) -> EvalResult:
    """Evaluate a postfix token sequence on a fresh brain.

    Args:
        tokens: Whitespace-separated string (e.g., "4 2 -") or iterable of tokens

    Returns:
        EvalResult with the result (None if the stack is incomplete), the
        stack symbols and any unconsumed entries

    Example:
        >>> from rpnbrain_pkg.api import evaluate
        >>> evaluate("8 2 /").result
        4.0
        >>> evaluate("4 2 −").result
        2.0
        >>> evaluate("+").result is None
        True
    """
    if isinstance(tokens, str):
        tokens = tokenize(tokens)
    brain = CalculatorBrain()
    try:
        for token in tokens:
            feed(brain, token)
    except ValidationError as e:
        return EvalResult(ok=False, error=str(e))
    except (TypeError, AttributeError) as e:
        return EvalResult(ok=False, error=f"Invalid token: {e}")

    trace = brain.trace()
    return EvalResult(
        ok=True,
        result=trace.result,
        stack=trace.stack,
        remaining=trace.remaining,
    )


def validate_token(token: str) -> tuple[bool, str | None]:
    """Validate a token without evaluating anything.

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from rpnbrain_pkg.api import validate_token
        >>> validate_token("2.5")
        (True, None)
        >>> validate_token("import")
        (False, 'Input contains forbidden token: import')
    """
    if is_operator_token(token):
        return True, None
    try:
        parse_operand(token)
        return True, None
    except ValidationError as e:
        return False, str(e)
    except (TypeError, AttributeError) as e:
        return False, f"Validation error: {e}"
    except Exception as e:
        logger.warning(f"Unexpected validation error: {e}", exc_info=True)
        return False, "Unexpected validation error"


def known_operators() -> list[str]:
    return list(OPERATOR_SYMBOLS)
