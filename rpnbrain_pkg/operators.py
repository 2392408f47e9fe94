"""Fixed registry of the operators the brain understands.

Arithmetic follows IEEE-754 double semantics with no guarding: division by
zero yields ``inf``/``nan`` and the square root of a negative number yields
``nan``. NumPy supplies those semantics; plain Python floats raise instead.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator

import numpy as np

from .config import (
    SYMBOL_ADD,
    SYMBOL_DIVIDE,
    SYMBOL_MULTIPLY,
    SYMBOL_SQRT,
    SYMBOL_SUBTRACT,
)
from .logging_config import get_logger
from .types import BinaryOp, UnaryOp

logger = get_logger("operators")


def multiply(first: float, second: float) -> float:
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.multiply(first, second))


def divide(first: float, second: float) -> float:
    """Divide the earlier-pushed operand by the later-pushed one (``8 2 ÷`` is 4)."""
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        return float(np.divide(second, first))


def add(first: float, second: float) -> float:
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.add(first, second))


def subtract(first: float, second: float) -> float:
    """Subtract the later-pushed operand from the earlier one (``4 2 −`` is 2)."""
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.subtract(second, first))


def square_root(operand: float) -> float:
    with np.errstate(invalid="ignore"):
        return float(np.sqrt(operand))


class OperatorRegistry:
    """Immutable mapping from operator symbol to its stack entry template."""

    def __init__(self) -> None:
        known: dict[str, UnaryOp | BinaryOp] = {}

        def learn(op: UnaryOp | BinaryOp) -> None:
            known[op.symbol] = op

        learn(BinaryOp(SYMBOL_MULTIPLY, multiply))
        learn(BinaryOp(SYMBOL_DIVIDE, divide))
        learn(BinaryOp(SYMBOL_ADD, add))
        learn(BinaryOp(SYMBOL_SUBTRACT, subtract))
        learn(UnaryOp(SYMBOL_SQRT, square_root))

        self._ops = MappingProxyType(known)
        logger.debug("Operator registry seeded with %s", list(self._ops))

    def lookup(self, symbol: str) -> UnaryOp | BinaryOp | None:
        """Return the operator registered under ``symbol``, or None if unknown."""
        return self._ops.get(symbol)

    @property
    def symbols(self) -> list[str]:
        """Known symbols in registration order."""
        return list(self._ops)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._ops

    def __iter__(self) -> Iterator[str]:
        return iter(self._ops)

    def __len__(self) -> int:
        return len(self._ops)

    def __repr__(self) -> str:
        return f"OperatorRegistry({self.symbols!r})"
