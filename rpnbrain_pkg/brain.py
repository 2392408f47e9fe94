"""The evaluation engine: an append-only operand/operator stack reduced in postfix order."""

from __future__ import annotations

from .logging_config import get_logger
from .operators import OperatorRegistry
from .types import (
    BinaryOp,
    EvaluationTrace,
    Operand,
    Reduction,
    StackEntry,
    UnaryOp,
)

logger = get_logger("brain")


def reduce_entries(entries: tuple[StackEntry, ...]) -> Reduction:
    """Reduce ``entries`` from the top (last element) downward.

    Returns the value of the topmost complete expression together with the
    entries left below it. When no complete expression can be formed the
    result is None and ``remaining`` is ``entries`` exactly as given.
    """
    if not entries:
        return Reduction(None, entries)

    top, rest = entries[-1], entries[:-1]

    if isinstance(top, Operand):
        return Reduction(top.value, rest)

    if isinstance(top, UnaryOp):
        operand = reduce_entries(rest)
        if operand.result is None:
            return Reduction(None, entries)
        return Reduction(top.fn(operand.result), operand.remaining)

    if isinstance(top, BinaryOp):
        first = reduce_entries(rest)
        if first.result is None:
            return Reduction(None, entries)
        second = reduce_entries(first.remaining)
        if second.result is None:
            return Reduction(None, entries)
        return Reduction(top.fn(first.result, second.result), second.remaining)

    raise TypeError(f"Unknown stack entry: {top!r}")


class CalculatorBrain:
    """Stack-based evaluator fed one operand or operator at a time.

    Every push re-evaluates the whole stack and returns the current result,
    or None while the stack cannot yet be reduced to a value.

    Example:
        >>> brain = CalculatorBrain()
        >>> brain.push_operand(4)
        4.0
        >>> brain.push_operand(2)
        2.0
        >>> brain.perform_operation("−")
        2.0
    """

    def __init__(self) -> None:
        self._stack: list[StackEntry] = []
        self._registry = OperatorRegistry()
        self.last_trace: EvaluationTrace | None = None

    @property
    def registry(self) -> OperatorRegistry:
        return self._registry

    @property
    def stack(self) -> tuple[StackEntry, ...]:
        """Read-only snapshot of the entries in push order."""
        return tuple(self._stack)

    def push_operand(self, operand: float) -> float | None:
        self._stack.append(Operand(float(operand)))
        return self.evaluate()

    def perform_operation(self, symbol: str) -> float | None:
        """Push the operator registered as ``symbol`` and re-evaluate.

        Unknown symbols leave the stack untouched.
        """
        operation = self._registry.lookup(symbol)
        if operation is not None:
            self._stack.append(operation)
        else:
            logger.debug("Ignoring unknown operator symbol %r", symbol)
        return self.evaluate()

    def evaluate(self) -> float | None:
        return self.trace().result

    def trace(self) -> EvaluationTrace:
        """Evaluate the stack and return the full diagnostic trace."""
        snapshot = tuple(self._stack)
        try:
            reduction = reduce_entries(snapshot)
        except RecursionError:
            logger.warning(
                "Stack of %d entries is nested too deeply to reduce", len(snapshot)
            )
            reduction = Reduction(None, snapshot)

        trace = EvaluationTrace.from_reduction(snapshot, reduction)
        logger.debug("%s = %s with %s left over", trace.stack, trace.result, trace.remaining)
        self.last_trace = trace
        return trace

    def __len__(self) -> int:
        return len(self._stack)

    def __str__(self) -> str:
        return " ".join(str(entry) for entry in self._stack)

    def __repr__(self) -> str:
        return f"CalculatorBrain({[str(entry) for entry in self._stack]!r})"
