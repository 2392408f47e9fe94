"""Stack entry variants and result dataclasses for consistent API responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, NamedTuple, Union


@dataclass(frozen=True)
class Operand:
    """A literal value pushed onto the stack."""

    value: float

    @property
    def symbol(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class UnaryOp:
    """Operator consuming one reduced operand."""

    symbol: str
    fn: Callable[[float], float] = field(compare=False, repr=False)

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class BinaryOp:
    """Operator consuming two reduced operands.

    ``fn`` is called as ``fn(first, second)`` where ``first`` is reduced from
    the top of the stack (the later-pushed operand) and ``second`` from what
    remains below it.
    """

    symbol: str
    fn: Callable[[float, float], float] = field(compare=False, repr=False)

    def __str__(self) -> str:
        return self.symbol


StackEntry = Union[Operand, UnaryOp, BinaryOp]


class Reduction(NamedTuple):
    """Result of reducing a run of stack entries.

    ``result`` is None when the entries cannot form a complete expression;
    ``remaining`` holds the entries left unconsumed.
    """

    result: float | None
    remaining: tuple[StackEntry, ...]


def _symbols(entries: tuple[StackEntry, ...] | list[StackEntry]) -> list[str]:
    return [str(entry) for entry in entries]


@dataclass
class EvaluationTrace:
    """Diagnostic snapshot of one evaluation pass."""

    stack: list[str]
    result: float | None
    remaining: list[str]

    @classmethod
    def from_reduction(
        cls, entries: tuple[StackEntry, ...], reduction: Reduction
    ) -> EvaluationTrace:
        return cls(
            stack=_symbols(entries),
            result=reduction.result,
            remaining=_symbols(reduction.remaining),
        )

    def __str__(self) -> str:
        stack = ", ".join(self.stack)
        remaining = ", ".join(self.remaining)
        return f"[{stack}] = {self.result} with [{remaining}] left over"


@dataclass
class EvalResult:
    """Result of feeding a token sequence through a fresh brain."""

    ok: bool
    result: float | None = None
    stack: list[str] | None = None
    remaining: list[str] | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.ok:
            # None is meaningful here: not enough operands yet
            result_dict["result"] = self.result
        if self.stack is not None:
            result_dict["stack"] = self.stack
        if self.remaining is not None:
            result_dict["remaining"] = self.remaining
        if self.error is not None:
            result_dict["error"] = self.error
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"EvalResult(ok=False, error={self.error!r})"
        parts = [f"ok={self.ok}", f"result={self.result!r}"]
        if self.stack is not None:
            parts.append(f"stack={self.stack!r}")
        if self.remaining:
            parts.append(f"remaining={self.remaining!r}")
        return f"EvalResult({', '.join(parts)})"


class ValidationError(Exception):
    """Raised when an input token is rejected."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
