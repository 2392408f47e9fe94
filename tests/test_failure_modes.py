"""Tests for failure modes and invalid input handling."""

import math

import pytest

from rpnbrain_pkg.api import evaluate
from rpnbrain_pkg.brain import CalculatorBrain
from rpnbrain_pkg.parser import parse_operand
from rpnbrain_pkg.types import ValidationError


class TestInputValidationFailures:
    """Test input validation failure modes."""

    def test_empty_operand(self):
        with pytest.raises(ValidationError):
            parse_operand("")

    def test_too_long_operand(self):
        with pytest.raises(ValidationError):
            parse_operand("1" * 10001)

    def test_forbidden_token_eval(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_operand("eval('1+1')")
        assert "forbidden" in str(exc_info.value).lower()

    def test_complex_constant_not_accepted(self):
        with pytest.raises(ValidationError):
            parse_operand("I")


class TestInsufficientOperandsNeverRaise:
    """Incomplete stacks report no result at every stage."""

    @pytest.mark.parametrize("line", ["+", "√", "1 +", "1 2 + ×", "− ÷ ×"])
    def test_incomplete_lines(self, line):
        result = evaluate(line)
        assert result.ok is True
        assert result.result is None
        assert result.remaining == result.stack

    def test_every_operator_on_empty_brain(self):
        for symbol in ("×", "÷", "+", "−", "√"):
            brain = CalculatorBrain()
            assert brain.perform_operation(symbol) is None
            assert len(brain) == 1


class TestNumericEdgeResults:
    """Special floating-point values are results, not failures."""

    def test_division_by_zero(self):
        assert evaluate("5 0 ÷").result == math.inf

    def test_sqrt_of_negative(self):
        assert math.isnan(evaluate("-9 √").result)

    def test_infinity_minus_infinity(self):
        assert math.isnan(evaluate("1 0 ÷ 1 0 ÷ −").result)

    def test_nan_reaches_dict(self):
        data = evaluate("-1 √").to_dict()
        assert data["ok"] is True
        assert math.isnan(data["result"])


class TestOversizedOperands:
    """Operands that would take unbounded time to evaluate are rejected."""

    @pytest.mark.parametrize("line", ["9**9**9", "1 9**9**9 +", "2**100000"])
    def test_power_towers_fail_fast(self, line):
        result = evaluate(line)
        assert result.ok is False
        assert "complex" in result.error.lower() or "exponent" in result.error.lower()
