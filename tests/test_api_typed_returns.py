"""Test that API functions return typed results."""

import json
import math

from rpnbrain_pkg.api import evaluate, feed, known_operators, validate_token
from rpnbrain_pkg.brain import CalculatorBrain
from rpnbrain_pkg.types import EvalResult


class TestEvaluate:
    def test_evaluate_returns_eval_result(self):
        result = evaluate("4 2 −")
        assert isinstance(result, EvalResult)
        assert result.ok is True
        assert result.result == 2.0
        assert result.stack == ["4.0", "2.0", "−"]
        assert result.remaining == []

    def test_ascii_spellings(self):
        assert evaluate("4 2 -").result == 2.0
        assert evaluate("6 3 *").result == 18.0
        assert evaluate("8 2 /").result == 4.0
        assert evaluate("9 sqrt").result == 3.0

    def test_token_list(self):
        assert evaluate(["1", "2", "+"]).result == 3.0

    def test_incomplete_stack(self):
        result = evaluate("+")
        assert result.ok is True
        assert result.result is None
        assert result.stack == ["+"]
        assert result.remaining == ["+"]

    def test_left_over_entries(self):
        result = evaluate("1 2 3 +")
        assert result.result == 5.0
        assert result.remaining == ["1.0"]

    def test_empty_input(self):
        result = evaluate("")
        assert result.ok is True
        assert result.result is None
        assert result.stack == []

    def test_invalid_operand_returns_error(self):
        result = evaluate("4 foo +")
        assert isinstance(result, EvalResult)
        assert result.ok is False
        assert "foo" in result.error

    def test_division_by_zero_is_not_an_error(self):
        result = evaluate("1 0 ÷")
        assert result.ok is True
        assert result.result == math.inf

    def test_each_call_uses_a_fresh_brain(self):
        evaluate("1 2")
        assert evaluate("+").result is None


class TestFeed:
    def test_feed_pushes_operators_and_operands(self):
        brain = CalculatorBrain()
        assert feed(brain, "4") == 4.0
        assert feed(brain, "2") == 2.0
        assert feed(brain, "-") == 2.0
        assert [str(entry) for entry in brain.stack] == ["4.0", "2.0", "−"]


class TestEvalResult:
    def test_to_dict_success(self):
        data = evaluate("6 3 ×").to_dict()
        assert data == {
            "ok": True,
            "result": 18.0,
            "stack": ["6.0", "3.0", "×"],
            "remaining": [],
        }

    def test_to_dict_keeps_none_result(self):
        data = evaluate("√").to_dict()
        assert "result" in data
        assert data["result"] is None

    def test_to_dict_error(self):
        data = evaluate("lambda").to_dict()
        assert data["ok"] is False
        assert "result" not in data
        assert "forbidden" in data["error"]

    def test_to_dict_is_json_serializable(self):
        assert json.loads(json.dumps(evaluate("9 √").to_dict()))["result"] == 3.0

    def test_repr(self):
        assert repr(evaluate("9 √")) == "EvalResult(ok=True, result=3.0, stack=['9.0', '√'])"
        assert repr(evaluate("import")).startswith("EvalResult(ok=False, error=")


class TestValidateToken:
    def test_valid_tokens(self):
        assert validate_token("2.5") == (True, None)
        assert validate_token("pi") == (True, None)
        assert validate_token("÷") == (True, None)
        assert validate_token("-") == (True, None)

    def test_invalid_tokens(self):
        is_valid, error = validate_token("import")
        assert is_valid is False
        assert error == "Input contains forbidden token: import"

        is_valid, error = validate_token("nope")
        assert is_valid is False
        assert isinstance(error, str)


def test_known_operators():
    assert known_operators() == ["×", "÷", "+", "−", "√"]
