"""Tests for the fixed operator registry."""

import math

import pytest

from rpnbrain_pkg.operators import OperatorRegistry, divide, square_root, subtract
from rpnbrain_pkg.types import BinaryOp, UnaryOp


@pytest.fixture
def registry():
    return OperatorRegistry()


class TestRegistryContents:
    def test_seeded_symbols(self, registry):
        assert registry.symbols == ["×", "÷", "+", "−", "√"]
        assert len(registry) == 5

    @pytest.mark.parametrize("symbol", ["×", "÷", "+", "−"])
    def test_binary_operators(self, registry, symbol):
        op = registry.lookup(symbol)
        assert isinstance(op, BinaryOp)
        assert op.symbol == symbol
        assert str(op) == symbol

    def test_square_root_is_unary(self, registry):
        assert isinstance(registry.lookup("√"), UnaryOp)

    @pytest.mark.parametrize("symbol", ["%", "-", "*", "/", "sqrt", "", "++"])
    def test_unknown_symbols_are_absent(self, registry, symbol):
        assert registry.lookup(symbol) is None
        assert symbol not in registry

    def test_lookup_is_stable(self, registry):
        assert registry.lookup("+") is registry.lookup("+")


class TestRegistryIsImmutable:
    def test_mapping_cannot_be_mutated(self, registry):
        with pytest.raises(TypeError):
            registry._ops["%"] = BinaryOp("%", math.fmod)

    def test_entries_are_frozen(self, registry):
        op = registry.lookup("+")
        with pytest.raises(AttributeError):
            op.symbol = "plus"

    def test_instances_are_independent(self):
        assert OperatorRegistry().symbols == OperatorRegistry().symbols


class TestOperandOrder:
    """Binary functions receive (later-pushed, earlier-pushed)."""

    def test_divide(self):
        assert divide(2.0, 8.0) == 4.0

    def test_subtract(self):
        assert subtract(2.0, 4.0) == 2.0

    @pytest.mark.parametrize("symbol,first,second,expected", [
        ("×", 3.0, 6.0, 18.0),
        ("+", 2.0, 5.0, 7.0),
        ("÷", 4.0, 2.0, 0.5),
        ("−", 10.0, 4.0, -6.0),
    ])
    def test_registry_functions(self, registry, symbol, first, second, expected):
        assert registry.lookup(symbol).fn(first, second) == expected


class TestFloatingPointSemantics:
    def test_divide_by_zero(self):
        assert divide(0.0, 5.0) == math.inf
        assert divide(0.0, -5.0) == -math.inf

    def test_zero_over_zero(self):
        assert math.isnan(divide(0.0, 0.0))

    def test_sqrt_negative(self):
        assert math.isnan(square_root(-1.0))

    def test_sqrt_returns_python_float(self):
        assert type(square_root(2.0)) is float
        assert square_root(2.0) == pytest.approx(math.sqrt(2.0))

    def test_overflow_is_infinite(self, registry):
        assert registry.lookup("×").fn(1e308, 10.0) == math.inf

    def test_no_runtime_warnings(self, recwarn):
        divide(0.0, 1.0)
        square_root(-9.0)
        assert not [w for w in recwarn if issubclass(w.category, RuntimeWarning)]
