"""
Tests for ExpressionEngine: compile cache, calculation and tabulation.
"""

import math

import pytest

from calculator import ExpressionEngine
from core import UnbalancedParens, InvalidToken


@pytest.fixture
def engine():
    """Create an engine with default parser settings."""
    return ExpressionEngine(cache_size=4, strict_parens=False, right_assoc_pow=False)


class TestCompile:
    """Tests for compile() and its cache."""

    def test_returns_tuple(self, engine):
        postfix = engine.compile("1+2")
        assert isinstance(postfix, tuple)
        assert len(postfix) == 3

    def test_cache_hit(self, engine):
        first = engine.compile("1+2")
        second = engine.compile("1+2")
        assert first is second
        assert engine.cache_info == {'hits': 1, 'misses': 1, 'size': 1}

    def test_lru_eviction(self):
        engine = ExpressionEngine(cache_size=2)
        engine.compile("1")
        engine.compile("2")
        engine.compile("1")  # 1 becomes most recent
        engine.compile("3")
        assert engine.cache_info['size'] == 2
        engine.compile("1")
        assert engine.cache_info['hits'] == 2
        engine.compile("2")
        assert engine.cache_info['misses'] == 4

    def test_clear_cache(self, engine):
        engine.compile("1+2")
        engine.compile("1+2")
        engine.clear_cache()
        assert engine.cache_info == {'hits': 0, 'misses': 0, 'size': 0}

    def test_failed_compile_not_cached(self, engine):
        with pytest.raises(InvalidToken):
            engine.compile("2x")
        assert engine.cache_info['size'] == 0


class TestCalculate:
    """Tests for calculate() and apply()."""

    def test_calculate(self, engine):
        assert engine.calculate("1+2*3") == 7.0

    def test_default_power_is_left_associative(self, engine):
        assert engine.calculate("2^2^3") == 64.0

    def test_right_assoc_engine(self):
        assert ExpressionEngine(right_assoc_pow=True).calculate("2^2^3") == 256.0

    def test_strict_engine(self):
        strict = ExpressionEngine(strict_parens=True)
        with pytest.raises(UnbalancedParens):
            strict.calculate("1+2)")

    def test_permissive_engine(self, engine):
        assert engine.calculate("1+2)") == 3.0

    def test_apply(self, engine):
        postfix = engine.compile("x*x+1")
        assert engine.apply(postfix, 3.0) == 10.0
        assert engine.apply(postfix, 0.0) == 1.0

    def test_divide_by_zero(self, engine):
        assert math.isinf(engine.calculate("1/0"))


class TestTabulate:
    """Tests for tabulate()."""

    def test_values_and_index(self, engine):
        postfix = engine.compile("x*x+1")
        series = engine.tabulate(postfix, 0, 2, 3)
        assert list(series.index) == [0.0, 1.0, 2.0]
        assert series.tolist() == [1.0, 2.0, 5.0]

    def test_single_point(self, engine):
        series = engine.tabulate(engine.compile("x+1"), 4, 10, 1)
        assert series.tolist() == [5.0]

    def test_index_name(self, engine):
        series = engine.tabulate(engine.compile("x"), 0, 1, 2, index_name="x")
        assert series.index.name == "x"

    def test_non_positive_count(self, engine):
        with pytest.raises(ValueError):
            engine.tabulate(engine.compile("x"), 0, 1, 0)

    @pytest.mark.filterwarnings("error")
    def test_infinite_bound_raises_no_warning(self, engine):
        """Test that linspace over an infinite range stays quiet like the operators do."""
        series = engine.tabulate(engine.compile("x"), 0, float("inf"), 3)
        assert len(series) == 3
        assert series.iloc[-1] == float("inf")
