"""Tests for the fluent LTV calculator."""

import dataclasses
import math

import pytest

from saas_metrics.foundation.inputs import DurationUnit
from saas_metrics.models.ltv_calculator import LTVCalculator


class TestLTVCalculator:
    """Test LTVCalculator builder."""

    def test_chained_ltv(self):
        """Sales 100, 10 users and 10% churn give an LTV of 100."""
        ltv = LTVCalculator().with_revenue(100, 10).with_churn_rate(10).ltv()
        assert ltv == 100

    def test_arpu(self):
        assert LTVCalculator().with_revenue(100, 10).arpu() == 10

    def test_average_duration_defaults_to_percentage(self):
        calculator = LTVCalculator().with_churn_rate(10)
        assert calculator.unit is DurationUnit.PERCENTAGE
        assert calculator.average_duration() == 10

    def test_average_duration_decimal(self):
        calculator = LTVCalculator().with_churn_rate(0.1, "number")
        assert calculator.unit is DurationUnit.DECIMAL
        assert calculator.average_duration() == 10

    def test_step_order_does_not_matter(self):
        a = LTVCalculator().with_revenue(100, 10).with_churn_rate(10)
        b = LTVCalculator().with_churn_rate(10).with_revenue(100, 10)
        assert a.ltv() == b.ltv()

    def test_builder_is_immutable(self):
        """with_* calls return new calculators and leave the original alone."""
        base = LTVCalculator()
        configured = base.with_revenue(100, 10)
        assert configured is not base
        assert base.sales is None
        with pytest.raises(dataclasses.FrozenInstanceError):
            configured.sales = 5

    def test_shared_partial_calculator(self):
        base = LTVCalculator().with_revenue(100, 10)
        assert base.with_churn_rate(10).ltv() == 100
        assert base.with_churn_rate(20).ltv() == 50

    def test_results_are_not_cached(self):
        calculator = LTVCalculator().with_revenue(100, 10).with_churn_rate(10)
        assert calculator.ltv() == calculator.ltv()

    def test_zero_churn_propagates_infinity(self):
        ltv = LTVCalculator().with_revenue(100, 10).with_churn_rate(0).ltv()
        assert math.isinf(ltv)

    def test_ltv_without_revenue_raises_error(self):
        with pytest.raises(ValueError, match="with_revenue"):
            LTVCalculator().with_churn_rate(10).ltv()

    def test_ltv_without_churn_raises_error(self):
        with pytest.raises(ValueError, match="with_churn_rate"):
            LTVCalculator().with_revenue(100, 10).ltv()

    def test_unknown_unit_raises_error(self):
        with pytest.raises(ValueError):
            LTVCalculator().with_churn_rate(10, "ratio")
