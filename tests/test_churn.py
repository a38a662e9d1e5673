"""Tests for churn rate calculations."""

import pytest

from saas_metrics.analyses.churn import (
    calculate_customer_churn_rate,
    calculate_revenue_churn_rate,
)
from saas_metrics.foundation.inputs import CustomerChurnInput, RevenueChurnInput


class TestCustomerChurnRate:
    """Test calculate_customer_churn_rate."""

    def test_basic_churn(self):
        churn_input = CustomerChurnInput(start_customers=100, churned_customers=5)
        assert calculate_customer_churn_rate(churn_input) == 5

    def test_zero_start_customers_returns_zero(self):
        """No starting customers reports 0 instead of dividing by zero."""
        churn_input = CustomerChurnInput(start_customers=0, churned_customers=5)
        assert calculate_customer_churn_rate(churn_input) == 0

    def test_full_churn(self):
        churn_input = CustomerChurnInput(start_customers=40, churned_customers=40)
        assert calculate_customer_churn_rate(churn_input) == 100


class TestRevenueChurnRate:
    """Test calculate_revenue_churn_rate."""

    def test_includes_contraction(self):
        churn_input = RevenueChurnInput(
            start_mrr=10000, churned_mrr=500, contraction_mrr=200
        )
        assert calculate_revenue_churn_rate(churn_input) == pytest.approx(7)

    def test_without_contraction(self):
        churn_input = RevenueChurnInput(start_mrr=10000, churned_mrr=500)
        assert calculate_revenue_churn_rate(churn_input) == 5

    def test_zero_start_mrr_returns_zero(self):
        churn_input = RevenueChurnInput(start_mrr=0, churned_mrr=500)
        assert calculate_revenue_churn_rate(churn_input) == 0

    def test_repeatable(self):
        churn_input = RevenueChurnInput(
            start_mrr=8000, churned_mrr=120, contraction_mrr=80
        )
        assert calculate_revenue_churn_rate(
            churn_input
        ) == calculate_revenue_churn_rate(churn_input)
