"""Tests for churn and retention pandas adapters."""

import pandas as pd  # type: ignore
import pytest

from saas_metrics.foundation.inputs import CohortDataPoint, NRRInput
from saas_metrics.pandas import (
    cohort_retention_df,
    dataframe_to_cohorts,
    dataframe_to_nrr_inputs,
    revenue_retention_df,
)


class TestDataFrameToCohorts:
    """Test dataframe_to_cohorts conversion."""

    def test_converts_rows(self):
        df = pd.DataFrame({"month": [0, 1], "customers": [100, 90]})

        points = dataframe_to_cohorts(df)

        assert points == [
            CohortDataPoint(month=0, customers=100),
            CohortDataPoint(month=1, customers=90),
        ]

    def test_missing_columns_raises_error(self):
        df = pd.DataFrame({"month": [0]})
        with pytest.raises(ValueError, match="missing required columns"):
            dataframe_to_cohorts(df)

    def test_whole_float_months_are_accepted(self):
        df = pd.DataFrame({"month": [0.0, 1.0], "customers": [100, 90]})
        assert [point.month for point in dataframe_to_cohorts(df)] == [0, 1]

    def test_fractional_month_raises_error(self):
        """Fractional months are rejected rather than truncated."""
        df = pd.DataFrame({"month": [0, 1.5], "customers": [100, 90]})
        with pytest.raises(ValueError, match="month must be an integer"):
            dataframe_to_cohorts(df)

    def test_negative_customers_raises_error(self):
        df = pd.DataFrame({"month": [0], "customers": [-1]})
        with pytest.raises(ValueError, match="customers cannot be negative"):
            dataframe_to_cohorts(df)


class TestCohortRetentionDataFrame:
    """Test cohort_retention_df."""

    def test_sorted_by_month(self):
        df = pd.DataFrame({"month": [2, 0, 1], "customers": [85, 100, 90]})

        result = cohort_retention_df(df)

        assert list(result.columns) == ["month", "customers", "retention_pct"]
        assert list(result["month"]) == [0, 1, 2]
        assert list(result["customers"]) == [100, 90, 85]
        assert list(result["retention_pct"]) == [100.0, 90.0, 85.0]

    def test_zero_base(self):
        df = pd.DataFrame({"month": [0, 1], "customers": [0, 0]})
        assert list(cohort_retention_df(df)["retention_pct"]) == [0.0, 0.0]

    def test_empty_dataframe(self):
        df = pd.DataFrame(columns=["month", "customers"])
        result = cohort_retention_df(df)
        assert result.empty
        assert list(result.columns) == ["month", "customers", "retention_pct"]


class TestDataFrameToNRRInputs:
    """Test dataframe_to_nrr_inputs conversion."""

    def test_optional_columns_default_to_zero(self):
        df = pd.DataFrame({"start_mrr": [10000], "churned_mrr": [300]})

        inputs = dataframe_to_nrr_inputs(df)

        assert inputs == [NRRInput(start_mrr=10000.0, churned_mrr=300.0)]

    def test_null_optional_values_count_as_zero(self):
        df = pd.DataFrame(
            {
                "start_mrr": [10000, 10000],
                "churned_mrr": [300, 300],
                "expansion_mrr": [1000, None],
            }
        )

        inputs = dataframe_to_nrr_inputs(df)

        assert inputs[0].expansion_mrr == 1000
        assert inputs[1].expansion_mrr == 0

    def test_null_required_values_raise_error(self):
        df = pd.DataFrame({"start_mrr": [None], "churned_mrr": [300]})
        with pytest.raises(ValueError, match="Null/NaN values"):
            dataframe_to_nrr_inputs(df)


class TestRevenueRetentionDataFrame:
    """Test revenue_retention_df."""

    def test_adds_retention_columns(self):
        df = pd.DataFrame(
            {
                "period": ["2024-01", "2024-02", "2024-03"],
                "start_mrr": [10000, 10000, 0],
                "churned_mrr": [300, 300, 300],
                "expansion_mrr": [1000, 0, 0],
                "contraction_mrr": [200, 200, 0],
                "new_mrr": [5000, 0, 0],
            }
        )

        result = revenue_retention_df(df)

        assert list(result["period"]) == ["2024-01", "2024-02", "2024-03"]
        assert list(result["nrr"]) == [105.0, 95.0, 0.0]
        assert list(result["grr"]) == [95.0, 95.0, 0.0]
        assert result["revenue_churn_rate"].tolist() == pytest.approx([5.0, 5.0, 0.0])

    def test_does_not_modify_input(self):
        df = pd.DataFrame({"start_mrr": [10000], "churned_mrr": [300]})
        revenue_retention_df(df)
        assert list(df.columns) == ["start_mrr", "churned_mrr"]
