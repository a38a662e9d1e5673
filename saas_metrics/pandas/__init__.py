"""Pandas DataFrame adapters for SaaS metric calculations."""

from .subscriptions import (
    dataframe_to_subscriptions,
    subscriptions_to_dataframe,
    calculate_mrr_df,
    calculate_arr_df,
)
from .retention import (
    dataframe_to_cohorts,
    cohort_retention_df,
    dataframe_to_nrr_inputs,
    revenue_retention_df,
)

__all__ = [
    # Recurring revenue adapters
    "dataframe_to_subscriptions",
    "subscriptions_to_dataframe",
    "calculate_mrr_df",
    "calculate_arr_df",
    # Retention adapters
    "dataframe_to_cohorts",
    "cohort_retention_df",
    "dataframe_to_nrr_inputs",
    "revenue_retention_df",
]
