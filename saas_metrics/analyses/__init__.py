"""Metric formulas: lifetime value, recurring revenue, churn and retention.

Every function here is pure: the result depends only on the arguments and
nothing is cached between calls.
"""

from .churn import calculate_customer_churn_rate, calculate_revenue_churn_rate
from .lifetime_value import (
    calculate_arpu,
    calculate_average_duration,
    calculate_historical_ltv,
    calculate_ltv,
)
from .recurring_revenue import calculate_arr, calculate_mrr, monthly_equivalent
from .retention import (
    calculate_cohort_retention,
    calculate_grr,
    calculate_nrr,
    sort_cohorts,
)

__all__ = [
    "calculate_arpu",
    "calculate_average_duration",
    "calculate_ltv",
    "calculate_historical_ltv",
    "calculate_mrr",
    "calculate_arr",
    "monthly_equivalent",
    "calculate_customer_churn_rate",
    "calculate_revenue_churn_rate",
    "calculate_nrr",
    "calculate_grr",
    "calculate_cohort_retention",
    "sort_cohorts",
]
