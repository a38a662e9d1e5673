"""Subscription business metrics: LTV, MRR/ARR, churn and retention.

Quick Start
-----------
>>> from saas_metrics import NRRInput, Subscription, calculate_arr, calculate_nrr
>>> calculate_arr([Subscription(1000, "month"), Subscription(12000, "year")])
24000.0
>>> calculate_nrr(NRRInput(start_mrr=10000, churned_mrr=300, expansion_mrr=1000))
107.0
"""

from saas_metrics.analyses import (
    calculate_arpu,
    calculate_arr,
    calculate_average_duration,
    calculate_cohort_retention,
    calculate_customer_churn_rate,
    calculate_grr,
    calculate_historical_ltv,
    calculate_ltv,
    calculate_mrr,
    calculate_nrr,
    calculate_revenue_churn_rate,
    monthly_equivalent,
)
from saas_metrics.foundation import (
    CohortDataPoint,
    CustomerChurnInput,
    DurationUnit,
    NRRInput,
    RevenueChurnInput,
    Subscription,
    SubscriptionInterval,
)
from saas_metrics.models import LTVCalculator

__version__ = "0.1.0"

__all__ = [
    # Input records
    "CohortDataPoint",
    "CustomerChurnInput",
    "DurationUnit",
    "NRRInput",
    "RevenueChurnInput",
    "Subscription",
    "SubscriptionInterval",
    # Formulas
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
    # Builders
    "LTVCalculator",
]
