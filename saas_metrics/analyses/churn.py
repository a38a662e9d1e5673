"""Customer and revenue churn rates.

Both rates are percentages of the starting figure. When the period starts
with no customers (or no MRR) there is nothing to churn from, and the rate
is reported as 0 rather than raising.
"""

from __future__ import annotations

from saas_metrics.analyses._utils import PERCENT
from saas_metrics.foundation.inputs import CustomerChurnInput, RevenueChurnInput


def calculate_customer_churn_rate(churn_input: CustomerChurnInput) -> float:
    """Percentage of starting customers lost during the period.

    Parameters
    ----------
    churn_input:
        Starting and churned customer counts

    Returns
    -------
    float
        ``churned / start × 100``, or 0 when ``start_customers`` is 0.

    Examples
    --------
    >>> calculate_customer_churn_rate(CustomerChurnInput(100, 5))
    5.0
    """
    if churn_input.start_customers == 0:
        return 0.0
    return (churn_input.churned_customers / churn_input.start_customers) * PERCENT


def calculate_revenue_churn_rate(churn_input: RevenueChurnInput) -> float:
    """Gross revenue churn: churned plus contraction MRR over starting MRR.

    Parameters
    ----------
    churn_input:
        Starting MRR and the MRR lost to cancellations and downgrades

    Returns
    -------
    float
        ``(churned + contraction) / start × 100``, or 0 when ``start_mrr`` is 0.

    Examples
    --------
    >>> calculate_revenue_churn_rate(RevenueChurnInput(10000, 500))
    5.0
    """
    if churn_input.start_mrr == 0:
        return 0.0
    lost_mrr = churn_input.churned_mrr + churn_input.contraction_mrr
    return (lost_mrr / churn_input.start_mrr) * PERCENT
