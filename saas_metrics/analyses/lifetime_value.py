"""Lifetime value formulas.

Classic subscription LTV is built from two intermediate figures:

    LTV = ARPU × Average Duration

Where:
    - ARPU: total revenue divided by the number of users
    - Average Duration: expected customer lifetime, the reciprocal of churn

None of these formulas guard against a zero denominator. A period without
users or without churn has no finite answer, so ``inf``/``nan`` flow through
to the caller rather than being masked. Compare ``saas_metrics.analyses.churn``
where zero denominators report 0.
"""

from __future__ import annotations

from typing import Sequence

from saas_metrics.analyses._utils import PERCENT, ieee_divide
from saas_metrics.foundation.inputs import DurationUnit


def calculate_arpu(sales: float, users: float) -> float:
    """Average revenue per user.

    Parameters
    ----------
    sales:
        Total revenue for the period
    users:
        Number of paying users

    Returns
    -------
    float
        ``sales / users``; ``inf`` or ``nan`` when ``users`` is 0.

    Examples
    --------
    >>> calculate_arpu(100, 10)
    10.0
    >>> calculate_arpu(100, 0)
    inf
    """
    return ieee_divide(sales, users)


def calculate_average_duration(
    churn_rate: float,
    unit: DurationUnit | str = DurationUnit.PERCENTAGE,
) -> float:
    """Expected customer lifetime, in periods, implied by a churn rate.

    Parameters
    ----------
    churn_rate:
        Churn per period, as a percentage (``10`` = 10%) or a decimal
        (``0.1`` = 10%) depending on ``unit``
    unit:
        ``DurationUnit.PERCENTAGE`` (default) or ``DurationUnit.DECIMAL``

    Returns
    -------
    float
        ``1 / churn_rate`` after unit conversion; ``inf`` when churn is 0.

    Raises
    ------
    ValueError
        If ``unit`` is not a known ``DurationUnit``.

    Examples
    --------
    >>> calculate_average_duration(10)
    10.0
    >>> calculate_average_duration(0.1, DurationUnit.DECIMAL)
    10.0
    """
    if DurationUnit(unit) is DurationUnit.PERCENTAGE:
        return ieee_divide(1, churn_rate / PERCENT)
    return ieee_divide(1, churn_rate)


def calculate_ltv(arpu: float, average_duration: float) -> float:
    """Lifetime value from ARPU and average duration.

    >>> calculate_ltv(10, 10)
    100.0
    """
    return float(arpu * average_duration)


def calculate_historical_ltv(customer_revenues: Sequence[float]) -> float:
    """Observed LTV: mean cumulative revenue across customers.

    Parameters
    ----------
    customer_revenues:
        Cumulative revenue of each customer over their lifetime so far

    Returns
    -------
    float
        Arithmetic mean of ``customer_revenues``, or 0 when empty.

    Examples
    --------
    >>> calculate_historical_ltv([1000, 1200, 1500, 800, 2000])
    1300.0
    >>> calculate_historical_ltv([])
    0.0
    """
    if len(customer_revenues) == 0:
        return 0.0
    return sum(customer_revenues) / len(customer_revenues)
