"""Recurring revenue (MRR/ARR) from a list of subscriptions.

Each subscription is normalised to a monthly-equivalent amount:

    month: amount
    year:  amount / 12
    week:  amount × 52 / 12
    day:   amount × 365 / 12

Subscriptions with any other interval contribute nothing.
"""

from __future__ import annotations

import logging
from typing import Iterable

from saas_metrics.foundation.inputs import Subscription, SubscriptionInterval

logger = logging.getLogger(__name__)

# Interval conversion constants
MONTHS_PER_YEAR = 12
WEEKS_PER_YEAR = 52
DAYS_PER_YEAR = 365


def monthly_equivalent(subscription: Subscription) -> float:
    """Monthly recurring contribution of a single subscription.

    >>> monthly_equivalent(Subscription(12000, SubscriptionInterval.YEAR))
    1000.0
    """
    amount = subscription.amount
    interval = subscription.interval
    if interval == SubscriptionInterval.MONTH:
        return float(amount)
    if interval == SubscriptionInterval.YEAR:
        return amount / MONTHS_PER_YEAR
    if interval == SubscriptionInterval.WEEK:
        return (amount * WEEKS_PER_YEAR) / MONTHS_PER_YEAR
    if interval == SubscriptionInterval.DAY:
        return (amount * DAYS_PER_YEAR) / MONTHS_PER_YEAR

    logger.debug(f"Ignoring subscription with unsupported interval {interval!r}")
    return 0.0


def calculate_mrr(subscriptions: Iterable[Subscription]) -> float:
    """Monthly recurring revenue.

    Parameters
    ----------
    subscriptions:
        Active subscriptions

    Returns
    -------
    float
        Sum of monthly-equivalent contributions (0 for no subscriptions).

    Examples
    --------
    >>> calculate_mrr([Subscription(1000, "month"), Subscription(2000, "month")])
    3000.0
    """
    total = 0.0
    for subscription in subscriptions:
        total += monthly_equivalent(subscription)
    return total


def calculate_arr(subscriptions: Iterable[Subscription]) -> float:
    """Annual recurring revenue: ``calculate_mrr(subscriptions) × 12``.

    >>> calculate_arr([Subscription(1000, "month")])
    12000.0
    """
    return calculate_mrr(subscriptions) * MONTHS_PER_YEAR
