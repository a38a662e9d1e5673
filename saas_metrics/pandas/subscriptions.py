"""Pandas DataFrame adapters for recurring revenue calculations."""

import logging
from typing import List, Sequence

import pandas as pd  # type: ignore

from saas_metrics.analyses.recurring_revenue import (
    calculate_arr,
    calculate_mrr,
    monthly_equivalent,
)
from saas_metrics.foundation.inputs import Subscription, SubscriptionInterval
from ._utils import validate_frame

logger = logging.getLogger(__name__)

SUBSCRIPTION_COLUMNS = ["amount", "interval"]


def dataframe_to_subscriptions(subscriptions_df: pd.DataFrame) -> List[Subscription]:
    """Convert a DataFrame of subscriptions to ``Subscription`` records.

    Args:
        subscriptions_df: DataFrame with ``amount`` and ``interval`` columns.
            Extra columns (e.g. customer_id, plan) are ignored.

    Returns:
        One Subscription per row, in row order

    Raises:
        ValueError: If required columns are missing or contain nulls

    Example:
        >>> df = pd.DataFrame({"amount": [1000, 12000], "interval": ["month", "year"]})
        >>> dataframe_to_subscriptions(df)[1].interval
        'year'
    """
    validate_frame(subscriptions_df, SUBSCRIPTION_COLUMNS)

    subscriptions = [
        Subscription(
            amount=float(record["amount"]),
            interval=_interval_tag(record["interval"]),
        )
        for record in subscriptions_df[SUBSCRIPTION_COLUMNS].to_dict("records")
    ]
    logger.debug(f"Converted {len(subscriptions)} subscription rows")
    return subscriptions


def subscriptions_to_dataframe(subscriptions: Sequence[Subscription]) -> pd.DataFrame:
    """Convert subscriptions to a DataFrame with their monthly contribution.

    Args:
        subscriptions: Sequence of Subscription objects

    Returns:
        DataFrame with columns: amount, interval, monthly_amount.
        ``monthly_amount`` is 0 for unsupported intervals.

    Example:
        >>> breakdown = subscriptions_to_dataframe(subscriptions)
        >>> breakdown.groupby("interval")["monthly_amount"].sum()
    """
    columns = SUBSCRIPTION_COLUMNS + ["monthly_amount"]
    if not subscriptions:
        return pd.DataFrame(columns=columns)

    rows = [
        {
            "amount": float(subscription.amount),
            "interval": _interval_tag(subscription.interval),
            "monthly_amount": monthly_equivalent(subscription),
        }
        for subscription in subscriptions
    ]
    return pd.DataFrame(rows, columns=columns)


def calculate_mrr_df(subscriptions_df: pd.DataFrame) -> float:
    """MRR of the subscriptions in a DataFrame.

    Example:
        >>> calculate_mrr_df(pd.DataFrame({"amount": [1000], "interval": ["month"]}))
        1000.0
    """
    return calculate_mrr(dataframe_to_subscriptions(subscriptions_df))


def calculate_arr_df(subscriptions_df: pd.DataFrame) -> float:
    """ARR of the subscriptions in a DataFrame."""
    return calculate_arr(dataframe_to_subscriptions(subscriptions_df))


def _interval_tag(interval: SubscriptionInterval | str) -> str:
    if isinstance(interval, SubscriptionInterval):
        return interval.value
    return str(interval)
