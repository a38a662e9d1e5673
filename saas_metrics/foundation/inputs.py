"""Input records for SaaS metric calculations.

Each record describes the parameters of a single calculation. Records are
frozen dataclasses: they are built by the caller, passed to a formula in
``saas_metrics.analyses`` and never mutated afterwards.

Quick Start
-----------
>>> from saas_metrics.foundation.inputs import Subscription, SubscriptionInterval
>>> from saas_metrics.analyses.recurring_revenue import calculate_mrr
>>> calculate_mrr([
...     Subscription(1000, SubscriptionInterval.MONTH),
...     Subscription(12000, "year"),
... ])
2000.0
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum


class SubscriptionInterval(str, Enum):
    """Billing intervals understood by the MRR calculation."""

    MONTH = "month"
    YEAR = "year"
    WEEK = "week"
    DAY = "day"


class DurationUnit(str, Enum):
    """How a churn rate passed to ``calculate_average_duration`` is expressed.

    ``PERCENTAGE`` means ``10`` is 10%; ``DECIMAL`` means ``0.1`` is 10%.
    The tag ``"number"`` is accepted as an alias of ``DECIMAL``.
    """

    PERCENTAGE = "percentage"
    DECIMAL = "decimal"

    @classmethod
    def _missing_(cls, value: object) -> DurationUnit | None:
        if value == "number":
            return cls.DECIMAL
        return None


def _require_non_negative(record: object, **values: float) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(
                f"{name} cannot be negative: {value} "
                f"({type(record).__name__})"
            )


@dataclass(frozen=True)
class Subscription:
    """A single recurring subscription.

    Attributes
    ----------
    amount:
        Amount billed once per ``interval``.
    interval:
        Billing interval. Plain strings are accepted; an interval outside
        ``SubscriptionInterval`` contributes nothing to MRR.
    """

    amount: float
    interval: SubscriptionInterval | str = SubscriptionInterval.MONTH


@dataclass(frozen=True)
class CustomerChurnInput:
    """Customer counts for a churn period.

    Attributes
    ----------
    start_customers:
        Customers at the start of the period
    churned_customers:
        Customers lost during the period
    """

    start_customers: float
    churned_customers: float

    def __post_init__(self) -> None:
        """Validate customer counts."""
        _require_non_negative(
            self,
            start_customers=self.start_customers,
            churned_customers=self.churned_customers,
        )


@dataclass(frozen=True)
class RevenueChurnInput:
    """Revenue figures for a gross revenue churn period.

    Attributes
    ----------
    start_mrr:
        MRR at the start of the period
    churned_mrr:
        MRR lost to cancelled customers
    contraction_mrr:
        MRR lost to downgrades of retained customers
    """

    start_mrr: float
    churned_mrr: float
    contraction_mrr: float = 0

    def __post_init__(self) -> None:
        """Validate MRR amounts."""
        _require_non_negative(
            self,
            start_mrr=self.start_mrr,
            churned_mrr=self.churned_mrr,
            contraction_mrr=self.contraction_mrr,
        )


@dataclass(frozen=True)
class NRRInput:
    """Revenue movements used by net and gross revenue retention.

    Attributes
    ----------
    start_mrr:
        MRR at the start of the period
    churned_mrr:
        MRR lost to cancelled customers
    new_mrr:
        MRR from newly acquired customers. Carried for reporting only;
        neither NRR nor GRR reads it.
    expansion_mrr:
        MRR gained from upgrades of existing customers
    contraction_mrr:
        MRR lost to downgrades of existing customers
    """

    start_mrr: float
    churned_mrr: float
    new_mrr: float = 0
    expansion_mrr: float = 0
    contraction_mrr: float = 0

    def __post_init__(self) -> None:
        """Validate MRR amounts."""
        _require_non_negative(
            self,
            start_mrr=self.start_mrr,
            churned_mrr=self.churned_mrr,
            new_mrr=self.new_mrr,
            expansion_mrr=self.expansion_mrr,
            contraction_mrr=self.contraction_mrr,
        )


@dataclass(frozen=True)
class CohortDataPoint:
    """Active customers of a cohort at a given month.

    Attributes
    ----------
    month:
        Months since acquisition (0 = acquisition month)
    customers:
        Customers still active in that month
    """

    month: int
    customers: float

    def __post_init__(self) -> None:
        """Validate cohort data point."""
        if not isinstance(self.month, numbers.Integral):
            raise ValueError(f"month must be an integer, got {self.month!r}")
        _require_non_negative(self, customers=self.customers)
