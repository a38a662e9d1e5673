"""Fluent LTV calculator.

``LTVCalculator`` collects the arguments of the lifetime value formulas step
by step and evaluates them on demand:

    LTV = ARPU × Average Duration
        = (sales / users) × 1 / churn_rate

The calculator is immutable. Each ``with_*`` call returns a new calculator,
so a partially configured instance can be shared and extended safely.
Results are never stored; ``arpu()``, ``average_duration()`` and ``ltv()``
call the pure formulas in ``saas_metrics.analyses.lifetime_value`` each time.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from saas_metrics.analyses.lifetime_value import (
    calculate_arpu,
    calculate_average_duration,
    calculate_ltv,
)
from saas_metrics.foundation.inputs import DurationUnit


@dataclass(frozen=True)
class LTVCalculator:
    """Immutable builder for ARPU, average duration and LTV.

    Attributes
    ----------
    sales:
        Total revenue for the period (set by ``with_revenue``)
    users:
        Number of paying users (set by ``with_revenue``)
    churn_rate:
        Churn rate per period (set by ``with_churn_rate``)
    unit:
        Unit of ``churn_rate``; percentage by default

    Examples
    --------
    >>> calculator = LTVCalculator().with_revenue(100, 10).with_churn_rate(10)
    >>> calculator.arpu()
    10.0
    >>> calculator.average_duration()
    10.0
    >>> calculator.ltv()
    100.0
    """

    sales: Optional[float] = None
    users: Optional[float] = None
    churn_rate: Optional[float] = None
    unit: DurationUnit = DurationUnit.PERCENTAGE

    def with_revenue(self, sales: float, users: float) -> LTVCalculator:
        """Return a calculator with the ARPU inputs set."""
        return replace(self, sales=sales, users=users)

    def with_churn_rate(
        self,
        churn_rate: float,
        unit: DurationUnit | str = DurationUnit.PERCENTAGE,
    ) -> LTVCalculator:
        """Return a calculator with the churn rate (and its unit) set.

        Raises
        ------
        ValueError
            If ``unit`` is not a known ``DurationUnit``.
        """
        return replace(self, churn_rate=churn_rate, unit=DurationUnit(unit))

    def arpu(self) -> float:
        """ARPU from the configured revenue and users."""
        if self.sales is None or self.users is None:
            raise ValueError(
                "ARPU inputs have not been set. Call with_revenue(sales, users) first."
            )
        return calculate_arpu(self.sales, self.users)

    def average_duration(self) -> float:
        """Average customer duration from the configured churn rate."""
        if self.churn_rate is None:
            raise ValueError(
                "Churn rate has not been set. Call with_churn_rate(churn_rate) first."
            )
        return calculate_average_duration(self.churn_rate, self.unit)

    def ltv(self) -> float:
        """Lifetime value: ``arpu() × average_duration()``."""
        return calculate_ltv(self.arpu(), self.average_duration())
