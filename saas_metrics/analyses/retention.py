"""Revenue retention (NRR/GRR) and cohort retention curves.

NRR and GRR measure how much of the starting MRR is still billed at the end
of the period:

    NRR = (start + expansion - contraction - churned) / start × 100
    GRR = (start - contraction - churned) / start × 100

Revenue from new customers is not part of either figure, so
``NRRInput.new_mrr`` is ignored here. Expansion only counts towards NRR.
"""

from __future__ import annotations

import logging
from typing import Sequence

from saas_metrics.analyses._utils import PERCENT
from saas_metrics.foundation.inputs import CohortDataPoint, NRRInput

logger = logging.getLogger(__name__)


def calculate_nrr(nrr_input: NRRInput) -> float:
    """Net revenue retention, in percent.

    Parameters
    ----------
    nrr_input:
        Starting MRR and its movements over the period

    Returns
    -------
    float
        NRR percentage, or 0 when ``start_mrr`` is 0.

    Examples
    --------
    >>> calculate_nrr(NRRInput(start_mrr=10000, churned_mrr=300))
    97.0
    """
    if nrr_input.start_mrr == 0:
        return 0.0
    end_mrr = (
        nrr_input.start_mrr
        + nrr_input.expansion_mrr
        - nrr_input.contraction_mrr
        - nrr_input.churned_mrr
    )
    return (end_mrr / nrr_input.start_mrr) * PERCENT


def calculate_grr(nrr_input: NRRInput) -> float:
    """Gross revenue retention, in percent. Expansion MRR is not counted.

    >>> calculate_grr(NRRInput(start_mrr=10000, churned_mrr=300, contraction_mrr=200))
    95.0
    """
    if nrr_input.start_mrr == 0:
        return 0.0
    retained_mrr = (
        nrr_input.start_mrr - nrr_input.contraction_mrr - nrr_input.churned_mrr
    )
    return (retained_mrr / nrr_input.start_mrr) * PERCENT


def sort_cohorts(cohorts: Sequence[CohortDataPoint]) -> list[CohortDataPoint]:
    """Cohort data points in ascending month order.

    Points sharing a month keep their input order. This is the row order of
    ``calculate_cohort_retention`` results.
    """
    return sorted(cohorts, key=lambda point: point.month)


def calculate_cohort_retention(cohorts: Sequence[CohortDataPoint]) -> list[float]:
    """Retention curve of a single cohort.

    Parameters
    ----------
    cohorts:
        Customer counts of the cohort per month, in any order

    Returns
    -------
    list[float]
        Customers of each month as a percentage of the earliest month,
        ordered by ascending ``month``. Points sharing a month keep their
        input order. Returns all zeros when the earliest month has no
        customers, and an empty list for empty input.

    Examples
    --------
    >>> calculate_cohort_retention([
    ...     CohortDataPoint(month=1, customers=90),
    ...     CohortDataPoint(month=0, customers=100),
    ... ])
    [100.0, 90.0]
    """
    if not cohorts:
        return []

    sorted_cohorts = sort_cohorts(cohorts)
    base_customers = sorted_cohorts[0].customers

    if base_customers == 0:
        logger.debug(
            f"Cohort starting at month {sorted_cohorts[0].month} has no customers; "
            "reporting zero retention"
        )
        return [0.0] * len(sorted_cohorts)

    return [
        (point.customers / base_customers) * PERCENT for point in sorted_cohorts
    ]
