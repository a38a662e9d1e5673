"""Pandas DataFrame adapters for churn and retention calculations."""

import logging
from typing import List

import pandas as pd  # type: ignore

from saas_metrics.analyses.churn import calculate_revenue_churn_rate
from saas_metrics.analyses.retention import (
    calculate_cohort_retention,
    calculate_grr,
    calculate_nrr,
    sort_cohorts,
)
from saas_metrics.foundation.inputs import (
    CohortDataPoint,
    NRRInput,
    RevenueChurnInput,
)
from ._utils import validate_frame

logger = logging.getLogger(__name__)

COHORT_COLUMNS = ["month", "customers"]
NRR_REQUIRED_COLUMNS = ["start_mrr", "churned_mrr"]
NRR_OPTIONAL_COLUMNS = ["new_mrr", "expansion_mrr", "contraction_mrr"]
REVENUE_RETENTION_COLUMNS = ["nrr", "grr", "revenue_churn_rate"]


def dataframe_to_cohorts(cohort_df: pd.DataFrame) -> List[CohortDataPoint]:
    """Convert a single cohort's DataFrame to ``CohortDataPoint`` records.

    Args:
        cohort_df: DataFrame with ``month`` and ``customers`` columns

    Returns:
        One CohortDataPoint per row, in row order

    Raises:
        ValueError: If required columns are missing, contain nulls, or
            hold negative customer counts or fractional months
    """
    validate_frame(cohort_df, COHORT_COLUMNS)

    points = [
        CohortDataPoint(
            month=_integral_month(record["month"]), customers=record["customers"]
        )
        for record in cohort_df[COHORT_COLUMNS].to_dict("records")
    ]
    logger.debug(f"Converted {len(points)} cohort rows")
    return points


def cohort_retention_df(cohort_df: pd.DataFrame) -> pd.DataFrame:
    """Retention curve of a cohort as a DataFrame.

    Args:
        cohort_df: DataFrame with ``month`` and ``customers`` columns, in
            any row order

    Returns:
        DataFrame with columns month, customers, retention_pct, sorted by
        month (rows sharing a month keep their input order)

    Example:
        >>> df = pd.DataFrame({"month": [2, 0, 1], "customers": [85, 100, 90]})
        >>> cohort_retention_df(df)["retention_pct"].tolist()
        [100.0, 90.0, 85.0]
    """
    columns = COHORT_COLUMNS + ["retention_pct"]
    points = dataframe_to_cohorts(cohort_df)
    if not points:
        return pd.DataFrame(columns=columns)

    sorted_points = sort_cohorts(points)
    retention = calculate_cohort_retention(points)
    rows = [
        {"month": point.month, "customers": point.customers, "retention_pct": pct}
        for point, pct in zip(sorted_points, retention)
    ]
    return pd.DataFrame(rows, columns=columns)


def dataframe_to_nrr_inputs(revenue_df: pd.DataFrame) -> List[NRRInput]:
    """Convert per-period MRR movements to ``NRRInput`` records.

    Args:
        revenue_df: DataFrame with ``start_mrr`` and ``churned_mrr`` columns
            and, optionally, ``new_mrr``, ``expansion_mrr`` and
            ``contraction_mrr``. Missing or null optional values count as 0.

    Returns:
        One NRRInput per row, in row order

    Raises:
        ValueError: If required columns are missing or contain nulls
    """
    validate_frame(revenue_df, NRR_REQUIRED_COLUMNS)

    inputs = []
    for record in revenue_df.to_dict("records"):
        optional = {
            col: float(record[col])
            for col in NRR_OPTIONAL_COLUMNS
            if col in record and pd.notna(record[col])
        }
        inputs.append(
            NRRInput(
                start_mrr=float(record["start_mrr"]),
                churned_mrr=float(record["churned_mrr"]),
                **optional,
            )
        )
    logger.debug(f"Converted {len(inputs)} revenue movement rows")
    return inputs


def revenue_retention_df(revenue_df: pd.DataFrame) -> pd.DataFrame:
    """Add NRR, GRR and gross revenue churn to each period of MRR movements.

    Args:
        revenue_df: DataFrame accepted by ``dataframe_to_nrr_inputs``, one
            row per period

    Returns:
        Copy of ``revenue_df`` with ``nrr``, ``grr`` and
        ``revenue_churn_rate`` columns (percentages)

    Example:
        >>> df = pd.DataFrame({
        ...     "period": ["2024-01", "2024-02"],
        ...     "start_mrr": [10000, 10500],
        ...     "churned_mrr": [300, 0],
        ...     "expansion_mrr": [1000, 0],
        ... })
        >>> revenue_retention_df(df)["nrr"].tolist()
        [107.0, 100.0]
    """
    inputs = dataframe_to_nrr_inputs(revenue_df)

    result = revenue_df.copy()
    result["nrr"] = [calculate_nrr(item) for item in inputs]
    result["grr"] = [calculate_grr(item) for item in inputs]
    result["revenue_churn_rate"] = [
        calculate_revenue_churn_rate(
            RevenueChurnInput(
                start_mrr=item.start_mrr,
                churned_mrr=item.churned_mrr,
                contraction_mrr=item.contraction_mrr,
            )
        )
        for item in inputs
    ]
    return result


def _integral_month(month: float) -> int:
    # Float columns hold whole months as 1.0
    if not float(month).is_integer():
        raise ValueError(f"month must be an integer, got {month!r}")
    return int(month)
