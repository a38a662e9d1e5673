"""Shared validation for DataFrame adapters."""

from typing import Sequence

import pandas as pd  # type: ignore


def validate_frame(df: pd.DataFrame, required_cols: Sequence[str]) -> None:
    """Check that ``df`` has ``required_cols`` and no nulls in them.

    Raises:
        ValueError: If a required column is missing or holds null/NaN values
    """
    missing_cols = set(required_cols) - set(df.columns)
    if missing_cols:
        raise ValueError(f"DataFrame missing required columns: {missing_cols}")

    if df.empty:
        return

    null_cols = df[list(required_cols)].isnull().any()
    if null_cols.any():
        null_col_names = null_cols[null_cols].index.tolist()
        raise ValueError(
            f"Null/NaN values found in columns: {null_col_names}. "
            "Metric calculations require complete data."
        )
