"""Shared arithmetic helpers for the metric formulas."""

import math

import numpy as np

# Ratios are reported as percentages (e.g., 5.0 means 5%)
PERCENT = 100


def _as_float64(value: float) -> np.float64:
    # Python ints beyond the float range overflow on conversion; saturate them
    try:
        return np.float64(value)
    except OverflowError:
        return np.float64(math.inf if value > 0 else -math.inf)


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE 754 semantics instead of raising ``ZeroDivisionError``.

    ``x / 0`` yields ``inf`` (signed like ``x``) and ``0 / 0`` yields ``nan``.

    Example:
        >>> ieee_divide(1, 0)
        inf
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(
            np.divide(_as_float64(numerator), _as_float64(denominator))
        )
