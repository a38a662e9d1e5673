"""Composite calculators built on the metric formulas."""

from saas_metrics.models.ltv_calculator import LTVCalculator

__all__ = ["LTVCalculator"]
