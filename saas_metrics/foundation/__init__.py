"""Input records shared by every SaaS metric calculation."""

from .inputs import (
    CohortDataPoint,
    CustomerChurnInput,
    DurationUnit,
    NRRInput,
    RevenueChurnInput,
    Subscription,
    SubscriptionInterval,
)

__all__ = [
    "CohortDataPoint",
    "CustomerChurnInput",
    "DurationUnit",
    "NRRInput",
    "RevenueChurnInput",
    "Subscription",
    "SubscriptionInterval",
]
