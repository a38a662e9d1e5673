"""SaaS metrics walkthrough on a small subscription book.

This example demonstrates:
1. MRR/ARR from a mix of monthly, yearly and weekly subscriptions
2. Customer and revenue churn for a month
3. Net and gross revenue retention
4. LTV from ARPU and churn, and historical LTV
5. A cohort retention curve from a DataFrame
"""

import pandas as pd

from saas_metrics import (
    CustomerChurnInput,
    LTVCalculator,
    NRRInput,
    RevenueChurnInput,
    Subscription,
    calculate_arr,
    calculate_customer_churn_rate,
    calculate_grr,
    calculate_historical_ltv,
    calculate_mrr,
    calculate_nrr,
    calculate_revenue_churn_rate,
)
from saas_metrics.pandas import cohort_retention_df, subscriptions_to_dataframe


def main():
    """Print the core SaaS metrics for a sample business."""
    print("=" * 60)
    print("SaaS Metrics Demo")
    print("=" * 60)

    # Step 1: Recurring revenue
    subscriptions = [
        Subscription(49, "month"),
        Subscription(99, "month"),
        Subscription(990, "year"),
        Subscription(15, "week"),
    ]
    print("\nStep 1: Recurring revenue")
    print(subscriptions_to_dataframe(subscriptions).to_string(index=False))
    print(f"  MRR: ${calculate_mrr(subscriptions):,.2f}")
    print(f"  ARR: ${calculate_arr(subscriptions):,.2f}")

    # Step 2: Churn
    customer_churn = calculate_customer_churn_rate(
        CustomerChurnInput(start_customers=400, churned_customers=12)
    )
    revenue_churn = calculate_revenue_churn_rate(
        RevenueChurnInput(start_mrr=20000, churned_mrr=600, contraction_mrr=150)
    )
    print("\nStep 2: Churn")
    print(f"  Customer churn: {customer_churn:.2f}%")
    print(f"  Revenue churn:  {revenue_churn:.2f}%")

    # Step 3: Revenue retention
    movements = NRRInput(
        start_mrr=20000,
        churned_mrr=600,
        contraction_mrr=150,
        expansion_mrr=1800,
        new_mrr=2500,
    )
    print("\nStep 3: Revenue retention (new MRR excluded)")
    print(f"  NRR: {calculate_nrr(movements):.1f}%")
    print(f"  GRR: {calculate_grr(movements):.1f}%")

    # Step 4: Lifetime value
    calculator = (
        LTVCalculator().with_revenue(20000, 400).with_churn_rate(customer_churn)
    )
    print("\nStep 4: Lifetime value")
    print(f"  ARPU:             ${calculator.arpu():,.2f}")
    print(f"  Average duration: {calculator.average_duration():.1f} months")
    print(f"  Predicted LTV:    ${calculator.ltv():,.2f}")
    historical = calculate_historical_ltv([1200, 860, 2300, 415, 1980])
    print(f"  Historical LTV:   ${historical:,.2f}")

    # Step 5: Cohort retention
    cohort = pd.DataFrame({"month": [3, 0, 1, 2], "customers": [61, 100, 82, 70]})
    print("\nStep 5: Cohort retention")
    print(cohort_retention_df(cohort).to_string(index=False))


if __name__ == "__main__":
    main()
