import numpy as np
import pandas as pd

from countries import ExpenseBucket


def total_monthly_expenses(buckets) -> float:
    """Sum of every bucket's value; None or {} gives 0."""
    if not buckets:
        return 0
    return sum(b.value for b in buckets.values())


def is_value_in_range(value: float, bucket: ExpenseBucket) -> bool:
    # A bucket without both bounds accepts anything (0 counts as "no bound")
    if not bucket.min or not bucket.max:
        return True
    return bucket.min <= value <= bucket.max


def out_of_range(buckets) -> list:
    """Keys whose value sits outside the slider bounds. Warnings only."""
    if not buckets:
        return []
    return [k for k, b in buckets.items() if not is_value_in_range(b.value, b)]


def expense_breakdown(buckets) -> pd.DataFrame:
    """
    One row per bucket: key, label, monthly value, annual value,
    share of the monthly total (percent) and whether it is within bounds.
    """
    cols = ["key", "label", "monthly", "annual", "share_pct", "in_range"]
    if not buckets:
        return pd.DataFrame(columns=cols)
    total = total_monthly_expenses(buckets)
    rows = []
    for key, b in buckets.items():
        rows.append({
            "key": key,
            "label": b.label,
            "monthly": float(b.value),
            "annual": float(b.value) * 12,
            "share_pct": (100.0 * b.value / total) if total else 0.0,
            "in_range": is_value_in_range(b.value, b),
        })
    return pd.DataFrame(rows, columns=cols)


def project_bucket_costs(buckets, inflation: float, years: int) -> pd.DataFrame:
    """
    Monthly and annual cost of each bucket for every year 0..years,
    inflated at a flat rate. Year 0 is today's money.
    """
    idx = np.arange(years + 1)
    growth = (1 + inflation) ** idx
    frames = []
    for key, b in (buckets or {}).items():
        monthly = b.value * growth
        frames.append(pd.DataFrame({
            "year": idx,
            "category": key,
            "monthly_nominal": monthly,
        }))
    if not frames:
        return pd.DataFrame(columns=["year", "category", "monthly_nominal", "annual_nominal"])
    out = pd.concat(frames, ignore_index=True)
    out["annual_nominal"] = out["monthly_nominal"] * 12
    return out


def basket_for_year(df: pd.DataFrame, year: int) -> dict:
    view = df[df["year"] == year]
    return {
        "monthly_nominal": float(view["monthly_nominal"].sum()),
        "annual_nominal": float(view["annual_nominal"].sum()),
    }
