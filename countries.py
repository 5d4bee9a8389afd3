"""
Country cost-of-living table.

Each country carries a flag, a rough monthly spend range, a cost multiplier
used by the retirement number, its currency symbol and six editable monthly
expense buckets with slider bounds.
"""

import copy
from dataclasses import dataclass, field
from typing import Dict, Optional

BUCKET_KEYS = ["housing", "food", "transportation", "healthcare", "entertainment", "other"]
FALLBACK_COUNTRY = "Other"


@dataclass
class ExpenseBucket:
    value: float
    label: str
    min: Optional[float] = None
    max: Optional[float] = None
    step: Optional[float] = None

    def to_dict(self) -> dict:
        out = {"value": self.value, "label": self.label}
        for k in ("min", "max", "step"):
            v = getattr(self, k)
            if v is not None:
                out[k] = v
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "ExpenseBucket":
        return cls(
            value=float(data.get("value") or 0),
            label=data.get("label", ""),
            min=data.get("min"),
            max=data.get("max"),
            step=data.get("step"),
        )


@dataclass
class CountryData:
    flag: str
    avg_monthly: str
    multiplier: float
    currency: str
    buckets: Dict[str, ExpenseBucket] = field(default_factory=dict)


def _b(value, label, lo, hi, step):
    return ExpenseBucket(value=value, label=label, min=lo, max=hi, step=step)


def _india():
    return CountryData(
        flag="🇮🇳", avg_monthly="₹40,000 - ₹1,20,000", multiplier=0.8, currency="₹",
        buckets={
            "housing": _b(15000, "Housing & Utilities", 5000, 50000, 1000),
            "food": _b(12000, "Food & Dining", 5000, 30000, 1000),
            "transportation": _b(5000, "Transportation", 2000, 20000, 500),
            "healthcare": _b(8000, "Healthcare & Insurance", 3000, 25000, 1000),
            "entertainment": _b(6000, "Entertainment & Leisure", 2000, 20000, 500),
            "other": _b(4000, "Other Expenses", 1000, 15000, 500),
        },
    )


def _thailand():
    return CountryData(
        flag="🇹🇭", avg_monthly="฿40,000 - ฿85,000", multiplier=1.0, currency="฿",
        buckets={
            "housing": _b(15000, "Housing & Utilities", 8000, 40000, 1000),
            "food": _b(10000, "Food & Dining", 5000, 25000, 500),
            "transportation": _b(5000, "Transportation", 2000, 15000, 500),
            "healthcare": _b(4000, "Healthcare & Insurance", 1500, 12000, 500),
            "entertainment": _b(6000, "Entertainment & Leisure", 2000, 15000, 500),
            "other": _b(4000, "Other Expenses", 1000, 10000, 500),
        },
    )


def _uae():
    return CountryData(
        flag="🇦🇪", avg_monthly="AED 8,000 - AED 18,000", multiplier=1.5, currency="AED",
        buckets={
            "housing": _b(5000, "Housing & Utilities", 3000, 15000, 500),
            "food": _b(3000, "Food & Dining", 1500, 8000, 250),
            "transportation": _b(1500, "Transportation", 500, 5000, 250),
            "healthcare": _b(2000, "Healthcare & Insurance", 1000, 6000, 250),
            "entertainment": _b(2000, "Entertainment & Leisure", 500, 6000, 250),
            "other": _b(1000, "Other Expenses", 300, 3000, 100),
        },
    )


def _europe():
    return CountryData(
        flag="🇪🇺", avg_monthly="€2,000 - €4,500", multiplier=1.8, currency="€",
        buckets={
            "housing": _b(1200, "Housing & Utilities", 600, 3000, 100),
            "food": _b(800, "Food & Dining", 400, 2000, 50),
            "transportation": _b(400, "Transportation", 200, 1200, 50),
            "healthcare": _b(500, "Healthcare & Insurance", 250, 1500, 50),
            "entertainment": _b(600, "Entertainment & Leisure", 200, 1500, 50),
            "other": _b(300, "Other Expenses", 100, 800, 50),
        },
    )


def _us():
    return CountryData(
        flag="🇺🇸", avg_monthly="$3,000 - $6,000", multiplier=2.0, currency="$",
        buckets={
            "housing": _b(1800, "Housing & Utilities", 800, 4000, 100),
            "food": _b(1000, "Food & Dining", 500, 2500, 50),
            "transportation": _b(600, "Transportation", 300, 2000, 50),
            "healthcare": _b(800, "Healthcare & Insurance", 400, 2000, 50),
            "entertainment": _b(700, "Entertainment & Leisure", 200, 2000, 50),
            "other": _b(400, "Other Expenses", 100, 1000, 50),
        },
    )


def _other():
    return CountryData(
        flag="🌍", avg_monthly="Varies by location", multiplier=1.2, currency="$",
        buckets={
            "housing": _b(800, "Housing & Utilities", 300, 2500, 50),
            "food": _b(600, "Food & Dining", 200, 1500, 50),
            "transportation": _b(300, "Transportation", 100, 1000, 25),
            "healthcare": _b(400, "Healthcare & Insurance", 150, 1200, 50),
            "entertainment": _b(350, "Entertainment & Leisure", 100, 1000, 25),
            "other": _b(200, "Other Expenses", 50, 600, 25),
        },
    )


COUNTRIES = {
    "India": _india(),
    "Thailand": _thailand(),
    "UAE": _uae(),
    "Europe": _europe(),
    "US": _us(),
    "Other": _other(),
}


def countries_sorted() -> list:
    """Alphabetical, with "Other" always last."""
    named = sorted(k for k in COUNTRIES if k != FALLBACK_COUNTRY)
    return named + [FALLBACK_COUNTRY]


def country_info(country: str) -> CountryData:
    # Unknown countries are treated as "Other"
    return COUNTRIES.get(country, COUNTRIES[FALLBACK_COUNTRY])


def currency_for(country: str) -> str:
    return country_info(country).currency


def default_buckets(country: str) -> Dict[str, ExpenseBucket]:
    """Fresh, editable copy of a country's default buckets."""
    return copy.deepcopy(country_info(country).buckets)
