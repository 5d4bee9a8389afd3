"""
Rough currency conversion to INR.

Live rates (one map per YYYY-MM month) are used when the caller has them;
otherwise the static fallback table applies. Currencies are keyed by the
country names used across the app.
"""

import re
from datetime import date, datetime

from dateutil import parser as dateparser

FALLBACK_RATES_TO_INR = {
    "India": 1,
    "Thailand": 2.2,
    "UAE": 22,
    "Europe": 90,
    "US": 83,
    "Other": 83,
}

CURRENCY_CODES = list(FALLBACK_RATES_TO_INR.keys())

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def rate_to_inr(code: str, rates=None, month_key=None) -> float:
    if rates and month_key and rates.get(code) is not None:
        return rates[code]
    return FALLBACK_RATES_TO_INR.get(code, 1)


def convert_to_inr(amount: float, code: str, rate=None) -> float:
    if rate is None:
        rate = FALLBACK_RATES_TO_INR.get(code, 1)
    return amount * rate


def to_month_key(value) -> str:
    """YYYY-MM for a date, datetime or date string."""
    if isinstance(value, str):
        value = dateparser.parse(value)
    if not isinstance(value, (date, datetime)):
        raise TypeError(f"cannot build a month key from {type(value).__name__}")
    return f"{value.year}-{value.month:02d}"


def current_month_key() -> str:
    return to_month_key(date.today())


def year_to_month_key(year) -> str:
    """Representative month (June) of a year; current month if unparseable."""
    m = _LEADING_INT.match(str(year))
    if not m:
        return current_month_key()
    return f"{int(m.group(1))}-06"


def convert_between_currencies(amount: float, month_key: str, from_code: str, to_code: str,
                               rates_by_month: dict) -> float:
    if from_code == to_code:
        return amount
    rates = rates_by_month.get(month_key)
    rate_from = rate_to_inr(from_code, rates, month_key)
    rate_to = rate_to_inr(to_code, rates, month_key)
    if rate_to == 0:
        return amount
    return amount * (rate_from / rate_to)
