"""
Money parsing and display helpers.

Two numbering systems are supported: Indian grouping (12,34,567 with
lakh/crore abbreviations) for the Rupee, and US grouping (1,234,567) for
everything else. All functions are pure.
"""

import re
from decimal import Decimal, ROUND_HALF_UP

RUPEE = "₹"
DIRHAM = "AED"

LAKH = 100_000
CRORE = 10_000_000
MILLION = 1_000_000

# Checked in this order; the first class that matches wins.
SUFFIX_CLASSES = [
    ("crore", re.compile(r"\d\s*(crores?|cr|c)\b", re.IGNORECASE), CRORE),
    ("lakh", re.compile(r"\d\s*(lakhs?|lacs?|l)\b", re.IGNORECASE), LAKH),
    ("million", re.compile(r"\d\s*(million|m)\b", re.IGNORECASE), MILLION),
    ("thousand", re.compile(r"\d\s*(thousand|k)\b", re.IGNORECASE), 1_000),
]

_LEADING_DECIMAL = re.compile(r"\d*\.?\d*")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def to_number(value, default=None):
    """
    Read the leading number of a string ("5,000" -> 5.0, "12abc" -> 12.0).
    Numbers pass through. Returns `default` when nothing can be read.
    """
    if value is None:
        return default
    if isinstance(value, (int, float)):
        return float(value)
    m = _LEADING_FLOAT.match(str(value))
    if not m:
        return default
    return float(m.group(1))


def _plain(num: float) -> str:
    if num == int(num):
        return str(int(num))
    return repr(num)


def suffix_multiplier(value: str) -> int:
    for _name, pattern, mult in SUFFIX_CLASSES:
        if pattern.search(value):
            return mult
    return 1


def parse_input_value(value: str) -> str:
    """
    "5L" -> "500000", "2Cr" -> "20000000", "10k" -> "10000", "1.5m" -> "1500000".
    Returns "" when the string holds no number.
    """
    if not value:
        return ""
    mult = suffix_multiplier(value)
    digits = re.sub(r"[^\d.]", "", value)
    mantissa = _LEADING_DECIMAL.match(digits).group(0)
    if not any(ch.isdigit() for ch in mantissa):
        return ""
    return _plain(float(mantissa) * mult)


def to_precision(x: float, precision: int = 3) -> str:
    """Significant-digit rendering: 1.2345 -> "1.23", 1.5 -> "1.50", 12.34 -> "12.3"."""
    if x == 0:
        return "0." + "0" * (precision - 1) if precision > 1 else "0"
    # Round the exact binary value; ties go away from zero (1.125 -> "1.13")
    d = Decimal(x)
    e = d.adjusted()
    r = d.quantize(Decimal(1).scaleb(e - precision + 1), rounding=ROUND_HALF_UP)
    if r.adjusted() > e:
        e = r.adjusted()
        r = d.quantize(Decimal(1).scaleb(e - precision + 1), rounding=ROUND_HALF_UP)
    if e < -6 or e >= precision:
        sign = "+" if e >= 0 else "-"
        return f"{r.scaleb(-e):.{precision - 1}f}e{sign}{abs(e)}"
    return f"{r:.{precision - 1 - e}f}"


def _split(amount):
    d = Decimal(str(amount)).quantize(Decimal("0.001"), rounding=ROUND_HALF_UP)
    negative = d < 0
    int_part, _, frac = f"{abs(d):f}".partition(".")
    return negative, int_part, frac.rstrip("0")


def _group_indian(int_part: str) -> str:
    if len(int_part) <= 3:
        return int_part
    head, tail = int_part[:-3], int_part[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def _group_us(int_part: str) -> str:
    return f"{int(int_part):,}"


def format_number(amount: float, locale: str = "en-US") -> str:
    """Grouped digits with up to three decimals, en-US or en-IN style."""
    negative, int_part, frac = _split(amount)
    grouped = _group_indian(int_part) if locale == "en-IN" else _group_us(int_part)
    out = f"{grouped}.{frac}" if frac else grouped
    return f"-{out}" if negative else out


def format_currency(amount: float, currency: str) -> str:
    if currency == RUPEE:
        if amount >= CRORE:
            return f"{RUPEE}{to_precision(amount / CRORE)} Cr"
        if amount >= LAKH:
            return f"{RUPEE}{to_precision(amount / LAKH)} L"
        return f"{RUPEE}{format_number(amount, 'en-IN')}"
    if currency == DIRHAM:
        if amount >= MILLION:
            return f"{DIRHAM} {to_precision(amount / MILLION)} M"
        return f"{DIRHAM} {format_number(amount)}"
    if amount >= MILLION:
        return f"{currency}{to_precision(amount / MILLION)} M"
    return f"{currency}{format_number(amount)}"


def format_input_value(value, currency: str) -> str:
    """Display form of a stored numeric string ("500000" -> "5,00,000" for ₹)."""
    if not value:
        return ""
    num = to_number(value)
    if num is None:
        return value
    return format_number(num, "en-IN" if currency == RUPEE else "en-US")
