import logging
import math
from dataclasses import dataclass, asdict
from typing import Optional

from config import RETIREMENT_CONFIG, DEFAULTS
from countries import FALLBACK_COUNTRY, currency_for
from expenses import total_monthly_expenses

logger = logging.getLogger(__name__)


@dataclass
class Answers:
    lifestyle: Optional[str] = None
    country: str = DEFAULTS["country"]
    housing: Optional[str] = None
    healthcare: Optional[str] = None
    travel: Optional[str] = None
    safety: Optional[str] = None
    # Numeric answers are kept as strings until calculation time
    liquid_net_worth: Optional[str] = None
    annual_income_job: Optional[str] = None
    other_income: Optional[str] = None
    pension: Optional[str] = None
    liabilities: Optional[str] = None  # monthly

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class RetirementResult:
    required: int
    aggressive: int
    balanced: int
    conservative: int
    annual_spend: int
    currency: str


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _lookup(table: dict, key, default=1.0) -> float:
    # Unknown or missing keys fall back to the default multiplier on purpose
    return table.get(key, default)


def safety_rate(safety) -> float:
    rates = RETIREMENT_CONFIG["safety_rates"]
    entry = rates.get(safety, rates[RETIREMENT_CONFIG["default_safety"]])
    return entry["rate"]


def annual_spend_from_tiers(lifestyle, country, housing, healthcare, travel) -> float:
    cfg = RETIREMENT_CONFIG
    country_mult = _lookup(
        cfg["country_multipliers"], country,
        default=cfg["country_multipliers"][FALLBACK_COUNTRY],
    )
    return (
        cfg["base_amount"]
        * country_mult
        * _lookup(cfg["lifestyle_multipliers"], lifestyle)
        * _lookup(cfg["housing_multipliers"], housing)
        * _lookup(cfg["healthcare_multipliers"], healthcare)
        * _lookup(cfg["travel_multipliers"], travel)
    )


def calculate_retirement_needs(lifestyle, country, housing, healthcare, travel, safety,
                               custom_monthly_expenses: Optional[float] = None) -> dict:
    """
    The retirement number: annual spend divided by a safe withdrawal rate.

    Annual spend is either the custom monthly total x 12 or the base amount
    scaled by the country/lifestyle/housing/healthcare/travel multipliers.
    Nothing here raises; unrecognised keys use their documented fallbacks.
    All money values are rounded half-up to whole units.
    """
    if custom_monthly_expenses:
        annual_spend = custom_monthly_expenses * 12
    else:
        annual_spend = annual_spend_from_tiers(lifestyle, country, housing, healthcare, travel)

    rate = safety_rate(safety)
    ref = RETIREMENT_CONFIG["reference_rates"]
    out = {
        "annual_spend": round_half_up(annual_spend),
        "required": round_half_up(annual_spend / rate),
        "aggressive": round_half_up(annual_spend / ref["aggressive"]),
        "balanced": round_half_up(annual_spend / ref["balanced"]),
        "conservative": round_half_up(annual_spend / ref["conservative"]),
    }
    logger.debug("retirement needs for %s/%s at %.3f: %s", lifestyle, country, rate, out)
    return out


def retirement_result(answers: Answers, buckets=None) -> RetirementResult:
    """Result for the current wizard answers; buckets (if any) override the tier estimate."""
    monthly = total_monthly_expenses(buckets)
    needs = calculate_retirement_needs(
        answers.lifestyle, answers.country, answers.housing,
        answers.healthcare, answers.travel, answers.safety,
        custom_monthly_expenses=monthly or None,
    )
    return RetirementResult(currency=currency_for(answers.country), **needs)
