import logging
from dataclasses import dataclass, asdict, replace

import numpy as np
import pandas as pd

from config import DEFAULTS, SAFETY_PRESETS, RETIREMENT_CONFIG
from formatting import to_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Assumptions:
    pre_retirement_return: float    # flat rate used in "simple" mode
    post_retirement_return: float
    inflation: float
    current_age: int
    retirement_age: int
    equity_return: float
    debt_return: float
    equity_alloc: float             # debt takes the rest
    mode: str = "simple"            # simple | advanced

    @property
    def debt_alloc(self) -> float:
        return 1.0 - self.equity_alloc

    @property
    def years_to_retirement(self) -> int:
        return max(1, int(self.retirement_age - self.current_age))

    def with_changes(self, **changes) -> "Assumptions":
        return replace(self, **changes)


@dataclass(frozen=True)
class SavingsPlan:
    years_to_retirement: int
    current_savings: float
    target_amount: float
    future_value_needed: float
    future_value_of_current_savings: float
    shortfall: float
    surplus: float
    monthly_savings_needed: float
    total_annual_income: float
    monthly_income: float
    monthly_buffer: float
    savings_rate: float
    has_details: bool
    has_income_data: bool

    def to_dict(self) -> dict:
        return asdict(self)


def default_assumptions(safety=None) -> Assumptions:
    """Projection defaults seeded from the safety tier (unknown -> balanced)."""
    preset = SAFETY_PRESETS.get(safety, SAFETY_PRESETS[RETIREMENT_CONFIG["default_safety"]])
    return Assumptions(
        pre_retirement_return=preset["pre_retirement_return"],
        post_retirement_return=preset["post_retirement_return"],
        inflation=DEFAULTS["inflation"],
        current_age=DEFAULTS["current_age"],
        retirement_age=DEFAULTS["retirement_age"],
        equity_return=DEFAULTS["equity_return"],
        debt_return=DEFAULTS["debt_return"],
        equity_alloc=preset["equity_alloc"],
        mode=DEFAULTS["mode"],
    )


def blended_return(a: Assumptions) -> float:
    if a.mode == "advanced":
        return a.equity_return * a.equity_alloc + a.debt_return * a.debt_alloc
    return a.pre_retirement_return


def annuity_factor(monthly_return: float, months: int) -> float:
    """Future value of 1 paid at the end of each month."""
    return ((1 + monthly_return) ** months - 1) / monthly_return


def project_savings_plan(required: float, assumptions: Assumptions, liquid_net_worth=None,
                         annual_income_job=None, other_income=None, pension=None,
                         liabilities=None) -> SavingsPlan:
    """
    How much to save each month to reach `required` (today's money) by the
    retirement age.

    The target is inflated to the retirement year, current savings are grown
    at the pre-retirement return and the gap is closed with a level monthly
    contribution (future value of an annuity). Income fields may be numeric
    strings; `liabilities` is monthly.

    With a zero monthly return the contribution is left at 0 rather than
    falling back to a straight-line amount.
    """
    years = assumptions.years_to_retirement
    r = blended_return(assumptions)
    current = to_number(liquid_net_worth, 0.0) or 0.0

    fv_needed = required * (1 + assumptions.inflation) ** years
    fv_current = current * (1 + r) ** years
    shortfall = max(0.0, fv_needed - fv_current)
    surplus = max(0.0, fv_current - fv_needed)

    monthly_return = r / 12
    months = years * 12
    monthly_needed = 0.0
    if shortfall > 0 and monthly_return != 0:
        monthly_needed = shortfall / annuity_factor(monthly_return, months)
    elif shortfall > 0:
        logger.info("zero return: monthly contribution left at 0 (shortfall %.0f)", shortfall)

    annual_income = sum(to_number(v, 0.0) or 0.0 for v in (annual_income_job, other_income, pension))
    annual_liabilities = (to_number(liabilities, 0.0) or 0.0) * 12
    disposable = annual_income - annual_liabilities
    savings_rate = (monthly_needed * 12 / disposable * 100) if disposable > 0 else 0.0

    return SavingsPlan(
        years_to_retirement=years,
        current_savings=current,
        target_amount=required,
        future_value_needed=fv_needed,
        future_value_of_current_savings=fv_current,
        shortfall=shortfall,
        surplus=surplus,
        monthly_savings_needed=monthly_needed,
        total_annual_income=annual_income,
        monthly_income=annual_income / 12,
        monthly_buffer=disposable / 12 - monthly_needed,
        savings_rate=savings_rate,
        has_details=current > 0,
        has_income_data=annual_income > 0,
    )


def plan_for_answers(required: float, answers, assumptions: Assumptions) -> SavingsPlan:
    return project_savings_plan(
        required, assumptions,
        liquid_net_worth=answers.liquid_net_worth,
        annual_income_job=answers.annual_income_job,
        other_income=answers.other_income,
        pension=answers.pension,
        liabilities=answers.liabilities,
    )


def savings_schedule(plan: SavingsPlan, assumptions: Assumptions) -> pd.DataFrame:
    """
    Year-by-year path to retirement: existing savings compounding, the
    monthly contribution stream, their sum and the inflating target.
    """
    years = np.arange(plan.years_to_retirement + 1)
    r = blended_return(assumptions)
    m = r / 12
    months = years * 12
    if m != 0:
        contrib_fv = plan.monthly_savings_needed * (((1 + m) ** months - 1) / m)
    else:
        contrib_fv = plan.monthly_savings_needed * months
    existing = plan.current_savings * (1 + r) ** years
    df = pd.DataFrame({
        "year": years,
        "age": assumptions.current_age + years,
        "existing_savings": existing,
        "contributions_value": contrib_fv,
        "contributed": plan.monthly_savings_needed * months,
        "target": plan.target_amount * (1 + assumptions.inflation) ** years,
    })
    df["balance"] = df["existing_savings"] + df["contributions_value"]
    return df
