"""
Retirement questionnaire as an explicit state machine.

The whole session lives in one frozen WizardState; every user interaction is
an action and `reduce(state, action)` returns the next state. Nothing here
talks to Streamlit, so the flow can be driven (and tested) without a UI.

Steps:
    0 lifestyle, 1 country & expenses, 2 housing, 3 healthcare, 4 travel,
    5 income & net worth, 6 safety, 7 contact & submit
"""

import copy
import logging
from dataclasses import dataclass, field, replace, fields
from typing import Optional

from config import DEFAULTS, RETIREMENT_CONFIG
from countries import ExpenseBucket
from formatting import parse_input_value
from retirement import Answers, retirement_result
from savings import Assumptions, default_assumptions, plan_for_answers
from validation import submission_errors, validate_liquid_net_worth

logger = logging.getLogger(__name__)

TOTAL_STEPS = DEFAULTS["total_steps"]
LAST_STEP = TOTAL_STEPS - 1

LIFESTYLE, COUNTRY, HOUSING, HEALTHCARE, TRAVEL, INCOME, SAFETY, CONTACT = range(TOTAL_STEPS)

CHOICE_QUESTIONS = ("lifestyle", "country", "housing", "healthcare", "travel", "safety")
NUMERIC_FIELDS = ("liquid_net_worth", "annual_income_job", "other_income", "pension", "liabilities")


@dataclass(frozen=True)
class WizardState:
    step: int = 0
    answers: Answers = field(default_factory=Answers)
    buckets: Optional[dict] = None
    initial_buckets: Optional[dict] = None
    assumptions: Assumptions = field(default_factory=default_assumptions)
    email: str = ""
    token: Optional[str] = None
    name: Optional[str] = None
    notes: str = ""
    errors: dict = field(default_factory=dict)
    submitting: bool = False
    submitted: bool = False


# ---------- Actions ----------
@dataclass(frozen=True)
class Answer:
    question: str
    value: str


@dataclass(frozen=True)
class SetField:
    name: str
    raw: str


@dataclass(frozen=True)
class Continue:
    pass


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class SetBuckets:
    buckets: Optional[dict]


@dataclass(frozen=True)
class SetAssumptions:
    changes: dict


@dataclass(frozen=True)
class SetEmail:
    email: str


@dataclass(frozen=True)
class SetNotes:
    notes: str


@dataclass(frozen=True)
class Submit:
    pass


@dataclass(frozen=True)
class SubmitSucceeded:
    token: Optional[str] = None


@dataclass(frozen=True)
class SubmitFailed:
    message: str = "Failed to submit. Please try again."


@dataclass(frozen=True)
class Reset:
    pass


def _as_buckets(buckets):
    # Saved sessions carry buckets as plain dicts
    if not buckets:
        return None
    return {k: b if isinstance(b, ExpenseBucket) else ExpenseBucket.from_dict(b)
            for k, b in buckets.items()}


def initial_state(answers: Optional[dict] = None, buckets=None, token=None, name=None) -> WizardState:
    """Fresh session, optionally pre-filled from saved answers and buckets."""
    known = {f.name for f in fields(Answers)}
    prefill = {k: v for k, v in (answers or {}).items() if k in known and v}
    start = Answers(**prefill)
    buckets = _as_buckets(buckets)
    return WizardState(
        answers=start,
        buckets=copy.deepcopy(buckets),
        initial_buckets=copy.deepcopy(buckets),
        assumptions=default_assumptions(start.safety),
        token=token,
        name=name,
    )


def _advance(state: WizardState, **changes) -> WizardState:
    return replace(state, step=min(state.step + 1, LAST_STEP), **changes)


def _without(errors: dict, key: str) -> dict:
    return {k: v for k, v in errors.items() if k != key}


def _answer(state: WizardState, action: Answer) -> WizardState:
    if action.question not in CHOICE_QUESTIONS:
        logger.warning("ignoring answer to unknown question %r", action.question)
        return state
    answers = replace(state.answers, **{action.question: action.value})

    if action.question == "lifestyle":
        housing = RETIREMENT_CONFIG["lifestyle_to_housing_default"].get(action.value)
        if housing:
            answers = replace(answers, housing=housing)

    if action.question == "country":
        return replace(state, answers=answers)

    if action.question == "safety":
        seeded = default_assumptions(action.value)
        assumptions = state.assumptions.with_changes(
            pre_retirement_return=seeded.pre_retirement_return,
            post_retirement_return=seeded.post_retirement_return,
            equity_alloc=seeded.equity_alloc,
        )
        return _advance(state, answers=answers, assumptions=assumptions)

    return _advance(state, answers=answers)


def _set_field(state: WizardState, action: SetField) -> WizardState:
    if action.name not in NUMERIC_FIELDS:
        logger.warning("ignoring unknown field %r", action.name)
        return state
    value = parse_input_value(action.raw or "") or None
    answers = replace(state.answers, **{action.name: value})
    return replace(state, answers=answers, errors=_without(state.errors, action.name))


def _set_assumptions(state: WizardState, action: SetAssumptions) -> WizardState:
    known = {f.name for f in fields(Assumptions)}
    unknown = sorted(k for k in action.changes if k not in known)
    if unknown:
        logger.warning("ignoring unknown assumptions %s", ", ".join(unknown))
    changes = {k: v for k, v in action.changes.items() if k in known}
    return replace(state, assumptions=state.assumptions.with_changes(**changes))


def _continue(state: WizardState) -> WizardState:
    if state.step == INCOME:
        msg = validate_liquid_net_worth(state.answers.liquid_net_worth)
        if msg:
            return replace(state, errors={**state.errors, "liquid_net_worth": msg})
    return _advance(state)


def _submit(state: WizardState) -> WizardState:
    if state.submitting or state.submitted:
        return state
    errors = submission_errors(state.answers, state.email, state.token)
    if errors:
        return replace(state, errors=errors)
    return replace(state, errors={}, submitting=True)


def reduce(state: WizardState, action) -> WizardState:
    if isinstance(action, Answer):
        return _answer(state, action)
    if isinstance(action, SetField):
        return _set_field(state, action)
    if isinstance(action, Continue):
        return _continue(state)
    if isinstance(action, Back):
        return replace(state, step=max(0, state.step - 1))
    if isinstance(action, SetBuckets):
        return replace(state, buckets=copy.deepcopy(action.buckets))
    if isinstance(action, SetAssumptions):
        return _set_assumptions(state, action)
    if isinstance(action, SetEmail):
        return replace(state, email=action.email, errors=_without(state.errors, "email"))
    if isinstance(action, SetNotes):
        return replace(state, notes=action.notes)
    if isinstance(action, Submit):
        return _submit(state)
    if isinstance(action, SubmitSucceeded):
        return replace(state, submitting=False, submitted=True, token=action.token or state.token)
    if isinstance(action, SubmitFailed):
        logger.info("submission failed: %s", action.message)
        return replace(state, submitting=False, errors={**state.errors, "submit": action.message})
    if isinstance(action, Reset):
        return initial_state(buckets=state.initial_buckets, token=state.token, name=state.name)
    raise TypeError(f"unknown wizard action: {action!r}")


# ---------- Selectors ----------
def result(state: WizardState):
    return retirement_result(state.answers, state.buckets)


def plan(state: WizardState):
    return plan_for_answers(result(state).required, state.answers, state.assumptions)


def progress(state: WizardState) -> float:
    return state.step / LAST_STEP
