# exporters.py
import json
from dataclasses import asdict

import numpy as np
import pandas as pd

from expenses import expense_breakdown
from validation import require_valid, submission_errors


def _json_default(o):
    # Handle numpy arrays & scalars cleanly for JSON
    if isinstance(o, np.ndarray):
        return o.tolist()
    if isinstance(o, (np.floating, np.integer)):
        return o.item()
    if isinstance(o, np.bool_):
        return bool(o)
    # Let json raise for anything else unexpected
    raise TypeError(f"Object of type {o.__class__.__name__} is not JSON serializable")


def _answers_json(answers) -> dict:
    # camelCase keys, matching what the web front end stores
    d = answers.to_dict()
    return {
        "lifestyle": d["lifestyle"],
        "country": d["country"],
        "housing": d["housing"],
        "healthcare": d["healthcare"],
        "travel": d["travel"],
        "safety": d["safety"],
        "liquidNetWorth": d["liquid_net_worth"],
        "annualIncomeJob": d["annual_income_job"],
        "otherIncome": d["other_income"],
        "pension": d["pension"],
        "liabilities": d["liabilities"],
    }


def shared_data(answers) -> dict:
    """Fields other forms reuse (net worth, income, country)."""
    return {
        "liquidNetWorth": answers.liquid_net_worth,
        "annualIncomeJob": answers.annual_income_job,
        "otherIncome": answers.other_income,
        "country": answers.country,
    }


def user_data_payload(state, validate: bool = True) -> dict:
    """
    JSON body for saving a retirement session to /api/user-data.
    Raises ValidationError when `validate` is set and the session is incomplete.
    """
    if validate:
        require_valid(submission_errors(state.answers, state.email, state.token))
    buckets = None
    if state.buckets:
        buckets = {k: b.to_dict() for k, b in state.buckets.items()}
    payload = {
        "token": state.token,
        "email": state.email.strip() or None,
        "name": state.name,
        "formType": "retirement",
        "formData": _answers_json(state.answers),
        "expenseBuckets": buckets,
        "sharedData": shared_data(state.answers),
    }
    return {k: v for k, v in payload.items() if v is not None}


def export_config(cfg_dict: dict) -> tuple[str, bytes]:
    """
    Safely export the current session (answers, assumptions, results) to JSON.
    Handles numpy arrays/scalars.
    """
    blob = json.dumps(cfg_dict, indent=2, default=_json_default)
    return "retirement_plan.json", blob.encode()


def session_snapshot(state, result, plan) -> dict:
    return {
        "answers": _answers_json(state.answers),
        "assumptions": asdict(state.assumptions),
        "result": asdict(result),
        "plan": plan.to_dict(),
    }


def export_breakdown(buckets) -> tuple[str, bytes]:
    df = expense_breakdown(buckets)
    return "expense_breakdown.csv", df.to_csv(index=False).encode()


def export_schedule(schedule: pd.DataFrame) -> tuple[str, bytes]:
    return "savings_schedule.csv", schedule.to_csv(index=False).encode()
