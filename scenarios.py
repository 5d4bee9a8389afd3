from dataclasses import asdict

import pandas as pd

from config import RETIREMENT_CONFIG
from retirement import Answers, retirement_result


def clone_answers(answers: Answers, **overrides) -> Answers:
    base = asdict(answers)
    base.update(overrides)
    return Answers(**base)


def compare(answers: Answers, variants: list[tuple[str, dict]], buckets=None):
    """
    variants: list of (name, overrides-dict)
    returns: dict name -> RetirementResult
    """
    res = {}
    for name, edits in variants:
        res[name] = retirement_result(clone_answers(answers, **edits), buckets)
    return res


def safety_table(answers: Answers, buckets=None) -> pd.DataFrame:
    """Required corpus for every safety tier, lowest withdrawal rate first."""
    rates = RETIREMENT_CONFIG["safety_rates"]
    variants = [(key, {"safety": key}) for key in rates]
    results = compare(answers, variants, buckets)
    rows = [
        {"safety": key, "label": rates[key]["label"], "rate": rates[key]["rate"],
         "required": results[key].required}
        for key in rates
    ]
    return pd.DataFrame(rows).sort_values("rate").reset_index(drop=True)
