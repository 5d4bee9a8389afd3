from retirement import Answers
from scenarios import clone_answers, compare, safety_table


BASE = Answers(lifestyle="Simple", country="India", housing="own_paid",
               healthcare="basic", travel="rarely", safety="balanced")


def test_clone_answers_copies():
    other = clone_answers(BASE, country="US")
    assert other.country == "US"
    assert BASE.country == "India"


def test_compare_variants():
    res = compare(BASE, [("stay", {}), ("move", {"country": "US"})])
    assert res["move"].required > res["stay"].required
    assert res["move"].currency == "$"


def test_safety_table_sorted_by_rate():
    df = safety_table(BASE)
    assert list(df["safety"]) == ["ultra_safe", "safe", "balanced", "aggressive"]
    assert df["required"].is_monotonic_decreasing
    assert df.loc[df["safety"] == "balanced", "required"].item() == 560000
