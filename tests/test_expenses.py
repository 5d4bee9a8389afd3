import pytest

from countries import ExpenseBucket, countries_sorted, country_info, default_buckets, COUNTRIES, BUCKET_KEYS
from expenses import (total_monthly_expenses, is_value_in_range, out_of_range, expense_breakdown,
                      project_bucket_costs, basket_for_year)


def test_total_monthly_expenses():
    buckets = {
        "a": ExpenseBucket(value=100, label="A"),
        "b": ExpenseBucket(value=200, label="B"),
    }
    assert total_monthly_expenses(buckets) == 300
    assert total_monthly_expenses({}) == 0
    assert total_monthly_expenses(None) == 0


def test_india_default_total():
    assert total_monthly_expenses(default_buckets("India")) == 50000


def test_value_in_range():
    b = ExpenseBucket(value=15000, label="Housing", min=5000, max=50000, step=1000)
    assert is_value_in_range(10000, b)
    assert not is_value_in_range(60000, b)
    assert not is_value_in_range(1000, b)
    assert is_value_in_range(10 ** 9, ExpenseBucket(value=0, label="free"))
    # a zero lower bound counts as "no bounds"
    assert is_value_in_range(500, ExpenseBucket(value=0, label="x", min=0, max=100))


def test_out_of_range_is_a_warning_list():
    buckets = default_buckets("US")
    buckets["food"].value = 99999
    assert out_of_range(buckets) == ["food"]
    assert total_monthly_expenses(buckets) > 99999


def test_breakdown_shares():
    df = expense_breakdown(default_buckets("Europe"))
    assert list(df["key"]) == BUCKET_KEYS
    assert df["share_pct"].sum() == pytest.approx(100.0)
    assert df["annual"].sum() == pytest.approx(3800 * 12)
    assert df["in_range"].all()
    assert expense_breakdown(None).empty


def test_project_bucket_costs():
    buckets = {"a": ExpenseBucket(value=100, label="A")}
    df = project_bucket_costs(buckets, 0.10, 2)
    assert len(df) == 3
    totals = basket_for_year(df, 2)
    assert totals["monthly_nominal"] == pytest.approx(121)
    assert totals["annual_nominal"] == pytest.approx(1452)


def test_countries_sorted_other_last():
    names = countries_sorted()
    assert names[-1] == "Other"
    assert names[:-1] == sorted(names[:-1])
    assert set(names) == set(COUNTRIES)


def test_unknown_country_is_other():
    assert country_info("Atlantis") is COUNTRIES["Other"]
    assert country_info("Atlantis").currency == "$"


def test_default_buckets_are_copies():
    b = default_buckets("India")
    b["housing"].value = 1
    assert COUNTRIES["India"].buckets["housing"].value == 15000


def test_bucket_dict_round_trip_keeps_optional_bounds():
    b = ExpenseBucket(value=10, label="X")
    assert b.to_dict() == {"value": 10, "label": "X"}
    assert ExpenseBucket.from_dict({"value": 5, "label": "Y", "min": 1, "max": 9}).max == 9
