from datetime import date, datetime

import pytest

from currency import (convert_to_inr, rate_to_inr, to_month_key, current_month_key,
                      year_to_month_key, convert_between_currencies)


def test_convert_to_inr():
    assert convert_to_inr(100, "US") == 8300
    assert convert_to_inr(100, "US", rate=80) == 8000
    assert convert_to_inr(100, "Narnia") == 100


def test_rate_to_inr_prefers_live_rates():
    assert rate_to_inr("US", {"US": 84}, "2024-01") == 84
    assert rate_to_inr("US", {"US": 84}) == 83
    assert rate_to_inr("UAE", {"US": 84}, "2024-01") == 22


def test_month_keys():
    assert to_month_key("2024-03-15") == "2024-03"
    assert to_month_key(date(2023, 1, 5)) == "2023-01"
    assert to_month_key(datetime(2022, 11, 30, 12, 0)) == "2022-11"
    with pytest.raises(TypeError):
        to_month_key(20240315)


def test_year_to_month_key():
    assert year_to_month_key("2024") == "2024-06"
    assert year_to_month_key("abc") == current_month_key()
    assert year_to_month_key("2024abc") == "2024-06"
    assert year_to_month_key(" 2024-01") == "2024-06"
    assert year_to_month_key(None) == current_month_key()


def test_convert_between_currencies():
    rates = {"2024-01": {"US": 80, "Europe": 88}}
    assert convert_between_currencies(10, "2024-01", "Europe", "US", rates) == pytest.approx(11.0)
    assert convert_between_currencies(10, "2024-01", "US", "US", rates) == 10
    # month without rates falls back to the static table
    assert convert_between_currencies(83, "1999-01", "US", "Europe", rates) == pytest.approx(83 * 83 / 90)


def test_zero_target_rate_returns_amount():
    rates = {"2024-01": {"US": 0}}
    assert convert_between_currencies(50, "2024-01", "India", "US", rates) == 50
