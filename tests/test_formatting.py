import pytest

from formatting import (parse_input_value, format_currency, format_input_value,
                        format_number, to_precision, to_number)


@pytest.mark.parametrize("raw, expected", [
    ("5L", "500000"),
    ("2Cr", "20000000"),
    ("10k", "10000"),
    ("1.5m", "1500000"),
    ("abc", ""),
    ("", ""),
    ("5 lakh", "500000"),
    ("3 lac", "300000"),
    ("2 crore", "20000000"),
    ("2c", "20000000"),
    ("0.5cr", "5000000"),
    ("2 million", "2000000"),
    ("3 thousand", "3000"),
    ("1.5K", "1500"),
    ("5,00,000", "500000"),
    ("₹1,20,000", "120000"),
    ("2.5", "2.5"),
    ("1.2.3", "1.2"),
])
def test_parse_input_value(raw, expected):
    assert parse_input_value(raw) == expected


def test_parse_input_value_first_suffix_class_wins():
    # lakh is checked before thousand; every digit joins the mantissa
    assert parse_input_value("5L 3k") == "5300000"
    assert parse_input_value("1cr 2l") == "120000000"


@pytest.mark.parametrize("amount, currency, expected", [
    (12345678, "₹", "₹1.23 Cr"),
    (150000, "₹", "₹1.50 L"),
    (5000, "₹", "₹5,000"),
    (99999, "₹", "₹99,999"),
    (10_000_000, "₹", "₹1.00 Cr"),
    (2_500_000, "AED", "AED 2.50 M"),
    (999_999, "AED", "AED 999,999"),
    (1_234_567, "$", "$1.23 M"),
    (950_000, "€", "€950,000"),
    (1234.5678, "$", "$1,234.568"),
    (0, "฿", "฿0"),
    (11_250_000, "₹", "₹1.13 Cr"),
    (112_500, "₹", "₹1.13 L"),
    (1_125_000, "$", "$1.13 M"),
    (2_625_000, "AED", "AED 2.63 M"),
])
def test_format_currency(amount, currency, expected):
    assert format_currency(amount, currency) == expected


def test_format_currency_is_deterministic():
    assert format_currency(7654321, "₹") == format_currency(7654321, "₹")


@pytest.mark.parametrize("x, expected", [
    (1.2345678, "1.23"),
    (1.5, "1.50"),
    (12.345, "12.3"),
    (123.4, "123"),
    (9.9996, "10.0"),
    (0, "0.00"),
    (15000, "1.50e+4"),
    (1.125, "1.13"),
    (2.625, "2.63"),
    (-1.125, "-1.13"),
    (99950, "1.00e+5"),
])
def test_to_precision(x, expected):
    assert to_precision(x) == expected


@pytest.mark.parametrize("amount, locale, expected", [
    (1234567, "en-IN", "12,34,567"),
    (100000, "en-IN", "1,00,000"),
    (1234567, "en-US", "1,234,567"),
    (-1500, "en-IN", "-1,500"),
    (999, "en-US", "999"),
    (0.1234, "en-US", "0.123"),
    (2.5, "en-US", "2.5"),
])
def test_format_number(amount, locale, expected):
    assert format_number(amount, locale) == expected


@pytest.mark.parametrize("value, currency, expected", [
    ("500000", "₹", "5,00,000"),
    ("500000", "$", "500,000"),
    ("1234.5", "€", "1,234.5"),
    (None, "$", ""),
    ("", "₹", ""),
    ("abc", "$", "abc"),
])
def test_format_input_value(value, currency, expected):
    assert format_input_value(value, currency) == expected


def test_to_number_reads_leading_number():
    assert to_number("5,000") == 5.0
    assert to_number("12abc") == 12.0
    assert to_number(7) == 7.0
    assert to_number("abc") is None
    assert to_number(None, 0.0) == 0.0
