"""Tests for display helpers."""

from src.views.formatting import (
    cap,
    format_count,
    format_decimal,
    format_score,
    risk_score_class,
    risk_score_width,
    token_value,
    truncate_address,
)


def test_truncate_address() -> None:
    assert truncate_address("0x1234567890abcdef1234") == "0x1234...1234"


def test_truncate_full_length_address() -> None:
    addr = "0x742d35Cc6634C0532925a3b8D4C0C3c6c8C8C6C6"
    assert truncate_address(addr) == "0x742d...C6C6"


def test_cap() -> None:
    assert cap(list(range(10)), 5) == [0, 1, 2, 3, 4]
    assert cap([1, 2], 5) == [1, 2]


def test_format_decimal() -> None:
    assert format_decimal("1.234567", 4) == "1.2346"
    assert format_decimal("1500.5", 2) == "1500.50"
    assert format_decimal("0", 4) == "0.0000"


def test_format_decimal_unparseable_shown_as_is() -> None:
    assert format_decimal("n/a", 4) == "n/a"


def test_format_count() -> None:
    assert format_count(10000) == "10,000"
    assert format_count(12) == "12"


def test_format_score() -> None:
    assert format_score(45) == "45/100"
    assert format_score(45.5) == "45.5/100"
    assert format_score(45.123456789) == "45.123456789/100"


def test_token_value() -> None:
    assert token_value("1500.5", 1.0) == "$1500.50"
    assert token_value("2", 0.125) == "$0.25"


def test_token_value_hidden_without_price() -> None:
    assert token_value("100", None) is None
    assert token_value("100", 0) is None
    assert token_value("abc", 2.0) is None


def test_risk_score_class_thresholds() -> None:
    assert risk_score_class(0) == "bg-green-500"
    assert risk_score_class(29.9) == "bg-green-500"
    assert risk_score_class(30) == "bg-yellow-500"
    assert risk_score_class(69) == "bg-yellow-500"
    assert risk_score_class(70) == "bg-red-500"
    assert risk_score_class(100) == "bg-red-500"


def test_risk_score_width_clamped() -> None:
    assert risk_score_width(45) == "45%"
    assert risk_score_width(150) == "100%"
    assert risk_score_width(-5) == "0%"
    assert risk_score_width(12.3456789) == "12.3456789%"
