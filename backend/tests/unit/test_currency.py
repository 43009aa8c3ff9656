"""Unit tests for the static-rate currency conversion functions."""

import pytest

from shopdesk.domain.currency import (
    SUPPORTED_CURRENCIES,
    convert_amount,
    convert_for_display,
    round_for_display,
)
from shopdesk.domain.exceptions import UnknownCurrencyError


@pytest.mark.parametrize("currency", sorted(SUPPORTED_CURRENCIES))
def test_same_currency_conversion_returns_amount_unchanged(currency: str):
    assert convert_amount(123.456, currency, currency) == 123.456


def test_usd_to_xaf_uses_usd_referenced_rate():
    assert convert_amount(100, "USD", "XAF") == 65596.0


def test_conversion_rounds_half_up_to_cents():
    # 10 / 655.96 = 0.015245...
    assert convert_amount(10, "XAF", "USD") == 0.02
    assert convert_amount(1, "EUR", "GBP") == 0.86


@pytest.mark.parametrize(
    ("amount", "currency", "other"),
    [(100, "USD", "EUR"), (59.99, "EUR", "GBP"), (1250.5, "GBP", "USD"), (42, "USD", "XAF")],
)
def test_round_trip_stays_within_a_cent(amount: float, currency: str, other: str):
    there = convert_amount(amount, currency, other)
    back = convert_amount(there, other, currency)
    assert abs(back - amount) <= 0.01


def test_unknown_currency_is_rejected():
    with pytest.raises(UnknownCurrencyError) as exc_info:
        convert_amount(10, "USD", "JPY")
    assert exc_info.value.currency == "JPY"


def test_unknown_currency_is_rejected_even_for_identity_display():
    with pytest.raises(UnknownCurrencyError):
        convert_for_display(10, "ABC", "ABC")


def test_xaf_is_displayed_in_whole_units():
    assert round_for_display(1234.5, "XAF") == 1235
    assert isinstance(round_for_display(1234.5, "XAF"), int)


def test_other_currencies_are_displayed_with_two_decimals():
    assert round_for_display(10.005, "USD") == 10.01
    assert round_for_display(3, "EUR") == 3.0


def test_convert_for_display():
    assert convert_for_display(100, "USD", "XAF") == 65596
    assert convert_for_display(1000, "XAF", "USD") == 1.52


def test_large_amounts_convert_without_decimal_overflow():
    assert convert_amount(1e27, "USD", "XAF") == 6.5596e29
    assert round_for_display(1e27, "XAF") == 10**27


@pytest.mark.parametrize("amount", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_amounts_are_rejected(amount: float):
    with pytest.raises(ValueError, match="finite"):
        convert_amount(amount, "USD", "EUR")
