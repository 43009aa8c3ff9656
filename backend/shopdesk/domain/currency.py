"""Static exchange rates and the pure conversion functions built on them.

All rates are expressed against USD. Conversions always go through USD:
``amount / rate[from] * rate[to]``, so there is no pairwise table.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext

from shopdesk.domain.exceptions import UnknownCurrencyError

EXCHANGE_RATES: dict[str, Decimal] = {
    "USD": Decimal("1"),
    "EUR": Decimal("0.92"),
    "XAF": Decimal("655.96"),
    "GBP": Decimal("0.79"),
}

SUPPORTED_CURRENCIES: frozenset[str] = frozenset(EXCHANGE_RATES)

# Largest magnitude accepted for a single conversion request
MAX_AMOUNT = 1e15

_CENTS = Decimal("0.01")
_UNITS = Decimal("1")

# Currencies displayed without a fractional part
_WHOLE_UNIT_CURRENCIES = frozenset({"XAF"})


def _rate(currency: str) -> Decimal:
    try:
        return EXCHANGE_RATES[currency]
    except KeyError:
        raise UnknownCurrencyError(currency) from None


def _to_decimal(amount: float | int | Decimal) -> Decimal:
    # str() keeps 0.1 as 0.1 instead of its binary expansion
    return amount if isinstance(amount, Decimal) else Decimal(str(amount))


def _quantize(value: Decimal, exponent: Decimal) -> Decimal:
    """Round half-up to ``exponent`` with enough precision for ``value``.

    Raises:
        ValueError: if ``value`` is infinite or NaN.
    """
    if not value.is_finite():
        raise ValueError(f"Amount must be a finite number, got {value}")
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        return value.quantize(exponent, rounding=ROUND_HALF_UP)


def convert_amount(amount: float, from_currency: str, to_currency: str) -> float:
    """Convert ``amount`` between two supported currencies.

    Same-currency conversions return ``amount`` untouched, which keeps
    repeated conversions idempotent. Otherwise the result is rounded half-up
    to two decimal places.

    Raises:
        UnknownCurrencyError: if either code is not in ``EXCHANGE_RATES``.
        ValueError: if ``amount`` is not finite.
    """
    if from_currency == to_currency:
        return amount

    from_rate = _rate(from_currency)
    to_rate = _rate(to_currency)

    in_reference = _to_decimal(amount) / from_rate
    converted = in_reference * to_rate
    return float(_quantize(converted, _CENTS))


def round_for_display(amount: float, currency: str) -> float | int:
    """Round an amount the way it is shown for ``currency``.

    XAF has no minor unit and is rounded to an integer; every other
    currency keeps two decimals.
    """
    value = _to_decimal(amount)
    if currency in _WHOLE_UNIT_CURRENCIES:
        return int(_quantize(value, _UNITS))
    return float(_quantize(value, _CENTS))


def convert_for_display(amount: float, from_currency: str, to_currency: str) -> float | int:
    """Convert and round for presentation in ``to_currency``."""
    _rate(from_currency)
    _rate(to_currency)
    if from_currency == to_currency:
        return round_for_display(amount, to_currency)
    raw = _to_decimal(amount) / EXCHANGE_RATES[from_currency] * EXCHANGE_RATES[to_currency]
    return round_for_display(raw, to_currency)
