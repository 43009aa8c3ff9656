"""Pydantic DTOs for currency conversion."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shopdesk.domain.currency import MAX_AMOUNT, SUPPORTED_CURRENCIES


def _check_currency(value: str) -> str:
    code = value.strip().upper()
    if code not in SUPPORTED_CURRENCIES:
        raise ValueError(
            f"Unsupported currency '{value}'; expected one of {sorted(SUPPORTED_CURRENCIES)}"
        )
    return code


class CurrencyConversionRequest(BaseModel):
    """Convert one amount: ``{"from": "USD", "to": "XAF", "amount": 100}``."""

    model_config = ConfigDict(populate_by_name=True)

    from_currency: str = Field(..., alias="from")
    to_currency: str = Field(..., alias="to")
    amount: float = Field(..., allow_inf_nan=False, ge=-MAX_AMOUNT, le=MAX_AMOUNT)

    @field_validator("from_currency", "to_currency")
    @classmethod
    def check_supported_currency(cls, value: str) -> str:
        return _check_currency(value)


class CurrencyConversionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_currency: str = Field(..., alias="from")
    to_currency: str = Field(..., alias="to")
    amount: float
    converted_amount: float | int = Field(..., alias="convertedAmount")


class ConvertStoredValuesRequest(BaseModel):
    """Rewrite every stored amount: ``{"fromCurrency": ..., "toCurrency": ...}``."""

    model_config = ConfigDict(populate_by_name=True)

    from_currency: str = Field(..., alias="fromCurrency", min_length=1)
    to_currency: str = Field(..., alias="toCurrency", min_length=1)

    @field_validator("from_currency", "to_currency")
    @classmethod
    def check_supported_currency(cls, value: str) -> str:
        return _check_currency(value)


class ConvertStoredValuesResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    from_currency: str = Field(..., alias="fromCurrency")
    to_currency: str = Field(..., alias="toCurrency")
