"""Single-amount currency conversion."""

from fastapi import APIRouter, Depends

from shopdesk.application.schemas import CurrencyConversionRequest, CurrencyConversionResponse
from shopdesk.application.services import CurrencyService
from shopdesk.infrastructure.dependencies import get_currency_service

router = APIRouter(prefix="/currency", tags=["Currency"])


@router.post(
    "/convert",
    response_model=CurrencyConversionResponse,
    response_model_by_alias=True,
)
async def convert_currency(
    data: CurrencyConversionRequest,
    service: CurrencyService = Depends(get_currency_service),
) -> CurrencyConversionResponse:
    """Convert ``amount`` for display: XAF in whole units, others to cents."""
    result = service.convert_single(data.amount, data.from_currency, data.to_currency)
    return CurrencyConversionResponse(
        from_currency=result["from"],
        to_currency=result["to"],
        amount=result["amount"],
        converted_amount=result["convertedAmount"],
    )
