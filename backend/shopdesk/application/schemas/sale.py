"""Pydantic DTOs for sales."""

from typing import Any

from pydantic import Field

from shopdesk.application.schemas.base import CamelModel
from shopdesk.domain.entities.sale import PaymentMethod, SaleStatus


class SaleItemInput(CamelModel):
    product_id: str = Field(..., min_length=1)
    quantity: float = Field(..., ge=1)
    unit_price: float = Field(..., ge=0)


class SaleCreate(CamelModel):
    """Schema for creating or fully replacing a sale; the total is computed."""

    customer_id: str = Field(..., min_length=1)
    items: list[SaleItemInput] = Field(..., min_length=1)
    status: SaleStatus
    payment_method: PaymentMethod
    notes: str | None = None


class SaleBulkUpdate(CamelModel):
    """Replacement list for every sale (e.g. after a client-side conversion)."""

    sales: list[dict[str, Any]]
