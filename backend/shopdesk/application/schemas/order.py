"""Pydantic DTOs for supplier orders."""

from typing import Literal

from pydantic import Field

from shopdesk.application.schemas.base import CamelModel

OrderStatus = Literal["pending", "paid", "shipped", "delivered"]


class OrderProductInput(CamelModel):
    name: str = Field(..., min_length=1)
    quantity: float = Field(..., ge=1)
    unit_price: float = Field(..., ge=0)
    product_id: str | None = None


class OrderCostsInput(CamelModel):
    purchase: float = Field(0, ge=0)
    shipping: float = Field(0, ge=0)
    taxes: float = Field(0, ge=0)
    bank_charges: float = Field(0, ge=0)
    platform_commission: float = Field(0, ge=0)
    delivery_to_forwarder: float = Field(0, ge=0)


class OrderPaymentsInput(CamelModel):
    supplier: float = Field(0, ge=0)
    forwarder: float = Field(0, ge=0)


class OrderCreate(CamelModel):
    """Schema for creating or replacing an order."""

    supplier_id: str = Field(..., min_length=1)
    forwarder_id: str | None = None
    products: list[OrderProductInput] = Field(..., min_length=1)
    status: OrderStatus
    costs: OrderCostsInput = Field(default_factory=OrderCostsInput)
    payments: OrderPaymentsInput = Field(default_factory=OrderPaymentsInput)
    payment_method: str | None = None
    tracking_number: str | None = None
    expected_delivery_date: str | None = None
