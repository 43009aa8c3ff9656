"""Pydantic DTOs for inventory items."""

from typing import Any

from pydantic import Field

from shopdesk.application.schemas.base import CamelModel


class InventoryItemCreate(CamelModel):
    name: str = Field(..., min_length=2)
    sku: str = Field(..., min_length=3)
    description: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    cost: float | None = Field(None, ge=0)
    quantity: float = Field(..., ge=0)
    reorder_point: float = Field(..., ge=0)
    supplier: str = Field(..., min_length=1)
    last_restocked: str | None = None
    location: str | None = None
    notes: str | None = None


class InventoryItemUpdate(CamelModel):
    name: str | None = Field(None, min_length=2)
    sku: str | None = Field(None, min_length=3)
    description: str | None = Field(None, min_length=1)
    category: str | None = Field(None, min_length=1)
    price: float | None = Field(None, ge=0)
    cost: float | None = Field(None, ge=0)
    quantity: float | None = Field(None, ge=0)
    reorder_point: float | None = Field(None, ge=0)
    supplier: str | None = Field(None, min_length=1)
    last_restocked: str | None = None
    location: str | None = None
    notes: str | None = None


class InventoryBulkUpdate(CamelModel):
    inventory: list[dict[str, Any]]
