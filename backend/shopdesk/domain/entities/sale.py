"""Sale records, including the legacy single-line shape."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from shopdesk.domain.entities.record import Record

SaleStatus = Literal["pending", "paid", "shipped", "delivered", "cancelled"]
PaymentMethod = Literal["cash", "card", "bank_transfer", "mobile_money"]


class SaleItem(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    product_id: str
    quantity: float
    unit_price: float


class Sale(Record):
    """A sale to a customer.

    Older records carry a single ``amount``/``totalPrice``/``unitPrice``
    triple instead of ``items``; see :func:`upgrade_sale_document`.
    """

    customer_id: str = ""
    items: list[SaleItem] = []
    total: float = 0
    status: str = "pending"
    payment_method: str | None = None
    notes: str | None = None

    # Legacy single-line fields
    amount: float | None = None
    total_price: float | None = None
    unit_price: float | None = None


def sale_total(items: list[dict[str, Any]]) -> float:
    """Sum of quantity x unit price over the sale lines."""
    return sum(float(item["quantity"]) * float(item["unitPrice"]) for item in items)


def upgrade_sale_document(raw: dict[str, Any]) -> dict[str, Any]:
    """Load-time migration from the legacy sale shape.

    A legacy sale has no ``items`` and keeps its value in ``totalPrice``
    (or ``amount``). The returned mapping fills ``total`` and ``items`` so
    every sale exposes the same fields; the input is not modified.
    """
    if "items" in raw and "total" in raw:
        return raw
    upgraded = dict(raw)
    upgraded.setdefault("items", [])
    if "total" not in upgraded:
        legacy_total = raw.get("totalPrice", raw.get("amount"))
        if legacy_total is not None:
            upgraded["total"] = legacy_total
        else:
            upgraded["total"] = sale_total(upgraded["items"])
    return upgraded
