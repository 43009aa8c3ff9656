"""Application service (use case) for customers and their loyalty points."""

import logging
from typing import Any
from uuid import uuid4

from shopdesk.application.interfaces import EntityStore
from shopdesk.application.services.record_service import RecordService
from shopdesk.domain.entities import (
    Customer,
    LoyaltyPointsEntry,
    Sale,
    segment_for_order_count,
    utc_timestamp,
)
from shopdesk.domain.exceptions import BusinessRuleError, EntityNotFoundError

logger = logging.getLogger(__name__)

# Secondary array in the customers document holding the loyalty ledger
LOYALTY_HISTORY_KEY = "loyaltyPointsHistory"


class CustomerService(RecordService[Customer]):
    """Customer CRUD plus loyalty adjustments and totals derived from sales."""

    def __init__(self, customers: EntityStore[Customer], sales: EntityStore[Sale]):
        super().__init__(customers, "Customer")
        self._sales = sales

    def _prepare_create(self, fields: dict[str, Any]) -> dict[str, Any]:
        fields.setdefault("segment", "new")
        return {**fields, "totalOrders": 0, "totalSpent": 0, "loyaltyPoints": 0}

    def _prepare_update(self, current: Customer, changes: dict[str, Any]) -> dict[str, Any]:
        changes.pop("loyaltyPoints", None)
        return changes

    async def adjust_loyalty_points(self, customer_id: str, points: int, reason: str) -> Customer:
        """Add (or deduct) loyalty points and append a ledger entry.

        The balance check, the balance update and the ledger append are
        written together.

        Raises:
            EntityNotFoundError: unknown customer.
            BusinessRuleError: the resulting balance would be negative.
        """
        timestamp = utc_timestamp()
        entry = LoyaltyPointsEntry(
            id=str(uuid4()),
            customer_id=customer_id,
            points=points,
            reason=reason,
            timestamp=timestamp,
        )

        def apply(document: dict[str, Any]) -> None:
            customer = next(
                (c for c in document["customers"] if c.get("id") == customer_id), None
            )
            if customer is None:
                raise EntityNotFoundError("Customer", customer_id)

            new_total = int(customer.get("loyaltyPoints") or 0) + points
            if new_total < 0:
                raise BusinessRuleError("Cannot reduce points below zero")

            customer["loyaltyPoints"] = new_total
            customer["updatedAt"] = timestamp
            history = document.setdefault(LOYALTY_HISTORY_KEY, [])
            history.append(entry.model_dump(by_alias=True))

        await self._store.transform_document(apply)
        logger.info("Adjusted loyalty points of customer %s by %+d", customer_id, points)
        return await self.get(customer_id)

    async def loyalty_history(self, customer_id: str) -> list[LoyaltyPointsEntry]:
        """Ledger entries for one customer, oldest first."""
        await self.get(customer_id)
        document = await self._store.read_document()
        return [
            LoyaltyPointsEntry.model_validate(raw)
            for raw in document.get(LOYALTY_HISTORY_KEY) or []
            if raw.get("customerId") == customer_id
        ]

    async def sync_with_sales(self) -> int:
        """Recompute order count, spend and segment of every customer from sales.

        Returns:
            Number of customers whose totals changed.
        """
        totals: dict[str, list[float]] = {}
        for sale in await self._sales.find_all():
            counted = totals.setdefault(sale.customer_id, [0, 0.0])
            counted[0] += 1
            counted[1] += sale.total

        timestamp = utc_timestamp()
        changed = 0

        def apply(document: dict[str, Any]) -> None:
            nonlocal changed
            for customer in document["customers"]:
                orders, spent = totals.get(customer.get("id"), (0, 0.0))
                if orders == customer.get("totalOrders") and spent == customer.get("totalSpent"):
                    continue
                customer.update(
                    totalOrders=int(orders),
                    totalSpent=spent,
                    segment=segment_for_order_count(int(orders)),
                    updatedAt=timestamp,
                )
                changed += 1

        await self._store.transform_document(apply)
        logger.info("Synchronized customer totals with sales (%d updated)", changed)
        return changed
