"""Application service for in-app notifications and the alerts derived from stored data."""

import logging
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import uuid4

from shopdesk.application.interfaces import EntityStore
from shopdesk.domain.entities import (
    LOYALTY_MILESTONES,
    Customer,
    InventoryItem,
    Notification,
    NotificationPriority,
    Sale,
    parse_timestamp,
    utc_timestamp,
)
from shopdesk.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

RECENT_SALE_WINDOW = timedelta(hours=24)


def _has_notification(existing: list[dict[str, Any]], kind: str, **metadata: Any) -> bool:
    """True if a notification of ``kind`` whose metadata contains ``metadata`` exists."""
    for notification in existing:
        if notification.get("type") != kind:
            continue
        stored = notification.get("metadata") or {}
        if all(stored.get(key) == value for key, value in metadata.items()):
            return True
    return False


class NotificationService:
    """Notification CRUD plus :meth:`sync`, which scans other collections for alerts."""

    def __init__(
        self,
        notifications: EntityStore[Notification],
        inventory: EntityStore[InventoryItem],
        sales: EntityStore[Sale],
        customers: EntityStore[Customer],
    ):
        self._store = notifications
        self._inventory = inventory
        self._sales = sales
        self._customers = customers

    async def list_all(self) -> list[Notification]:
        return await self._store.find_all()

    async def create(self, fields: Mapping[str, Any]) -> Notification:
        return await self._store.create({**fields, "isRead": False, "isArchived": False})

    async def create_system_notification(
        self,
        title: str,
        message: str,
        priority: NotificationPriority = "medium",
        metadata: dict[str, Any] | None = None,
    ) -> Notification:
        fields: dict[str, Any] = {
            "type": "system_alert",
            "title": title,
            "message": message,
            "priority": priority,
        }
        if metadata is not None:
            fields["metadata"] = metadata
        return await self.create(fields)

    async def _set_flag(self, notification_id: str, flag: str) -> Notification:
        updated = await self._store.update(notification_id, {flag: True})
        if updated is None:
            raise EntityNotFoundError("Notification", notification_id)
        return updated

    async def mark_as_read(self, notification_id: str) -> Notification:
        return await self._set_flag(notification_id, "isRead")

    async def archive(self, notification_id: str) -> Notification:
        return await self._set_flag(notification_id, "isArchived")

    async def mark_all_as_read(self) -> None:
        def apply(document: dict[str, Any]) -> None:
            for notification in document["notifications"]:
                notification["isRead"] = True

        await self._store.transform_document(apply)

    async def delete(self, notification_id: str) -> None:
        if not await self._store.delete(notification_id):
            raise EntityNotFoundError("Notification", notification_id)

    async def clear_all(self) -> None:
        await self._store.clear()

    async def unread_count(self) -> int:
        return sum(1 for n in await self._store.find_all() if n.is_unread)

    # ── Sync ────────────────────────────────────────────────────────

    async def sync(self, now: datetime | None = None) -> list[Notification]:
        """Generate alerts for low stock, recent sales and loyalty milestones.

        Alerts already on file (same product and stock level, same sale,
        same customer milestone) are not generated again. New notifications
        are placed ahead of the existing ones.

        Returns:
            The notifications that were added.
        """
        now = now or datetime.now(timezone.utc)
        inventory = await self._inventory.find_all()
        sales = await self._sales.find_all()
        customers = await self._customers.find_all()
        created: list[dict[str, Any]] = []

        def apply(document: dict[str, Any]) -> None:
            existing = document["notifications"]
            timestamp = utc_timestamp()

            def add(fields: dict[str, Any]) -> None:
                created.append({
                    **fields,
                    "id": str(uuid4()),
                    "isRead": False,
                    "isArchived": False,
                    "createdAt": timestamp,
                    "updatedAt": timestamp,
                })

            for item in inventory:
                if not item.is_low_stock:
                    continue
                if _has_notification(
                    existing, "inventory_low", productId=item.id, currentStock=item.quantity
                ):
                    continue
                add({
                    "type": "inventory_low",
                    "title": "Low Stock Alert",
                    "message": (
                        f"Product '{item.name}' is running low on stock. "
                        f"Current quantity: {item.quantity:g} units"
                    ),
                    "priority": "urgent" if item.quantity == 0 else "high",
                    "actionUrl": f"/inventory/{item.id}",
                    "metadata": {
                        "productId": item.id,
                        "currentStock": item.quantity,
                        "threshold": item.reorder_point,
                    },
                })

            for sale in sales:
                created_at = parse_timestamp(sale.created_at)
                if created_at is None or now - created_at > RECENT_SALE_WINDOW:
                    continue
                if _has_notification(existing, "order_status", orderId=sale.id):
                    continue
                add({
                    "type": "order_status",
                    "title": "New Sale Recorded",
                    "message": f"Sale #{sale.id} has been recorded for {sale.total:.2f}",
                    "priority": "medium",
                    "actionUrl": f"/sales/{sale.id}",
                    "metadata": {
                        "orderId": sale.id,
                        "amount": sale.total,
                        "customerId": sale.customer_id,
                    },
                })

            for customer in customers:
                for milestone, level in LOYALTY_MILESTONES.items():
                    if customer.loyalty_points < milestone:
                        continue
                    if _has_notification(
                        existing,
                        "customer_loyalty",
                        customerId=customer.id,
                        loyaltyPoints=milestone,
                    ):
                        continue
                    add({
                        "type": "customer_loyalty",
                        "title": "Customer Milestone",
                        "message": (
                            f"Customer {customer.name} has reached {milestone} loyalty points!"
                        ),
                        "priority": "low",
                        "actionUrl": f"/customers/{customer.id}",
                        "metadata": {
                            "customerId": customer.id,
                            "loyaltyPoints": milestone,
                            "milestone": level,
                        },
                    })

            if created:
                document["notifications"] = created + existing

        await self._store.transform_document(apply)
        if created:
            logger.info("Notification sync added %d notifications", len(created))
        return [Notification.model_validate(raw) for raw in created]
