"""In-app notifications."""

from typing import Any, Literal

from shopdesk.domain.entities.record import Record

NotificationType = Literal[
    "inventory_low",
    "order_status",
    "payment_due",
    "customer_loyalty",
    "delivery_update",
    "system_alert",
    "price_change",
    "task_reminder",
]
NotificationPriority = Literal["low", "medium", "high", "urgent"]

# Loyalty balance → milestone level, checked in ascending order
LOYALTY_MILESTONES: dict[int, str] = {
    1000: "silver",
    5000: "gold",
    10000: "platinum",
}


class Notification(Record):
    type: NotificationType = "system_alert"
    title: str = ""
    message: str = ""
    priority: NotificationPriority = "medium"
    is_read: bool = False
    is_archived: bool = False
    action_url: str | None = None
    expires_at: str | None = None
    metadata: dict[str, Any] | None = None

    @property
    def is_unread(self) -> bool:
        return not self.is_read and not self.is_archived
