"""Pydantic DTOs for notifications."""

from typing import Any, Literal

from pydantic import Field, model_validator

from shopdesk.application.schemas.base import CamelModel
from shopdesk.domain.entities import NotificationPriority, NotificationType


class NotificationCreate(CamelModel):
    type: NotificationType = "system_alert"
    title: str = Field(..., min_length=1)
    message: str = ""
    priority: NotificationPriority = "medium"
    action_url: str | None = None
    expires_at: str | None = None
    metadata: dict[str, Any] | None = None


class NotificationAction(CamelModel):
    """Body of ``PUT /notifications``."""

    action: Literal["markAsRead", "markAllAsRead", "archive"]
    id: str | None = None

    @model_validator(mode="after")
    def check_target_id(self) -> "NotificationAction":
        if self.action != "markAllAsRead" and not self.id:
            raise ValueError(f"'id' is required for action '{self.action}'")
        return self


class NotificationDelete(CamelModel):
    """Body of ``DELETE /notifications``: one id, or ``clearAll``."""

    id: str | None = None
    clear_all: bool = False

    @model_validator(mode="after")
    def check_target(self) -> "NotificationDelete":
        if not self.clear_all and not self.id:
            raise ValueError("Missing id or clearAll parameter")
        return self
