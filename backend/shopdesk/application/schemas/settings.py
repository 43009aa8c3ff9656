"""Pydantic DTOs for the business settings document."""

from typing import Any, Literal

from pydantic import ConfigDict, Field, field_validator

from shopdesk.application.schemas.base import CamelModel
from shopdesk.domain.currency import SUPPORTED_CURRENCIES


class _PartialSection(CamelModel):
    model_config = ConfigDict(extra="allow")


class BusinessInfoUpdate(_PartialSection):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    currency: str | None = None
    language: str | None = None

    @field_validator("currency")
    @classmethod
    def check_supported_currency(cls, value: str | None) -> str | None:
        if value is not None and value not in SUPPORTED_CURRENCIES:
            raise ValueError(f"Unsupported currency '{value}'")
        return value


class NotificationPreferencesUpdate(_PartialSection):
    email: bool | None = None
    browser: bool | None = None
    low_stock: bool | None = None
    new_orders: bool | None = None
    payment_reminders: bool | None = None


class AppearanceUpdate(_PartialSection):
    theme: Literal["light", "dark", "system"] | None = None
    density: Literal["comfortable", "compact"] | None = None
    sidebar_collapsed: bool | None = None


class BackupUpdate(_PartialSection):
    auto_backup: bool | None = None
    backup_frequency: Literal["daily", "weekly", "monthly"] | None = None


class SettingsUpdate(_PartialSection):
    """Partial settings; each section is merged over the stored one."""

    business_info: BusinessInfoUpdate | None = None
    notifications: NotificationPreferencesUpdate | None = None
    appearance: AppearanceUpdate | None = None
    backup: BackupUpdate | None = None
    timezone: str | None = None

    def to_changes(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)


class SettingsSaved(CamelModel):
    message: str = "Settings saved successfully"
    settings: dict[str, Any] = Field(default_factory=dict)
