"""The single business settings document (``settings.json``)."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Section(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class BusinessInfo(_Section):
    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    currency: str = "USD"
    language: str = "en"


class NotificationPreferences(_Section):
    email: bool = False
    browser: bool = True
    low_stock: bool = True
    new_orders: bool = True
    payment_reminders: bool = True


class AppearanceSettings(_Section):
    theme: Literal["light", "dark", "system"] = "system"
    density: Literal["comfortable", "compact"] = "comfortable"
    sidebar_collapsed: bool = False


class BackupSettings(_Section):
    last_backup: str | None = None
    auto_backup: bool = False
    backup_frequency: Literal["daily", "weekly", "monthly"] = "weekly"


class BusinessSettings(_Section):
    """Process-wide business configuration.

    Each section is merged over its defaults when loaded, so a file that
    predates a field still yields a complete document.
    """

    business_info: BusinessInfo = Field(default_factory=BusinessInfo)
    notifications: NotificationPreferences = Field(default_factory=NotificationPreferences)
    appearance: AppearanceSettings = Field(default_factory=AppearanceSettings)
    backup: BackupSettings = Field(default_factory=BackupSettings)
    timezone: str = "UTC"

    @property
    def currency(self) -> str:
        return self.business_info.currency

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


SETTINGS_SECTIONS = ("businessInfo", "notifications", "appearance", "backup")


def merge_settings(base: dict[str, Any], changes: dict[str, Any]) -> dict[str, Any]:
    """Merge ``changes`` over ``base``: one level deep for known sections.

    Unknown top-level keys in ``changes`` replace the value in ``base``.
    """
    merged = dict(base)
    for key, value in changes.items():
        if key in SETTINGS_SECTIONS and isinstance(value, dict):
            merged[key] = {**(base.get(key) or {}), **value}
        else:
            merged[key] = value
    return merged
