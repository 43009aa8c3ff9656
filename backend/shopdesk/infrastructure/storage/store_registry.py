"""One JsonEntityStore per collection, plus the settings file location."""

import asyncio
from dataclasses import dataclass, field, fields
from pathlib import Path

from shopdesk.domain.entities import (
    Costing,
    Customer,
    FreightForwarder,
    InventoryItem,
    Notification,
    Order,
    Report,
    Sale,
    Supplier,
    upgrade_sale_document,
)
from shopdesk.infrastructure.storage.json_entity_store import JsonEntityStore

SETTINGS_FILENAME = "settings.json"


@dataclass(frozen=True)
class StoreRegistry:
    """Owns the store for every collection file under ``data_dir``.

    Build exactly one registry per data directory and share it, so that
    no two store instances (and locks) address the same file.
    """

    data_dir: Path
    customers: JsonEntityStore[Customer]
    sales: JsonEntityStore[Sale]
    orders: JsonEntityStore[Order]
    inventory: JsonEntityStore[InventoryItem]
    suppliers: JsonEntityStore[Supplier]
    forwarders: JsonEntityStore[FreightForwarder]
    reports: JsonEntityStore[Report]
    notifications: JsonEntityStore[Notification]
    costings: JsonEntityStore[Costing]
    settings_lock: asyncio.Lock = field(default_factory=asyncio.Lock, compare=False)

    @classmethod
    def from_directory(cls, data_dir: str | Path) -> "StoreRegistry":
        root = Path(data_dir)
        return cls(
            data_dir=root,
            customers=JsonEntityStore(root, "customers", Customer),
            sales=JsonEntityStore(root, "sales", Sale, migrate=upgrade_sale_document),
            orders=JsonEntityStore(root, "orders", Order),
            inventory=JsonEntityStore(root, "inventory", InventoryItem),
            suppliers=JsonEntityStore(root, "suppliers", Supplier),
            forwarders=JsonEntityStore(root, "forwarders", FreightForwarder),
            reports=JsonEntityStore(root, "reports", Report),
            notifications=JsonEntityStore(root, "notifications", Notification),
            costings=JsonEntityStore(root, "costings", Costing),
        )

    @property
    def settings_path(self) -> Path:
        return self.data_dir / SETTINGS_FILENAME

    def as_mapping(self) -> dict[str, JsonEntityStore]:
        """Every store keyed by its collection name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if isinstance(getattr(self, f.name), JsonEntityStore)
        }
