"""FastAPI dependency injection: wires infrastructure to application layer."""

from functools import lru_cache

from fastapi import Depends

from shopdesk.config import get_settings
from shopdesk.application.services import (
    BackupService,
    CostingService,
    CurrencyService,
    CustomerService,
    DashboardService,
    EventBroadcaster,
    ExportService,
    InventoryService,
    NotificationService,
    OrderService,
    RecordService,
    SaleService,
    SettingsService,
)
from shopdesk.domain.entities import FreightForwarder, Report, Supplier
from shopdesk.infrastructure.storage import StoreRegistry


@lru_cache
def get_store_registry() -> StoreRegistry:
    """One registry (and so one lock per collection file) for the process."""
    return StoreRegistry.from_directory(get_settings().data_dir)


@lru_cache
def get_event_broadcaster() -> EventBroadcaster:
    return EventBroadcaster()


def get_customer_service(
    stores: StoreRegistry = Depends(get_store_registry),
) -> CustomerService:
    return CustomerService(stores.customers, stores.sales)


def get_sale_service(stores: StoreRegistry = Depends(get_store_registry)) -> SaleService:
    return SaleService(stores.sales)


def get_order_service(stores: StoreRegistry = Depends(get_store_registry)) -> OrderService:
    return OrderService(stores.orders)


def get_inventory_service(
    stores: StoreRegistry = Depends(get_store_registry),
) -> InventoryService:
    return InventoryService(stores.inventory)


def get_supplier_service(
    stores: StoreRegistry = Depends(get_store_registry),
) -> RecordService[Supplier]:
    return RecordService(stores.suppliers, "Supplier")


def get_forwarder_service(
    stores: StoreRegistry = Depends(get_store_registry),
) -> RecordService[FreightForwarder]:
    return RecordService(stores.forwarders, "FreightForwarder")


def get_report_service(
    stores: StoreRegistry = Depends(get_store_registry),
) -> RecordService[Report]:
    return RecordService(stores.reports, "Report")


def get_costing_service(stores: StoreRegistry = Depends(get_store_registry)) -> CostingService:
    return CostingService(stores.costings)


def get_notification_service(
    stores: StoreRegistry = Depends(get_store_registry),
) -> NotificationService:
    return NotificationService(
        stores.notifications, stores.inventory, stores.sales, stores.customers
    )


def get_dashboard_service(
    stores: StoreRegistry = Depends(get_store_registry),
) -> DashboardService:
    return DashboardService(stores.sales, stores.orders, stores.customers, stores.inventory)


def get_export_service(stores: StoreRegistry = Depends(get_store_registry)) -> ExportService:
    return ExportService(stores.as_mapping())


def get_currency_service(
    stores: StoreRegistry = Depends(get_store_registry),
) -> CurrencyService:
    return CurrencyService(stores.as_mapping())


def get_settings_service(
    stores: StoreRegistry = Depends(get_store_registry),
    currency: CurrencyService = Depends(get_currency_service),
    broadcaster: EventBroadcaster = Depends(get_event_broadcaster),
) -> SettingsService:
    return SettingsService(
        settings_path=stores.settings_path,
        update_lock=stores.settings_lock,
        currency_service=currency,
        broadcaster=broadcaster,
        default_currency=get_settings().default_currency,
    )


def get_backup_service(
    stores: StoreRegistry = Depends(get_store_registry),
    settings_service: SettingsService = Depends(get_settings_service),
) -> BackupService:
    return BackupService(stores.as_mapping(), settings_service)
