from .record_service import CostingService, OrderService, RecordService
from .customer_service import CustomerService
from .sale_service import SaleService
from .inventory_service import InventoryService
from .notification_service import NotificationService
from .dashboard_service import DashboardService
from .currency_service import CurrencyConversionOutcome, CurrencyService
from .event_broadcaster import EventBroadcaster
from .settings_service import SETTINGS_UPDATED_EVENT, SettingsService
from .backup_service import BackupService
from .export_service import EXPORT_TYPES, ExportFile, ExportService

__all__ = [
    "RecordService",
    "OrderService",
    "CostingService",
    "CustomerService",
    "SaleService",
    "InventoryService",
    "NotificationService",
    "DashboardService",
    "CurrencyConversionOutcome",
    "CurrencyService",
    "EventBroadcaster",
    "SETTINGS_UPDATED_EVENT",
    "SettingsService",
    "BackupService",
    "EXPORT_TYPES",
    "ExportFile",
    "ExportService",
]
