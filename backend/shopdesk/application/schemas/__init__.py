from .base import CamelModel
from .customer import (
    CustomerCreate,
    CustomerSyncResult,
    CustomerUpdate,
    LoyaltyPointsAdjustment,
)
from .sale import SaleBulkUpdate, SaleCreate, SaleItemInput
from .order import OrderCreate, OrderCostsInput, OrderPaymentsInput, OrderProductInput
from .inventory import InventoryBulkUpdate, InventoryItemCreate, InventoryItemUpdate
from .supplier import ForwarderCreate, ForwarderUpdate, SupplierCreate, SupplierUpdate
from .costing import CostingCreate, CostingUpdate
from .report import ReportCreate, ReportUpdate
from .notification import NotificationAction, NotificationCreate, NotificationDelete
from .currency import (
    ConvertStoredValuesRequest,
    ConvertStoredValuesResponse,
    CurrencyConversionRequest,
    CurrencyConversionResponse,
)
from .settings import SettingsSaved, SettingsUpdate

__all__ = [
    "CamelModel",
    "CustomerCreate",
    "CustomerSyncResult",
    "CustomerUpdate",
    "LoyaltyPointsAdjustment",
    "SaleBulkUpdate",
    "SaleCreate",
    "SaleItemInput",
    "OrderCreate",
    "OrderCostsInput",
    "OrderPaymentsInput",
    "OrderProductInput",
    "InventoryBulkUpdate",
    "InventoryItemCreate",
    "InventoryItemUpdate",
    "ForwarderCreate",
    "ForwarderUpdate",
    "SupplierCreate",
    "SupplierUpdate",
    "CostingCreate",
    "CostingUpdate",
    "ReportCreate",
    "ReportUpdate",
    "NotificationAction",
    "NotificationCreate",
    "NotificationDelete",
    "ConvertStoredValuesRequest",
    "ConvertStoredValuesResponse",
    "CurrencyConversionRequest",
    "CurrencyConversionResponse",
    "SettingsSaved",
    "SettingsUpdate",
]
