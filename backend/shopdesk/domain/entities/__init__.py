from .record import Record, parse_timestamp, utc_timestamp
from .customer import Customer, CustomerSegment, LoyaltyPointsEntry, segment_for_order_count
from .sale import Sale, SaleItem, sale_total, upgrade_sale_document
from .order import Order, OrderCosts, OrderPayments, OrderProduct
from .inventory_item import InventoryItem
from .supplier import FreightForwarder, Supplier
from .report import Report
from .costing import Costing, landed_cost
from .notification import LOYALTY_MILESTONES, Notification, NotificationPriority, NotificationType
from .business_settings import BusinessSettings, merge_settings

__all__ = [
    "Record",
    "utc_timestamp",
    "parse_timestamp",
    "Customer",
    "CustomerSegment",
    "LoyaltyPointsEntry",
    "segment_for_order_count",
    "Sale",
    "SaleItem",
    "sale_total",
    "upgrade_sale_document",
    "Order",
    "OrderCosts",
    "OrderPayments",
    "OrderProduct",
    "InventoryItem",
    "FreightForwarder",
    "Supplier",
    "Report",
    "Costing",
    "landed_cost",
    "LOYALTY_MILESTONES",
    "Notification",
    "NotificationPriority",
    "NotificationType",
    "BusinessSettings",
    "merge_settings",
]
