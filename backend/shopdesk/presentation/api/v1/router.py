"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from shopdesk.presentation.api.v1.endpoints.health import router as health_router
from shopdesk.presentation.api.v1.endpoints.customers import router as customers_router
from shopdesk.presentation.api.v1.endpoints.sales import router as sales_router
from shopdesk.presentation.api.v1.endpoints.orders import router as orders_router
from shopdesk.presentation.api.v1.endpoints.inventory import router as inventory_router
from shopdesk.presentation.api.v1.endpoints.suppliers import router as suppliers_router
from shopdesk.presentation.api.v1.endpoints.forwarders import router as forwarders_router
from shopdesk.presentation.api.v1.endpoints.costings import router as costings_router
from shopdesk.presentation.api.v1.endpoints.reports import router as reports_router
from shopdesk.presentation.api.v1.endpoints.notifications import router as notifications_router
from shopdesk.presentation.api.v1.endpoints.dashboard import router as dashboard_router
from shopdesk.presentation.api.v1.endpoints.currency import router as currency_router
from shopdesk.presentation.api.v1.endpoints.export import router as export_router
from shopdesk.presentation.api.v1.settings_controller import router as settings_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(customers_router)
router.include_router(sales_router)
router.include_router(orders_router)
router.include_router(inventory_router)
router.include_router(suppliers_router)
router.include_router(forwarders_router)
router.include_router(costings_router)
router.include_router(reports_router)
router.include_router(notifications_router)
router.include_router(dashboard_router)
router.include_router(currency_router)
router.include_router(export_router)
router.include_router(settings_router)
