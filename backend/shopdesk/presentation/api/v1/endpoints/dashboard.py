"""Dashboard endpoint."""

from fastapi import APIRouter, Depends

from shopdesk.application.services import DashboardService
from shopdesk.infrastructure.dependencies import get_dashboard_service

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("")
async def get_dashboard(service: DashboardService = Depends(get_dashboard_service)) -> dict:
    """Revenue metrics, monthly overview and the five latest sales."""
    return await service.summary()
