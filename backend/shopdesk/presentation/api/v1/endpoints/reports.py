"""Report endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from shopdesk.application.schemas import ReportCreate, ReportUpdate
from shopdesk.application.services import RecordService
from shopdesk.domain.entities import Report
from shopdesk.domain.exceptions import EntityNotFoundError
from shopdesk.infrastructure.dependencies import get_report_service

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("")
async def list_reports(service: RecordService[Report] = Depends(get_report_service)) -> dict:
    return {"reports": [r.to_document() for r in await service.list_all()]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_report(
    data: ReportCreate,
    service: RecordService[Report] = Depends(get_report_service),
) -> dict:
    report = await service.create(data.to_fields())
    return {"report": report.to_document()}


@router.get("/{report_id}")
async def get_report(
    report_id: str,
    service: RecordService[Report] = Depends(get_report_service),
) -> dict:
    try:
        report = await service.get(report_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"report": report.to_document()}


@router.api_route("/{report_id}", methods=["PUT", "PATCH"])
async def update_report(
    report_id: str,
    data: ReportUpdate,
    service: RecordService[Report] = Depends(get_report_service),
) -> dict:
    try:
        report = await service.update(report_id, data.to_changes())
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"report": report.to_document()}


@router.delete("/{report_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_report(
    report_id: str,
    service: RecordService[Report] = Depends(get_report_service),
) -> None:
    try:
        await service.delete(report_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
