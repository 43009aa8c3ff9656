"""Spreadsheet export endpoints."""

from io import BytesIO

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import StreamingResponse

from shopdesk.application.services import EXPORT_TYPES, ExportFile, ExportService
from shopdesk.application.services.export_service import XLSX_MEDIA_TYPE
from shopdesk.infrastructure.dependencies import get_export_service

router = APIRouter(prefix="/export", tags=["Export"])


def _download(export: ExportFile) -> StreamingResponse:
    return StreamingResponse(
        BytesIO(export.content),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )


@router.get("/reports")
async def export_reports(service: ExportService = Depends(get_export_service)) -> StreamingResponse:
    """Summary metrics for sales, inventory, customers and orders."""
    return _download(await service.export_reports())


@router.get("/{export_type}")
async def export_collection(
    export_type: str,
    service: ExportService = Depends(get_export_service),
) -> StreamingResponse:
    """Download one collection, or ``all`` of them as one sheet each."""
    if export_type not in EXPORT_TYPES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid export type")

    export = await service.export(export_type)
    if export is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No data to export")
    return _download(export)
