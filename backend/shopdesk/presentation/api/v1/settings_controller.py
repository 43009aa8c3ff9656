"""Settings API controller: business settings, currency switch, backup and restore."""

import json
import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.responses import JSONResponse, StreamingResponse

from shopdesk.application.schemas import (
    ConvertStoredValuesRequest,
    ConvertStoredValuesResponse,
    SettingsSaved,
    SettingsUpdate,
)
from shopdesk.application.services import (
    BackupService,
    CurrencyService,
    EventBroadcaster,
    SettingsService,
)
from shopdesk.domain.entities import utc_timestamp
from shopdesk.domain.exceptions import CurrencyConversionError, InvalidBackupError
from shopdesk.infrastructure.dependencies import (
    get_backup_service,
    get_currency_service,
    get_event_broadcaster,
    get_settings_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["Settings"])


# ── Settings document ────────────────────────────────────────────────


@router.get("")
async def get_business_settings(
    service: SettingsService = Depends(get_settings_service),
) -> dict:
    settings = await service.load()
    return settings.to_document()


@router.api_route("", methods=["PUT", "POST"], response_model=SettingsSaved)
async def save_business_settings(
    data: SettingsUpdate,
    service: SettingsService = Depends(get_settings_service),
) -> SettingsSaved:
    """Merge the given sections into the stored settings.

    Changing ``businessInfo.currency`` converts every stored amount first;
    if any collection fails to convert the settings are not saved.
    """
    try:
        settings = await service.update(data.to_changes())
    except CurrencyConversionError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return SettingsSaved(settings=settings.to_document())


# ── SSE Stream ───────────────────────────────────────────────────────


@router.get("/stream")
async def settings_stream(
    broadcaster: EventBroadcaster = Depends(get_event_broadcaster),
) -> StreamingResponse:
    """SSE endpoint; emits a ``settings_updated`` event after every save."""
    return StreamingResponse(
        broadcaster.subscribe(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )


# ── Currency ─────────────────────────────────────────────────────────


@router.post(
    "/convert-currency",
    response_model=ConvertStoredValuesResponse,
    response_model_by_alias=True,
)
async def convert_stored_values(
    data: ConvertStoredValuesRequest,
    service: CurrencyService = Depends(get_currency_service),
) -> ConvertStoredValuesResponse:
    """Rewrite every stored amount from one currency to another.

    Settings are left untouched. Collections converted before a failure
    stay converted.
    """
    outcome = await service.convert_collections(data.from_currency, data.to_currency)
    if not outcome.succeeded:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to convert currency values for: {', '.join(outcome.failed)}",
        )
    return ConvertStoredValuesResponse(
        message="Currency values converted successfully",
        from_currency=data.from_currency,
        to_currency=data.to_currency,
    )


# ── Backup / restore ─────────────────────────────────────────────────


@router.post("/backup")
async def create_backup(service: BackupService = Depends(get_backup_service)) -> JSONResponse:
    """Download settings and core collections as one JSON document."""
    backup = await service.create_backup()
    return JSONResponse(
        content=backup,
        headers={
            "Content-Disposition": f'attachment; filename="backup-{utc_timestamp()}.json"',
        },
    )


@router.post("/restore")
async def restore_backup(
    backup: UploadFile | None = File(None),
    service: BackupService = Depends(get_backup_service),
) -> dict:
    """Restore from a file produced by ``POST /settings/backup``."""
    if backup is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No backup file provided")

    try:
        payload = json.loads(await backup.read())
    except (UnicodeDecodeError, json.JSONDecodeError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Backup file is not valid JSON"
        )

    try:
        restored = await service.restore_backup(payload)
    except InvalidBackupError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"message": "Data restored successfully", "restored": restored}
