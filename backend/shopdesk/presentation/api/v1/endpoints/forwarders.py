"""Freight forwarder endpoints. Records are returned without an envelope."""

from fastapi import APIRouter, Depends, HTTPException, status

from shopdesk.application.schemas import ForwarderCreate, ForwarderUpdate
from shopdesk.application.services import RecordService
from shopdesk.domain.entities import FreightForwarder
from shopdesk.domain.exceptions import EntityNotFoundError
from shopdesk.infrastructure.dependencies import get_forwarder_service

router = APIRouter(prefix="/forwarders", tags=["Forwarders"])


@router.get("")
async def list_forwarders(
    service: RecordService[FreightForwarder] = Depends(get_forwarder_service),
) -> list[dict]:
    return [f.to_document() for f in await service.list_all()]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_forwarder(
    data: ForwarderCreate,
    service: RecordService[FreightForwarder] = Depends(get_forwarder_service),
) -> dict:
    forwarder = await service.create(data.to_fields())
    return forwarder.to_document()


@router.get("/{forwarder_id}")
async def get_forwarder(
    forwarder_id: str,
    service: RecordService[FreightForwarder] = Depends(get_forwarder_service),
) -> dict:
    try:
        forwarder = await service.get(forwarder_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return forwarder.to_document()


@router.api_route("/{forwarder_id}", methods=["PUT", "PATCH"])
async def update_forwarder(
    forwarder_id: str,
    data: ForwarderUpdate,
    service: RecordService[FreightForwarder] = Depends(get_forwarder_service),
) -> dict:
    try:
        forwarder = await service.update(forwarder_id, data.to_changes())
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return forwarder.to_document()


@router.delete("/{forwarder_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_forwarder(
    forwarder_id: str,
    service: RecordService[FreightForwarder] = Depends(get_forwarder_service),
) -> None:
    try:
        await service.delete(forwarder_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
