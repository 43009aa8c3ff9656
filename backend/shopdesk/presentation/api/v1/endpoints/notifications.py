"""Notification endpoints: listing, actions, and alert sync."""

from fastapi import APIRouter, Depends, HTTPException, status

from shopdesk.application.schemas import (
    NotificationAction,
    NotificationCreate,
    NotificationDelete,
)
from shopdesk.application.services import NotificationService
from shopdesk.domain.exceptions import EntityNotFoundError
from shopdesk.infrastructure.dependencies import get_notification_service

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("")
async def list_notifications(
    service: NotificationService = Depends(get_notification_service),
) -> dict:
    notifications = await service.list_all()
    return {"notifications": [n.to_document() for n in notifications]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_notification(
    data: NotificationCreate,
    service: NotificationService = Depends(get_notification_service),
) -> dict:
    notification = await service.create(data.to_fields())
    return {"notification": notification.to_document()}


@router.put("")
async def apply_action(
    data: NotificationAction,
    service: NotificationService = Depends(get_notification_service),
) -> dict:
    """``markAsRead`` / ``archive`` one notification, or ``markAllAsRead``."""
    try:
        if data.action == "markAllAsRead":
            await service.mark_all_as_read()
        elif data.action == "markAsRead":
            await service.mark_as_read(data.id)
        else:
            await service.archive(data.id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"success": True}


@router.delete("")
async def delete_notifications(
    data: NotificationDelete,
    service: NotificationService = Depends(get_notification_service),
) -> dict:
    """Delete one notification by ``id``, or all of them with ``clearAll``."""
    try:
        if data.clear_all:
            await service.clear_all()
        else:
            await service.delete(data.id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"success": True}


@router.get("/unread-count")
async def unread_count(
    service: NotificationService = Depends(get_notification_service),
) -> dict:
    return {"count": await service.unread_count()}


@router.post("/sync")
async def sync_notifications(
    service: NotificationService = Depends(get_notification_service),
) -> dict:
    """Scan inventory, sales and customers and add any new alerts."""
    created = await service.sync()
    return {
        "success": True,
        "count": len(created),
        "notifications": [n.to_document() for n in created],
    }
