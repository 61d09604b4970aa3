from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import List


from showroom import schemas
from showroom.auth.dependencies import get_current_admin
from showroom.core.dependencies import get_mongo_db
from showroom.services import notification_service

router = APIRouter()


@router.get("", response_model=List[schemas.NotificationPublic])
async def list_notifications(
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
    _: schemas.TokenPayload = Depends(get_current_admin),
):
    """
    List notifications, newest first.
    """
    return await notification_service.list_notifications(db)


@router.post(
    "",
    response_model=schemas.NotificationPublic,
    status_code=status.HTTP_201_CREATED,
)
async def create_notification(
    notification_in: schemas.NotificationCreate,
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
    _: schemas.TokenPayload = Depends(get_current_admin),
):
    """
    Post a notification.

    Args:
        notification_in: Notification message
        db: MongoDB database dependency

    Returns:
        Created notification
    """
    return await notification_service.create_notification(db, notification_in)
