from typing import List
from motor.motor_asyncio import AsyncIOMotorDatabase


from showroom import schemas
from showroom.collections import Notification
from showroom.crud import notification_crud
from showroom.utils.exception_utils import BadRequestException


class NotificationService:
    """
    Service layer for admin notifications.
    """
    def _to_public(self, notification: Notification) -> schemas.NotificationPublic:
        return schemas.NotificationPublic(
            id=str(notification.id),
            message=notification.message,
            created_at=notification.created_at,
        )


    async def create_notification(
        self, db: AsyncIOMotorDatabase, notification_in: schemas.NotificationCreate
    ) -> schemas.NotificationPublic:
        """
        Append a notification.

        Args:
            db: MongoDB database
            notification_in: Notification payload

        Returns:
            Created notification
        """
        message = notification_in.message.strip()
        if not message:
            raise BadRequestException("Notification message is required")

        created = await notification_crud.create_notification(
            db, Notification(message=message)
        )
        return self._to_public(created)


    async def list_notifications(
        self, db: AsyncIOMotorDatabase
    ) -> List[schemas.NotificationPublic]:
        """
        List notifications, newest first.
        """
        notifications = await notification_crud.get_all_notifications(db)
        return [self._to_public(n) for n in notifications]


notification_service = NotificationService()
