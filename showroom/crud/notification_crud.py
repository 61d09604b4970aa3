from typing import List
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING


from showroom.collections import Notification


class NotificationCRUD:
    """
    Class for the append-only notifications collection.
    """
    async def create_notification(
        self, db: AsyncIOMotorDatabase, notification: Notification
    ) -> Notification:
        result = await db.notifications.insert_one(notification.to_document())
        created = await db.notifications.find_one({"_id": result.inserted_id})
        return Notification(**created)


    async def get_all_notifications(self, db: AsyncIOMotorDatabase) -> List[Notification]:
        cursor = db.notifications.find().sort("created_at", DESCENDING)
        notifications = await cursor.to_list(length=None)
        return [Notification(**notification) for notification in notifications]


notification_crud = NotificationCRUD()
