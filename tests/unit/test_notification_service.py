"""Unit tests for admin notifications."""

import pytest
from datetime import timedelta

from showroom import schemas
from showroom.services import notification_service
from showroom.utils.exception_utils import BadRequestException


class TestNotificationService:
    """Tests for NotificationService."""

    @pytest.mark.asyncio
    async def test_create_strips_message(self, db, memory_db):
        created = await notification_service.create_notification(
            db, schemas.NotificationCreate(message="  New stock arrived ")
        )

        assert created.message == "New stock arrived"
        assert len(memory_db.notifications) == 1

    @pytest.mark.asyncio
    async def test_blank_message_rejected(self, db, memory_db):
        with pytest.raises(BadRequestException):
            await notification_service.create_notification(
                db, schemas.NotificationCreate(message="   ")
            )

        assert memory_db.notifications == []

    @pytest.mark.asyncio
    async def test_list_newest_first(self, db, memory_db):
        first = await notification_service.create_notification(
            db, schemas.NotificationCreate(message="first")
        )
        memory_db.notifications[0].created_at = first.created_at - timedelta(hours=1)
        await notification_service.create_notification(
            db, schemas.NotificationCreate(message="second")
        )

        listed = await notification_service.list_notifications(db)

        assert [n.message for n in listed] == ["second", "first"]
