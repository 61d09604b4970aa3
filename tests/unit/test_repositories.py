"""Unit tests for the MongoDB CRUD classes."""

import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument

from showroom.collections import Admin, Booking, Car, Notification
from showroom.crud import admin_crud, booking_crud, car_crud, notification_crud
from tests.factories import make_car


def make_booking(car_id: ObjectId, **overrides) -> Booking:
    fields = {
        "name": "Amina",
        "email": "amina@example.com",
        "phone": "+255700000000",
        "preferred_date": "2026-11-02",
        "car_id": car_id,
    }
    fields.update(overrides)
    return Booking(**fields)


@pytest.fixture
def mock_db():
    """Mock motor database with cars, bookings, notifications and admins."""
    db = MagicMock()
    for name in ("cars", "bookings", "notifications", "admins"):
        collection = getattr(db, name)
        collection.insert_one = AsyncMock()
        collection.find_one = AsyncMock()
        collection.find_one_and_update = AsyncMock()
        collection.delete_one = AsyncMock()
        collection.distinct = AsyncMock()
    return db


class TestCarCRUD:
    """Tests for CarCRUD."""

    @pytest.mark.asyncio
    async def test_create_car(self, mock_db):
        car = make_car(["cars/a"])
        mock_db.cars.insert_one.return_value = SimpleNamespace(inserted_id=car.id)
        mock_db.cars.find_one.return_value = car.to_document()

        created = await car_crud.create_car(mock_db, car)

        inserted = mock_db.cars.insert_one.call_args.args[0]
        assert inserted["_id"] == car.id
        assert inserted["images"] == [
            {"url": "https://images.test/cars/a", "asset_id": "cars/a"}
        ]
        mock_db.cars.find_one.assert_awaited_once_with({"_id": car.id})
        assert created == car

    @pytest.mark.asyncio
    async def test_get_car_missing(self, mock_db):
        mock_db.cars.find_one.return_value = None

        assert await car_crud.get_car(mock_db, ObjectId()) is None

    @pytest.mark.asyncio
    async def test_get_all_cars_newest_first(self, mock_db):
        cars = [make_car(["cars/b"], name="Newer"), make_car(["cars/a"], name="Older")]
        cursor = mock_db.cars.find.return_value.sort.return_value
        cursor.to_list = AsyncMock(return_value=[c.to_document() for c in cars])

        result = await car_crud.get_all_cars(mock_db)

        mock_db.cars.find.return_value.sort.assert_called_once_with(
            "created_at", DESCENDING
        )
        assert [c.name for c in result] == ["Newer", "Older"]
        assert all(isinstance(c, Car) for c in result)

    @pytest.mark.asyncio
    async def test_update_car_sets_fields_and_returns_new_document(self, mock_db):
        car = make_car(["cars/b"], price=450000)
        mock_db.cars.find_one_and_update.return_value = car.to_document()
        update_data = {
            "price": 450000,
            "images": [{"url": "https://images.test/cars/b", "asset_id": "cars/b"}],
        }

        updated = await car_crud.update_car(mock_db, car.id, update_data)

        mock_db.cars.find_one_and_update.assert_awaited_once_with(
            {"_id": car.id},
            {"$set": update_data},
            return_document=ReturnDocument.AFTER,
        )
        assert updated.price == 450000
        assert [i.asset_id for i in updated.images] == ["cars/b"]

    @pytest.mark.asyncio
    async def test_update_car_missing(self, mock_db):
        mock_db.cars.find_one_and_update.return_value = None

        assert await car_crud.update_car(mock_db, ObjectId(), {"name": "Axio"}) is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("deleted_count, expected", [(1, True), (0, False)])
    async def test_delete_car(self, mock_db, deleted_count, expected):
        car_id = ObjectId()
        mock_db.cars.delete_one.return_value = SimpleNamespace(
            deleted_count=deleted_count
        )

        assert await car_crud.delete_car(mock_db, car_id) is expected
        mock_db.cars.delete_one.assert_awaited_once_with({"_id": car_id})

    @pytest.mark.asyncio
    async def test_referenced_asset_ids(self, mock_db):
        mock_db.cars.distinct.return_value = ["cars/a", "cars/b"]

        result = await car_crud.get_referenced_asset_ids(mock_db)

        mock_db.cars.distinct.assert_awaited_once_with("images.asset_id")
        assert result == {"cars/a", "cars/b"}


class TestBookingCRUD:
    """Tests for BookingCRUD."""

    @pytest.mark.asyncio
    async def test_bookings_joined_with_car(self, mock_db):
        car = make_car(["cars/a"])
        kept = make_booking(car.id)
        orphaned = make_booking(ObjectId(), name="Baraka")
        mock_db.bookings.aggregate.return_value.to_list = AsyncMock(
            return_value=[
                {**kept.to_document(), "car": car.to_document()},
                orphaned.to_document(),
            ]
        )

        rows = await booking_crud.get_all_bookings_with_car(mock_db)

        pipeline = mock_db.bookings.aggregate.call_args.args[0]
        assert pipeline[0] == {"$sort": {"created_at": -1}}
        assert pipeline[1]["$lookup"] == {
            "from": "cars",
            "localField": "car_id",
            "foreignField": "_id",
            "as": "car",
        }
        assert pipeline[2] == {
            "$unwind": {"path": "$car", "preserveNullAndEmptyArrays": True}
        }

        assert rows[0] == (kept, car)
        assert rows[1][0].name == "Baraka"
        assert rows[1][1] is None

    @pytest.mark.asyncio
    async def test_create_booking(self, mock_db):
        booking = make_booking(ObjectId())
        mock_db.bookings.insert_one.return_value = SimpleNamespace(
            inserted_id=booking.id
        )
        mock_db.bookings.find_one.return_value = booking.to_document()

        created = await booking_crud.create_booking(mock_db, booking)

        inserted = mock_db.bookings.insert_one.call_args.args[0]
        assert inserted["car_id"] == booking.car_id
        assert created == booking

    @pytest.mark.asyncio
    async def test_delete_booking_missing(self, mock_db):
        mock_db.bookings.delete_one.return_value = SimpleNamespace(deleted_count=0)

        assert await booking_crud.delete_booking(mock_db, ObjectId()) is False


class TestNotificationAndAdminCRUD:
    """Tests for NotificationCRUD and AdminCRUD."""

    @pytest.mark.asyncio
    async def test_notifications_newest_first(self, mock_db):
        notification = Notification(message="New stock")
        cursor = mock_db.notifications.find.return_value.sort.return_value
        cursor.to_list = AsyncMock(return_value=[notification.to_document()])

        result = await notification_crud.get_all_notifications(mock_db)

        mock_db.notifications.find.return_value.sort.assert_called_once_with(
            "created_at", DESCENDING
        )
        assert result == [notification]

    @pytest.mark.asyncio
    async def test_admin_lookup_by_email(self, mock_db):
        admin = Admin(email="owner@showroom.test", password="hashed")
        mock_db.admins.find_one.return_value = admin.to_document()

        found = await admin_crud.get_by_email(mock_db, "owner@showroom.test")

        mock_db.admins.find_one.assert_awaited_once_with(
            {"email": "owner@showroom.test"}
        )
        assert found.role == "admin"
