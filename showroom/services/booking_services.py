from datetime import datetime, timezone
from typing import List
from motor.motor_asyncio import AsyncIOMotorDatabase


from showroom import schemas
from showroom.collections import Booking, Car
from showroom.crud import booking_crud, car_crud
from showroom.utils.exception_utils import BadRequestException, NotFoundException
from showroom.utils.logger_utils import get_logger
from showroom.utils.objectid_utils import parse_object_id


logger = get_logger(__name__)


REQUIRED_BOOKING_FIELDS = ("name", "email", "phone", "preferred_date", "car_id")


class BookingService:
    """
    Service layer for test-drive bookings made from the storefront.
    """
    def _to_public(self, booking: Booking) -> schemas.BookingPublic:
        return schemas.BookingPublic(
            id=str(booking.id),
            name=booking.name,
            email=booking.email,
            phone=booking.phone,
            preferred_date=booking.preferred_date,
            message=booking.message,
            car=str(booking.car_id),
            created_at=booking.created_at,
            updated_at=booking.updated_at,
        )


    def _car_summary(self, car: Car) -> schemas.CarSummary:
        return schemas.CarSummary(
            id=str(car.id),
            name=car.name,
            price=car.price,
            description=car.description,
            images=[
                schemas.CarImagePublic(url=image.url, asset_id=image.asset_id)
                for image in car.images
            ],
        )


    async def create_booking(
        self, db: AsyncIOMotorDatabase, booking_in: schemas.BookingCreate
    ) -> schemas.BookingPublic:
        """
        Record a test-drive request for an existing car.

        Args:
            db: MongoDB database
            booking_in: Booking request payload

        Returns:
            Created booking
        """
        values = {
            field: (getattr(booking_in, field) or "").strip()
            for field in REQUIRED_BOOKING_FIELDS
        }
        if not all(values.values()):
            raise BadRequestException("All required fields must be provided")

        car_id = parse_object_id(values["car_id"])
        car = await car_crud.get_car(db, car_id) if car_id else None
        if not car:
            raise NotFoundException("Car not found in showroom")

        now = datetime.now(timezone.utc)
        booking = Booking(
            name=values["name"],
            email=values["email"],
            phone=values["phone"],
            preferred_date=values["preferred_date"],
            message=booking_in.message,
            car_id=car.id,
            created_at=now,
            updated_at=now,
        )
        created = await booking_crud.create_booking(db, booking)
        logger.info(f"Booking {created.id} saved for car {car.id}")
        return self._to_public(created)


    async def list_bookings(
        self, db: AsyncIOMotorDatabase
    ) -> List[schemas.BookingDetailed]:
        """
        List all bookings newest first with the booked car expanded.

        Args:
            db: MongoDB database

        Returns:
            List of bookings
        """
        rows = await booking_crud.get_all_bookings_with_car(db)
        return [
            schemas.BookingDetailed(
                id=str(booking.id),
                name=booking.name,
                email=booking.email,
                phone=booking.phone,
                preferred_date=booking.preferred_date,
                message=booking.message,
                car=self._car_summary(car) if car else None,
                created_at=booking.created_at,
                updated_at=booking.updated_at,
            )
            for booking, car in rows
        ]


    async def delete_booking(self, db: AsyncIOMotorDatabase, booking_id: str) -> None:
        """
        Remove a booking.

        Args:
            db: MongoDB database
            booking_id: Booking identifier

        Returns:
            None
        """
        object_id = parse_object_id(booking_id)
        if not object_id or not await booking_crud.delete_booking(db, object_id):
            raise NotFoundException("Booking not found")
        logger.info(f"Booking {booking_id} deleted")


booking_service = BookingService()
