from typing import List, Optional, Tuple
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase


from showroom.collections import Booking, Car


class BookingCRUD:
    """
    Class for managing test-drive bookings in MongoDB.
    """
    async def create_booking(self, db: AsyncIOMotorDatabase, booking: Booking) -> Booking:
        """
        Insert a new booking document.

        Args:
            db: MongoDB database
            booking: Booking to persist

        Returns:
            The persisted Booking
        """
        result = await db.bookings.insert_one(booking.to_document())
        created = await db.bookings.find_one({"_id": result.inserted_id})
        return Booking(**created)


    async def get_all_bookings_with_car(
        self, db: AsyncIOMotorDatabase
    ) -> List[Tuple[Booking, Optional[Car]]]:
        """
        Retrieve all bookings newest first, each joined with its car.

        Args:
            db: MongoDB database

        Returns:
            List of (Booking, Car or None when the car no longer exists)
        """
        pipeline = [
            {"$sort": {"created_at": -1}},
            {
                "$lookup": {
                    "from": "cars",
                    "localField": "car_id",
                    "foreignField": "_id",
                    "as": "car",
                }
            },
            {"$unwind": {"path": "$car", "preserveNullAndEmptyArrays": True}},
        ]
        documents = await db.bookings.aggregate(pipeline).to_list(length=None)

        results = []
        for document in documents:
            car = document.pop("car", None)
            results.append((Booking(**document), Car(**car) if car else None))
        return results


    async def delete_booking(self, db: AsyncIOMotorDatabase, booking_id: ObjectId) -> bool:
        """
        Delete a booking.

        Args:
            db: MongoDB database
            booking_id: Booking identifier

        Returns:
            True if the booking was deleted, False if not found
        """
        result = await db.bookings.delete_one({"_id": booking_id})
        return result.deleted_count > 0


booking_crud = BookingCRUD()
