from typing import Any, Dict, List, Optional, Set
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING, ReturnDocument


from showroom.collections import Car


class CarCRUD:
    """
    Class for reading and writing car documents in MongoDB.
    """
    async def create_car(self, db: AsyncIOMotorDatabase, car: Car) -> Car:
        """
        Insert a new car document.

        Args:
            db: MongoDB database
            car: Car to persist

        Returns:
            The persisted Car
        """
        result = await db.cars.insert_one(car.to_document())
        created = await db.cars.find_one({"_id": result.inserted_id})
        return Car(**created)


    async def get_car(self, db: AsyncIOMotorDatabase, car_id: ObjectId) -> Optional[Car]:
        """
        Retrieve a car by its identifier.

        Args:
            db: MongoDB database
            car_id: Car identifier

        Returns:
            Car if found, None otherwise
        """
        car = await db.cars.find_one({"_id": car_id})
        return Car(**car) if car else None


    async def get_all_cars(self, db: AsyncIOMotorDatabase) -> List[Car]:
        """
        Retrieve every car, newest first.

        Args:
            db: MongoDB database

        Returns:
            List of Car objects
        """
        cursor = db.cars.find().sort("created_at", DESCENDING)
        cars = await cursor.to_list(length=None)
        return [Car(**car) for car in cars]


    async def update_car(
        self, db: AsyncIOMotorDatabase, car_id: ObjectId, update_data: Dict[str, Any]
    ) -> Optional[Car]:
        """
        Overwrite the given fields of a car document.

        Args:
            db: MongoDB database
            car_id: Car identifier
            update_data: Fields to set

        Returns:
            Updated Car if it still exists, None otherwise
        """
        updated = await db.cars.find_one_and_update(
            {"_id": car_id},
            {"$set": update_data},
            return_document=ReturnDocument.AFTER,
        )
        return Car(**updated) if updated else None


    async def delete_car(self, db: AsyncIOMotorDatabase, car_id: ObjectId) -> bool:
        """
        Delete a car document.

        Args:
            db: MongoDB database
            car_id: Car identifier

        Returns:
            True if the car was deleted, False if not found
        """
        result = await db.cars.delete_one({"_id": car_id})
        return result.deleted_count > 0


    async def get_referenced_asset_ids(self, db: AsyncIOMotorDatabase) -> Set[str]:
        """
        Collect every image asset id referenced by any car.

        Args:
            db: MongoDB database

        Returns:
            Set of asset ids
        """
        asset_ids = await db.cars.distinct("images.asset_id")
        return set(asset_ids)


car_crud = CarCRUD()
