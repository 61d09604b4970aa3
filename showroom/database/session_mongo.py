from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING


from showroom.core.config import settings
from showroom.utils.logger_utils import get_logger


logger = get_logger(__name__)


class MongoManager:
    """
    Manages the asynchronous MongoDB connection and database instance.
    """

    client: AsyncIOMotorClient | None = None
    db: AsyncIOMotorDatabase | None = None


mongo_manager = MongoManager()


async def connect_to_mongo():
    """
    Establishes the MongoDB client connection and set the database instance.

    Args:
        None

    Returns:
        None
    """
    mongo_manager.client = AsyncIOMotorClient(settings.MONGO_URI, tz_aware=True)
    mongo_manager.db = mongo_manager.client[settings.MONGO_DB]

    try:
        await mongo_manager.client.admin.command("ping")
    except Exception as e:
        raise Exception(f"Failed to connect to MongoDB: {e}")


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    """
    Creates the indexes the collections rely on. Safe to run on every startup.

    Args:
        db: MongoDB database instance

    Returns:
        None
    """
    await db.admins.create_index([("email", ASCENDING)], unique=True)
    await db.cars.create_index([("created_at", DESCENDING)])
    await db.cars.create_index([("name", ASCENDING), ("price", ASCENDING)])
    await db.bookings.create_index([("created_at", DESCENDING)])
    await db.notifications.create_index([("created_at", DESCENDING)])
    logger.info("MongoDB indexes ensured.")


async def close_mongo_connection():
    """
    Closes the MongoDB client connection.

    Args:
        None

    Returns:
        None
    """
    if mongo_manager.client:
        mongo_manager.client.close()
