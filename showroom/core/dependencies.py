from motor.motor_asyncio import AsyncIOMotorDatabase


from showroom.core.config import settings
from showroom.database import session_mongo, blob_storage


async def get_mongo_db() -> AsyncIOMotorDatabase:
    """
    Provide the MongoDB database instance.

    Args:
        None

    Returns:
        An instance of AsyncIOMotorDatabase.
    """
    if session_mongo.mongo_manager.db is None:
        raise Exception("MongoDB connection is not initialized.")
    return session_mongo.mongo_manager.db


def get_image_store() -> blob_storage.ImageStore:
    """
    Provide the image store bound to the inventory container.

    Args:
        None

    Returns:
        An instance of ImageStore.
    """
    container_client = blob_storage.get_blob_service_client().get_container_client(
        settings.INVENTORY_CONTAINER_NAME
    )
    return blob_storage.ImageStore(container_client)
