import os
import uuid
from datetime import datetime
from typing import AsyncIterator, Tuple
from azure.storage.blob import ContentSettings
from azure.storage.blob.aio import BlobServiceClient, ContainerClient
from azure.core.exceptions import (
    AzureError,
    ResourceExistsError,
    ResourceNotFoundError,
)


from showroom.core.config import settings
from showroom.collections import CarImage
from showroom.utils.logger_utils import get_logger


logger = get_logger(__name__)


CAR_IMAGE_PREFIX = "cars/"


class ImageStoreError(Exception):
    """
    Raised when the image store rejects an upload, delete or listing.
    """


class BlobManager:
    """
    Holds the Azure Blob Service client for the lifetime of the application.
    """

    service_client: BlobServiceClient | None = None


blob_manager = BlobManager()


class ImageStore:
    """
    Stores car images as blobs in a single container.

    The blob name doubles as the asset id persisted on the car document.
    """

    def __init__(self, container_client: ContainerClient):
        self.container_client = container_client

    async def upload(self, data: bytes, filename: str, content_type: str) -> CarImage:
        """
        Upload image bytes under a fresh blob name.

        Args:
            data: Raw image bytes
            filename: Client supplied filename, only the extension is kept
            content_type: MIME type stored on the blob

        Returns:
            CarImage with the blob URL and asset id
        """
        extension = os.path.splitext(filename or "")[1].lower()
        asset_id = f"{CAR_IMAGE_PREFIX}{uuid.uuid4().hex}{extension}"
        blob_client = self.container_client.get_blob_client(asset_id)
        try:
            await blob_client.upload_blob(
                data,
                overwrite=False,
                content_settings=ContentSettings(content_type=content_type),
            )
        except AzureError as e:
            raise ImageStoreError(f"Failed to upload {filename}: {e}") from e

        logger.info(f"Uploaded image {asset_id}")
        return CarImage(url=blob_client.url, asset_id=asset_id)

    async def delete(self, asset_id: str) -> None:
        """
        Delete a blob by asset id. A blob that is already gone counts as deleted.

        Args:
            asset_id: Blob name to delete

        Returns:
            None
        """
        blob_client = self.container_client.get_blob_client(asset_id)
        try:
            await blob_client.delete_blob()
        except ResourceNotFoundError:
            logger.info(f"Image {asset_id} already absent from store")
            return
        except AzureError as e:
            raise ImageStoreError(f"Failed to delete {asset_id}: {e}") from e

        logger.info(f"Deleted image {asset_id}")

    async def list_assets(self) -> AsyncIterator[Tuple[str, datetime]]:
        """
        Iterate over every stored car image.

        Yields:
            Tuples of (asset id, last modified time)
        """
        try:
            async for blob in self.container_client.list_blobs(
                name_starts_with=CAR_IMAGE_PREFIX
            ):
                yield blob.name, blob.last_modified
        except AzureError as e:
            raise ImageStoreError(f"Failed to list images: {e}") from e


def get_blob_service_client() -> BlobServiceClient:
    """
    Returns the Azure Blob Service client, creating it on first use.

    Args:
        None

    Returns:
        BlobServiceClient: The Azure Blob Service client.
    """
    if blob_manager.service_client is None:
        blob_manager.service_client = BlobServiceClient.from_connection_string(
            settings.AZURE_STORAGE_CONNECTION_STRING
        )
    return blob_manager.service_client


async def close_blob_service_client():
    """
    Closes the Azure Blob Service client connection.

    Args:
        None

    Returns:
        None
    """
    if blob_manager.service_client is not None:
        await blob_manager.service_client.close()
        blob_manager.service_client = None


async def verify_containers() -> None:
    """
    Ensure the inventory container exists, creates it if missing.

    Args:
        None

    Returns:
        None
    """
    name = settings.INVENTORY_CONTAINER_NAME
    container_client = get_blob_service_client().get_container_client(name)
    try:
        await container_client.create_container()

    except ResourceExistsError:
        return

    except Exception as exc:
        raise RuntimeError(
            f"Failed to ensure Azure Blob container '{name}'. "
            f"Application startup aborted."
        ) from exc
