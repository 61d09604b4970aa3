import asyncio
import json
import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List, Optional
from fastapi import UploadFile
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError


from showroom import schemas
from showroom.collections import Car, CarImage
from showroom.core.config import settings
from showroom.crud import car_crud
from showroom.database.blob_storage import ImageStore, ImageStoreError
from showroom.utils.exception_utils import (
    BadRequestException,
    NotFoundException,
    UpstreamFailureException,
)
from showroom.utils.logger_utils import get_logger
from showroom.utils.objectid_utils import parse_object_id


logger = get_logger(__name__)


VALID_CONTENT_TYPES = {
    "image/jpeg": "image/jpeg",
    "image/jpg": "image/jpeg",
    "image/png": "image/png",
}
VALID_EXTENSIONS = {".jpg", ".jpeg", ".png"}


@dataclass
class PendingImage:
    """An image file read into memory and validated, waiting for upload."""

    filename: str
    content_type: str
    data: bytes


def parse_remove_images(raw: Optional[str]) -> List[str]:
    """
    Parse the `removeImages` form field.

    Accepts a JSON array of asset ids or a single JSON string. A value that is
    not JSON removes nothing.

    Args:
        raw: Raw form value

    Returns:
        List of asset ids, possibly empty
    """
    if not raw or not raw.strip():
        return []
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning(f"Ignoring removeImages value that is not JSON: {raw!r}")
        return []

    if isinstance(parsed, str):
        parsed = [parsed]
    if not isinstance(parsed, list) or not all(isinstance(i, str) for i in parsed):
        raise BadRequestException("removeImages must be a JSON array of asset ids")
    return [item.strip() for item in parsed if item.strip()]


class InventoryService:
    """
    Service class for the car inventory write path.

    Keeps each car's `images` array in step with the blobs held by the image store.
    """
    def _to_public(self, car: Car) -> schemas.CarPublic:
        return schemas.CarPublic(
            id=str(car.id),
            name=car.name,
            price=car.price,
            description=car.description,
            images=[
                schemas.CarImagePublic(url=image.url, asset_id=image.asset_id)
                for image in car.images
            ],
            created_at=car.created_at,
            updated_at=car.updated_at,
        )


    async def _get_car_or_404(self, db: AsyncIOMotorDatabase, car_id: str) -> Car:
        object_id = parse_object_id(car_id)
        car = await car_crud.get_car(db, object_id) if object_id else None
        if not car:
            raise NotFoundException("Car not found")
        return car


    async def _read_images(
        self, files: Optional[List[UploadFile]]
    ) -> List[PendingImage]:
        """
        Validates image format, size and count, and reads the bytes. Both the
        content type and the file extension must be JPG or PNG.

        Args:
            files: Uploaded files, empty slots are skipped

        Returns:
            Images ready for upload in submission order
        """
        valid_files = [f for f in files or [] if f is not None and f.filename]
        if len(valid_files) > settings.MAX_IMAGES_PER_REQUEST:
            raise BadRequestException(
                f"Maximum {settings.MAX_IMAGES_PER_REQUEST} images allowed per request"
            )

        max_bytes = settings.MAX_IMAGE_SIZE_MB * 1024 * 1024
        pending = []
        for file in valid_files:
            content_type = (file.content_type or "").lower()
            extension = os.path.splitext(file.filename)[1].lower()
            resolved_type = VALID_CONTENT_TYPES.get(content_type)
            if not resolved_type or extension not in VALID_EXTENSIONS:
                raise BadRequestException("Only JPEG/PNG images are allowed")

            data = await file.read()
            if not data:
                raise BadRequestException(f"Image {file.filename} is empty")
            if len(data) > max_bytes:
                raise BadRequestException(
                    f"Image file size must be less than {settings.MAX_IMAGE_SIZE_MB} MB"
                )
            pending.append(PendingImage(file.filename, resolved_type, data))

        return pending


    async def _upload_images(
        self, image_store: ImageStore, pending: List[PendingImage]
    ) -> List[CarImage]:
        """
        Uploads all images concurrently. All or nothing: if any upload fails,
        the ones that succeeded are deleted again before raising.

        Args:
            image_store: Target image store
            pending: Validated images

        Returns:
            Uploaded images in submission order
        """
        results = await asyncio.gather(
            *(
                image_store.upload(image.data, image.filename, image.content_type)
                for image in pending
            ),
            return_exceptions=True,
        )

        uploaded = [result for result in results if isinstance(result, CarImage)]
        failures = [result for result in results if isinstance(result, BaseException)]
        if failures:
            for failure in failures:
                logger.error(f"Error uploading car image: {failure}")
            if uploaded:
                logger.info(f"Rolling back {len(uploaded)} uploaded image(s)")
                await self._delete_images(image_store, [i.asset_id for i in uploaded])
            raise UpstreamFailureException("Failed to upload car images")

        return uploaded


    async def _delete_images(
        self, image_store: ImageStore, asset_ids: List[str]
    ) -> List[str]:
        """
        Best-effort deletion of images from the store.

        Args:
            image_store: Image store holding the assets
            asset_ids: Assets to delete

        Returns:
            Asset ids whose deletion failed
        """
        if not asset_ids:
            return []

        results = await asyncio.gather(
            *(image_store.delete(asset_id) for asset_id in asset_ids),
            return_exceptions=True,
        )

        failed = []
        for asset_id, result in zip(asset_ids, results):
            if isinstance(result, BaseException):
                logger.warning(f"Failed to delete image {asset_id}: {result}")
                failed.append(asset_id)
        return failed


    async def create_car(
        self,
        db: AsyncIOMotorDatabase,
        image_store: ImageStore,
        car_in: schemas.CarCreate,
        images: Optional[List[UploadFile]],
    ) -> schemas.CarPublic:
        """
        Create a car after uploading its images. No document is written unless
        every upload succeeds.

        Args:
            db: MongoDB database
            image_store: Image store for the car images
            car_in: Car scalar fields
            images: Image files, at least one required

        Returns:
            Created car
        """
        pending = await self._read_images(images)
        if not pending:
            raise BadRequestException("At least one image is required")

        car_images = await self._upload_images(image_store, pending)

        now = datetime.now(timezone.utc)
        car = Car(
            **car_in.model_dump(), images=car_images, created_at=now, updated_at=now
        )
        try:
            created_car = await car_crud.create_car(db, car)
        except PyMongoError as e:
            logger.error(f"Error saving car: {e}")
            await self._delete_images(image_store, [i.asset_id for i in car_images])
            raise UpstreamFailureException("Failed to save car")

        logger.info(f"Created car {created_car.id} with {len(car_images)} image(s)")
        return self._to_public(created_car)


    async def get_car(self, db: AsyncIOMotorDatabase, car_id: str) -> schemas.CarPublic:
        """
        Get car by ID.

        Args:
            db: MongoDB database
            car_id: Car ID to retrieve

        Returns:
            Car details
        """
        return self._to_public(await self._get_car_or_404(db, car_id))


    async def list_cars(self, db: AsyncIOMotorDatabase) -> List[schemas.CarPublic]:
        """
        List all cars, newest first.

        Args:
            db: MongoDB database

        Returns:
            List of cars
        """
        cars = await car_crud.get_all_cars(db)
        return [self._to_public(car) for car in cars]


    async def update_car(
        self,
        db: AsyncIOMotorDatabase,
        image_store: ImageStore,
        car_id: str,
        car_in: schemas.CarUpdate,
        new_images: Optional[List[UploadFile]] = None,
        remove_asset_ids: Optional[List[str]] = None,
    ) -> schemas.CarUpdateResult:
        """
        Update car fields, append new images and remove listed ones.

        New images are uploaded first; a failed upload aborts the update with
        nothing changed. Removed images are then deleted best-effort: they leave
        the car document even when the store fails to delete them, and such
        failures are reported in the result.

        Args:
            db: MongoDB database
            image_store: Image store for the car images
            car_id: Car ID to update
            car_in: Scalar fields to change, unset ones are kept
            new_images: Image files to append
            remove_asset_ids: Asset ids to remove, ids not on the car are ignored

        Returns:
            Updated car with any failed deletions
        """
        car = await self._get_car_or_404(db, car_id)
        pending = await self._read_images(new_images)

        remove_set = set(remove_asset_ids or [])
        removed = [image for image in car.images if image.asset_id in remove_set]
        kept = [image for image in car.images if image.asset_id not in remove_set]

        if not kept and not pending:
            raise BadRequestException("A car must keep at least one image")

        added = await self._upload_images(image_store, pending) if pending else []
        failed_deletions = await self._delete_images(
            image_store, [image.asset_id for image in removed]
        )

        update_data = car_in.model_dump(exclude_none=True)
        update_data["images"] = [image.model_dump() for image in kept + added]
        update_data["updated_at"] = datetime.now(timezone.utc)

        try:
            updated_car = await car_crud.update_car(db, car.id, update_data)
        except PyMongoError as e:
            logger.error(f"Error updating car {car.id}: {e}")
            await self._delete_images(image_store, [i.asset_id for i in added])
            raise UpstreamFailureException("Failed to update car")

        if not updated_car:
            await self._delete_images(image_store, [i.asset_id for i in added])
            raise NotFoundException("Car not found")

        logger.info(
            f"Updated car {car.id}: {len(added)} image(s) added, {len(removed)} removed"
        )
        return schemas.CarUpdateResult(
            **self._to_public(updated_car).model_dump(),
            failed_image_deletions=failed_deletions,
        )


    async def delete_car(
        self, db: AsyncIOMotorDatabase, image_store: ImageStore, car_id: str
    ) -> None:
        """
        Delete car and, best-effort, its images from the image store.

        Args:
            db: MongoDB database
            image_store: Image store for the car images
            car_id: Car ID to delete

        Returns:
            None
        """
        car = await self._get_car_or_404(db, car_id)

        failed = await self._delete_images(
            image_store, [image.asset_id for image in car.images]
        )
        if failed:
            logger.warning(
                f"Car {car.id} deleted with {len(failed)} image(s) left in store: {failed}"
            )

        if not await car_crud.delete_car(db, car.id):
            raise NotFoundException("Car not found")
        logger.info(f"Deleted car {car.id}")


    async def reconcile_images(
        self, db: AsyncIOMotorDatabase, image_store: ImageStore, dry_run: bool = True
    ) -> schemas.ImageReconcileResult:
        """
        Find stored images no car references and delete them.

        Images newer than the grace period are skipped so uploads belonging to
        an in-flight create or update are never touched.

        Args:
            db: MongoDB database
            image_store: Image store to sweep
            dry_run: Only report orphans when True

        Returns:
            Summary of the sweep
        """
        cutoff = datetime.now(timezone.utc) - timedelta(
            minutes=settings.ORPHAN_IMAGE_GRACE_MINUTES
        )
        referenced = await car_crud.get_referenced_asset_ids(db)

        scanned = 0
        orphaned = []
        try:
            async for asset_id, last_modified in image_store.list_assets():
                scanned += 1
                if asset_id in referenced:
                    continue
                if last_modified and last_modified > cutoff:
                    continue
                orphaned.append(asset_id)
        except ImageStoreError as e:
            logger.error(f"Error listing stored images: {e}")
            raise UpstreamFailureException("Failed to list stored images")

        failed = [] if dry_run else await self._delete_images(image_store, orphaned)
        deleted = [] if dry_run else [a for a in orphaned if a not in failed]

        logger.info(
            f"Image reconcile (dry_run={dry_run}): scanned {scanned}, "
            f"orphaned {len(orphaned)}, deleted {len(deleted)}, failed {len(failed)}"
        )
        return schemas.ImageReconcileResult(
            dry_run=dry_run,
            scanned=scanned,
            orphaned=orphaned,
            deleted=deleted,
            failed=failed,
        )


inventory_service = InventoryService()
