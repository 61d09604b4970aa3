from fastapi import APIRouter, Depends, Query
from motor.motor_asyncio import AsyncIOMotorDatabase


from showroom import schemas
from showroom.auth.dependencies import get_current_admin
from showroom.core.dependencies import get_image_store, get_mongo_db
from showroom.database.blob_storage import ImageStore
from showroom.services import inventory_service

router = APIRouter()


@router.post("/images/reconcile", response_model=schemas.ImageReconcileResult)
async def reconcile_images(
    dry_run: bool = Query(True, description="Only report orphaned images"),
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
    image_store: ImageStore = Depends(get_image_store),
    _: schemas.TokenPayload = Depends(get_current_admin),
):
    """
    Find stored images no car references and optionally delete them.

    Args:
        dry_run: Report without deleting when True
        db: MongoDB database dependency
        image_store: Image store dependency

    Returns:
        Summary of orphaned images
    """
    return await inventory_service.reconcile_images(db, image_store, dry_run)
