from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.exceptions import RequestValidationError
from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import List, Optional, Type, TypeVar
from pydantic import BaseModel, ValidationError


from showroom import schemas
from showroom.auth.dependencies import get_current_admin
from showroom.core.dependencies import get_image_store, get_mongo_db
from showroom.database.blob_storage import ImageStore
from showroom.services import inventory_service
from showroom.services.inventory_services import parse_remove_images

router = APIRouter()

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _schema_from_form(schema: Type[SchemaT], **fields) -> SchemaT:
    """
    Build a schema from multipart form fields, reporting failures as request errors.
    """
    try:
        return schema(**fields)
    except ValidationError as e:
        raise RequestValidationError(e.errors())


@router.get("", response_model=List[schemas.CarPublic])
async def list_cars(db: AsyncIOMotorDatabase = Depends(get_mongo_db)):
    """
    List all cars, newest first.

    Args:
        db: MongoDB database dependency

    Returns:
        List of cars
    """
    return await inventory_service.list_cars(db)


@router.get("/{car_id}", response_model=schemas.CarPublic)
async def get_car(car_id: str, db: AsyncIOMotorDatabase = Depends(get_mongo_db)):
    """
    Get car by ID.

    Args:
        car_id: Unique identifier of the car
        db: MongoDB database dependency

    Returns:
        Car details
    """
    return await inventory_service.get_car(db, car_id)


@router.post(
    "", response_model=schemas.CarPublic, status_code=status.HTTP_201_CREATED
)
async def create_car(
    name: str = Form(...),
    price: float = Form(...),
    description: str = Form(""),
    images: Optional[List[UploadFile]] = File(
        None, description="1-5 car images (JPG/PNG)"
    ),
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
    image_store: ImageStore = Depends(get_image_store),
    _: schemas.TokenPayload = Depends(get_current_admin),
):
    """
    Create new car with its images.

    Args:
        name: Car display name
        price: Asking price
        description: Free text description
        images: Car images, at least one
        db: MongoDB database dependency
        image_store: Image store dependency

    Returns:
        Newly created car
    """
    car_in = _schema_from_form(
        schemas.CarCreate, name=name, price=price, description=description
    )
    return await inventory_service.create_car(db, image_store, car_in, images)


@router.put("/{car_id}", response_model=schemas.CarUpdateResult)
async def update_car(
    car_id: str,
    name: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    images: Optional[List[UploadFile]] = File(
        None, description="New images to append"
    ),
    remove_images: Optional[str] = Form(
        None,
        alias="removeImages",
        description="JSON array of asset ids to remove",
    ),
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
    image_store: ImageStore = Depends(get_image_store),
    _: schemas.TokenPayload = Depends(get_current_admin),
):
    """
    Update car details and add or remove images.

    Args:
        car_id: ID of the car to update
        name: Updated name
        price: Updated price
        description: Updated description
        images: New images to append
        remove_images: Asset ids of images to remove
        db: MongoDB database dependency
        image_store: Image store dependency

    Returns:
        Updated car with any image deletions that failed
    """
    car_in = _schema_from_form(
        schemas.CarUpdate, name=name, price=price, description=description
    )
    return await inventory_service.update_car(
        db,
        image_store,
        car_id,
        car_in,
        new_images=images,
        remove_asset_ids=parse_remove_images(remove_images),
    )


@router.delete("/{car_id}", response_model=schemas.Msg)
async def delete_car(
    car_id: str,
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
    image_store: ImageStore = Depends(get_image_store),
    _: schemas.TokenPayload = Depends(get_current_admin),
):
    """
    Delete car and its images.

    Args:
        car_id: ID of the car to delete
        db: MongoDB database dependency
        image_store: Image store dependency

    Returns:
        Success message confirming deletion
    """
    await inventory_service.delete_car(db, image_store, car_id)
    return schemas.Msg(message="Car deleted successfully")
