from datetime import datetime
from typing import List, Optional
from pydantic import Field, field_validator


from showroom.schemas.utility_schemas import BaseSchema


class CarImagePublic(BaseSchema):
    """
    Schema for an image attached to a car.
    """
    url: str = Field(..., description="Public URL of the image")
    asset_id: str = Field(..., description="Image store identifier of the image")


class CarCreate(BaseSchema):
    """
    Schema for the scalar fields of a new car.
    """
    name: str = Field(..., min_length=1, description="Display name of the car")
    price: float = Field(..., ge=0, description="Asking price")
    description: str = Field("", description="Free text description")

    @field_validator("name", "description", mode="before")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value


class CarUpdate(BaseSchema):
    """
    Schema for partial car updates. Omitted or blank fields keep their value.
    """
    name: Optional[str] = Field(None, min_length=1, description="Updated name")
    price: Optional[float] = Field(None, ge=0, description="Updated price")
    description: Optional[str] = Field(None, description="Updated description")

    @field_validator("name", "price", "description", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value


class CarPublic(BaseSchema):
    """
    Schema for car information returned to clients.
    """
    id: str = Field(..., description="Car unique identifier")
    name: str
    price: float
    description: str
    images: List[CarImagePublic]
    created_at: datetime
    updated_at: datetime


class CarSummary(BaseSchema):
    """
    Display fields of a car embedded in booking listings.
    """
    id: str
    name: str
    price: float
    description: str
    images: List[CarImagePublic]


class CarUpdateResult(CarPublic):
    """
    Schema for an updated car along with images the store failed to delete.
    """
    failed_image_deletions: List[str] = Field(
        default_factory=list,
        description="Asset ids removed from the car but still present in the image store",
    )


class ImageReconcileResult(BaseSchema):
    """
    Schema summarising an orphaned image sweep.
    """
    dry_run: bool
    scanned: int = Field(..., description="Number of stored images inspected")
    orphaned: List[str] = Field(..., description="Images not referenced by any car")
    deleted: List[str] = Field(..., description="Orphans removed from the store")
    failed: List[str] = Field(..., description="Orphans the store failed to delete")
