from datetime import datetime, timezone
from typing import List
from pydantic import BaseModel, Field


from showroom.collections.base import BaseMongoModel


class CarImage(BaseModel):
    """
    Image metadata embedded in a car document, pointing at a blob in the image store.
    """

    url: str = Field(..., description="Public URL of the stored image")
    asset_id: str = Field(..., description="Stable identifier of the blob")


class Car(BaseMongoModel):
    """
    Collection of cars on display in the showroom.
    """

    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    description: str = ""
    images: List[CarImage] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
