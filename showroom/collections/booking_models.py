from datetime import datetime, timezone
from typing import Optional
from pydantic import Field


from showroom.collections.base import BaseMongoModel
from showroom.utils.objectid_utils import PyObjectId


class Booking(BaseMongoModel):
    """
    Collection of test-drive requests submitted from the storefront.
    """

    name: str
    email: str
    phone: str
    preferred_date: str
    message: Optional[str] = None
    car_id: PyObjectId = Field(..., description="References cars._id")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
