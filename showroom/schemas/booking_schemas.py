from datetime import datetime
from typing import Optional
from pydantic import ConfigDict, Field


from showroom.schemas.car_schemas import CarSummary
from showroom.schemas.utility_schemas import BaseSchema


class BookingCreate(BaseSchema):
    """
    Schema for a test-drive request. Presence of required fields is checked by the service.
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: Optional[str] = Field(None, description="Customer name")
    email: Optional[str] = Field(None, description="Customer email")
    phone: Optional[str] = Field(None, description="Customer phone number")
    preferred_date: Optional[str] = Field(None, description="Preferred test-drive date")
    message: Optional[str] = Field(None, description="Optional message for the showroom")
    car_id: Optional[str] = Field(None, description="Identifier of the car to test drive")


class BookingBase(BaseSchema):
    """
    Schema for booking fields shared by responses.
    """
    id: str
    name: str
    email: str
    phone: str
    preferred_date: str
    message: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class BookingPublic(BookingBase):
    """
    Schema for a stored booking with the car reference as an id.
    """
    car: str = Field(..., description="Identifier of the booked car")


class BookingDetailed(BookingBase):
    """
    Schema for admin booking listings with the car expanded.
    """
    car: Optional[CarSummary] = Field(
        None, description="Booked car, null when the car has since been removed"
    )
