from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import List


from showroom import schemas
from showroom.auth.dependencies import get_current_admin
from showroom.core.dependencies import get_mongo_db
from showroom.services import booking_service

router = APIRouter()


@router.post(
    "", response_model=schemas.BookingPublic, status_code=status.HTTP_201_CREATED
)
async def create_booking(
    booking_in: schemas.BookingCreate,
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
):
    """
    Book a test drive for a car in the showroom.

    Args:
        booking_in: Customer details and the car identifier
        db: MongoDB database dependency

    Returns:
        Saved booking
    """
    return await booking_service.create_booking(db, booking_in)


@router.get("", response_model=List[schemas.BookingDetailed])
async def list_bookings(
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
    _: schemas.TokenPayload = Depends(get_current_admin),
):
    """
    List all bookings, newest first, with car details.

    Args:
        db: MongoDB database dependency

    Returns:
        List of bookings
    """
    return await booking_service.list_bookings(db)


@router.delete("/{booking_id}", response_model=schemas.Msg)
async def delete_booking(
    booking_id: str,
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
    _: schemas.TokenPayload = Depends(get_current_admin),
):
    """
    Remove a booking.

    Args:
        booking_id: ID of the booking to delete
        db: MongoDB database dependency

    Returns:
        Success message confirming deletion
    """
    await booking_service.delete_booking(db, booking_id)
    return schemas.Msg(message="Booking deleted successfully")
