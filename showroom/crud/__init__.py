from .admin_crud import admin_crud
from .booking_crud import booking_crud
from .car_crud import car_crud
from .notification_crud import notification_crud


__all__ = [
    "admin_crud",
    "booking_crud",
    "car_crud",
    "notification_crud",
]
