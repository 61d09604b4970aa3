from .admin_models import Admin
from .base import BaseMongoModel
from .booking_models import Booking
from .car_models import Car, CarImage
from .enums import AdminRole
from .notification_models import Notification


__all__ = [
    "Admin",
    "AdminRole",
    "BaseMongoModel",
    "Booking",
    "Car",
    "CarImage",
    "Notification",
]
