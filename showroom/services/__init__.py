from .auth_services import auth_service
from .booking_services import booking_service
from .inventory_services import inventory_service
from .notification_services import notification_service


__all__ = [
    "auth_service",
    "booking_service",
    "inventory_service",
    "notification_service",
]
