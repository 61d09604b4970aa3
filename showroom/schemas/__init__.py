from .auth_schemas import (
    AdminLogin,
    AdminPublic,
    AdminRegister,
    LoginResponse,
    TokenPayload,
)
from .booking_schemas import BookingCreate, BookingDetailed, BookingPublic
from .car_schemas import (
    CarCreate,
    CarImagePublic,
    CarPublic,
    CarSummary,
    CarUpdate,
    CarUpdateResult,
    ImageReconcileResult,
)
from .notification_schemas import NotificationCreate, NotificationPublic
from .utility_schemas import BaseSchema, Msg
