from fastapi import APIRouter
from showroom.api.routes import (
    admin_routes,
    auth_routes,
    booking_routes,
    inventory_routes,
    notification_routes,
)

# Master router that bundles all service routers
router = APIRouter()

router.include_router(auth_routes.router, prefix="/auth", tags=["Authentication"])
router.include_router(inventory_routes.router, prefix="/cars", tags=["Car Inventory"])
router.include_router(booking_routes.router, prefix="/bookings", tags=["Bookings"])
router.include_router(
    notification_routes.router, prefix="/notifications", tags=["Notifications"]
)
router.include_router(admin_routes.router, prefix="/admin", tags=["Admin Maintenance"])
