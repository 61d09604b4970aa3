from datetime import datetime
from pydantic import Field


from showroom.schemas.utility_schemas import BaseSchema


class NotificationCreate(BaseSchema):
    """
    Schema for posting a notification.
    """
    message: str = Field(..., description="Notification text")


class NotificationPublic(BaseSchema):
    """
    Schema for notification information.
    """
    id: str
    message: str
    created_at: datetime
