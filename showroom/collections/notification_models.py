from datetime import datetime, timezone
from pydantic import Field


from showroom.collections.base import BaseMongoModel


class Notification(BaseMongoModel):
    """
    Append-only admin notifications.
    """

    message: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
