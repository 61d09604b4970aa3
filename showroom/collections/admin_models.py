from datetime import datetime, timezone
from pydantic import Field


from showroom.collections.base import BaseMongoModel
from showroom.collections.enums import AdminRole


class Admin(BaseMongoModel):
    """
    Collection of admin accounts. The password field always holds a bcrypt hash.
    """

    email: str
    password: str
    role: AdminRole = AdminRole.ADMIN
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
