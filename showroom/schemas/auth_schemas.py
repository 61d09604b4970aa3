from datetime import datetime
from typing import Optional
from pydantic import EmailStr, Field


from showroom.schemas.utility_schemas import BaseSchema


class TokenPayload(BaseSchema):
    """
    Schema for JWT token payload data.
    """
    id: str = Field(..., description="Admin identifier")
    email: str = Field(..., description="Admin email")
    role: str = Field(..., description="Role granted by the token")
    exp: datetime = Field(..., description="Token expiration timestamp")


class AdminRegister(BaseSchema):
    """
    Schema for registering an admin account.
    """
    email: EmailStr = Field(..., description="Admin email address")
    password: str = Field(..., min_length=1, description="Plain text password")


class AdminLogin(BaseSchema):
    """
    Schema for admin login credentials.
    """
    email: Optional[str] = Field(None, description="Admin email address")
    password: Optional[str] = Field(None, description="Plain text password")


class AdminPublic(BaseSchema):
    """
    Schema for public admin identity.
    """
    id: str
    email: str
    role: str


class LoginResponse(BaseSchema):
    """
    Schema for a successful login.
    """
    message: str
    token: str = Field(..., description="Bearer token for admin routes")
    admin: AdminPublic
