from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer


from showroom.core.config import settings
from showroom.collections import AdminRole
from showroom.utils.exception_utils import ForbiddenException
from showroom.auth import security
from showroom import schemas


oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_STR}/auth/login")


async def get_current_admin(
    token: str = Depends(oauth2_scheme),
) -> schemas.TokenPayload:
    """
    Validate the bearer token and require the admin role.

    Tokens are self-contained, so no lookup against the admins collection is made.

    Args:
        token (str): JWT access token.

    Returns:
        schemas.TokenPayload: Decoded admin identity.
    """
    payload = security.decode_token(
        token=token, secret_key=settings.ACCESS_TOKEN_SECRET_KEY
    )

    if payload.role != AdminRole.ADMIN.value:
        raise ForbiddenException(detail="Access denied. Admins only.")

    return payload
