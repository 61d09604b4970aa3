from datetime import datetime, timedelta, timezone
from passlib.context import CryptContext
from jose import JWTError, jwt, ExpiredSignatureError
from pydantic import ValidationError


from showroom.core.config import settings
from showroom.schemas import TokenPayload
from showroom.utils.exception_utils import CredentialsException


pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify that a plain text password matches its hashed version.

    Args:
        plain_password (str): User provided password.
        hashed_password (str): Stored hashed password.

    Returns:
        bool: True if password matches.
    """
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """
    Hash a plaintext password using bcrypt.

    Args:
        password (str): Admin password.

    Returns:
        str: Hashed password.
    """
    return pwd_context.hash(password)


def create_access_token(subject: str, email: str, role: str) -> str:
    """
    Create a signed, time-limited JWT carrying the admin identity.

    Args:
        subject (str): Admin ID.
        email (str): Admin email.
        role (str): Role granted by the token.

    Returns:
        str: Encoded access token.
    """
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES
    )
    payload = {"id": str(subject), "email": email, "role": role, "exp": expire}
    return jwt.encode(
        payload, settings.ACCESS_TOKEN_SECRET_KEY, algorithm=settings.ALGORITHM
    )


def decode_token(token: str, secret_key: str) -> TokenPayload:
    """
    Decode a JWT and validate signature, expiration, and structure.

    Args:
        token (str): JWT token string.
        secret_key (str): Key used to decode token.

    Returns:
        TokenPayload: Parsed token payload data.
    """
    try:
        payload = jwt.decode(token, secret_key, algorithms=[settings.ALGORITHM])
        return TokenPayload(**payload)

    except ExpiredSignatureError:
        raise CredentialsException("Token has expired")

    except (JWTError, ValidationError):
        raise CredentialsException("Invalid or expired token")
