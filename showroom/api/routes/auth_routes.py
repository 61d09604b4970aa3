from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorDatabase


from showroom import schemas
from showroom.auth.dependencies import get_current_admin
from showroom.core.dependencies import get_mongo_db
from showroom.services import auth_service


router = APIRouter()


@router.post(
    "/register", response_model=schemas.AdminPublic, status_code=status.HTTP_201_CREATED
)
async def register(
    admin_in: schemas.AdminRegister,
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
):
    """
    Register a new admin account.

    Args:
        admin_in: Email and password
        db: MongoDB database dependency

    Returns:
        Registered admin identity
    """
    return await auth_service.register(db, admin_in)


@router.post("/login", response_model=schemas.LoginResponse)
async def login(
    login_in: schemas.AdminLogin,
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
):
    """
    Authenticate an admin and issue a bearer token.

    Args:
        login_in: Email and password
        db: MongoDB database dependency

    Returns:
        Token and admin identity
    """
    return await auth_service.login(db, login_in)


@router.get("/dashboard", response_model=schemas.AdminPublic)
async def dashboard(admin: schemas.TokenPayload = Depends(get_current_admin)):
    """
    Return the identity carried by the caller's admin token.
    """
    return schemas.AdminPublic(id=admin.id, email=admin.email, role=admin.role)
