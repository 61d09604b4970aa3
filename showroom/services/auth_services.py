from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError


from showroom import schemas
from showroom.auth import security
from showroom.collections import Admin, AdminRole
from showroom.core.config import settings
from showroom.crud import admin_crud
from showroom.utils.exception_utils import (
    BadRequestException,
    CredentialsException,
    DuplicateEntryException,
    ForbiddenException,
)
from showroom.utils.logger_utils import get_logger


logger = get_logger(__name__)


INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    """
    Handles admin registration, login and token issuance.
    """
    def _to_public(self, admin: Admin) -> schemas.AdminPublic:
        return schemas.AdminPublic(id=str(admin.id), email=admin.email, role=admin.role)


    async def register(
        self, db: AsyncIOMotorDatabase, admin_in: schemas.AdminRegister
    ) -> schemas.AdminPublic:
        """
        Register a new admin. The role is always admin.

        Args:
            db: MongoDB database
            admin_in: Registration payload

        Returns:
            Registered admin
        """
        if not settings.ADMIN_REGISTRATION_ENABLED:
            raise ForbiddenException("Admin registration is disabled")

        email = admin_in.email.lower()
        if await admin_crud.get_by_email(db, email):
            raise DuplicateEntryException("Admin already exists")

        admin = Admin(
            email=email,
            password=security.get_password_hash(admin_in.password),
            role=AdminRole.ADMIN,
        )
        try:
            created = await admin_crud.create_admin(db, admin)
        except DuplicateKeyError:
            raise DuplicateEntryException("Admin already exists")

        logger.info(f"Admin {created.email} registered")
        return self._to_public(created)


    async def login(
        self, db: AsyncIOMotorDatabase, login_in: schemas.AdminLogin
    ) -> schemas.LoginResponse:
        """
        Authenticate an admin and issue a bearer token.

        Unknown email and wrong password fail with the same error.

        Args:
            db: MongoDB database
            login_in: Login credentials

        Returns:
            Login response carrying the token and admin identity
        """
        if not login_in.email or not login_in.password:
            raise BadRequestException("Email and password are required")

        admin = await admin_crud.get_by_email(db, login_in.email.strip().lower())
        if not admin or not security.verify_password(login_in.password, admin.password):
            raise CredentialsException(INVALID_CREDENTIALS)

        if admin.role != AdminRole.ADMIN.value:
            raise ForbiddenException("Access denied. Not an admin.")

        token = security.create_access_token(
            subject=str(admin.id), email=admin.email, role=admin.role
        )
        return schemas.LoginResponse(
            message="Login successful", token=token, admin=self._to_public(admin)
        )


    async def seed_super_admin(self, db: AsyncIOMotorDatabase) -> None:
        """
        Create the configured super admin when it does not exist yet.

        Args:
            db: MongoDB database

        Returns:
            None
        """
        if not settings.SUPER_ADMIN_EMAIL or not settings.SUPER_ADMIN_PASSWORD:
            return

        email = settings.SUPER_ADMIN_EMAIL.lower()
        if await admin_crud.get_by_email(db, email):
            logger.info("Super admin already present. Skipping seeder.")
            return

        await admin_crud.create_admin(
            db,
            Admin(
                email=email,
                password=security.get_password_hash(settings.SUPER_ADMIN_PASSWORD),
                role=AdminRole.ADMIN,
            ),
        )
        logger.info(f"Seeded super admin {email}")


auth_service = AuthService()
