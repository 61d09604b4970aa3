from typing import Optional
from motor.motor_asyncio import AsyncIOMotorDatabase


from showroom.collections import Admin


class AdminCRUD:
    """
    Class for admin account lookups and creation in MongoDB.
    """
    async def get_by_email(self, db: AsyncIOMotorDatabase, email: str) -> Optional[Admin]:
        """
        Retrieve an admin by email.

        Args:
            db: MongoDB database
            email: Admin email

        Returns:
            Admin if found, None otherwise
        """
        admin = await db.admins.find_one({"email": email})
        return Admin(**admin) if admin else None


    async def create_admin(self, db: AsyncIOMotorDatabase, admin: Admin) -> Admin:
        """
        Insert a new admin. The unique email index rejects duplicates.

        Args:
            db: MongoDB database
            admin: Admin to persist, password already hashed

        Returns:
            The persisted Admin
        """
        result = await db.admins.insert_one(admin.to_document())
        created = await db.admins.find_one({"_id": result.inserted_id})
        return Admin(**created)


admin_crud = AdminCRUD()
