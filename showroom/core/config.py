from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """
    Configuration settings for the application, loaded from .env file and environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    MONGO_URI: str
    MONGO_DB: str

    PROJECT_NAME: str = "Showroom API"
    API_STR: str = "/api"
    PROJECT_VERSION: str = "1.0.0"
    PROJECT_DESCRIPTION: str = (
        "Car showroom backend: inventory, test-drive bookings, notifications and admin auth"
    )

    ACCESS_TOKEN_SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 1440

    ADMIN_REGISTRATION_ENABLED: bool = True
    SUPER_ADMIN_EMAIL: Optional[str] = None
    SUPER_ADMIN_PASSWORD: Optional[str] = None

    AZURE_STORAGE_CONNECTION_STRING: str
    INVENTORY_CONTAINER_NAME: str = "inventory"

    MAX_IMAGES_PER_REQUEST: int = 5
    MAX_IMAGE_SIZE_MB: int = 5
    ORPHAN_IMAGE_GRACE_MINUTES: int = 60

    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    LOG_LEVEL: str = "INFO"
    QUIET_LOGGERS: List[str] = ["azure", "pymongo", "passlib"]


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()


settings = get_settings()
