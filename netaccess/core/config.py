"""Application configuration from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    APP_NAME: str = "Network Access Control"
    DEBUG: bool = False

    # Record store
    RECORD_STORE: str = "memory"  # "memory" or "redis"
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_KEY_PREFIX: str = "netaccess"

    # Tables
    ROLES_TABLE: str = "user_permissions"
    GROUPS_TABLE: str = "user_groups"
    USERS_TABLE: str = "users"

    # Authorization
    NETACCESS_ENFORCE_OPERATION_SCOPE: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


settings = Settings()
