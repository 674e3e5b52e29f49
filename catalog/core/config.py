"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite+aiosqlite:///./catalog.db", alias="url")
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None


class SecuritySettings(BaseModel):
    secret_key: str = Field(default="change-me", min_length=8)
    algorithm: str = "HS256"
    admin_roles: frozenset[str] = frozenset({"admin", "super_admin"})
    manager_roles: frozenset[str] = frozenset({"mentor"})


class PaginationSettings(BaseModel):
    """Listing defaults handed explicitly to the catalog services."""

    default_page: int = Field(default=1, ge=1)
    default_limit: int = Field(default=10, ge=1)
    max_limit: int = Field(default=100, ge=1)
    featured_limit: int = Field(default=8, ge=1)


class CloudinarySettings(BaseModel):
    cloud_name: str = ""
    api_key: str = ""
    api_secret: str = ""
    # hex key for token based (expiring) delivery URLs
    auth_token_key: str = ""


class DownloadSettings(BaseModel):
    link_ttl_seconds: int = Field(default=3600, gt=0)


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Design Template Catalog"
    api_prefix: str = "/api"

    database: DatabaseSettings = DatabaseSettings()
    security: SecuritySettings = SecuritySettings()
    pagination: PaginationSettings = PaginationSettings()
    cloudinary: CloudinarySettings = CloudinarySettings()
    downloads: DownloadSettings = DownloadSettings()

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def secret_key(self) -> str:
        return self.security.secret_key

    @property
    def algorithm(self) -> str:
        return self.security.algorithm


@lru_cache()
def get_settings() -> Settings:
    return Settings()
