"""Configuration management for the Newsdesk API."""

from enum import Enum
from functools import lru_cache
from typing import List, Optional, Set

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Application settings."""

    # Application
    app_name: str = "Newsdesk"
    app_version: str = "0.1.0"
    environment: Environment = Field(Environment.DEVELOPMENT, env="ENVIRONMENT")
    debug: bool = Field(False, env="DEBUG")

    # API Configuration
    api_prefix: str = "/api/v1"
    allowed_origins: str = Field("*", env="ALLOWED_ORIGINS")

    # Redis Configuration
    redis_host: str = Field("redis", env="REDIS_HOST")
    redis_port: int = Field(6379, env="REDIS_PORT")
    redis_password: Optional[str] = Field(None, env="REDIS_PASSWORD")
    redis_db: int = Field(0, env="REDIS_DB")
    redis_url: Optional[str] = Field(None, env="REDIS_URL")

    # Pagination
    default_items_per_page: int = Field(10, env="DEFAULT_ITEMS_PER_PAGE")
    maximum_items_per_page: int = Field(100, env="MAXIMUM_ITEMS_PER_PAGE")
    maximum_number_of_links: int = Field(10, env="MAXIMUM_NUMBER_OF_LINKS")

    # Extensions reported as loaded, comma separated
    loaded_extensions: str = Field("news", env="LOADED_EXTENSIONS")

    # Logging
    log_level: LogLevel = Field(LogLevel.INFO, env="LOG_LEVEL")
    log_format: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", env="LOG_FORMAT"
    )
    log_json: bool = Field(False, env="LOG_JSON")

    # Server
    host: str = Field("0.0.0.0", env="HOST")
    port: int = Field(8080, env="PORT")
    reload: bool = Field(False, env="RELOAD")

    # Health Check
    health_check_path: str = "/health"
    readiness_check_path: str = "/ready"

    @validator("redis_url", pre=True, always=True)
    def build_redis_url(cls, v, values):
        """Build Redis URL from components if not provided."""
        if v:
            return v

        host = values.get("redis_host", "redis")
        port = values.get("redis_port", 6379)
        password = values.get("redis_password")
        db = values.get("redis_db", 0)

        if password:
            return f"redis://:{password}@{host}:{port}/{db}"
        return f"redis://{host}:{port}/{db}"

    @property
    def allowed_origin_list(self) -> List[str]:
        """Allowed CORS origins from the comma separated setting."""
        return [
            origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()
        ]

    @property
    def loaded_extension_keys(self) -> Set[str]:
        """Loaded extension keys, normalised to lower case."""
        return {
            key.strip().lower()
            for key in self.loaded_extensions.split(",")
            if key.strip()
        }

    class Config:
        """Pydantic config."""

        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience function for getting settings
settings = get_settings()
