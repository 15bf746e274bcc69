"""
Configuration settings for the Mechanic Shop records client.
Uses Pydantic for type-safe configuration management.
"""
from functools import lru_cache
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Mechanic Shop"
    app_version: str = "1.0.0"
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "WARNING"

    # Database
    db_driver: str = "postgresql+psycopg2"
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "mechanic_shop"
    db_user: str = "postgres"
    db_password: str = ""
    database_url: Optional[str] = None  # full SQLAlchemy URL, wins over the parts above
    sql_echo: bool = False

    model_config = SettingsConfigDict(
        env_prefix="MECHANIC_SHOP_",
        env_file=".env",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @property
    def sqlalchemy_url(self) -> URL:
        """URL handed to create_engine()."""
        if self.database_url:
            return make_url(self.database_url)
        return URL.create(
            drivername=self.db_driver,
            username=self.db_user or None,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
