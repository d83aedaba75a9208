"""Configuration management for model-describer."""

import os
from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional


def _find_env_file() -> Optional[str]:
    """Find .env file in multiple locations.

    Search order:
    1. Current working directory
    2. ~/.model-describer/.env
    3. Package directory (where this file is located)
    """
    if os.path.exists(".env"):
        return ".env"

    user_env = Path.home() / ".model-describer" / ".env"
    if user_env.exists():
        return str(user_env)

    package_dir = Path(__file__).parent.parent
    package_env = package_dir / ".env"
    if package_env.exists():
        return str(package_env)

    return None


class Settings(BaseSettings):
    """Application settings loaded from MODEL_DESCRIBER_* environment variables."""

    # Model lookup
    default_namespace: Optional[str] = Field(
        default="app.models",
        description="Module prepended to class names that are not fully qualified"
    )

    # Database configuration
    database_default: str = Field(
        default="sqlite",
        description="Default storage engine (sqlite, mysql, postgresql, ...)"
    )
    database_url: Optional[str] = Field(
        default=None,
        description="SQLAlchemy URL of a database to reflect columns from"
    )

    # Output
    scalar_type_label: str = Field(
        default="PHP type",
        description="Header of the scalar type column"
    )

    class Config:
        env_prefix = "MODEL_DESCRIBER_"
        env_file = _find_env_file()
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
