"""Configuration management for erd-cli."""

import json
import os
from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic import Field, ValidationError
from typing import List, Optional, Union

from .errors import ConfigurationError


def _find_env_file() -> Optional[str]:
    """Find .env file in multiple locations.

    Search order:
    1. Current working directory
    2. ~/.erd-cli/.env
    3. Package directory (where this file is located)
    """
    if os.path.exists(".env"):
        return ".env"

    user_env = Path.home() / ".erd-cli" / ".env"
    if user_env.exists():
        return str(user_env)

    package_dir = Path(__file__).parent.parent
    package_env = package_dir / ".env"
    if package_env.exists():
        return str(package_env)

    return None


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # PostgreSQL connection
    pg_hostname: str = Field(default="localhost", description="PostgreSQL host")
    pg_username: str = Field(default="postgres", description="PostgreSQL user")
    pg_password: str = Field(default="postgres", description="PostgreSQL password")
    pg_database: str = Field(default="postgres", description="Database to introspect")
    pg_schema: str = Field(default="public", description="Schema to introspect")

    # Load-time table filter
    include_tables: Optional[List[str]] = Field(
        default=None,
        description="Only load these tables (default: all)"
    )
    exclude_tables: Optional[List[str]] = Field(
        default=None,
        description="Never load these tables"
    )

    # Description wrapping
    column_description_wrap: Optional[int] = Field(
        default=None,
        ge=0,
        description="Wrap column descriptions at this width"
    )
    table_description_wrap: Optional[int] = Field(
        default=None,
        ge=0,
        description="Wrap table descriptions at this width"
    )

    # Diagram presentation defaults
    title: Optional[str] = Field(default=None, description="Diagram title")
    title_loc: str = Field(default="t", description="Title placement: t (top) or b (bottom)")
    title_size: int = Field(default=30, description="Title font size")
    title_color: str = Field(default="black", description="Title font color")
    direction: str = Field(default="TB", description="Layout direction: TB, LR, BT or RL")

    class Config:
        env_file = _find_env_file()
        env_file_encoding = "utf-8"
        extra = "ignore"


def load_settings(template: Optional[Union[str, Path]] = None) -> Settings:
    """Load settings, optionally overridden by a JSON options template.

    Keys in the template take precedence over environment variables and
    the .env file.

    Args:
        template: Path to a JSON file with Settings field names as keys

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If the template cannot be read or is invalid
    """
    overrides = {}
    if template is not None:
        path = Path(template)
        try:
            overrides = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read options template {path}: {e}",
                details={"template": str(path)},
            ) from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Options template {path} is not valid JSON: {e}",
                details={"template": str(path)},
            ) from e

        if not isinstance(overrides, dict):
            raise ConfigurationError(
                f"Options template {path} must contain a JSON object",
                details={"template": str(path)},
            )

    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e
