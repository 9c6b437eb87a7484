"""Phonebook service configuration.

Settings come from environment variables, optionally seeded from a `.env` file
in the working directory. `DATABASE_URL` is required; everything else has a
default suitable for local development.
"""

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError


class Settings(BaseSettings):
    """Runtime settings for the API service and the seeding job."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    database_url: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("DATABASE_URL", "MONGODB_URI"),
        description="SQLAlchemy connection URL",
    )
    host: str = Field(default="0.0.0.0", validation_alias="LISTEN_HOST")
    port: int = Field(default=3001, ge=1, le=65535, validation_alias="PORT")
    static_dir: str = Field(default="dist", validation_alias="STATIC_DIR")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


def load_settings(env_file: str | None = ".env", **overrides) -> Settings:
    """Build `Settings` from the environment, failing fast when incomplete.

    Args:
        env_file: Optional dotenv file loaded into the environment first. Values
            already present in the environment win.
        **overrides: Explicit field values (used by tests).

    Returns:
        Settings: Validated settings.

    Raises:
        ConfigError: If `DATABASE_URL` is absent or a value fails validation.
    """
    if env_file:
        load_dotenv(env_file, override=False)
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        missing = [".".join(str(p) for p in e["loc"]) for e in exc.errors()]
        raise ConfigError(f"invalid configuration: {', '.join(missing)}") from exc

