"""Tool configuration via environment variables."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """forgesetup configuration, read from ``FORGESETUP_*`` variables.

    The generated bot's own ``.env`` lives in the target directory and holds
    the bot's secrets, so it is deliberately not used as a settings source.
    """

    model_config = SettingsConfigDict(
        env_prefix="FORGESETUP_",
        env_file=None,
    )

    # --- Dependency install ---
    package_manager: str = "npm"
    install_timeout: int = Field(default=600, ge=1, le=3600)

    # --- Logging ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @field_validator("package_manager")
    @classmethod
    def validate_package_manager(cls, v: str) -> str:
        """Reject blank package manager names."""
        v = v.strip()
        if not v:
            msg = "package_manager must not be empty"
            raise ValueError(msg)
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v
