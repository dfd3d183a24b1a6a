from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from services.auth_service import hash_pin

# Global Config
GYM_NAME = "SOLID GYM"
CREATOR_NAME = "Sayyam Shahbaz"

USERS_FILE = "users.txt"
PAYSLIP_FOLDER = "payslips"

# Only used when no PIN is configured in the environment
LEGACY_ADMIN_PIN = "1234"

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    """
    Process-wide settings, read from GYM_* environment variables (or .env)
    once at startup and frozen afterwards.

    Admin PIN order: GYM_ADMIN_PIN_HASH (bcrypt) beats GYM_ADMIN_PIN (plain,
    hashed here) beats the legacy PIN.
    """
    model_config = SettingsConfigDict(
        env_prefix="GYM_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    users_file: Path = Path(USERS_FILE)
    payslip_folder: Path = Path(PAYSLIP_FOLDER)
    admin_pin_hash: bytes
    admin_pin: Optional[str] = Field(default=None, repr=False)
    log_level: LogLevel = "WARNING"

    # Set by the validator, never read from the environment
    legacy_pin_in_use: bool = Field(default=False, exclude=True)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalise_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="before")
    @classmethod
    def resolve_admin_pin(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)

        pin_hash = data.get("admin_pin_hash")
        if isinstance(pin_hash, str):
            pin_hash = pin_hash.strip()
        pin = (data.get("admin_pin") or "").strip()

        data["legacy_pin_in_use"] = False
        if not pin_hash:
            if not pin:
                pin = LEGACY_ADMIN_PIN
                data["legacy_pin_in_use"] = True
            pin_hash = hash_pin(pin)

        data["admin_pin_hash"] = pin_hash
        # The plain PIN is not kept once hashed
        data["admin_pin"] = None
        return data
