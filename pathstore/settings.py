from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .backup import validate_backup_interval
from .errors import ConfigurationError
from .paths import default_folder


_ALIASES = {
    "noBlankData": "no_blank_data",
    "checkUpdates": "check_updates",
    "backupInterval": "backup_interval",
}


def _by_field_name(raw: Mapping[str, Any]) -> dict[str, Any]:
    return {_ALIASES.get(k, k): v for k, v in raw.items()}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class StoreOptions(BaseModel):
    """
    Options recognized by Store. Accepts the snake_case field names or
    their camelCase aliases (noBlankData, checkUpdates, backupInterval).
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    folder: Path = Field(default_factory=default_folder)
    file: str = "data"
    readable: bool = False
    no_blank_data: bool = Field(False, alias="noBlankData")
    # Stored only; update checks are not performed by this package.
    check_updates: bool = Field(False, alias="checkUpdates")
    backup_interval: float = Field(5.0, alias="backupInterval")

    @field_validator("file")
    @classmethod
    def _check_file(cls, v: str) -> str:
        return validate_file_name(v)

    @field_validator("backup_interval", mode="before")
    @classmethod
    def _check_interval(cls, v: Any) -> float:
        return validate_backup_interval(v)

    @classmethod
    def build(cls, base: "StoreOptions | Mapping[str, Any] | None" = None, **overrides: Any) -> "StoreOptions":
        """Merge *overrides* onto *base*, raising ConfigurationError on bad input."""
        if isinstance(base, StoreOptions):
            data: dict[str, Any] = base.model_dump()
        else:
            data = _by_field_name(base or {})
        data.update(_by_field_name(overrides))
        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid store options: {e}") from e


def validate_file_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ConfigurationError("File name must be a non-empty string")
    if "/" in name or "\\" in name or name in (".", ".."):
        raise ConfigurationError(f"File name must not contain a path separator: {name!r}")
    return name


def get_settings(dotenv_path: str | os.PathLike[str] | None = None) -> StoreOptions:
    """
    Build StoreOptions from PATHSTORE_* environment variables, after
    loading a .env file if one is found.
    """
    load_dotenv(dotenv_path)

    raw: dict[str, Any] = {
        "readable": _env_bool("PATHSTORE_READABLE", False),
        "no_blank_data": _env_bool("PATHSTORE_NO_BLANK_DATA", False),
        "check_updates": _env_bool("PATHSTORE_CHECK_UPDATES", False),
    }
    folder = os.getenv("PATHSTORE_FOLDER")
    if folder:
        raw["folder"] = Path(folder)
    file = os.getenv("PATHSTORE_FILE")
    if file:
        raw["file"] = file.strip()
    interval = os.getenv("PATHSTORE_BACKUP_INTERVAL")
    if interval:
        try:
            raw["backup_interval"] = float(interval)
        except ValueError as e:
            raise ConfigurationError(f"PATHSTORE_BACKUP_INTERVAL is not a number: {interval!r}") from e

    return StoreOptions.build(raw)
