"""Configuration for the diagnostics stack.

Values can be given directly or read from DIAGNOSTICS_* environment
variables via DiagnosticsConfig.from_env().
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

ENV_PREFIX = "DIAGNOSTICS_"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class DiagnosticsConfig(BaseModel):
    """Settings for building a Diagnostics instance."""

    log_level: str = "INFO"
    max_entries: Optional[int] = None
    mirror_to_logging: bool = True
    forward_breadcrumbs: bool = False
    max_breadcrumbs: int = 100
    user_id: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(VALID_LOG_LEVELS)}")
        return v.upper()

    @field_validator("max_entries")
    @classmethod
    def validate_max_entries(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 1:
            raise ValueError("max_entries must be at least 1")
        return v

    @field_validator("max_breadcrumbs")
    @classmethod
    def validate_max_breadcrumbs(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_breadcrumbs must be at least 1")
        return v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DiagnosticsConfig":
        """Build config from DIAGNOSTICS_* environment variables.

        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        values = {}

        if f"{ENV_PREFIX}LOG_LEVEL" in env:
            values["log_level"] = env[f"{ENV_PREFIX}LOG_LEVEL"]
        if env.get(f"{ENV_PREFIX}MAX_ENTRIES"):
            values["max_entries"] = int(env[f"{ENV_PREFIX}MAX_ENTRIES"])
        if f"{ENV_PREFIX}MIRROR_TO_LOGGING" in env:
            values["mirror_to_logging"] = _parse_bool(env[f"{ENV_PREFIX}MIRROR_TO_LOGGING"])
        if f"{ENV_PREFIX}FORWARD_BREADCRUMBS" in env:
            values["forward_breadcrumbs"] = _parse_bool(env[f"{ENV_PREFIX}FORWARD_BREADCRUMBS"])
        if env.get(f"{ENV_PREFIX}MAX_BREADCRUMBS"):
            values["max_breadcrumbs"] = int(env[f"{ENV_PREFIX}MAX_BREADCRUMBS"])
        if env.get(f"{ENV_PREFIX}USER_ID"):
            values["user_id"] = env[f"{ENV_PREFIX}USER_ID"]

        return cls(**values)


def _parse_bool(value: str) -> bool:
    key = value.strip().lower()
    if key in _TRUE_VALUES:
        return True
    if key in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")
