"""Library Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the library works with no environment at all
    - get_settings() is cached (lru_cache): single instance per process
    - Settings are read by factory.py only; core/ receives plain arguments

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - SYMENUM_ prefix: avoids collisions with the host application's variables
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from symenum.core.domain_types import DEFAULT_TYPE_NAME_PREFIX

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


class Settings(BaseSettings):
    """symenum settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SYMENUM_", env_file=".env", extra="ignore", case_sensitive=False,
    )

    # Registry
    eager_pool: bool = False
    type_name_prefix: str = DEFAULT_TYPE_NAME_PREFIX

    # Observability
    log_level: str = "WARNING"
    log_format: Literal["json", "text"] = "text"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level: {v!r}")
        return level

    @field_validator("type_name_prefix")
    @classmethod
    def check_type_name_prefix(cls, v: str) -> str:
        if not v.isidentifier():
            raise ValueError(f"type_name_prefix must be an identifier: {v!r}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
