# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _parse_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


class ErrorsConfig(BaseSettings):
    capture_stack: bool = Field(True, alias="RICHERR_CAPTURE_STACK")

    model_config = SettingsConfigDict(validate_by_name=True, extra="ignore")

    @field_validator("capture_stack", mode="before")
    @classmethod
    def _parse_capture_stack(cls, value: str | bool) -> bool:
        return _parse_bool(value)


def _errors_config_factory() -> ErrorsConfig:
    return ErrorsConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    log_level: str = Field("INFO", alias="RICHERR_LOG_LEVEL")
    debug_logging: bool = Field(False, alias="RICHERR_DEBUG_LOGGING")

    errors: ErrorsConfig = Field(default_factory=_errors_config_factory)

    model_config = SettingsConfigDict(
        validate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @field_validator("log_level", mode="after")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.upper()


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "ErrorsConfig", "load_config"]
