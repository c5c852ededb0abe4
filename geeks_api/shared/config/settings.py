# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_PACKAGED_MESSAGES_DIR = Path(__file__).resolve().parents[2] / "resources" / "messages"


class I18nConfig(BaseSettings):
    default_locale: str = Field("en", alias="DEFAULT_LOCALE")
    supported_locales: Annotated[list[str], NoDecode] = Field(["en", "fa"], alias="SUPPORTED_LOCALES")
    messages_dir: Path = Field(_PACKAGED_MESSAGES_DIR, alias="MESSAGES_DIR")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_by_name=True,
        extra="ignore",
    )

    @field_validator("supported_locales", mode="before")
    @classmethod
    def _parse_locales(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [locale.strip() for locale in value.split(",") if locale.strip()]
        return value

    @model_validator(mode="after")
    def _include_default_locale(self) -> "I18nConfig":
        if self.default_locale not in self.supported_locales:
            self.supported_locales = [self.default_locale, *self.supported_locales]
        return self


def _i18n_config_factory() -> I18nConfig:
    return I18nConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: Path | None = Field(None, alias="LOG_FILE")

    i18n: I18nConfig = Field(default_factory=_i18n_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @field_validator("log_level", mode="after")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.upper()


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "I18nConfig", "load_config"]
