from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import InvalidLocaleError
from .langid import LocaleTag


ENV_FILE_NAME = ".env"


class Settings(BaseSettings):
    RESOURCES_DIR: str = "res"
    RESOURCE_FILENAME: str = "messages.ftl"
    DEFAULT_LOCALE: str = "en"
    LOCALE: Optional[str] = None  # Explicit override, wins over the system locale
    THEME: Optional[Literal["light", "dark"]] = None
    DEBUG: bool = False
    LOG_FILE: bool = False

    @field_validator("LOCALE", "DEFAULT_LOCALE", mode="before")
    @classmethod
    def normalize_locale(cls, v, info):  # type: ignore
        if v in (None, ""):
            return "en" if info.field_name == "DEFAULT_LOCALE" else None
        try:
            return str(LocaleTag.parse(str(v)))
        except InvalidLocaleError as e:
            raise ValueError(str(e)) from e

    @field_validator("THEME", mode="before")
    @classmethod
    def parse_theme(cls, v):  # type: ignore
        if v in (None, "", "system"):
            return None
        return str(v).strip().lower()

    @property
    def locale_override(self) -> Optional[LocaleTag]:
        return LocaleTag.parse(self.LOCALE) if self.LOCALE else None

    @property
    def default_locale(self) -> LocaleTag:
        return LocaleTag.parse(self.DEFAULT_LOCALE or "en")

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_NAME,
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv(ENV_FILE_NAME)
    return Settings()
