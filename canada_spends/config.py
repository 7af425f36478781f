from __future__ import annotations

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator

from canada_spends.tax.jurisdictions import Jurisdiction
from canada_spends.tax.registry import DEFAULT_TAX_YEAR

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseModel):
    default_year: str = Field(
        default_factory=lambda: os.getenv("CANADA_SPENDS_DEFAULT_YEAR", DEFAULT_TAX_YEAR)
    )
    default_jurisdiction: Jurisdiction = Field(
        default_factory=lambda: os.getenv("CANADA_SPENDS_DEFAULT_JURISDICTION", "ontario")
    )
    log_level: str = Field(default_factory=lambda: os.getenv("CANADA_SPENDS_LOG_LEVEL", "INFO"))
    log_dir: str = Field(default_factory=lambda: os.getenv("CANADA_SPENDS_LOG_DIR", "logs"))
    build_version: str = Field(default_factory=lambda: os.getenv("BUILD_VERSION", "dev"))
    build_sha: str = Field(default_factory=lambda: os.getenv("BUILD_SHA", "local"))

    model_config = ConfigDict(frozen=True, validate_default=True)

    @field_validator("default_year", mode="before")
    @classmethod
    def _normalize_year(cls, value: object) -> str:
        year = str(value).strip()
        if not year.isdigit() or len(year) != 4:
            raise ValueError(f"CANADA_SPENDS_DEFAULT_YEAR must be a four digit year, got {value!r}")
        return year

    @field_validator("default_jurisdiction", mode="before")
    @classmethod
    def _parse_jurisdiction(cls, value: object) -> Jurisdiction:
        try:
            return Jurisdiction.parse(value)  # type: ignore[arg-type]
        except KeyError as exc:
            raise ValueError(str(exc)) from exc

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> str:
        upper = str(value or "INFO").strip().upper()
        if upper not in _LOG_LEVELS:
            raise ValueError(f"CANADA_SPENDS_LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {upper}")
        return upper

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
