"""Centralized configuration loaded from environment."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "catalog.yaml"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    catalog_path: Optional[Path] = Field(default=None, alias="COSTKIT_CATALOG")
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    output_format: str = Field(default="table", alias="COSTKIT_FORMAT")

    def resolved_catalog_path(self) -> Path:
        return self.catalog_path or DEFAULT_CATALOG_PATH


settings = Settings()
