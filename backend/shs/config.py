"""shs configuration — Pydantic BaseSettings loaded from env / .env / CLI."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings. Immutable; handed explicitly to each request pipeline."""

    app_name: str = "shs"
    debug: bool = False
    log_level: str = "INFO"
    silent: bool = False

    # Served directory
    root: Path = Field(default_factory=Path.cwd, validate_default=True)

    # Network
    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)
    threads: int | None = Field(default=None, gt=0)  # uvicorn workers

    # Features
    index_enabled: bool = False  # serve index.html / index.htm when present
    sort_enabled: bool = True
    cache_enabled: bool = True
    cors: bool = False
    try_file: Path | None = None  # root-relative fallback for missing paths

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SHS_",
        extra="ignore",
        frozen=True,
    )

    @field_validator("root")
    @classmethod
    def _root_is_directory(cls, value: Path) -> Path:
        value = value.expanduser().resolve()
        if not value.is_dir():
            raise ValueError(f"Not a directory: {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @model_validator(mode="after")
    def _check_try_file(self) -> "Settings":
        """The fallback file must exist as a regular file under root."""
        if self.try_file is None:
            return self
        target = self.root / self.try_file
        if not target.is_file():
            raise ValueError(f"try_file is not a file: {target}")
        return self

    @property
    def try_file_path(self) -> Path | None:
        if self.try_file is None:
            return None
        return self.root / self.try_file


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
