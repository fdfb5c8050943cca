"""wolpage configuration: Pydantic BaseSettings loaded from .env."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = "WOL via WebPage"
    debug: bool = False
    log_level: str = "INFO"

    # Network
    host: str = "0.0.0.0"
    port: int = 3000
    api_prefix: str = "/api"

    # Targets (relative resolved from project root at runtime)
    target_list_path: str = "./MacAddressList.json5"

    # Wake-on-LAN
    wol_port: int = 9
    default_broadcast: str = "255.255.255.255"
    platform: str = "auto"  # auto, explicit_broadcast, default_broadcast

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        env_prefix="WOLPAGE_",
        extra="ignore",
    )

    @field_validator("platform", mode="before")
    @classmethod
    def _normalize_platform(cls, value: str) -> str:
        value = (value or "auto").strip().lower()
        if value not in ("auto", "explicit_broadcast", "default_broadcast"):
            raise ValueError(f"Unknown platform kind: {value}")
        return value

    @field_validator("wol_port")
    @classmethod
    def _check_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError(f"Invalid UDP port: {value}")
        return value

    @model_validator(mode="after")
    def _resolve_paths(self) -> "Settings":
        """Ensure the target list path is absolute."""
        base = Path(__file__).resolve().parent.parent.parent  # project root
        if not Path(self.target_list_path).is_absolute():
            self.target_list_path = str(base / self.target_list_path)
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
