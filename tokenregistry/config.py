"""Centralized configuration via pydantic-settings. Overrides from .env or TOKENREGISTRY_* vars."""

from pathlib import Path
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, model_validator


PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TOKENREGISTRY_",
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Data paths
    data_dir: Path = Field(default_factory=lambda: PROJECT_ROOT / "data")
    duckdb_path: Path | None = None

    # Uniswap-format token list JSON; None uses the built-in catalog
    default_token_list_path: Path | None = None

    default_chain: str = "ethereum"
    log_level: str = "INFO"

    @model_validator(mode="after")
    def _derive_duckdb_path(self) -> "Settings":
        if self.duckdb_path is None:
            self.duckdb_path = self.data_dir / "tokenregistry.duckdb"
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
