"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ROOT = "~/.ghr"
CONFIG_FILE_NAME = "config.toml"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GHR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Directory holding every managed repository as <root>/<host>/<owner>/<repo>
    root: str = DEFAULT_ROOT

    log_level: str = "INFO"

    @field_validator("root", mode="before")
    @classmethod
    def default_empty_root(cls, value: str | None) -> str:
        # GHR_ROOT="" means "not set"
        return value or DEFAULT_ROOT

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.root = str(Path(self.root).expanduser().resolve())

    @property
    def root_path(self) -> Path:
        return Path(self.root)

    @property
    def config_path(self) -> Path:
        return self.root_path / CONFIG_FILE_NAME


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
