"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROMPT_MODES = ("batch", "per-item")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REPO_MIRROR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # General
    log_level: str = "WARNING"

    # Git
    git_executable: str = "git"
    git_host: str = "github.com"
    primary_remote: str = "origin"
    default_branch: str = "main"

    # Files
    config_file: str = "repos.txt"
    output_file: str = "repos_generated.txt"

    # Cloner: "batch" (skip all / re-clone all) or "per-item" (y/N)
    prompt_mode: str = "batch"

    @field_validator("prompt_mode")
    @classmethod
    def _check_prompt_mode(cls, value: str) -> str:
        value = value.lower()
        if value not in PROMPT_MODES:
            raise ValueError(f"prompt_mode must be one of {', '.join(PROMPT_MODES)}")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
