from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["development", "production", "staging", "test"]


def _resolve_env_files() -> tuple[str, ...]:
    env = os.getenv("NAMING_MASTER_ENVIRONMENT", "development").lower()
    if env in {"prod", "production"}:
        return (".env", ".env.prod")
    if env in {"dev", "development"}:
        return (".env", ".env.dev")
    if env in {"test", "testing"}:
        return (".env", ".env.test")
    return (".env",)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="NAMING_MASTER_",
        env_file=_resolve_env_files(),
        env_nested_delimiter="__",
        env_delimiter=",",
        extra="ignore",
    )

    environment: Environment = "development"
    project_name: str = "Naming Master"
    api_v1_prefix: str = "/api"
    log_level: str = "INFO"
    log_json: bool = False
    rate_limit: str = "30/minute"
    allowed_hosts: list[str] = ["*"]
    cors_origins: list[str] = []
    enable_docs: bool = True

    openai_api_key: SecretStr | None = None
    openai_model: str = "gpt-4o"
    openai_temperature: float = 0.8
    openai_max_tokens: int = 2000
    openai_timeout_seconds: float = 60.0
    max_keywords_chars: int = 500

    # Client-side quota bookkeeping, used by the CLI caller only.
    api_base_url: str = "http://localhost:8000"
    daily_quota: int = 3
    usage_path: str = "~/.naming-master/usage.json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
