"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    sigma_env: str = "development"
    sigma_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Avatar endpoint
    avatar_cache_size: int = 1000
    avatar_cache_control: str = "public, max-age=31536000, immutable"
    avatar_default_variant: str = "beam"
    avatar_default_name: str = "default"
    avatar_max_size: int = 1024

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
