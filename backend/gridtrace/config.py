"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    gridtrace_env: str = "development"
    gridtrace_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Largest grid accepted over HTTP (177 = QR version 40)
    max_module_count: int = 177

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
