"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    rasterrect_env: str = "development"
    rasterrect_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Decoding: longest side after downsizing (0 keeps source resolution)
    max_dimension: int = 1200

    # Sampling: stride = max(1, min(W, H) // stride_divisor)
    stride_divisor: int = 400

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
