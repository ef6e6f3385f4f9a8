"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    gridlines_env: str = "development"
    gridlines_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Engine defaults
    gridlines_layer_name: str = "Gridlines"
    gridlines_tolerance: float = Field(default=0.001, gt=0)
    gridlines_stroke_color: str = "#000000"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
