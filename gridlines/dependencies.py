"""FastAPI dependency injection."""

from __future__ import annotations

from gridlines.config import settings
from gridlines.engine.config import GridConfig


def get_grid_config() -> GridConfig:
    return GridConfig.from_settings(settings)
