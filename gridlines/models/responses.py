"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class GridLine(BaseModel):
    x1: float
    y1: float
    x2: float
    y2: float


class GridlinesResponse(BaseModel):
    svg: str
    layer_id: str
    lines: list[GridLine] = Field(default_factory=list)
    edges_processed: int = 0
    skipped: dict[str, int] = Field(default_factory=dict)
    processing_time_ms: float = 0.0
