"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class GridlinesRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    selection: list[str] = Field(
        default_factory=list,
        description="Ids of the selected elements; empty selects all top-level artwork",
    )
    tolerance: float | None = Field(
        default=None,
        gt=0,
        description="Per-axis distance under which two lines are the same line",
    )
    layer_name: str | None = Field(default=None, description="Name of the layer to create")
