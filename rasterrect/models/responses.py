"""API response models."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class ConvertResponse(BaseModel):
    svg: str
    width: int
    height: int
    stride: int
    color_count: int = 0
    rect_count: int = 0
    processing_time_ms: float = 0.0


class ErrorResponse(BaseModel):
    error: str
