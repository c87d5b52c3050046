"""Pydantic models for API I/O."""

from .compare import CompareResponse, PlayerReportResponse, PlayerSummaryResponse, SeriesResponse

__all__ = [
    "CompareResponse",
    "PlayerReportResponse",
    "PlayerSummaryResponse",
    "SeriesResponse",
]
