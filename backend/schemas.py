"""
Pydantic Schemas for API Request/Response Models.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AnalyzeResponse(BaseModel):
    """Response from the analyze endpoint."""

    score: int = Field(..., ge=0, le=100, description="Share of job keywords found in the resume, 0-100")
    missing_keywords: list[str] = Field(
        default_factory=list,
        description="Job keywords absent from the resume, in job description order",
    )
    matched_keywords: list[str] = Field(default_factory=list, description="Job keywords found in the resume")
    file_name: Optional[str] = Field(None, description="Name of the uploaded resume file")
    check_id: Optional[str] = Field(None, description="Id of the stored check, if it was saved")


class CheckRecord(BaseModel):
    """A stored resume check."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    job_title: str
    file_name: Optional[str] = None
    score: int
    missing_keywords: list[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None

    @field_validator("created_at")
    @classmethod
    def _created_at_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # * SQLite returns naive datetimes; stored values are always UTC
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class ChecksListResponse(BaseModel):
    """Response listing recent checks."""

    checks: list[CheckRecord]
    count: int


class ErrorResponse(BaseModel):
    """Error response model."""

    detail: str
