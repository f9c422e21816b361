from pydantic import BaseModel, field_validator
from typing import Optional, List, Any

from yt_summarizer.models.schemas import SummaryResult, TranscriptSegment


class FullSummaryRequest(BaseModel):
    """Model for requesting a full-transcript summary."""
    transcript: Optional[str] = None


class IncrementalSummaryRequest(BaseModel):
    """Model for requesting per-segment summaries.

    Segments are accepted as raw objects; invalid ones are filtered out
    before chunking.
    """
    segments: Optional[List[Any]] = None

    @field_validator("segments", mode="before")
    @classmethod
    def drop_non_array(cls, value):
        # Anything but a list is answered like a missing array
        return value if isinstance(value, list) else None


class TranscriptResponse(BaseModel):
    """Model for transcript responses."""
    segments: List[TranscriptSegment]
    full_text: str


class FullSummaryResponse(BaseModel):
    """Model for full summary responses."""
    summary: str


class IncrementalSummaryResponse(BaseModel):
    """Model for incremental summary responses."""
    summaries: List[SummaryResult]


class HealthResponse(BaseModel):
    status: str
    message: str
