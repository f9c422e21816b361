"""
Data models for the YouTube segment summarizer application.
"""
import time
from typing import Optional, List, Tuple
from pydantic import BaseModel, Field, ConfigDict


class TranscriptSegment(BaseModel):
    """A timed span of transcript text, in seconds."""
    model_config = ConfigDict(frozen=True)

    text: str = ""
    start: float = Field(ge=0)
    duration: float = Field(ge=0)

    @property
    def end(self) -> float:
        return self.start + self.duration


# An ordered, non-empty run of consecutive segments
Chunk = Tuple[TranscriptSegment, ...]


class Transcript(BaseModel):
    """Normalized transcript returned by the transcript fetcher."""
    segments: List[TranscriptSegment]
    full_text: str


class SummaryResult(BaseModel):
    """Summary of one chunk, labelled with its time range."""
    time: str
    summary: str


class VideoInfo(BaseModel):
    """Best-effort video metadata."""
    video_id: str
    title: Optional[str] = None
    author: Optional[str] = None


class TranscriptFetchConfig(BaseModel):
    """Configuration for the transcript provider."""
    api_key: str
    api_url: str = "https://youtube-transcript3.p.rapidapi.com/api/transcript"
    api_host: str = "youtube-transcript3.p.rapidapi.com"
    timeout: float = 30.0
    caption_language: str = "en"
    caption_country: str = "US"


class SummaryConfig(BaseModel):
    """Configuration for summarization operations."""
    api_key: str
    model: str = "gpt-4o-mini"
    temperature: Optional[float] = None
    full_max_tokens: int = 1000
    segment_max_tokens: int = 300
    chunk_seconds: float = 300.0


class VideoSummary(BaseModel):
    """Model for storing video summary information."""
    video_id: str
    title: Optional[str] = None
    full_summary: str
    segment_summaries: List[SummaryResult] = []
    created_at: str = Field(default_factory=lambda: time.strftime("%Y-%m-%d %H:%M:%S"))
