"""
API routes for the YouTube Segment Summarizer application.
"""

from fastapi import APIRouter, HTTPException, Depends, Path

from yt_summarizer.api.schemas import (
    FullSummaryRequest,
    FullSummaryResponse,
    HealthResponse,
    IncrementalSummaryRequest,
    IncrementalSummaryResponse,
    TranscriptResponse,
)
from yt_summarizer.config import config
from yt_summarizer.core.summarizer import TranscriptSummarizer
from yt_summarizer.core.transcript_fetcher import TranscriptFetcher
from yt_summarizer.core.video_info import fetch_video_info
from yt_summarizer.models.schemas import VideoInfo
from yt_summarizer.utils.error_handling import SummarizerError, to_http_exception
from yt_summarizer.utils.logger import logging

router = APIRouter(prefix="/api", tags=["youtube"])


def get_transcript_fetcher() -> TranscriptFetcher:
    """Build a transcript fetcher from the application configuration."""
    try:
        return TranscriptFetcher(config.transcript_fetch_config())
    except SummarizerError as e:
        raise to_http_exception(e)


def get_summarizer() -> TranscriptSummarizer:
    """Build a summarizer from the application configuration."""
    try:
        return TranscriptSummarizer(config.summary_config())
    except SummarizerError as e:
        raise to_http_exception(e)


@router.get("/health", response_model=HealthResponse)
async def health():
    """Report that the server is up."""
    return HealthResponse(status="ok", message="Server is running")


@router.get("/transcript/{video_id}", response_model=TranscriptResponse)
def get_transcript(
    video_id: str = Path(..., description="YouTube video ID"),
    fetcher: TranscriptFetcher = Depends(get_transcript_fetcher),
):
    """
    Fetch the transcript of a video.

    - Falls back to auto-generated captions when no regular transcript exists
    - Returns 404 when neither is available
    """
    try:
        transcript = fetcher.fetch(video_id)
    except SummarizerError as e:
        logging.error(f"Error fetching transcript for {video_id}: {e.message}")
        raise to_http_exception(e)

    return TranscriptResponse(segments=transcript.segments, full_text=transcript.full_text)


@router.post("/summarize/full", response_model=FullSummaryResponse)
def summarize_full(
    request: FullSummaryRequest,
    summarizer: TranscriptSummarizer = Depends(get_summarizer),
):
    """Summarize a whole transcript."""
    if not request.transcript:
        raise HTTPException(status_code=400, detail="Transcript is required")

    try:
        summary = summarizer.summarize(request.transcript)
    except SummarizerError as e:
        logging.error(f"Error generating summary: {e.message}")
        raise to_http_exception(e)

    return FullSummaryResponse(summary=summary)


@router.post("/summarize/incremental", response_model=IncrementalSummaryResponse)
def summarize_incremental(
    request: IncrementalSummaryRequest,
    summarizer: TranscriptSummarizer = Depends(get_summarizer),
):
    """
    Summarize a transcript in time segments of up to five minutes.

    Segments with missing, non-numeric or negative timing are ignored.
    """
    if not request.segments:
        raise HTTPException(status_code=400, detail="Valid segments array is required")

    try:
        summaries = summarizer.summarize_incremental(request.segments)
    except SummarizerError as e:
        logging.error(f"Error generating incremental summaries: {e.message}")
        raise to_http_exception(e)

    return IncrementalSummaryResponse(summaries=summaries)


@router.get("/video/{video_id}", response_model=VideoInfo)
def get_video_info(video_id: str = Path(..., description="YouTube video ID")):
    """Best-effort title lookup; always answers 200."""
    return fetch_video_info(video_id, info_url=config.VIDEO_INFO_URL)
