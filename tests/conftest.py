"""
Configuration for pytest tests.
"""

import os
import tempfile
import pytest

# Must be set before yt_summarizer.config is imported
os.environ.setdefault("OPENAI_API_KEY", "test_openai_key")
os.environ.setdefault("RAPID_API_KEY", "test_rapid_key")
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "yt_summarizer_test_logs"))
os.environ["ENVIRONMENT"] = "development"

from yt_summarizer.models.schemas import SummaryConfig, TranscriptFetchConfig, TranscriptSegment


@pytest.fixture
def segments():
    """Three segments that split into two chunks at a 300 second ceiling."""
    return [
        TranscriptSegment(text="Welcome to the channel.", start=0.0, duration=200.0),
        TranscriptSegment(text="Today we talk about testing.", start=200.0, duration=200.0),
        TranscriptSegment(text="Thanks for watching.", start=400.0, duration=50.0),
    ]


@pytest.fixture
def raw_segments():
    """Segments as they arrive in a JSON request body."""
    return [
        {"text": "Welcome to the channel.", "start": 0, "duration": 200},
        {"text": "Today we talk about testing.", "start": 200, "duration": 200},
        {"text": "Thanks for watching.", "start": 400, "duration": 50},
    ]


@pytest.fixture
def fetch_config():
    return TranscriptFetchConfig(
        api_key="test_rapid_key",
        api_url="https://transcripts.example.com/api/transcript",
        api_host="transcripts.example.com",
        timeout=5,
    )


@pytest.fixture
def summary_config():
    """Fixture to create a SummaryConfig object."""
    return SummaryConfig(
        api_key="test_openai_key",
        model="gpt-4o-mini",
        full_max_tokens=1000,
        segment_max_tokens=300,
        chunk_seconds=300,
    )


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
