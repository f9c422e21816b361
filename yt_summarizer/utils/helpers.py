"""
Helper utility functions for the YouTube segment summarizer application.
"""

import math
import re
from typing import Optional


# watch?v=, youtu.be/, /embed/, /v/, /e/ and /user/<name>/<id> shapes
VIDEO_ID_PATTERN = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)([^\"&?/\s]{11})"
)


def extract_video_id(url: str) -> Optional[str]:
    """
    Extract the 11-character video ID from a YouTube URL.

    Args:
        url: Any string that may contain a YouTube URL

    Returns:
        The video ID, or None when no known URL shape matches
    """
    if not url:
        return None
    match = VIDEO_ID_PATTERN.search(url)
    return match.group(1) if match else None


def format_time(seconds) -> str:
    """
    Format a seconds offset as MM:SS, or HH:MM:SS from one hour on.

    Args:
        seconds: Offset in seconds

    Returns:
        Clock string; "00:00" for NaN, negative or non-numeric input
    """
    try:
        seconds = float(seconds)
    except (TypeError, ValueError):
        return "00:00"
    if not math.isfinite(seconds) or seconds < 0:
        return "00:00"

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)

    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length.

    Args:
        text: Text to truncate
        max_length: Maximum length
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix
