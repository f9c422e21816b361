"""
Grouping of transcript segments into time-bounded chunks.
"""

import math
from typing import Any, Iterable, List, Optional

from yt_summarizer.models.schemas import Chunk, TranscriptSegment
from yt_summarizer.utils.error_handling import NoValidSegmentsError
from yt_summarizer.utils.helpers import format_time

DEFAULT_CHUNK_SECONDS = 5 * 60


def _as_seconds(value: Any) -> Optional[float]:
    """Return value as a finite float, or None when it is not a usable number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _field(candidate: Any, name: str) -> Any:
    if isinstance(candidate, dict):
        return candidate.get(name)
    return getattr(candidate, name, None)


def coerce_segment(candidate: Any) -> Optional[TranscriptSegment]:
    """
    Build a TranscriptSegment from a dict or segment-like object.

    Returns None unless start and duration are finite, non-negative numbers.
    """
    start = _as_seconds(_field(candidate, "start"))
    duration = _as_seconds(_field(candidate, "duration"))
    if start is None or duration is None or start < 0 or duration < 0:
        return None
    text = _field(candidate, "text")
    return TranscriptSegment(
        text="" if text is None else str(text),
        start=start,
        duration=duration,
    )


def filter_valid_segments(candidates: Iterable[Any]) -> List[TranscriptSegment]:
    """
    Keep the candidates whose start and duration are usable.

    Args:
        candidates: Segment dicts (e.g. from a JSON body) or TranscriptSegment objects

    Returns:
        TranscriptSegment list in the original order

    Raises:
        NoValidSegmentsError: if nothing survives the filter
    """
    valid = [
        segment
        for segment in (coerce_segment(candidate) for candidate in candidates)
        if segment is not None
    ]

    if not valid:
        raise NoValidSegmentsError()
    return valid


def chunk_segments(
    segments: Iterable[TranscriptSegment], max_seconds: float = DEFAULT_CHUNK_SECONDS
) -> List[Chunk]:
    """
    Partition segments into contiguous chunks of at most max_seconds.

    A chunk is closed as soon as the next segment would push it over the
    ceiling. A single segment longer than the ceiling is never split and
    becomes a chunk of its own.
    """
    chunks: List[Chunk] = []
    current: List[TranscriptSegment] = []
    current_duration = 0.0

    for segment in segments:
        if current_duration + segment.duration > max_seconds and current:
            chunks.append(tuple(current))
            current = [segment]
            current_duration = segment.duration
        else:
            current.append(segment)
            current_duration += segment.duration

    if current:
        chunks.append(tuple(current))

    return chunks


def chunk_duration(chunk: Chunk) -> float:
    return sum(segment.duration for segment in chunk)


def chunk_text(chunk: Chunk) -> str:
    """Concatenate the chunk's text with single spaces."""
    return " ".join(segment.text for segment in chunk)


def label_chunk(index: int, chunk: Chunk) -> str:
    """Label a chunk as 'Segment N: start - end' (index is 0-based)."""
    start_time = format_time(chunk[0].start)
    end_time = format_time(chunk[-1].end)
    return f"Segment {index + 1}: {start_time} - {end_time}"
