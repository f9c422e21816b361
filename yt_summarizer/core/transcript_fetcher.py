"""
Module for fetching YouTube transcripts from the RapidAPI transcript service.
"""

from typing import Any, Dict, List, Optional

import requests

from yt_summarizer.core.chunker import coerce_segment
from yt_summarizer.models.schemas import Transcript, TranscriptFetchConfig
from yt_summarizer.utils.error_handling import (
    MissingCredentialsError,
    TranscriptFetchError,
    TranscriptNotFoundError,
)
from yt_summarizer.utils.logger import logging


def normalize_transcript(items: Any) -> Transcript:
    """
    Map the provider's transcript items onto TranscriptSegments.

    Items with unusable timing are left out of the segments but their text
    still goes into the full text.

    Args:
        items: List of dicts carrying text, start (or offset) and duration

    Returns:
        Transcript with the segments in provider order and all text joined by spaces

    Raises:
        TranscriptFetchError: if the items are not a list of objects
    """
    if not isinstance(items, list):
        raise TranscriptFetchError("Malformed transcript response from provider")

    segments = []
    texts = []
    for item in items:
        if not isinstance(item, dict):
            raise TranscriptFetchError("Malformed transcript item from provider")
        text = "" if item.get("text") is None else str(item["text"])
        texts.append(text)
        segment = coerce_segment(
            {
                "text": text,
                "start": item["start"] if "start" in item else item.get("offset"),
                "duration": item.get("duration"),
            }
        )
        if segment is None:
            logging.warning(f"Skipping transcript item with unusable timing: {item}")
            continue
        segments.append(segment)

    return Transcript(segments=segments, full_text=" ".join(texts))


class TranscriptFetcher:
    """Class to handle transcript retrieval operations."""

    def __init__(self, fetch_config: TranscriptFetchConfig, session: Optional[requests.Session] = None):
        """
        Initialize the fetcher with the provider settings.

        Args:
            fetch_config: Provider endpoint, key and timeout
            session: Optional requests session (a new one is created if omitted)
        """
        if not fetch_config.api_key:
            raise MissingCredentialsError(
                "RapidAPI key is required. Set RAPID_API_KEY in .env file or pass directly."
            )
        self.fetch_config = fetch_config
        self.session = session or requests.Session()

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "X-RapidAPI-Key": self.fetch_config.api_key,
            "X-RapidAPI-Host": self.fetch_config.api_host,
        }

    def _request(self, params: Dict[str, Any]) -> Optional[List[Any]]:
        """Call the provider once and return its transcript items, if any."""
        try:
            response = self.session.get(
                self.fetch_config.api_url,
                params=params,
                headers=self.headers,
                timeout=self.fetch_config.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logging.error(f"Error fetching transcript for {params.get('videoId')}: {e}")
            raise TranscriptFetchError("Failed to fetch transcript") from e
        except ValueError as e:
            logging.error(f"Transcript provider returned invalid JSON: {e}")
            raise TranscriptFetchError("Failed to fetch transcript") from e

        if not isinstance(data, dict):
            return None
        return data.get("transcript") or None

    def fetch(self, video_id: str) -> Transcript:
        """
        Fetch the transcript for a video, falling back to auto-generated captions.

        Args:
            video_id: 11-character YouTube video ID

        Returns:
            Normalized Transcript

        Raises:
            TranscriptNotFoundError: if neither request yields a transcript
            TranscriptFetchError: on network errors or malformed responses
        """
        logging.info(f"Fetching transcript for video {video_id}")
        items = self._request({"videoId": video_id})

        if items is None:
            logging.info("No regular transcript found, trying auto-generated captions...")
            items = self._request(
                {
                    "videoId": video_id,
                    "lang": self.fetch_config.caption_language,
                    "country": self.fetch_config.caption_country,
                    "auto": "true",
                }
            )
            if items is None:
                raise TranscriptNotFoundError()

        transcript = normalize_transcript(items)
        logging.info(f"Fetched {len(transcript.segments)} transcript segments for video {video_id}")
        return transcript
