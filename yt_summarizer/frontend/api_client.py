"""
API client for communicating with the YouTube Segment Summarizer backend.
"""

import requests
from typing import Dict, List, Any, Optional
from urllib.parse import urljoin

from yt_summarizer.config import config
from yt_summarizer.utils.helpers import extract_video_id


class ApiClientError(Exception):
    """Raised when the backend answers with an error or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ApiClient:
    """Client for interacting with the YouTube Segment Summarizer API."""

    def __init__(self, base_url: str = config.PUBLIC_URL, timeout: float = 300):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
            timeout: Seconds to wait for a response; summaries can take a while
        """
        self.base_url = base_url
        self.api_base = base_url.rstrip("/") + "/api/"
        self.timeout = timeout

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    def _handle(self, response: requests.Response, fallback: str) -> Dict[str, Any]:
        """Return the JSON body, or raise ApiClientError with the server's detail."""
        if not response.ok:
            try:
                body = response.json()
            except ValueError:
                body = None
            detail = body.get("detail", fallback) if isinstance(body, dict) else fallback
            raise ApiClientError(str(detail), response.status_code)
        return response.json()

    def _get(self, endpoint: str, fallback: str) -> Dict[str, Any]:
        try:
            response = requests.get(self._url(endpoint), timeout=self.timeout)
        except requests.RequestException as e:
            raise ApiClientError(fallback) from e
        return self._handle(response, fallback)

    def _post(self, endpoint: str, payload: Dict[str, Any], fallback: str) -> Dict[str, Any]:
        try:
            response = requests.post(self._url(endpoint), json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise ApiClientError(fallback) from e
        return self._handle(response, fallback)

    def health(self) -> Dict[str, Any]:
        """Check that the backend is running."""
        return self._get("health", "API server is not reachable")

    def get_transcript(self, video_id: str) -> Dict[str, Any]:
        """
        Fetch a video transcript.

        Args:
            video_id: YouTube video ID

        Returns:
            Dictionary with segments and full_text
        """
        return self._get(
            f"transcript/{video_id}",
            "Failed to fetch transcript or auto-generated captions",
        )

    def generate_full_summary(self, transcript: str) -> str:
        """
        Summarize a whole transcript.

        Args:
            transcript: Full transcript text

        Returns:
            Summary text
        """
        data = self._post("summarize/full", {"transcript": transcript}, "Failed to generate summary")
        return data["summary"]

    def generate_incremental_summaries(self, segments: List[Dict[str, Any]]) -> List[Dict[str, str]]:
        """
        Summarize a transcript segment by segment.

        Args:
            segments: Transcript segments as returned by get_transcript

        Returns:
            List of {"time", "summary"} dictionaries
        """
        data = self._post(
            "summarize/incremental",
            {"segments": segments},
            "Failed to generate incremental summaries",
        )
        return data["summaries"]

    def get_video_info(self, video_id: str) -> Dict[str, Any]:
        """Look up the video's title and author."""
        return self._get(f"video/{video_id}", "Failed to fetch video info")

    def extract_video_id(self, url: str) -> Optional[str]:
        """
        Extract YouTube video ID from a URL.

        Args:
            url: YouTube URL

        Returns:
            Video ID or None if extraction fails
        """
        return extract_video_id(url)
