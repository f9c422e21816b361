"""
Best-effort lookup of YouTube video metadata.
"""

import requests

from yt_summarizer.models.schemas import VideoInfo
from yt_summarizer.utils.logger import logging

NOEMBED_URL = "https://noembed.com/embed"


def fetch_video_info(video_id: str, info_url: str = NOEMBED_URL, timeout: float = 10.0) -> VideoInfo:
    """
    Look up the title and author of a video through noembed.

    Failures are logged and yield a VideoInfo without a title; they never
    interrupt the summary flow.
    """
    try:
        response = requests.get(
            info_url,
            params={"url": f"https://www.youtube.com/watch?v={video_id}"},
            timeout=timeout,
        )
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        logging.warning(f"Error fetching video info for {video_id}: {e}")
        return VideoInfo(video_id=video_id)

    if not isinstance(data, dict) or "error" in data:
        logging.warning(f"No video info available for {video_id}")
        return VideoInfo(video_id=video_id)

    title = data.get("title")
    author = data.get("author_name")
    return VideoInfo(
        video_id=video_id,
        title=title if isinstance(title, str) else None,
        author=author if isinstance(author, str) else None,
    )
