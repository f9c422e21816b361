"""
YouTube Segment Summarizer Application.

This application fetches the transcript of a YouTube video and generates a
full summary plus time-segmented summaries using LLM models.
"""

from yt_summarizer.config import config

__version__ = config.APP_VERSION
