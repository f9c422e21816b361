"""
Main entry point for the YouTube Segment Summarizer application.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from yt_summarizer.models.schemas import VideoSummary
from yt_summarizer.core.transcript_fetcher import TranscriptFetcher
from yt_summarizer.core.summarizer import TranscriptSummarizer
from yt_summarizer.core.video_info import fetch_video_info
from yt_summarizer.config import config
from yt_summarizer.utils.error_handling import InvalidInputError, SummarizerError
from yt_summarizer.utils.helpers import extract_video_id
from yt_summarizer.utils.logger import logging


def save_summary(summary: VideoSummary, output_file: str) -> Path:
    """Save the summary to a JSON file."""
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(summary.model_dump(), f, indent=2, default=str)

    logging.info(f"Summary saved to: {output_file}")
    return output_file


def summarize_youtube_video(url: str, output_file: Optional[str] = None) -> VideoSummary:
    """
    Process a YouTube video: fetch the transcript, then summarize it whole and per segment.

    Args:
        url: YouTube video URL
        output_file: Optional file path to save the summary

    Returns:
        VideoSummary object
    """
    if not url:
        raise InvalidInputError("A YouTube URL is required")

    video_id = extract_video_id(url)
    if not video_id:
        raise InvalidInputError("Invalid YouTube URL")

    # Build both clients first so missing keys fail before any request
    fetcher = TranscriptFetcher(config.transcript_fetch_config())
    summarizer = TranscriptSummarizer(config.summary_config())

    video_info = fetch_video_info(video_id, info_url=config.VIDEO_INFO_URL)

    transcript = fetcher.fetch(video_id)

    logging.info("Generating full summary...")
    full_summary = summarizer.summarize(transcript.full_text)

    logging.info("Generating segment summaries...")
    try:
        segment_summaries = summarizer.summarize_incremental(transcript.segments)
    except SummarizerError as e:
        # The full summary is still worth returning
        logging.error(f"Segment summaries failed: {e.message}")
        segment_summaries = []

    summary = VideoSummary(
        video_id=video_id,
        title=video_info.title,
        full_summary=full_summary,
        segment_summaries=segment_summaries,
    )

    if output_file:
        save_summary(summary, output_file)

    return summary


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="YouTube Segment Summarizer")
    parser.add_argument("url", help="YouTube video URL")
    parser.add_argument("--output", help="Output file path for the summary (JSON)")

    args = parser.parse_args()

    try:
        summary = summarize_youtube_video(args.url, args.output)
    except SummarizerError as e:
        logging.error(e.message)
        print(f"Error ({e.status_code}): {e.message}", file=sys.stderr)
        sys.exit(1)

    print("\n" + "=" * 80)
    print(f"Summary of '{summary.title or summary.video_id}'")
    print("=" * 80)
    print(summary.full_summary)
    for segment in summary.segment_summaries:
        print("\n" + "-" * 80)
        print(segment.time)
        print("-" * 80)
        print(segment.summary)
    print("=" * 80)


if __name__ == "__main__":
    main()
