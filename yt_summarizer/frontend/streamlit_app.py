"""
Main Streamlit application for the YouTube Segment Summarizer.
"""

import streamlit as st
from typing import Dict, Any
from dotenv import load_dotenv

from yt_summarizer.frontend.api_client import ApiClient, ApiClientError
from yt_summarizer.frontend.components import (
    header, sidebar, youtube_input, loading_spinner, loading_message,
    display_error, display_video_title, display_full_summary,
    display_segment_summaries, display_transcript_preview, youtube_embed,
)
from yt_summarizer.utils.logger import logging


load_dotenv()


def fetch_title(client: ApiClient, video_id: str):
    """Look up the video title; a failure here never stops the summary."""
    try:
        return client.get_video_info(video_id).get("title")
    except ApiClientError as e:
        logging.warning(f"Error fetching video info: {e.message}")
        return None


def process_youtube_url(client: ApiClient, url: str) -> Dict[str, Any]:
    """
    Process a YouTube URL: title, transcript, full summary and segment summaries.

    Args:
        client: Backend API client
        url: YouTube URL

    Returns:
        Result dictionary; an "error" key is added when a step fails,
        alongside whatever was produced before the failure
    """
    video_id = client.extract_video_id(url)
    if not video_id:
        return {"error": "Invalid YouTube URL"}

    title = fetch_title(client, video_id)
    result = {
        "video_id": video_id,
        "title": title,
        "transcript": "",
        "full_summary": "",
        "summaries": [],
    }

    try:
        transcript = client.get_transcript(video_id)
        full_text = transcript.get("full_text", "")
        segments = transcript.get("segments") or []
        result["transcript"] = full_text
        if not full_text:
            return result

        # Kept even if the segment summaries fail below
        result["full_summary"] = client.generate_full_summary(full_text)

        if not segments:
            result["error"] = "No valid segments found in transcript"
            return result
        result["summaries"] = client.generate_incremental_summaries(segments)
        return result

    except ApiClientError as e:
        result["error"] = e.message
        return result


def init_session_state(api_url: str):
    """Initialize session state variables."""
    client = st.session_state.get("api_client")
    if client is None or client.base_url != api_url:
        st.session_state.api_client = ApiClient(api_url)

    if "result" not in st.session_state:
        st.session_state.result = None


def display_result(result: Dict[str, Any]):
    display_video_title(result.get("title"))

    if "error" in result:
        display_error(result["error"])

    if not result.get("video_id"):
        return

    youtube_embed(result["video_id"])
    display_full_summary(result.get("full_summary", ""))
    display_segment_summaries(result.get("summaries", []))
    display_transcript_preview(result.get("transcript", ""))


def main():
    """Main application entry point."""
    header()
    api_url = sidebar()
    init_session_state(api_url)

    url = youtube_input()
    if url:
        loading_message()
        with loading_spinner("Summarizing..."):
            st.session_state.result = process_youtube_url(st.session_state.api_client, url)

    if st.session_state.result:
        display_result(st.session_state.result)


if __name__ == "__main__":
    main()
