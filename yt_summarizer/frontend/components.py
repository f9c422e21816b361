"""
Reusable UI components for the Streamlit app.
"""

import streamlit as st
from typing import Dict, List, Optional

from yt_summarizer.config import config
from yt_summarizer.utils.helpers import truncate_text


def header():
    """Display the application header."""
    st.set_page_config(
        page_title="YouTube Video Summarizer",
        page_icon="🎬",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    st.title("🎬 YouTube Video Summarizer")
    st.markdown("""
    Enter a YouTube URL to get an AI-generated summary of the whole video
    and of each five-minute segment.
    """)
    st.divider()


def sidebar() -> str:
    """
    Display the sidebar with app information and the API URL setting.

    Returns:
        The API URL entered by the user
    """
    with st.sidebar:
        st.title("YouTube Summarizer")

        st.markdown("## About")
        st.info("""
        This app fetches the video transcript (or its auto-generated captions)
        and summarizes it:
        - one summary for the whole video
        - one summary per five-minute segment
        """)

        st.markdown("## Settings")
        api_url = st.text_input("API URL", value=config.PUBLIC_URL, key="api_url")

        st.divider()
        st.caption("Powered by YouTube Transcript API and GPT-4o-mini")

    return api_url


def youtube_input() -> Optional[str]:
    """
    Display a YouTube URL input form.

    Returns:
        The submitted YouTube URL or None
    """
    with st.form(key="youtube_form"):
        url = st.text_input(
            "Enter YouTube URL",
            placeholder="https://www.youtube.com/watch?v=...",
        )
        submit = st.form_submit_button("Summarize")

    if submit and url:
        return url.strip()

    return None


def loading_spinner(message: str = "Processing..."):
    """
    Display a loading spinner with a message.

    Args:
        message: Message to display with the spinner
    """
    return st.spinner(message)


def loading_message():
    st.info(
        "Fetching transcript and generating summaries... "
        "If no transcript is available, auto-generated captions are used. "
        "This may take a minute depending on video length."
    )


def display_error(message: str):
    st.error(message)


def display_video_title(title: Optional[str]):
    if title:
        st.markdown(f"## Video: {title}")


def display_full_summary(summary: str):
    """
    Display the summary of the whole video.

    Args:
        summary: Markdown summary text
    """
    if not summary:
        return
    st.markdown("## Full Video Summary")
    st.markdown(summary)


def display_segment_summaries(summaries: List[Dict[str, str]]):
    """
    Display one block per time segment.

    Args:
        summaries: List of {"time", "summary"} dictionaries
    """
    if not summaries:
        return
    st.markdown("## Segment Summaries")
    for segment in summaries:
        st.markdown(f"### {segment['time']}")
        st.markdown(segment["summary"])


def display_transcript_preview(text: str, max_length: int = 500):
    """
    Display a preview of the transcript.

    Args:
        text: Full transcript text
        max_length: Maximum length to display
    """
    if not text:
        return

    with st.expander("Transcript Preview"):
        st.markdown(truncate_text(text, max_length))
        if len(text) > max_length:
            st.markdown(f"*Transcript is {len(text)} characters long. Showing first {max_length} characters.*")


def youtube_embed(video_id: str):
    """
    Embed a YouTube video.

    Args:
        video_id: YouTube video ID
    """
    st.markdown(f"""
    <iframe width="560" height="315" src="https://www.youtube.com/embed/{video_id}"
    frameborder="0" allow="accelerometer; autoplay; clipboard-write; encrypted-media;
    gyroscope; picture-in-picture" allowfullscreen></iframe>
    """, unsafe_allow_html=True)
