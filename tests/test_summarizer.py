"""
Tests for the transcript summarizer module.
"""

import logging
import pytest
from unittest.mock import patch, MagicMock

from yt_summarizer.core.summarizer import TranscriptSummarizer
from yt_summarizer.models.schemas import SummaryConfig, SummaryResult
from yt_summarizer.utils.error_handling import (
    MissingCredentialsError,
    NoValidSegmentsError,
    SummaryGenerationError,
)


@pytest.fixture
def mock_init_chat_model():
    """Fixture to mock init_chat_model and the chat model it returns."""
    with patch('yt_summarizer.core.summarizer.init_chat_model') as mock_init_model:
        mock_model = MagicMock()

        mock_response = MagicMock()
        mock_response.content = "  This is a summarized transcript of the video.\n"
        mock_model.invoke.return_value = mock_response

        mock_init_model.return_value = mock_model

        yield mock_init_model


@pytest.fixture
def mock_chat_model(mock_init_chat_model):
    """The chat model returned by the mocked init_chat_model."""
    return mock_init_chat_model.return_value


def test_init_summarizer_requires_key():
    with pytest.raises(MissingCredentialsError):
        TranscriptSummarizer(SummaryConfig(api_key=""))


def test_summarize_full_transcript(mock_init_chat_model, mock_chat_model, summary_config):
    summarizer = TranscriptSummarizer(summary_config)
    summary = summarizer.summarize("This is a short test transcript.")

    assert summary == "This is a summarized transcript of the video."
    mock_chat_model.invoke.assert_called_once()

    init_kwargs = mock_init_chat_model.call_args.kwargs
    assert init_kwargs["model"] == "gpt-4o-mini"
    assert init_kwargs["model_provider"] == "openai"
    assert init_kwargs["max_tokens"] == 1000

    messages = mock_chat_model.invoke.call_args.args[0]
    assert [message.type for message in messages] == ["system", "human"]
    assert "This is a short test transcript." in messages[1].content


def test_summarize_segment_uses_segment_budget(mock_init_chat_model, mock_chat_model, summary_config):
    summarizer = TranscriptSummarizer(summary_config)
    summarizer.summarize_segment("A segment of text.")

    assert mock_init_chat_model.call_args.kwargs["max_tokens"] == 300
    messages = mock_chat_model.invoke.call_args.args[0]
    assert "segment" in messages[0].content


def test_summarize_incremental(mock_chat_model, summary_config, raw_segments):
    mock_chat_model.invoke.side_effect = [
        MagicMock(content="First part."),
        MagicMock(content="Second part."),
    ]

    summarizer = TranscriptSummarizer(summary_config)
    summaries = summarizer.summarize_incremental(raw_segments)

    assert summaries == [
        SummaryResult(time="Segment 1: 00:00 - 03:20", summary="First part."),
        SummaryResult(time="Segment 2: 03:20 - 07:30", summary="Second part."),
    ]

    # Chunks are summarized in order, one request each
    first_call, second_call = mock_chat_model.invoke.call_args_list
    assert "Welcome to the channel." in first_call.args[0][1].content
    assert "Today we talk about testing. Thanks for watching." in second_call.args[0][1].content


def test_summarize_incremental_honours_chunk_ceiling(mock_chat_model, raw_segments):
    summarizer = TranscriptSummarizer(SummaryConfig(api_key="test_openai_key", chunk_seconds=1000))
    summaries = summarizer.summarize_incremental(raw_segments)

    assert len(summaries) == 1
    assert summaries[0].time == "Segment 1: 00:00 - 07:30"


def test_summarize_incremental_logs_chunk_durations(mock_chat_model, summary_config, raw_segments, caplog):
    with caplog.at_level(logging.DEBUG, logger="ytsegmentsummarizer"):
        TranscriptSummarizer(summary_config).summarize_incremental(raw_segments)

    assert "Summarizing Segment 1: 00:00 - 03:20 (200s)" in caplog.text
    assert "Summarizing Segment 2: 03:20 - 07:30 (250s)" in caplog.text


def test_summarize_incremental_no_valid_segments(mock_chat_model, summary_config):
    summarizer = TranscriptSummarizer(summary_config)

    with pytest.raises(NoValidSegmentsError):
        summarizer.summarize_incremental([{"text": "bad", "start": 0, "duration": -1}])

    mock_chat_model.invoke.assert_not_called()


def test_provider_failure(mock_chat_model, summary_config):
    mock_chat_model.invoke.side_effect = RuntimeError("rate limited")

    summarizer = TranscriptSummarizer(summary_config)

    with pytest.raises(SummaryGenerationError) as exc_info:
        summarizer.summarize("Some transcript.")

    assert exc_info.value.status_code == 500


def test_malformed_reply(mock_chat_model, summary_config):
    mock_chat_model.invoke.return_value = MagicMock(content=[{"type": "image"}])

    summarizer = TranscriptSummarizer(summary_config)

    with pytest.raises(SummaryGenerationError):
        summarizer.summarize("Some transcript.")
