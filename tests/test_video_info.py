"""
Tests for the best-effort video info lookup.
"""

import pytest
import requests
from unittest.mock import patch, MagicMock

from yt_summarizer.core.video_info import fetch_video_info


@pytest.fixture
def mock_get():
    with patch("yt_summarizer.core.video_info.requests.get") as mock_request:
        yield mock_request


def test_fetch_video_info(mock_get):
    response = MagicMock()
    response.json.return_value = {"title": "Test Video", "author_name": "Test Author"}
    mock_get.return_value = response

    info = fetch_video_info("dQw4w9WgXcQ")

    assert info.title == "Test Video"
    assert info.author == "Test Author"
    assert mock_get.call_args.kwargs["params"] == {
        "url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
    }


def test_fetch_video_info_network_error_is_swallowed(mock_get):
    mock_get.side_effect = requests.Timeout("timed out")

    info = fetch_video_info("dQw4w9WgXcQ")

    assert info.video_id == "dQw4w9WgXcQ"
    assert info.title is None


def test_fetch_video_info_provider_error(mock_get):
    response = MagicMock()
    response.json.return_value = {"error": "404 Not Found"}
    mock_get.return_value = response

    assert fetch_video_info("dQw4w9WgXcQ").title is None


def test_fetch_video_info_http_error(mock_get):
    response = MagicMock()
    response.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
    mock_get.return_value = response

    assert fetch_video_info("dQw4w9WgXcQ").title is None
