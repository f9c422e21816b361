import pytest

from yt_summarizer.utils.helpers import extract_video_id, format_time, truncate_text


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "00:00"),
        (65, "01:05"),
        (59.99, "00:59"),
        (200, "03:20"),
        (3599, "59:59"),
        (3600, "01:00:00"),
        (3661, "01:01:01"),
        (36000 + 125.7, "10:02:05"),
    ],
)
def test_format_time(seconds, expected):
    assert format_time(seconds) == expected


@pytest.mark.parametrize("seconds", [float("nan"), -5, -0.1, float("inf"), None, "abc"])
def test_format_time_invalid_input_defaults(seconds):
    assert format_time(seconds) == "00:00"


@pytest.mark.parametrize(
    "url",
    [
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ?si=abc123",
        "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "https://www.youtube.com/v/dQw4w9WgXcQ",
        "Check this out: https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
    ],
)
def test_extract_video_id(url):
    assert extract_video_id(url) == "dQw4w9WgXcQ"


@pytest.mark.parametrize(
    "url",
    ["not a url", "", "https://vimeo.com/123456789", "https://youtu.be/short"],
)
def test_extract_video_id_no_match(url):
    assert extract_video_id(url) is None


def test_truncate_text():
    assert truncate_text("short", 10) == "short"
    assert truncate_text("a" * 20, 10) == "aaaaaaa..."
