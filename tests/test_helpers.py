"""
Tests for the helper functions.
"""

import pytest

from video_digest.utils.helpers import (
    extract_video_id,
    format_duration,
    format_file_size,
    resolve_stored_file,
)


@pytest.mark.parametrize("seconds, expected", [
    (None, "Unknown"),
    (0, "Unknown"),
    (5, "0:05"),
    (125, "2:05"),
    ("61", "1:01"),
    (3600, "60:00"),
])
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


@pytest.mark.parametrize("size, expected", [
    (None, "Unknown"),
    (0, "Unknown"),
    (500, "500 Bytes"),
    (1024, "1 KB"),
    (1536, "1.5 KB"),
    (5 * 1024 * 1024, "5 MB"),
])
def test_format_file_size(size, expected):
    assert format_file_size(size) == expected


@pytest.mark.parametrize("url", [
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
    "https://youtu.be/dQw4w9WgXcQ?si=abc",
    "https://www.youtube.com/embed/dQw4w9WgXcQ",
    "https://www.youtube.com/shorts/dQw4w9WgXcQ",
])
def test_extract_video_id(url):
    assert extract_video_id(url) == "dQw4w9WgXcQ"


def test_extract_video_id_unknown_url():
    assert extract_video_id("https://example.com/video") is None



def test_resolve_stored_file(tmp_path):
    (tmp_path / "audio_1.mp3").write_bytes(b"data")
    (tmp_path / "nested").mkdir()

    assert resolve_stored_file(tmp_path, "audio_1.mp3") == (tmp_path / "audio_1.mp3").resolve()
    assert resolve_stored_file(tmp_path, "missing.mp3") is None
    assert resolve_stored_file(tmp_path, "nested") is None
    assert resolve_stored_file(tmp_path, "../audio_1.mp3") is None
    assert resolve_stored_file(tmp_path, "") is None


@pytest.mark.parametrize("filename", ["a\u0000.mp3", "x" * 300])
def test_resolve_stored_file_unusable_names(tmp_path, filename):
    assert resolve_stored_file(tmp_path, filename) is None
