"""
Helper utility functions for the Video Digest backend.
"""

import re
import time
from pathlib import Path
from typing import Optional, Union


def timestamp_ms() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)


def format_duration(seconds: Optional[Union[int, float, str]]) -> str:
    """
    Format a duration in seconds as M:SS.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted duration, or "Unknown" when missing
    """
    if not seconds:
        return "Unknown"
    seconds = float(seconds)
    if seconds <= 0:
        return "Unknown"
    mins = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{mins}:{secs:02d}"


def format_file_size(size_bytes: Optional[int]) -> str:
    """
    Format a byte count for humans.

    Args:
        size_bytes: Size in bytes

    Returns:
        Size like "1.5 MB", or "Unknown" for empty values
    """
    sizes = ["Bytes", "KB", "MB", "GB"]
    if not size_bytes or size_bytes <= 0:
        return "Unknown"
    i = 0
    value = float(size_bytes)
    while value >= 1024 and i < len(sizes) - 1:
        value /= 1024
        i += 1
    value = round(value, 2)
    if value == int(value):
        value = int(value)
    return f"{value} {sizes[i]}"


def extract_video_id(url: str) -> Optional[str]:
    """Extract the video ID from a YouTube URL."""
    # YouTube URL patterns
    patterns = [
        r"(?:watch\?v=|&v=)([0-9A-Za-z_-]{11})",
        r"(?:embed\/|shorts\/|live\/)([0-9A-Za-z_-]{11})",
        r"(?:youtu\.be\/)([0-9A-Za-z_-]{11})",
    ]

    for pattern in patterns:
        match = re.search(pattern, url)
        if match:
            return match.group(1)

    return None


def resolve_stored_file(downloads_dir: Union[str, Path], filename: str) -> Optional[Path]:
    """
    Locate a stored media file inside the downloads directory.

    Args:
        downloads_dir: The flat directory downloads are written to
        filename: Name of the stored file

    Returns:
        Path to the file, or None if it does not exist or lies outside the directory
    """
    if not filename:
        return None

    try:
        base = Path(downloads_dir).resolve()
        candidate = (base / filename).resolve()
        if candidate.parent != base or not candidate.is_file():
            return None
    except (OSError, ValueError):
        # e.g. embedded null bytes or names too long for the filesystem
        return None
    return candidate
