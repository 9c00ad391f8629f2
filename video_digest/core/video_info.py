"""
Video metadata lookup.
"""

from pytubefix import YouTube

from video_digest.models.schemas import VideoInfo
from video_digest.utils.logger import logging

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"


class VideoInfoFetcher:
    """Looks up title, author and other details for a video ID."""

    def get_info(self, video_id: str) -> VideoInfo:
        """
        Fetch metadata for a video.

        Args:
            video_id: YouTube video ID

        Returns:
            VideoInfo for the video
        """
        logging.info(f"Fetching video info for: {video_id}")
        yt = YouTube(WATCH_URL.format(video_id=video_id))

        return VideoInfo(
            video_id=yt.video_id,
            title=yt.title,
            author=yt.author,
            description=yt.description,
            length_seconds=yt.length,
            views=yt.views,
        )
