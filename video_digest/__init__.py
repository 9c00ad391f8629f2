"""
Video Digest backend.

Downloads YouTube videos and audio with yt-dlp, transcribes stored audio and
summarizes transcripts with Gemini.
"""

from video_digest.config import config

__version__ = config.APP_VERSION
