"""
Data models for the Video Digest backend.
"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel


class MediaType(str, Enum):
    """Types of media that can be downloaded."""
    VIDEO = "video"
    AUDIO = "audio"


class DownloadResult(BaseModel):
    """A media file written to the downloads directory."""
    media_type: MediaType
    filename: str
    path: str


class VideoInfo(BaseModel):
    """Metadata looked up for a YouTube video."""
    video_id: str
    title: str
    author: str
    description: Optional[str] = None
    length_seconds: Optional[int] = None
    views: Optional[int] = None

    model_config = {"from_attributes": True}


class TranscriptRequest(BaseModel):
    """What the transcript providers have to work with."""
    filename: Optional[str] = None
    url: Optional[str] = None
