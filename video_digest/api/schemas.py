from pydantic import BaseModel
from typing import Optional


class DownloadRequest(BaseModel):
    """Model for requesting a video download."""
    url: Optional[str] = None
    format: Optional[str] = None


class AudioDownloadRequest(BaseModel):
    """Model for requesting an audio download."""
    url: Optional[str] = None


class TranscribeRequest(BaseModel):
    """Model for transcribing a stored audio file."""
    filename: Optional[str] = None


class SummarizeRequest(BaseModel):
    """Model for summarizing a video by URL and/or stored file."""
    url: Optional[str] = None
    filename: Optional[str] = None


class DownloadResponse(BaseModel):
    """Model for download responses."""
    message: str
    file: str
    downloadUrl: str


class VideoInfoResponse(BaseModel):
    """Model for video info responses."""
    title: str
    author: str
    description: Optional[str] = None
    length: str
    views: Optional[int] = None


class TranscribeResponse(BaseModel):
    """Model for transcription responses."""
    message: str
    transcript: str


class SummarizeResponse(BaseModel):
    """Model for summary responses."""
    transcript: str
    summary: str


class ErrorResponse(BaseModel):
    error: str
