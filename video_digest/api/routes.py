"""
API routes for the Video Digest backend.

Handlers that wait on yt-dlp or an external API are plain functions so
FastAPI runs them in its threadpool.
"""

import traceback
from typing import Optional

from fastapi import APIRouter, Depends, Path

from video_digest.api.dependencies import (
    get_app_config,
    get_downloader,
    get_summarizer,
    get_transcriber,
    get_transcript_resolver,
    get_video_info_fetcher,
)
from video_digest.api.schemas import (
    AudioDownloadRequest,
    DownloadRequest,
    DownloadResponse,
    ErrorResponse,
    SummarizeRequest,
    SummarizeResponse,
    TranscribeRequest,
    TranscribeResponse,
    VideoInfoResponse,
)
from video_digest.core.summarizer import TranscriptSummarizer
from video_digest.core.transcriber import AudioTranscriber
from video_digest.core.transcript_providers import TranscriptResolver
from video_digest.core.video_info import VideoInfoFetcher
from video_digest.core.youtube_downloader import YouTubeDownloader
from video_digest.models.schemas import DownloadResult, TranscriptRequest
from video_digest.utils.error_handling import (
    AppError,
    DownstreamError,
    FileMissingError,
    InvalidInputError,
    MissingInputError,
)
from video_digest.utils.helpers import format_duration, resolve_stored_file
from video_digest.utils.logger import logging

router = APIRouter(
    prefix="/api",
    tags=["media"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)

DOWNLOADS_ROUTE = "/downloads"


def _download_response(message: str, result: DownloadResult) -> DownloadResponse:
    return DownloadResponse(
        message=message,
        file=result.filename,
        downloadUrl=f"{DOWNLOADS_ROUTE}/{result.filename}",
    )


@router.post("/download", response_model=DownloadResponse)
def download_video(
    request: DownloadRequest,
    app_config=Depends(get_app_config),
    downloader: YouTubeDownloader = Depends(get_downloader),
):
    """Download a video with yt-dlp into the downloads directory."""
    if not request.url:
        raise MissingInputError("No URL provided")

    video_format = (request.format or app_config.DEFAULT_VIDEO_FORMAT).lower()
    if video_format not in app_config.SUPPORTED_VIDEO_FORMATS:
        raise InvalidInputError(f"Unsupported format: {request.format}")

    try:
        result = downloader.download_video(request.url, video_format)
    except AppError:
        raise
    except Exception as e:
        logging.error(f"Download error: {str(e)}")
        logging.error(traceback.format_exc())
        raise DownstreamError("Download failed")

    return _download_response("Download successful", result)


@router.post("/download-audio", response_model=DownloadResponse)
def download_audio(
    request: AudioDownloadRequest,
    downloader: YouTubeDownloader = Depends(get_downloader),
):
    """Extract the audio track of a video as mp3."""
    if not request.url:
        raise MissingInputError("No URL provided")

    try:
        result = downloader.download_audio(request.url)
    except AppError:
        raise
    except Exception as e:
        logging.error(f"Audio download error: {str(e)}")
        logging.error(traceback.format_exc())
        raise DownstreamError("Audio download failed")

    return _download_response("Audio download successful", result)


@router.get("/video-info/{video_id}", response_model=VideoInfoResponse)
def get_video_info(
    video_id: str = Path(..., description="YouTube video ID"),
    fetcher: VideoInfoFetcher = Depends(get_video_info_fetcher),
):
    """Get title, author, description, duration and views of a video."""
    try:
        info = fetcher.get_info(video_id)
    except Exception as e:
        logging.error(f"Video info fetch error: {str(e)}")
        logging.error(traceback.format_exc())
        raise DownstreamError("Failed to fetch video info")

    return VideoInfoResponse(
        title=info.title,
        author=info.author,
        description=info.description,
        length=format_duration(info.length_seconds),
        views=info.views,
    )


@router.post("/transcribe-audio", response_model=TranscribeResponse)
def transcribe_audio(
    request: TranscribeRequest,
    app_config=Depends(get_app_config),
    transcriber: AudioTranscriber = Depends(get_transcriber),
):
    """Transcribe a previously downloaded audio file."""
    if not request.filename:
        raise MissingInputError("No filename provided")

    audio_path = resolve_stored_file(app_config.DOWNLOADS_DIR, request.filename)
    if audio_path is None:
        raise FileMissingError("File not found")

    try:
        transcript = transcriber.transcribe(audio_path)
    except Exception as e:
        logging.error(f"Gemini transcription error: {str(e)}")
        logging.error(traceback.format_exc())
        raise DownstreamError("Transcription failed")

    return TranscribeResponse(message="Transcription successful", transcript=transcript)


@router.post("/summarize", response_model=SummarizeResponse)
def summarize_video(
    request: Optional[SummarizeRequest] = None,
    resolver: TranscriptResolver = Depends(get_transcript_resolver),
    summarizer: TranscriptSummarizer = Depends(get_summarizer),
):
    """
    Summarize a video.

    - A stored audio file is transcribed first, if given
    - Otherwise the published YouTube captions are used
    - Failing both, the summarizer is asked to work from the URL alone
    """
    request = request or SummarizeRequest()
    try:
        transcript = resolver.resolve(TranscriptRequest(url=request.url, filename=request.filename))
        summary = summarizer.summarize(transcript)
    except Exception as e:
        logging.error(f"Summarization error: {str(e)}")
        logging.error(traceback.format_exc())
        raise DownstreamError(str(e) or "Failed to generate summary")

    return SummarizeResponse(transcript=transcript, summary=summary)
