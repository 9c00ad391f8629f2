"""
FastAPI dependency providers.

Services are built per request from the configuration and the Gemini client
that the application created at startup.
"""

from fastapi import Depends, Request

from video_digest.core.summarizer import TranscriptSummarizer
from video_digest.core.transcriber import AudioTranscriber
from video_digest.core.transcript_providers import TranscriptResolver, build_transcript_resolver
from video_digest.core.video_info import VideoInfoFetcher
from video_digest.core.youtube_downloader import YouTubeDownloader


def get_app_config(request: Request):
    return request.app.state.config


def get_genai_client(request: Request):
    return request.app.state.genai_client


def get_downloader(app_config=Depends(get_app_config)) -> YouTubeDownloader:
    return YouTubeDownloader(app_config.DOWNLOADS_DIR, binary=app_config.YTDLP_BINARY)


def get_video_info_fetcher() -> VideoInfoFetcher:
    return VideoInfoFetcher()


def get_transcriber(
    app_config=Depends(get_app_config),
    client=Depends(get_genai_client),
) -> AudioTranscriber:
    return AudioTranscriber(client, model=app_config.GEMINI_MODEL)


def get_summarizer(
    app_config=Depends(get_app_config),
    client=Depends(get_genai_client),
) -> TranscriptSummarizer:
    return TranscriptSummarizer(client, model=app_config.GEMINI_MODEL)


def get_transcript_resolver(
    app_config=Depends(get_app_config),
    transcriber: AudioTranscriber = Depends(get_transcriber),
) -> TranscriptResolver:
    return build_transcript_resolver(transcriber, app_config.DOWNLOADS_DIR)
