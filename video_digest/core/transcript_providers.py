"""
Transcript resolution through an ordered chain of providers.

Each provider either returns transcript text, returns None when it has nothing
to work with, or raises. The resolver walks the providers in order and keeps
the first non-empty text; a failing provider is logged and skipped, never
retried.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Union

from youtube_transcript_api import YouTubeTranscriptApi

from video_digest.core.prompts import TRANSCRIPT_NOT_AVAILABLE, URL_PLACEHOLDER
from video_digest.core.transcriber import AudioTranscriber
from video_digest.models.schemas import TranscriptRequest
from video_digest.utils.helpers import extract_video_id, resolve_stored_file
from video_digest.utils.logger import logging


class TranscriptProvider:
    """A single source of transcript text."""

    name = "provider"

    def attempt(self, request: TranscriptRequest) -> Optional[str]:
        raise NotImplementedError


class StoredAudioProvider(TranscriptProvider):
    """Transcribes a previously downloaded audio file."""

    name = "stored audio"

    def __init__(self, transcriber: AudioTranscriber, downloads_dir: Union[str, Path]):
        self.transcriber = transcriber
        self.downloads_dir = downloads_dir

    def attempt(self, request: TranscriptRequest) -> Optional[str]:
        if not request.filename:
            return None
        audio_path = resolve_stored_file(self.downloads_dir, request.filename)
        if audio_path is None:
            logging.info(f"Stored file not found, skipping audio transcript: {request.filename}")
            return None
        return self.transcriber.transcribe(audio_path)


class YouTubeCaptionProvider(TranscriptProvider):
    """Fetches the caption track published for the video."""

    name = "youtube captions"

    def attempt(self, request: TranscriptRequest) -> Optional[str]:
        if not request.url:
            return None
        video_id = extract_video_id(request.url) or request.url
        fetched = YouTubeTranscriptApi().fetch(video_id)
        return " ".join(snippet.text for snippet in fetched)


class UrlPlaceholderProvider(TranscriptProvider):
    """Asks the summarizer to fall back on general knowledge about the URL."""

    name = "url placeholder"

    def attempt(self, request: TranscriptRequest) -> Optional[str]:
        if not request.url:
            return None
        return URL_PLACEHOLDER.format(url=request.url)


class TranscriptResolver:
    """Tries transcript providers in order until one yields text."""

    def __init__(self, providers: Iterable[TranscriptProvider]):
        self.providers: List[TranscriptProvider] = list(providers)

    def resolve(self, request: TranscriptRequest) -> str:
        """
        Produce a transcript for the request.

        Args:
            request: Stored filename and/or source URL

        Returns:
            Transcript text; "Transcript not available." when no provider succeeds
        """
        for provider in self.providers:
            try:
                text = provider.attempt(request)
            except Exception as e:
                logging.warning(f"Transcript provider '{provider.name}' failed, trying next: {str(e)}")
                continue

            if text:
                logging.info(f"Used transcript from {provider.name}")
                return text

        return TRANSCRIPT_NOT_AVAILABLE


def build_transcript_resolver(transcriber: AudioTranscriber, downloads_dir: Union[str, Path]) -> TranscriptResolver:
    """Default chain: stored audio, then captions, then the URL placeholder."""
    return TranscriptResolver([
        StoredAudioProvider(transcriber, downloads_dir),
        YouTubeCaptionProvider(),
        UrlPlaceholderProvider(),
    ])
