"""
Module for transcribing stored audio files with Gemini.
"""

import os
from pathlib import Path
from typing import Optional, Union

from google import genai
from google.genai import types

from video_digest.core.prompts import TRANSCRIBE_PROMPT
from video_digest.utils.error_handling import GeminiNotConfiguredError
from video_digest.utils.logger import logging

AUDIO_MIME_TYPES = {
    ".mp3": "audio/mp3",
    ".wav": "audio/wav",
    ".m4a": "audio/mp4",
    ".aac": "audio/aac",
    ".ogg": "audio/ogg",
    ".flac": "audio/flac",
    ".aiff": "audio/aiff",
}
DEFAULT_AUDIO_MIME_TYPE = "audio/mp3"


def guess_audio_mime_type(path: Union[str, Path]) -> str:
    return AUDIO_MIME_TYPES.get(Path(path).suffix.lower(), DEFAULT_AUDIO_MIME_TYPE)


class AudioTranscriber:
    """Class to handle audio transcription operations."""

    def __init__(self, client: Optional[genai.Client], model: str):
        """
        Initialize the transcriber.

        Args:
            client: Gemini client built at startup (None if unconfigured)
            model: Gemini model name
        """
        self.client = client
        self.model = model

    def transcribe(self, audio_path: Union[str, Path]) -> str:
        """
        Transcribe an audio file.

        Args:
            audio_path: Path to a stored audio file

        Returns:
            Transcript text
        """
        if not os.path.exists(audio_path) or not os.path.isfile(audio_path):
            raise FileNotFoundError(f"Audio file not found at {audio_path}")
        if self.client is None:
            raise GeminiNotConfiguredError()

        logging.info(f"Transcribing audio file: {audio_path}")

        with open(audio_path, "rb") as audio_file:
            audio_bytes = audio_file.read()

        response = self.client.models.generate_content(
            model=self.model,
            contents=types.Content(
                parts=[
                    types.Part(text=TRANSCRIBE_PROMPT),
                    types.Part(
                        inline_data=types.Blob(
                            mime_type=guess_audio_mime_type(audio_path),
                            data=audio_bytes,
                        )
                    ),
                ]
            ),
        )

        transcript = response.text or ""
        logging.info(f"Transcription complete ({len(transcript)} characters).")
        return transcript
