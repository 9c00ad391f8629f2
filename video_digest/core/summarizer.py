"""
Module for summarizing transcripts with Gemini.
"""

from typing import Optional

from google import genai

from video_digest.core.prompts import SUMMARY_PROMPT
from video_digest.utils.error_handling import GeminiNotConfiguredError
from video_digest.utils.logger import logging


class TranscriptSummarizer:
    """Class to handle transcript summarization operations."""

    def __init__(self, client: Optional[genai.Client], model: str):
        """
        Initialize the summarizer.

        Args:
            client: Gemini client built at startup (None if unconfigured)
            model: Gemini model name
        """
        self.client = client
        self.model = model

    def summarize(self, transcript_text: str) -> str:
        """
        Summarize a transcript text.

        The text is sent as-is; overly long input is rejected by the service,
        and that error reaches the caller unchanged.

        Args:
            transcript_text: Transcript (or placeholder) to summarize

        Returns:
            Summarized text
        """
        if self.client is None:
            raise GeminiNotConfiguredError()

        prompt = SUMMARY_PROMPT.format(transcript=transcript_text)
        logging.info(f"Summarizing transcript ({len(transcript_text)} characters)")

        response = self.client.models.generate_content(model=self.model, contents=prompt)
        return response.text
