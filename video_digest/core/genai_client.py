"""
Construction of the Gemini client used by transcription and summarization.
"""

from typing import Optional

from google import genai

from video_digest.utils.logger import logging


def create_genai_client(app_config) -> Optional[genai.Client]:
    """
    Build the Gemini client from configuration.

    Args:
        app_config: Configuration class carrying GEMINI_API_KEY

    Returns:
        A client, or None when no API key is configured
    """
    if not app_config.GEMINI_API_KEY:
        logging.warning("Gemini client not created: GEMINI_API_KEY is missing")
        return None

    client = genai.Client(api_key=app_config.GEMINI_API_KEY)
    logging.info(f"Gemini client initialized (model: {app_config.GEMINI_MODEL})")
    return client
