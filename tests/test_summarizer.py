"""
Tests for the transcript summarizer module.
"""

import pytest
from unittest.mock import MagicMock

from video_digest.core.summarizer import TranscriptSummarizer
from video_digest.utils.error_handling import GeminiNotConfiguredError


def test_summarize(mock_genai_client):
    """Test summarizing a transcript."""
    mock_genai_client.models.generate_content.return_value.text = "A short summary."
    summarizer = TranscriptSummarizer(mock_genai_client, model="gemini-test")

    summary = summarizer.summarize("We discuss unit testing and mocking.")

    assert summary == "A short summary."
    kwargs = mock_genai_client.models.generate_content.call_args[1]
    assert kwargs["model"] == "gemini-test"
    assert kwargs["contents"] == (
        "Summarize the following YouTube transcript clearly and concisely:\n\n"
        "We discuss unit testing and mocking."
    )


def test_summarize_keeps_long_input_whole(mock_genai_client):
    transcript = "word " * 50000
    TranscriptSummarizer(mock_genai_client, model="gemini-test").summarize(transcript)

    contents = mock_genai_client.models.generate_content.call_args[1]["contents"]
    assert contents.endswith(transcript)


def test_summarize_without_client():
    with pytest.raises(GeminiNotConfiguredError):
        TranscriptSummarizer(None, model="gemini-test").summarize("text")


def test_summarize_error_propagates():
    client = MagicMock()
    client.models.generate_content.side_effect = ValueError("input too long")

    with pytest.raises(ValueError, match="input too long"):
        TranscriptSummarizer(client, model="gemini-test").summarize("text")
