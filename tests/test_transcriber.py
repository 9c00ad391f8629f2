"""
Tests for the audio transcriber module.
"""

import pytest
from unittest.mock import MagicMock

from video_digest.core.transcriber import AudioTranscriber, guess_audio_mime_type
from video_digest.utils.error_handling import GeminiNotConfiguredError


@pytest.fixture
def audio_file(tmp_path):
    path = tmp_path / "audio_1700000000000.mp3"
    path.write_bytes(b"test audio data")
    return path


def test_transcribe(mock_genai_client, audio_file):
    """Test transcribing audio file."""
    mock_genai_client.models.generate_content.return_value.text = "This is a test transcript"

    transcriber = AudioTranscriber(mock_genai_client, model="gemini-test")
    transcript = transcriber.transcribe(audio_file)

    assert transcript == "This is a test transcript"
    mock_genai_client.models.generate_content.assert_called_once()

    kwargs = mock_genai_client.models.generate_content.call_args[1]
    assert kwargs["model"] == "gemini-test"
    prompt_part, audio_part = kwargs["contents"].parts
    assert prompt_part.text == "Please transcribe this audio into text:"
    assert audio_part.inline_data.mime_type == "audio/mp3"
    assert audio_part.inline_data.data == b"test audio data"


def test_transcribe_file_not_found(mock_genai_client, tmp_path):
    """Test transcribing with non-existent audio file."""
    transcriber = AudioTranscriber(mock_genai_client, model="gemini-test")

    with pytest.raises(FileNotFoundError):
        transcriber.transcribe(tmp_path / "nonexistent_file.mp3")

    mock_genai_client.models.generate_content.assert_not_called()


def test_transcribe_without_client(audio_file):
    transcriber = AudioTranscriber(None, model="gemini-test")

    with pytest.raises(GeminiNotConfiguredError):
        transcriber.transcribe(audio_file)


def test_transcribe_api_error_propagates(audio_file):
    client = MagicMock()
    client.models.generate_content.side_effect = RuntimeError("429 RESOURCE_EXHAUSTED")

    transcriber = AudioTranscriber(client, model="gemini-test")
    with pytest.raises(RuntimeError, match="RESOURCE_EXHAUSTED"):
        transcriber.transcribe(audio_file)


@pytest.mark.parametrize("filename, mime_type", [
    ("a.mp3", "audio/mp3"),
    ("a.WAV", "audio/wav"),
    ("a.m4a", "audio/mp4"),
    ("a.unknown", "audio/mp3"),
])
def test_guess_audio_mime_type(filename, mime_type):
    assert guess_audio_mime_type(filename) == mime_type
