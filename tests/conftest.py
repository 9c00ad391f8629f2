"""
Configuration for pytest tests.
"""

import os
import tempfile

# Keep logs and the default downloads directory out of the project tree
_test_root = tempfile.mkdtemp(prefix="video_digest_tests_")
os.environ.setdefault("LOG_DIR", os.path.join(_test_root, "logs"))
os.environ.setdefault("DOWNLOADS_DIR", os.path.join(_test_root, "downloads"))
os.environ.setdefault("ENVIRONMENT", "development")

import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from video_digest.api.app import create_app
from video_digest.config import DevelopmentConfig


@pytest.fixture
def app_config(tmp_path):
    """Configuration pointing at a per-test downloads directory."""
    downloads = tmp_path / "downloads"

    class TestConfig(DevelopmentConfig):
        DOWNLOADS_DIR = downloads
        GEMINI_API_KEY = "test_api_key"
        GEMINI_MODEL = "gemini-test"
        YTDLP_BINARY = "yt-dlp"

    TestConfig.initialize()
    return TestConfig


@pytest.fixture
def downloads_dir(app_config):
    return app_config.DOWNLOADS_DIR


def gemini_response(text):
    response = MagicMock()
    response.text = text
    return response


@pytest.fixture
def mock_genai_client():
    """Fixture to mock the Gemini client."""
    client = MagicMock()
    client.models.generate_content.return_value = gemini_response("This is a mocked Gemini answer.")
    return client


@pytest.fixture
def client(app_config, mock_genai_client):
    """Test client for an app wired to the mocked Gemini client."""
    app = create_app(app_config, genai_client=mock_genai_client)
    return TestClient(app)


@pytest.fixture
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
