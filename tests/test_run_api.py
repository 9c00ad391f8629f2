"""
Tests for the server launcher.
"""

from unittest.mock import patch

import run_api
from video_digest.config import config


def test_main_runs_uvicorn():
    with patch("run_api.uvicorn.run") as mock_run:
        run_api.main(["--port", "8123"])

    args, kwargs = mock_run.call_args
    assert args == ("video_digest.api.app:app",)
    assert kwargs["port"] == 8123
    assert kwargs["host"] == config.HOST
    assert kwargs["reload"] is False
