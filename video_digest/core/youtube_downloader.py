"""
YouTube video and audio downloader module.

Downloads are delegated to the yt-dlp command-line tool. The command is always
built as an argument list and the URL is placed after ``--`` so user input is
never interpreted by a shell or as a yt-dlp option.
"""

import os
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from video_digest.models.schemas import DownloadResult, MediaType
from video_digest.utils.error_handling import DownloadError
from video_digest.utils.helpers import format_file_size, timestamp_ms
from video_digest.utils.logger import logging

MP4_FORMAT_SELECTOR = "bestvideo[ext=mp4]+bestaudio[ext=m4a]/mp4"
GENERIC_FORMAT_SELECTOR = "bestvideo+bestaudio/best"


class YouTubeDownloader:
    """Class to handle downloading YouTube videos and audio."""

    def __init__(self, output_directory: Union[str, Path], binary: str = "yt-dlp"):
        """
        Initialize the downloader.

        Args:
            output_directory: Flat directory downloaded files are written to
            binary: yt-dlp executable name or path
        """
        self.output_directory = Path(output_directory)
        self.binary = binary

    def _get_filename(self, prefix: str, extension: str) -> str:
        """
        Generate a timestamped filename.

        Args:
            prefix: "video" or "audio"
            extension: File extension (e.g., 'mp3', 'mp4')

        Returns:
            Bare filename inside the output directory
        """
        return f"{prefix}_{timestamp_ms()}.{extension}"

    def build_video_command(self, url: str, output_path: str, video_format: str) -> List[str]:
        selector = MP4_FORMAT_SELECTOR if video_format == "mp4" else GENERIC_FORMAT_SELECTOR
        return [
            self.binary,
            "-f", selector,
            "--merge-output-format", video_format,
            "--no-playlist",
            "-o", output_path,
            "--", url,
        ]

    def build_audio_command(self, url: str, output_path: str) -> List[str]:
        return [
            self.binary,
            "-x",
            "--audio-format", "mp3",
            "--no-playlist",
            "-o", output_path,
            "--", url,
        ]

    def _run(self, command: List[str], description: str) -> None:
        logging.debug(f"Running: {command}")
        try:
            subprocess.run(command, check=True, capture_output=True, text=True)
        except subprocess.CalledProcessError as e:
            logging.error(f"{description} error (exit {e.returncode}): {e.stderr}")
            raise DownloadError(f"{description} failed") from e
        except OSError as e:
            logging.error(f"{description} error: could not run {self.binary}: {str(e)}")
            raise DownloadError(f"{description} failed") from e

    def _result(self, media_type: MediaType, filename: str, output_path: str) -> DownloadResult:
        size = os.path.getsize(output_path) if os.path.exists(output_path) else None
        logging.info(f"Downloaded: {output_path} ({format_file_size(size)})")
        return DownloadResult(media_type=media_type, filename=filename, path=output_path)

    def download_video(self, url: str, video_format: Optional[str] = None) -> DownloadResult:
        """
        Download a video with merged audio.

        Args:
            url: Video URL
            video_format: Container to merge into (default mp4)

        Returns:
            DownloadResult describing the stored file
        """
        video_format = video_format or "mp4"
        self.output_directory.mkdir(parents=True, exist_ok=True)

        filename = self._get_filename("video", video_format)
        output_path = str(self.output_directory / filename)

        logging.info(f"Downloading video: {url}")
        self._run(self.build_video_command(url, output_path, video_format), "Download")
        return self._result(MediaType.VIDEO, filename, output_path)

    def download_audio(self, url: str) -> DownloadResult:
        """
        Download the audio track as mp3.

        Args:
            url: Video URL

        Returns:
            DownloadResult describing the stored file
        """
        self.output_directory.mkdir(parents=True, exist_ok=True)

        filename = self._get_filename("audio", "mp3")
        output_path = str(self.output_directory / filename)

        logging.info(f"Downloading audio: {url}")
        self._run(self.build_audio_command(url, output_path), "Audio download")
        return self._result(MediaType.AUDIO, filename, output_path)

