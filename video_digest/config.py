"""
Configuration settings for the Video Digest backend.
"""

import os
from typing import List
from pathlib import Path
from dotenv import load_dotenv

from video_digest.utils.logger import logging


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "Video Downloader Backend"
    APP_VERSION = "0.2.0"

    # Data directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    DOWNLOADS_DIR = Path(os.getenv("DOWNLOADS_DIR", str(BASE_DIR / "downloads")))

    # API keys
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")

    # Default models
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")

    # External download tool
    YTDLP_BINARY = os.getenv("YTDLP_BINARY", "yt-dlp")
    DEFAULT_VIDEO_FORMAT = "mp4"
    SUPPORTED_VIDEO_FORMATS: List[str] = ["mp4", "mkv", "webm"]

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3000"))
    CORS_ORIGINS: List[str] = os.getenv("CORS_ORIGINS", "*").split(",")

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        Path(cls.DOWNLOADS_DIR).mkdir(parents=True, exist_ok=True)

        # Validate required environment variables
        if not cls.GEMINI_API_KEY:
            logging.warning("GEMINI_API_KEY environment variable not set.")
            logging.warning("Please set it in the .env file or environment variables.")


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
