"""
Command-line entry point: summarize a video without running the server.
"""

import argparse
import json
from pathlib import Path
from typing import Optional

from video_digest.config import config
from video_digest.core.genai_client import create_genai_client
from video_digest.core.summarizer import TranscriptSummarizer
from video_digest.core.transcriber import AudioTranscriber
from video_digest.core.transcript_providers import build_transcript_resolver
from video_digest.models.schemas import TranscriptRequest
from video_digest.utils.logger import logging


def save_summary(result: dict, output_file: str) -> Path:
    """Save the transcript and summary to a JSON file."""
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(result, f, indent=2, ensure_ascii=False)

    logging.info(f"Summary saved to: {output_path}")
    return output_path


def summarize(url: Optional[str] = None, filename: Optional[str] = None, app_config=config) -> dict:
    """
    Resolve a transcript for a URL and/or stored file and summarize it.

    Args:
        url: Video URL
        filename: Name of an audio file in the downloads directory
        app_config: Configuration class

    Returns:
        Dict with "transcript" and "summary"
    """
    client = create_genai_client(app_config)
    transcriber = AudioTranscriber(client, model=app_config.GEMINI_MODEL)
    resolver = build_transcript_resolver(transcriber, app_config.DOWNLOADS_DIR)
    summarizer = TranscriptSummarizer(client, model=app_config.GEMINI_MODEL)

    transcript = resolver.resolve(TranscriptRequest(url=url, filename=filename))
    summary = summarizer.summarize(transcript)
    return {"transcript": transcript, "summary": summary}


def main():
    """Main function to run the summarizer from the command line."""
    parser = argparse.ArgumentParser(description="Summarize a YouTube video")
    parser.add_argument("url", nargs="?", help="YouTube video URL")
    parser.add_argument("--filename", help="Stored audio file in the downloads directory")
    parser.add_argument("--output", help="Output file path for the transcript and summary")

    args = parser.parse_args()
    if not args.url and not args.filename:
        parser.error("a URL or --filename is required")

    result = summarize(args.url, args.filename)

    if args.output:
        save_summary(result, args.output)

    print("\n" + "=" * 80)
    print(result["summary"])
    print("=" * 80)


if __name__ == "__main__":
    main()
