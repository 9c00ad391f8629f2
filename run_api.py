"""
Start the Video Digest API with uvicorn.
"""

import argparse
import os

import uvicorn

from video_digest.config import config


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Video Digest API")
    parser.add_argument("--host", default=config.HOST, help="Interface to bind (default from HOST)")
    parser.add_argument("--port", type=int, default=config.PORT, help="Port to listen on (default from PORT)")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    return parser.parse_args(argv)


def main(argv=None):
    """Run the FastAPI server. Environment comes from .env via video_digest.config."""
    args = parse_args(argv)

    print(f"{config.APP_NAME} v{config.APP_VERSION} "
          f"({os.getenv('ENVIRONMENT', 'development')}) on http://{args.host}:{args.port}")

    uvicorn.run(
        "video_digest.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=getattr(config, "LOG_LEVEL", "INFO").lower(),
    )


if __name__ == "__main__":
    main()
