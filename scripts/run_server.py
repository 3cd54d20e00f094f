"""Run the TrackCoach API with uvicorn."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import uvicorn

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from trackcoach.config import get_settings


def main() -> None:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Run the TrackCoach API server")
    parser.add_argument("--host", default=settings.app_host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.app_port, help="Port to listen on")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    args = parser.parse_args()

    uvicorn.run(
        "trackcoach.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload or settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
