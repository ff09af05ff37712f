#!/usr/bin/env python
"""
Run the DevConnect API server.

Usage:
    python run_api.py
    python run_api.py --reload --port 5000
"""

import argparse
import uvicorn

from shared.config import get_settings


def main():
    parser = argparse.ArgumentParser(description="Run DevConnect API server")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    parser.add_argument("--host", type=str, help="Interface to bind")
    parser.add_argument("--port", type=int, help="Port to listen on")
    args = parser.parse_args()

    settings = get_settings()

    uvicorn.run(
        "api.app:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
