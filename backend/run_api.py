#!/usr/bin/env python
"""
Run the kosync API server.

Usage:
    python run_api.py
    python run_api.py --reload            # Development mode
    python run_api.py --store supabase    # Persistent store
"""

import argparse
import os

import uvicorn

from shared.config import get_settings


def main():
    parser = argparse.ArgumentParser(description="Run kosync API server")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", type=str, help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to bind to")
    parser.add_argument(
        "--store",
        choices=["memory", "supabase"],
        help="Store backend (overrides KOSYNC_STORE_BACKEND)",
    )
    args = parser.parse_args()

    if args.store:
        # Settings are read in the server process (and reloader children)
        os.environ["KOSYNC_STORE_BACKEND"] = args.store
        get_settings.cache_clear()

    settings = get_settings()

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level=settings.log_level.lower(),
        proxy_headers=True,
    )


if __name__ == "__main__":
    main()
