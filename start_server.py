#!/usr/bin/env python3
"""Launch the User Management API.

Usage:
    ./start_server.py              # Start server with settings from the environment
    ./start_server.py --port 8080  # Use custom port
    ./start_server.py --reload     # Restart on code changes (development)
"""

import argparse
import sys

from userapi.config import ConfigurationError, Settings


def main():
    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    parser = argparse.ArgumentParser(description="Launch User Management API")
    parser.add_argument("--port", type=int, default=settings.port,
                        help=f"Server port (default: {settings.port})")
    parser.add_argument("--host", default=settings.host,
                        help=f"Server host (default: {settings.host})")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    try:
        import uvicorn
    except ImportError:
        print("""
ERROR: Server dependencies not installed.

Install them with:
    pip install -e .
""")
        sys.exit(1)

    print(f"User Management API running at http://{args.host}:{args.port} ({settings.environment} mode)")
    print("Press Ctrl+C to stop")

    uvicorn.run(
        "userapi.server:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
