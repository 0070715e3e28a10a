"""
Task Store API Launcher

Starts the REST API server for the in-memory task list.

Usage:
    python start_api.py
    python start_api.py --port 3001
    python start_api.py --host 127.0.0.1 --port 9000 --log-level DEBUG
"""

import argparse
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from task_store.config import ConfigProperties, SETTINGS
from task_store.utils.exceptions import ConfigurationError


def build_banner(port: int) -> str:
    """Startup banner listing every endpoint served on *port*."""
    from api.server import ENDPOINTS

    lines = [
        "",
        "╔══════════════════════════════════════════════════════════╗",
        "║                    Task Store API                        ║",
        "╚══════════════════════════════════════════════════════════╝",
        f"  SERVER: http://localhost:{port}",
        "  Endpoints:",
    ]
    for method, path in ENDPOINTS:
        lines.append(f"    {method:<7}http://localhost:{port}{path}")
    return "\n".join(lines) + "\n"


def main():
    parser = argparse.ArgumentParser(description="Task Store API")
    parser.add_argument("--host", default=None, help="Host to bind (default: server.host, 0.0.0.0)")
    parser.add_argument("--port", type=int, default=None, help="Port to bind (default: server.port, 3000)")
    parser.add_argument("--log-level", default=None, help="Log level override (DEBUG, INFO, ...)")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    args = parser.parse_args()

    # Set before api.server is imported; the --reload worker inherits the environment
    if args.log_level:
        os.environ[SETTINGS["logging.level"][0]] = args.log_level.upper()

    try:
        host = args.host or ConfigProperties.get_server_host()
        port = args.port or ConfigProperties.get_server_port()
    except ConfigurationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    import uvicorn

    print(build_banner(port))

    uvicorn.run(
        "api.server:app",
        host=host,
        port=port,
        reload=args.reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()
