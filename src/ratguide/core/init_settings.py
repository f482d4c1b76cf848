"""
Initialize settings based on command-line arguments and environment.

Usage:
    # Import in main.py to get mode-aware settings
    from ratguide.core.init_settings import settings

    # Or run directly
    python -m ratguide.main --mode prod --host 0.0.0.0
"""
import os
import sys
import argparse
from ratguide.core.config import get_settings

DEFAULT_PORT = int(os.getenv("PORT", "3500"))

parser = argparse.ArgumentParser(description="Rat Food Guide API Server")
parser.add_argument(
    "--mode",
    choices=["dev", "prod"],
    default="dev",
    help="Running mode: dev (SQLite) or prod (PostgreSQL)"
)
parser.add_argument(
    "--host",
    type=str,
    default="127.0.0.1",
    help="Host to bind to"
)
parser.add_argument(
    "--port",
    type=int,
    default=DEFAULT_PORT,
    help="Port to bind to (default: $PORT or 3500)"
)

# Check if running under pytest or uvicorn reload
is_testing = "pytest" in sys.argv[0]
is_uvicorn = "uvicorn" in sys.argv[0]

if is_testing or is_uvicorn:
    mode = os.getenv("APP_MODE", "dev")
    args = argparse.Namespace(mode=mode, host="127.0.0.1", port=DEFAULT_PORT)
else:
    # parse_known_args so `python -m ratguide.db.seed --reset` can share this module
    args, _ = parser.parse_known_args()

settings = get_settings(args.mode)

__all__ = ["settings", "args"]
