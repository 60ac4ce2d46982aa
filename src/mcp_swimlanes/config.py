"""
Configuration from environment.

Values are read when used so the CLI can set them before the server starts.
"""

import os
from pathlib import Path

DEFAULT_API_BASE = "https://api.swimlanes.io/v1"
DEFAULT_LOG_LEVEL = "INFO"

# Follow at most this many redirects when fetching rendered images
MAX_IMAGE_REDIRECTS = 5


def project_dir() -> Path:
    """Directory that relative output paths are resolved against."""
    return Path(os.environ.get("MCP_PROJECT_DIR", os.getcwd())).resolve()


def api_base() -> str:
    return os.environ.get("SWIMLANES_API_BASE", DEFAULT_API_BASE).rstrip("/")


def log_level() -> str:
    return os.environ.get("SWIMLANES_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
