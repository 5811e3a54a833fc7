"""Centralized file path configuration.

All file paths used by the browser are defined here for easy maintenance
and testing.
"""

from pathlib import Path

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Environment file (API token and overrides)
ENV_FILE = PROJECT_ROOT / ".env"

# Snapshot files (one JSON file per API endpoint)
SNAPSHOT_DIR = PROJECT_ROOT / "snapshots"

# Log files (stored in project root)
LOG_FILE = PROJECT_ROOT / "esports.log"
