"""
Fixture configuration - data directory layout and snapshot timing.
"""

import os
from pathlib import Path
from typing import Union

# Data directory layout under a home directory
# Processes started against a fixture home look for $HOME/.observer/observer.db
DATA_DIR_NAME = ".observer"
DB_FILE_NAME = "observer.db"
LOG_FILE_NAME = "observer.log"
DATA_DIR_MODE = 0o755

# Store connection tuning
STORE_BUSY_TIMEOUT_MS = int(os.getenv("OBSERVER_STORE_BUSY_TIMEOUT_MS", "5000"))

# Snapshot reader timing and buffer sizes
SNAPSHOT_DEADLINE_SEC = 0.05
SNAPSHOT_CHUNK_SIZE = 4096

# Environment passed to processes started against a fixture home
E2E_ENV_FLAG = "OBSERVER_E2E"

DEBUG = os.getenv("DEBUG", "false").lower() == "true"


def data_dir(home: Union[str, Path]) -> Path:
    """Data directory for a given home directory."""
    return Path(home) / DATA_DIR_NAME


def db_path(home: Union[str, Path]) -> Path:
    """Store database file for a given home directory."""
    return data_dir(home) / DB_FILE_NAME


def log_path(home: Union[str, Path]) -> Path:
    return data_dir(home) / LOG_FILE_NAME


def debug_enabled():
    """Check if debug mode is enabled."""
    return DEBUG


def get_snapshot_deadline():
    """Get the snapshot read deadline in seconds."""
    return SNAPSHOT_DEADLINE_SEC
