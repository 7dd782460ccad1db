"""
Settings and configuration for conjugador.

Values come from environment variables, with defaults under the package
data directory.
"""

import os
from pathlib import Path

# Data directory paths
PACKAGE_DIR = Path(__file__).parent
DATA_DIR = PACKAGE_DIR / "data"

# Paradigm store - defaults to data/conjugador.db
DEFAULT_DB_PATH = DATA_DIR / "conjugador.db"

# Environment variable for custom database path
DB_PATH = Path(os.environ.get("CONJUGADOR_DB_PATH", DEFAULT_DB_PATH))

# Debug mode (DEBUG-level logging in the CLI)
DEBUG = os.environ.get("CONJUGADOR_DEBUG", "").lower() in ("1", "true", "yes")

# Rows inserted between commits when loading paradigms
BATCH_SIZE = int(os.environ.get("CONJUGADOR_BATCH_SIZE", "5000"))

# Log format used by the CLI
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
