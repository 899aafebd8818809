"""
Standards Engine Settings

Environment-driven configuration for the resolution engine and its
override store. Values are read once at import time.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Override store connection
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///standards.db")

# Per-read timeout (seconds) for the state/district/school layer fetches.
# A read that times out is treated exactly like a failed read: empty layer.
STORE_READ_TIMEOUT_SECONDS = float(os.getenv("STANDARDS_STORE_TIMEOUT", "2.0"))

LOG_LEVEL = os.getenv("STANDARDS_LOG_LEVEL", "INFO")
