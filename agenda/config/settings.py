"""
Global settings loaded from environment variables.

All settings have sensible defaults so the terminal works out of the box.
Override via environment variables.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent.parent.resolve()

# =============================================================================
# Terminal
# =============================================================================
MENU_WIDTH = int(os.getenv("MENU_WIDTH", "30"))

# =============================================================================
# Logging
# =============================================================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "")
VERBOSE = os.getenv("VERBOSE", "false").lower() in ("true", "1", "yes")
