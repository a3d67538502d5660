"""
Configuration constants and environment setup.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent
DB_PATH = PROJECT_ROOT / "data" / "db" / "timetable.db"
OUTPUT_DIR = PROJECT_ROOT / "output"

# =============================================================================
# TIME TABLE CONFIGURATION
# =============================================================================

DEFAULT_PROJECT_COLOR = "#cccccc"  # Used when a project is unknown or has no color

DATE_FORMAT = "%Y-%m-%d"  # Day bucket key, e.g. "2024-01-01"
TIME_FORMAT = "%H:%M"  # Zero-padded 24-hour clock, e.g. "09:05"
TIME_RANGE_SEPARATOR = " - "

# IANA zone name used to derive dates and clock times. Empty means the
# machine's local timezone.
DISPLAY_TIMEZONE = os.environ.get("DISPLAY_TIMEZONE", "")

# =============================================================================
# REPORT CONFIGURATION
# =============================================================================

TIMETABLE_SHEET_NAME = "Time Table"
TIMETABLE_HEADERS = ["Date", "Time", "Description", "Project ID", "Color"]
TIMETABLE_COLUMN_WIDTHS = [12, 15, 48, 14, 10]

# =============================================================================
# API CONFIGURATION
# =============================================================================

TIMETABLE_API_KEY = os.environ.get("TIMETABLE_API_KEY", "")
API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
API_VERSION = "1.0.0"
