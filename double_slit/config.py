"""
Configuration
=============
Central place for the simulator's constants and the environment overrides
used by the Streamlit client and the REST API.

Environment:
    DOUBLE_SLIT_DB_PATH: SQLite file holding saved configurations.
    DOUBLE_SLIT_LOG_LEVEL: logging level name (DEBUG, INFO, ...).
    DOUBLE_SLIT_LOG_FILE: optional file that also receives the log.
    DOUBLE_SLIT_API_HOST / DOUBLE_SLIT_API_PORT: REST API bind address.
"""
import logging
import os
from typing import Optional

# ---------------- Physics defaults (nm, mm, cm) ----------------
DEFAULT_WAVELENGTH_NM = 500.0
DEFAULT_SEPARATION_MM = 0.5
DEFAULT_DISTANCE_CM = 100.0

# ---------------- Slider ranges: (min, max, step) ----------------
WAVELENGTH_RANGE_NM = (380.0, 750.0, 1.0)
SEPARATION_RANGE_MM = (0.05, 5.0, 0.01)
DISTANCE_RANGE_CM = (10.0, 200.0, 1.0)

# ---------------- Screen / numerics ----------------
# Physical width of the visualised screen, independent of pixel width
SCREEN_WIDTH_MM = 200.0
SCREEN_ASPECT = 0.6
VIEWPORT_WIDTHS_PX = (320, 480, 640, 960, 1280)
DEFAULT_VIEWPORT_WIDTH_PX = 640
MAX_VIEWPORT_WIDTH_PX = 1600

# ---------------- Storage / API ----------------
DEFAULT_DB_PATH = "configurations.db"
DEFAULT_API_HOST = "127.0.0.1"
DEFAULT_API_PORT = 5000


def get_database_path() -> str:
    """Path of the SQLite database, read from the environment on every call."""
    return os.environ.get("DOUBLE_SLIT_DB_PATH", DEFAULT_DB_PATH)


def get_log_level() -> int:
    name = os.environ.get("DOUBLE_SLIT_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.INFO


def get_log_file() -> Optional[str]:
    """Optional log file path; unset or empty means stdout only."""
    return os.environ.get("DOUBLE_SLIT_LOG_FILE") or None


def get_api_address():
    host = os.environ.get("DOUBLE_SLIT_API_HOST", DEFAULT_API_HOST)
    port = int(os.environ.get("DOUBLE_SLIT_API_PORT", DEFAULT_API_PORT))
    return host, port


def clamp_to_range(value: float, value_range) -> float:
    """Clamp a loaded value into a slider's (min, max, step) range."""
    lo, hi, _ = value_range
    return float(min(max(value, lo), hi))
