"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps application identity, timing and font settings out
   of the widgets.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find bundled assets (the clock font) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    FONT_PATH (str): Absolute path to the optional clock face font.
    TIMER_INTERVAL_MS (int): Real-time period of one tickule.
    LOG_LEVEL (int): Default logging level, overridable via HUBCLOCK_LOG_LEVEL.
"""
import logging
import sys
import os
from pathlib import Path

from hubclock.model.codec import SECONDS_PER_TICKULE


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/hubclock/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


def get_log_level(default: int = logging.INFO) -> int:
    """Resolve HUBCLOCK_LOG_LEVEL (a level name such as DEBUG) to a number."""
    name = os.environ.get("HUBCLOCK_LOG_LEVEL", "").strip().upper()
    level = logging.getLevelName(name) if name else default
    return level if isinstance(level, int) else default


# Application identity
ORG_ID = "elushae"
ORG_DOMAIN = "hubclock.local"
APP_ID = "hubclock"
VISIBLE_APP_NAME = "Hub Clock"

# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
FONT_PATH: str = os.path.join(ASSETS_PATH, "fonts", "digital-7-mono.ttf")
FONT_FAMILY: str = "Digital-7 Mono"
CYCLE_FONT_SIZE: int = 60
TIME_FONT_SIZE: int = 80

TIMER_INTERVAL_MS: int = round(SECONDS_PER_TICKULE * 1000)
LOG_LEVEL: int = get_log_level()
