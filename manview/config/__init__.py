"""Configuration and constants for manview."""
from __future__ import annotations

import os
from pathlib import Path

from .settings import Settings

# Paths
MANVIEW_DIR = Path(os.environ.get('MANVIEW_HOME', Path.home() / ".config" / "manview"))

SETTINGS_FILE = MANVIEW_DIR / "settings.conf"
FAVORITES_FILE = MANVIEW_DIR / "favorites.json"
NOTES_DIR = MANVIEW_DIR / "notes"

# Directories scanned for installed programs
DEFAULT_BIN_DIRS = ['/bin', '/usr/bin', '/usr/local/bin', '/sbin', '/usr/sbin']

# Process invocation
MANWIDTH = '120'
MAN_TIMEOUT = 5  # seconds
HELP_TIMEOUT = 3  # seconds

__all__ = [
    'Settings',
    'MANVIEW_DIR',
    'SETTINGS_FILE',
    'FAVORITES_FILE',
    'NOTES_DIR',
    'DEFAULT_BIN_DIRS',
    'MANWIDTH',
    'MAN_TIMEOUT',
    'HELP_TIMEOUT',
]
