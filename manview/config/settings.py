"""User settings persisted as a simple key=value file."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Viewer settings.

    Help fallback is off by default since it executes arbitrary programs.
    """
    enable_help_fallback: bool = False
    use_single_click: bool = False

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        """Load settings from disk, falling back to defaults."""
        if path is None:
            from . import SETTINGS_FILE
            path = SETTINGS_FILE

        settings = cls()
        if not path.exists():
            return settings

        try:
            lines = path.read_text(encoding='utf-8').splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read settings from %s: %s", path, e)
            return settings

        for line in lines:
            parts = line.split('=')
            if len(parts) != 2:
                continue
            key = parts[0].strip()
            value = parts[1].strip().lower() == 'true'

            if key == 'EnableHelpFallback':
                settings.enable_help_fallback = value
            elif key == 'UseSingleClick':
                settings.use_single_click = value

        return settings

    def save(self, path: Optional[Path] = None):
        """Save settings to disk."""
        if path is None:
            from . import SETTINGS_FILE
            path = SETTINGS_FILE

        content = (
            f"EnableHelpFallback={self.enable_help_fallback}\n"
            f"UseSingleClick={self.use_single_click}\n"
        )
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding='utf-8')
        except OSError as e:
            logger.warning("Could not save settings to %s: %s", path, e)
