"""Per-program notes, stored as one text file per program."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional

from .config import NOTES_DIR

logger = logging.getLogger(__name__)


class NotesRepository:
    """Stores and retrieves notes for programs.

    Notes live in `<notes_dir>/<program>.txt`. Saving blank content removes
    the file. Status callbacks are notified with the program name whenever a
    notes file is created or deleted, so a UI can show or hide its marker.
    """

    def __init__(self, notes_dir: Optional[Path] = None):
        self._notes_dir = Path(notes_dir) if notes_dir is not None else NOTES_DIR
        self._status_callbacks: List[Callable[[str], None]] = []

    @property
    def notes_dir(self) -> Path:
        return self._notes_dir

    def add_status_callback(self, callback: Callable[[str], None]):
        """Add a callback to be notified when a program gains or loses notes."""
        self._status_callbacks.append(callback)

    def _notify(self, program: str):
        for callback in list(self._status_callbacks):
            callback(program)

    def get_notes_path(self, program: str) -> Path:
        """Get the notes file path for a program."""
        return self._notes_dir / f"{program}.txt"

    def load(self, program: str) -> str:
        """Load notes for a program, or an empty string if there are none."""
        path = self.get_notes_path(program)
        try:
            if path.exists():
                return path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error loading notes for %s: %s", program, e)
        return ""

    def save(self, program: str, content: str):
        """Save notes for a program. Blank content deletes existing notes."""
        path = self.get_notes_path(program)
        had_notes = path.exists()

        try:
            if content.strip():
                self._notes_dir.mkdir(parents=True, exist_ok=True)
                path.write_text(content, encoding='utf-8')
                if not had_notes:
                    self._notify(program)
            elif had_notes:
                path.unlink()
                self._notify(program)
        except OSError as e:
            logger.error("Error saving notes for %s: %s", program, e)

    def has_notes(self, program: str) -> bool:
        """Check if notes exist for a program."""
        return self.get_notes_path(program).exists()

    def delete(self, program: str) -> bool:
        """Delete notes for a program. Returns True if a file was removed."""
        path = self.get_notes_path(program)
        try:
            if path.exists():
                path.unlink()
                self._notify(program)
                return True
        except OSError as e:
            logger.error("Error deleting notes for %s: %s", program, e)
        return False
