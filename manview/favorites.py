"""Favorites store: the set of programs a user has starred in the listing."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Set

from .config import FAVORITES_FILE

logger = logging.getLogger(__name__)


def _parse_favorites(data) -> Set[str]:
    """Extract the program names from a decoded favorites document."""
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    names = data.get('favorites', [])
    if not isinstance(names, list) or not all(isinstance(name, str) for name in names):
        raise ValueError("'favorites' must be a list of program names")
    return set(names)


class FavoritesManager:
    """Starred programs, written back to a JSON file on every change."""

    def __init__(self, path: Optional[Path] = None):
        self._path = path if path is not None else FAVORITES_FILE
        self._favorites: Set[str] = set()
        self._load()

    def _load(self):
        if not self._path.exists():
            return
        try:
            with open(self._path, 'r', encoding='utf-8') as f:
                self._favorites = _parse_favorites(json.load(f))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable favorites file %s: %s", self._path, e)
            self._favorites = set()

    def _save(self):
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, 'w', encoding='utf-8') as f:
                json.dump({'favorites': sorted(self._favorites)}, f, indent=2)
        except OSError as e:
            logger.warning("Could not save favorites to %s: %s", self._path, e)

    def _mark(self, program: str, starred: bool):
        if starred == (program in self._favorites):
            return
        if starred:
            self._favorites.add(program)
        else:
            self._favorites.remove(program)
        self._save()

    def add(self, program: str):
        self._mark(program, True)

    def remove(self, program: str):
        self._mark(program, False)

    def toggle(self, program: str) -> bool:
        """Flip the star on `program` and return whether it is now starred."""
        starred = not self.is_favorite(program)
        self._mark(program, starred)
        return starred

    def is_favorite(self, program: str) -> bool:
        return program in self._favorites

    def get_all(self) -> Set[str]:
        """Return a snapshot of the starred programs."""
        return set(self._favorites)

    def clear(self):
        if self._favorites:
            self._favorites = set()
            self._save()
