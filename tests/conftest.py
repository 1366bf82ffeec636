from __future__ import annotations

import pytest


class FakeTextBuffer:
    """Records every tag applied to it."""

    def __init__(self, text: str):
        self.text = text
        self.applied: list[tuple[str, int, int]] = []

    def apply_tag(self, tag_name: str, start: int, end: int) -> None:
        self.applied.append((tag_name, start, end))

    def tagged(self, tag_name: str) -> list[str]:
        return [self.text[s:e] for name, s, e in self.applied if name == tag_name]


@pytest.fixture
def text_buffer():
    """Factory for recording text buffers."""
    return FakeTextBuffer


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point every store at a temporary directory."""
    monkeypatch.setattr("manview.config.SETTINGS_FILE", tmp_path / "settings.conf")
    monkeypatch.setattr("manview.favorites.FAVORITES_FILE", tmp_path / "favorites.json")
    monkeypatch.setattr("manview.notes.NOTES_DIR", tmp_path / "notes")
    return tmp_path
