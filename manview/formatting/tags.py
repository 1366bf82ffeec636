"""Tag kinds, spans and the default visual style for each kind."""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, NamedTuple, Optional


class TagKind(Enum):
    """Semantic categories emitted by the annotators."""
    HEADER = "header"
    COMMAND = "command"
    OPTION = "option"
    ARGUMENT = "argument"
    BOLD = "bold"
    FILE_PATH = "filePath"
    URL = "url"
    MAN_REFERENCE = "manReference"


class TagSpan(NamedTuple):
    """Half-open offset range [start, end) carrying one tag kind."""
    kind: TagKind
    start: int
    end: int

    def slice(self, text: str) -> str:
        """Return the part of `text` covered by this span."""
        return text[self.start:self.end]


@dataclass
class TagStyle:
    """How a rendering sink should paint one tag kind."""
    name: str
    foreground: Optional[str] = None
    background: Optional[str] = None
    bold: bool = False
    italic: bool = False
    underline: bool = False
    scale: float = 1.0


DEFAULT_TAG_STYLES: Dict[TagKind, TagStyle] = {
    TagKind.HEADER: TagStyle(TagKind.HEADER.value, foreground="#2E86AB", bold=True, scale=1.3),  # blue
    TagKind.COMMAND: TagStyle(TagKind.COMMAND.value, foreground="#A23B72", bold=True),  # purple
    TagKind.OPTION: TagStyle(TagKind.OPTION.value, foreground="#F18F01", bold=True),  # orange
    TagKind.ARGUMENT: TagStyle(TagKind.ARGUMENT.value, foreground="#C73E1D", italic=True),  # red
    TagKind.BOLD: TagStyle(TagKind.BOLD.value, bold=True),
    TagKind.FILE_PATH: TagStyle(TagKind.FILE_PATH.value, foreground="#06A77D", underline=True),  # teal
    TagKind.URL: TagStyle(TagKind.URL.value, foreground="#0077CC", underline=True),
    TagKind.MAN_REFERENCE: TagStyle(TagKind.MAN_REFERENCE.value, foreground="#0077CC", underline=True),
}


def get_default_tag_styles() -> Dict[str, TagStyle]:
    """Get a fresh copy of the default styles, keyed by tag name."""
    return {kind.value: replace(style) for kind, style in DEFAULT_TAG_STYLES.items()}
