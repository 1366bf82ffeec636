"""Loading a program's documentation and annotating it."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..config import Settings
from ..formatting import FormatResult, TagSpan, classify, classify_help
from .discovery import get_help_text, get_man_page
from .parser import strip_overstrike

logger = logging.getLogger(__name__)


class PageNotFoundError(LookupError):
    """Raised when neither a man page nor --help output is available."""

    def __init__(self, program: str, tried_help: bool = False):
        self.program = program
        self.tried_help = tried_help
        if tried_help:
            message = f"No man page or --help output for '{program}'"
        else:
            message = f"No manual entry for '{program}'"
        super().__init__(message)


class PageSource(Enum):
    """Where the text of a page came from."""
    MAN = "man"
    HELP = "help"


@dataclass
class Page:
    """Cleaned documentation text for one program."""
    program: str
    text: str
    source: PageSource
    bold_spans: List[TagSpan] = field(default_factory=list)


def load_page(program: str, settings: Optional[Settings] = None) -> Page:
    """Fetch the man page for a program, falling back to --help if enabled.

    Raises:
        PageNotFoundError: if no documentation could be obtained
    """
    if settings is None:
        settings = Settings.load()

    raw = get_man_page(program)
    if raw is not None:
        text, bold_spans = strip_overstrike(raw)
        return Page(program, text, PageSource.MAN, bold_spans)

    if not settings.enable_help_fallback:
        raise PageNotFoundError(program)

    logger.info("No man page for %s, running --help", program)
    raw = get_help_text(program)
    if raw is None:
        raise PageNotFoundError(program, tried_help=True)

    text, bold_spans = strip_overstrike(raw)
    return Page(program, text, PageSource.HELP, bold_spans)


def annotate_page(page: Page) -> FormatResult:
    """Classify a page with the rule set matching its source."""
    if page.source is PageSource.HELP:
        return FormatResult(classify_help(page.text), {})
    return classify(page.text, page.program)
