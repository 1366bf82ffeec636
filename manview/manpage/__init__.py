"""Man page processing utilities."""
from __future__ import annotations

from .parser import strip_overstrike, clean_text
from .discovery import get_all_executables, get_man_page, get_help_text
from .loader import Page, PageSource, PageNotFoundError, load_page, annotate_page

__all__ = [
    'strip_overstrike',
    'clean_text',
    'get_all_executables',
    'get_man_page',
    'get_help_text',
    'Page',
    'PageSource',
    'PageNotFoundError',
    'load_page',
    'annotate_page',
]
