"""Semantic tagging of man pages and help text."""
from __future__ import annotations

from .tags import TagKind, TagSpan, TagStyle, DEFAULT_TAG_STYLES, get_default_tag_styles
from .annotator import FormatResult, classify, classify_help
from .sink import TextSink, apply_spans, format_man_page, format_help_text, tagged_text

__all__ = [
    'TagKind',
    'TagSpan',
    'TagStyle',
    'DEFAULT_TAG_STYLES',
    'get_default_tag_styles',
    'FormatResult',
    'classify',
    'classify_help',
    'TextSink',
    'apply_spans',
    'format_man_page',
    'format_help_text',
    'tagged_text',
]
