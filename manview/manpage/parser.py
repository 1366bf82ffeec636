"""Cleaning of raw man/help output before it is annotated."""
from __future__ import annotations

import re
from typing import List, Tuple

from ..formatting import TagKind, TagSpan

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


def _is_control(char: str) -> bool:
    return (char < ' ' and char not in '\n\t') or char == '\x7f'


def strip_overstrike(raw: str) -> Tuple[str, List[TagSpan]]:
    """Remove terminal formatting from man output.

    Overstruck characters (``c\\bc``) are kept once and reported as BOLD
    spans; underlined ones (``_\\bc``) are kept as plain text. ANSI escapes
    and other control characters are dropped.

    Returns:
        (clean_text, bold_spans) with span offsets into clean_text
    """
    text = ANSI_ESCAPE_RE.sub('', raw)

    result: List[str] = []
    bold: List[bool] = []
    i = 0
    while i < len(text):
        char = text[i]

        if (i + 2 < len(text) and text[i + 1] == '\b'
                and not _is_control(char) and not _is_control(text[i + 2])
                and '\n' not in (char, text[i + 2])):
            second = text[i + 2]
            is_bold = char == second
            if second == '_' and char != '_':
                second = char
            i += 3
            # Repeated strikes, e.g. "a\ba\ba"
            while i + 1 < len(text) and text[i] == '\b':
                i += 2
            result.append(second)
            bold.append(is_bold)
            continue

        if char == '\b':
            if result:
                result.pop()
                bold.pop()
        elif not _is_control(char):
            result.append(char)
            bold.append(False)
        i += 1

    spans: List[TagSpan] = []
    start = None
    for offset, is_bold in enumerate(bold + [False]):
        if is_bold and start is None:
            start = offset
        elif not is_bold and start is not None:
            spans.append(TagSpan(TagKind.BOLD, start, offset))
            start = None

    return ''.join(result), spans


def clean_text(raw: str) -> str:
    """Return `raw` without any terminal formatting."""
    return strip_overstrike(raw)[0]
