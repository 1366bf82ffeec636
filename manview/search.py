"""Program list filtering and find-in-page."""
from __future__ import annotations

from typing import Iterable, List, Tuple


def filter_programs(programs: Iterable[str], query: str) -> List[str]:
    """Keep programs whose name contains the query, ignoring case."""
    needle = query.strip().lower()
    if not needle:
        return list(programs)
    return [p for p in programs if needle in p.lower()]


def find_in_page(text: str, term: str) -> List[Tuple[int, int]]:
    """Find non-overlapping case-insensitive occurrences of a term.

    Returns:
        List of (start, end) offsets into text
    """
    if not term:
        return []

    haystack = text.lower()
    needle = term.lower()
    matches = []
    index = haystack.find(needle)
    while index != -1:
        matches.append((index, index + len(needle)))
        index = haystack.find(needle, index + len(needle))
    return matches


def matching_lines(text: str, term: str) -> List[Tuple[int, str]]:
    """Get (line_number, line) for every line containing the term (1-based)."""
    if not term:
        return []
    needle = term.lower()
    return [
        (number, line)
        for number, line in enumerate(text.split('\n'), 1)
        if needle in line.lower()
    ]
