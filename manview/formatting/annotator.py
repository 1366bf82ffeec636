"""Semantic tagging of formatted man pages and --help output.

Both annotators are pure functions of their input text: they never touch a
rendering surface and never raise. A classification pass walks the document
line by line and emits `TagSpan`s with absolute offsets into the whole text.

Spans are not deduplicated. Within a line they are emitted in a fixed order
(header or command first, then option, argument, url, file path and man
reference), and sinks should apply them in that order so that later kinds win
where they overlap.
"""
from __future__ import annotations

import re
import string
import unicodedata
from dataclasses import dataclass
from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple

from .tags import TagKind, TagSpan


# Man page rules
HEADER_RE = re.compile(r"[A-Z][A-Z\s]+")
FIRST_WORD_RE = re.compile(r"\s*(\S+)")
# Running header/footer such as "LS(1)   User Commands   LS(1)"
RUNNING_HEADER_RE = re.compile(r"\S+\(\d+\).*\S+\(\d+\)\s*$")

# Options: -x, -?, -arj, --opt, --opt=value, -x=[a|b]. A bracket group without
# '=' (e.g. -productv[ersion]) documents an abbreviation and is left out.
OPTION_RE = re.compile(
    r"(?:^|(?<=[\s\[{|,]))"
    r"(?:-[-a-zA-Z0-9?]+(?:=\[[^\]]+\]|=[^\s,\[\]]+)?"
    r"|--[a-zA-Z][-a-zA-Z0-9\u2010]*(?:=\[[^\]]+\]|=[^\s,\[\]]+)?)"
    r"(?=[\s,\[\]{}|]|$)"
)

# Argument placeholders, tried in order at each position:
#   <FILE>, FILE_NAME, "x, ", snake_or-dashed, and the word after "-o ".
# The last alternative needs a variable-width lookbehind, so it is captured
# as `operand` and checked by `_follows_option`.
ARGUMENT_RE = re.compile(
    r"<[A-Z_][A-Z_0-9]*>"
    r"|(?<![a-zA-Z])[A-Z][A-Z_0-9]+(?![a-zA-Z])"
    r"|(?:^|(?<=\s))[a-z](?=,\s)"
    r"|(?:^|(?<=\s))[a-z][a-z0-9]*[_\-][a-z0-9_\-:<>\[\]]*"
    r"|(?<=\s)(?P<operand>[a-z][a-z0-9\-:<>\[\]]*)"
)
OPTION_CHARS = frozenset(string.ascii_letters + string.digits + "?")

URL_RE = re.compile(r"https?://[^\s<>\[\]]+")
FILE_PATH_RE = re.compile(r"(?:^|\s)(~?/[/\w\-.]+)")
MAN_REFERENCE_RE = re.compile(r"([a-zA-Z0-9_\-.]+)\(\d+\)")

# Help text rules
KEY_HINT_RE = re.compile(r"^\s+([+\-]|Enter|Return|Letters)\s+(key|-)\s")
HELP_FILE_PATH_RE = re.compile(r"/[^\s]+|~/[^\s]+")
HELP_URL_RE = re.compile(r"https?://[^\s]+")
HELP_PATH_MARKERS = ('~/.config/', '/home/')


class FormatResult(NamedTuple):
    """Output of a man page classification pass."""
    spans: List[TagSpan]
    references: Dict[Tuple[int, int], str]


@dataclass
class _SectionState:
    in_name: bool = False
    in_synopsis: bool = False
    in_see_also: bool = False

    def enter(self, header: str):
        title = header.strip()
        self.in_see_also = title == "SEE ALSO"
        self.in_name = title == "NAME"
        self.in_synopsis = title == "SYNOPSIS"


def _is_word_boundary(char: str) -> bool:
    return char.isspace() or unicodedata.category(char).startswith('P')


def _subject_occurrences(line: str, subject: str) -> Iterator[Tuple[int, int]]:
    """Yield (start, end) of whole-word occurrences of `subject` in `line`."""
    index = line.find(subject)
    while index != -1:
        end = index + len(subject)
        before = index == 0 or _is_word_boundary(line[index - 1])
        after = end >= len(line) or _is_word_boundary(line[end])
        if before and after:
            yield index, end
        index = line.find(subject, end)


def _follows_option(line: str, start: int) -> bool:
    """True if `line[:start]` ends with an option token and one whitespace."""
    # line[start - 1] is whitespace, guaranteed by the operand lookbehind
    index = start - 2
    while index >= 0 and line[index] in OPTION_CHARS:
        index -= 1
    return index >= 0 and index < start - 2 and line[index] == '-'


def _argument_matches(line: str) -> Iterator[Tuple[int, int]]:
    pos = 0
    while True:
        match = ARGUMENT_RE.search(line, pos)
        if match is None:
            return
        if match.group('operand') is not None and not _follows_option(line, match.start()):
            # Nothing else matches here either; retry one character later
            pos = match.start() + 1
            continue
        yield match.start(), match.end()
        pos = match.end()


def _classify_line(
    line: str,
    line_start: int,
    subject: str,
    state: _SectionState,
    spans: List[TagSpan],
    references: Dict[Tuple[int, int], str],
):
    if line.strip() and HEADER_RE.fullmatch(line):
        spans.append(TagSpan(TagKind.HEADER, line_start, line_start + len(line)))
        state.enter(line)
    elif (state.in_name or state.in_synopsis) and line.strip():
        word = FIRST_WORD_RE.match(line)
        spans.append(TagSpan(TagKind.COMMAND, line_start + word.start(1), line_start + word.end(1)))
    elif subject and subject in line and not RUNNING_HEADER_RE.match(line):
        for start, end in _subject_occurrences(line, subject):
            spans.append(TagSpan(TagKind.COMMAND, line_start + start, line_start + end))

    for match in OPTION_RE.finditer(line):
        spans.append(TagSpan(TagKind.OPTION, line_start + match.start(), line_start + match.end()))

    for start, end in _argument_matches(line):
        spans.append(TagSpan(TagKind.ARGUMENT, line_start + start, line_start + end))

    for match in URL_RE.finditer(line):
        spans.append(TagSpan(TagKind.URL, line_start + match.start(), line_start + match.end()))

    for match in FILE_PATH_RE.finditer(line):
        spans.append(TagSpan(TagKind.FILE_PATH, line_start + match.start(1), line_start + match.end(1)))

    # Cross-references are collected document-wide, not only under SEE ALSO
    for match in MAN_REFERENCE_RE.finditer(line):
        key = (line_start + match.start(), line_start + match.end())
        spans.append(TagSpan(TagKind.MAN_REFERENCE, *key))
        references[key] = match.group(1)


def classify(text: Optional[str], subject_name: Optional[str] = "") -> FormatResult:
    """Classify a formatted man page.

    Args:
        text: Plain man page text (control characters already stripped)
        subject_name: Program the page documents; its whole-word occurrences
                      are tagged as commands

    Returns:
        FormatResult with the spans in emission order and a map from each
        man reference range to the referenced page name (no section number).
    """
    spans: List[TagSpan] = []
    references: Dict[Tuple[int, int], str] = {}
    if not text:
        return FormatResult(spans, references)

    subject = subject_name or ""
    state = _SectionState()
    line_start = 0
    for line in text.split('\n'):
        _classify_line(line, line_start, subject, state, spans, references)
        line_start += len(line) + 1

    return FormatResult(spans, references)


def classify_help(text: Optional[str]) -> List[TagSpan]:
    """Classify --help output with a reduced rule set.

    Unindented all-uppercase lines are headers, indented key hints such as
    "    + key - zoom in" are options, and paths and URLs are only looked for
    on lines that plausibly contain them.
    """
    spans: List[TagSpan] = []
    if not text:
        return spans

    line_start = 0
    for line in text.split('\n'):
        offset = line_start
        line_start += len(line) + 1

        if not line.strip():
            continue

        if line == line.upper() and not line.startswith(('    ', '\t')):
            spans.append(TagSpan(TagKind.HEADER, offset, offset + len(line)))
            continue

        if line.startswith('    '):
            hint = KEY_HINT_RE.match(line)
            if hint:
                spans.append(TagSpan(TagKind.OPTION, offset + hint.start(), offset + hint.end()))
                continue

        if any(marker in line for marker in HELP_PATH_MARKERS):
            for match in HELP_FILE_PATH_RE.finditer(line):
                spans.append(TagSpan(TagKind.FILE_PATH, offset + match.start(), offset + match.end()))

        if 'http://' in line or 'https://' in line:
            for match in HELP_URL_RE.finditer(line):
                spans.append(TagSpan(TagKind.URL, offset + match.start(), offset + match.end()))

    return spans
