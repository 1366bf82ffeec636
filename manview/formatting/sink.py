"""Applying classification results to a text surface."""
from __future__ import annotations

from typing import Iterable, List, Protocol

from .annotator import FormatResult, classify, classify_help
from .tags import TagKind, TagSpan


class TextSink(Protocol):
    """Anything holding text that tags can be applied to by name."""

    @property
    def text(self) -> str: ...

    def apply_tag(self, tag_name: str, start: int, end: int) -> None: ...


def apply_spans(sink: TextSink, spans: Iterable[TagSpan]):
    """Apply spans to the sink in emission order."""
    for span in spans:
        sink.apply_tag(span.kind.value, span.start, span.end)


def format_man_page(sink: TextSink, program: str) -> FormatResult:
    """Tag the sink's man page text and return the cross-references found."""
    result = classify(sink.text, program)
    apply_spans(sink, result.spans)
    return result


def format_help_text(sink: TextSink) -> List[TagSpan]:
    """Tag the sink's --help text."""
    spans = classify_help(sink.text)
    apply_spans(sink, spans)
    return spans


def tagged_text(text: str, spans: Iterable[TagSpan], kind: TagKind) -> List[str]:
    """Return the substrings covered by spans of one kind, in order."""
    return [span.slice(text) for span in spans if span.kind is kind]
