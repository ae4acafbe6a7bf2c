"""Inline span resolution: bold, then emphasis, then links, then plain text"""

import re

from mdnodes.core.models import Bold, Emphasis, InlineSpan, Link, PlainText


BOLD_SPLIT_RE     = re.compile(r'(\*\*.*?\*\*)')
EMPHASIS_SPLIT_RE = re.compile(r'(\*[^*]+?\*)')
LINK_SPLIT_RE     = re.compile(r'(\[.*?\]\(.*?\))')
LINK_RE           = re.compile(r'^\[(.*?)\]\((.*?)\)$')


def _split(pattern: re.Pattern, text: str) -> list[tuple[bool, str]]:
    """Return (matched, piece) pairs for a capturing split, dropping empty pieces."""
    return [(i % 2 == 1, piece) for i, piece in enumerate(pattern.split(text)) if piece]


def _resolve_links(text: str) -> list[InlineSpan]:
    spans: list[InlineSpan] = []
    for matched, piece in _split(LINK_SPLIT_RE, text):
        m = LINK_RE.match(piece) if matched else None
        if m:
            spans.append(Link(label=m.group(1), url=m.group(2)))
        else:
            spans.append(PlainText(text=piece))
    return spans


def _resolve_emphasis(text: str) -> list[InlineSpan]:
    spans: list[InlineSpan] = []
    for matched, piece in _split(EMPHASIS_SPLIT_RE, text):
        if matched:
            spans.append(Emphasis(text=piece[1:-1]))
        else:
            spans.extend(_resolve_links(piece))
    return spans


def _merge_plain(spans: list[InlineSpan]) -> list[InlineSpan]:
    """Join runs of adjacent PlainText spans into one."""
    merged: list[InlineSpan] = []
    for span in spans:
        if merged and isinstance(span, PlainText) and isinstance(merged[-1], PlainText):
            merged[-1] = PlainText(text=merged[-1].text + span.text)
        else:
            merged.append(span)
    return merged


def resolve(text: str) -> list[InlineSpan]:
    """Resolve a raw line or cell into typed inline spans.

    Each pass only splits the text the previous pass left untyped, so a bold
    run is never searched for emphasis or links. Unmatched markers survive
    verbatim as PlainText; this function never raises.
    """
    spans: list[InlineSpan] = []
    for matched, piece in _split(BOLD_SPLIT_RE, text):
        # '****' matches the split but has nothing to embolden
        if matched and len(piece) > 4:
            spans.append(Bold(text=piece[2:-2]))
        else:
            spans.extend(_resolve_emphasis(piece))
    return _merge_plain(spans)


def plain_text(spans: list[InlineSpan]) -> str:
    """Reconstruct marker-free text; links contribute their label."""
    return ''.join(s.label if isinstance(s, Link) else s.text for s in spans)
