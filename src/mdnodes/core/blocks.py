"""Segment-to-ContentNode conversion using line-prefix markers"""

import re

from mdnodes.core.inline import resolve
from mdnodes.core.models import (
    Blockquote,
    ContentNode,
    Heading,
    ListItem,
    Paragraph,
    Preformatted,
    Segment,
    Spacer,
    Table,
    TableSegment,
)
from mdnodes.core.table import parse_table


HEADING_PREFIXES: tuple[tuple[str, int], ...] = (
    ('### ', 3),
    ('## ',  2),
    ('# ',   1),
)
BULLET_PREFIXES = ('- ', '* ', '• ')

HEADING_MARK_RE = re.compile(r'^#+\s+')
BULLET_MARK_RE  = re.compile(r'^\s*[-*•]\s+')
ORDINAL_RE      = re.compile(r'^([0-9]+)\.\s')
ORDINAL_MARK_RE = re.compile(r'^\s*[0-9]+\.\s+')
QUOTE_MARK_RE   = re.compile(r'^>\s+')


def _heading_level(line: str) -> int | None:
    """Heading level (1-3) from an unindented '#' prefix, else None."""
    for prefix, level in HEADING_PREFIXES:
        if line.startswith(prefix):
            return level
    return None


def _ordinal(stripped: str) -> int | None:
    """Printed list number, or None if absent or too long to convert."""
    m = ORDINAL_RE.match(stripped)
    if not m:
        return None
    try:
        return int(m.group(1))
    except ValueError:
        return None


def classify_line(line: str) -> ContentNode:
    """Convert one text line to a typed node, stripping its block marker."""
    stripped = line.strip()
    if not stripped:
        return Spacer()

    level = _heading_level(line)
    if level is not None:
        return Heading(level=level, spans=resolve(HEADING_MARK_RE.sub('', line, count=1)))

    if stripped.startswith(BULLET_PREFIXES):
        return ListItem(spans=resolve(BULLET_MARK_RE.sub('', line, count=1)))

    ordinal = _ordinal(stripped)
    if ordinal is not None:
        return ListItem(ordinal=ordinal, spans=resolve(ORDINAL_MARK_RE.sub('', line, count=1)))

    if line.startswith('> '):
        return Blockquote(spans=resolve(QUOTE_MARK_RE.sub('', line, count=1)))

    return Paragraph(spans=resolve(line))


def table_to_node(lines: list[str]) -> ContentNode:
    """Build a Table node from a table region, or Preformatted if it degraded."""
    raw = parse_table(lines)
    if raw.is_literal:
        return Preformatted(text=raw.rows[0][0])
    return Table(
        headers=[resolve(cell) for cell in raw.headers],
        rows=[[resolve(cell) for cell in row] for row in raw.rows],
    )


def segments_to_nodes(segments: list[Segment]) -> list[ContentNode]:
    """Convert segmenter output to ContentNodes, one node per segment."""
    return [
        table_to_node(seg.lines) if isinstance(seg, TableSegment) else classify_line(seg.line)
        for seg in segments
    ]
