"""Line classification and grouping of table regions versus text lines"""

import logging

from mdnodes.core.models import Segment, TableSegment, TextSegment


logger = logging.getLogger(__name__)

FENCE = '```'


def split_lines(text: str) -> list[str]:
    """Split text on newlines after folding CRLF; empty text has no lines."""
    if not text:
        return []
    return text.replace('\r\n', '\n').split('\n')


def is_fence(line: str) -> bool:
    """True for a code-fence marker line, with or without a language tag."""
    return line.strip().startswith(FENCE)


def is_table_line(line: str) -> bool:
    """True if a line looks like a table row or an un-piped separator row."""
    stripped = line.strip()
    return stripped.startswith('|') or (len(stripped.split('|')) > 2 and '-' in stripped)


def segment(text: str) -> list[Segment]:
    """Group lines into TableSegments and TextSegments in source order.

    Blank lines inside an open table region are absorbed so a table with gaps
    between its rows stays one region. Fence lines close an open region and are
    dropped; the lines between fences are classified like any other line.
    """
    segments: list[Segment] = []
    table_lines: list[str] = []

    def _flush() -> None:
        if table_lines:
            logger.debug("table region closed with %d line(s)", len(table_lines))
            segments.append(TableSegment(lines=list(table_lines)))
            table_lines.clear()

    for line in split_lines(text):
        if is_fence(line):
            _flush()
            continue
        if is_table_line(line):
            table_lines.append(line)
            continue
        if table_lines:
            if not line.strip():
                continue
            _flush()
        segments.append(TextSegment(line=line))

    _flush()
    return segments
