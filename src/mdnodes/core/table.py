"""Table region parsing into header and body cell strings"""

import logging

from mdnodes.core.models import RawTable


logger = logging.getLogger(__name__)

SEPARATOR_MARK = '---'


def split_cells(line: str) -> list[str]:
    """Split a row on '|' after removing one outer pipe from each end."""
    content = line.strip()
    if content.startswith('|'):
        content = content[1:]
    if content.endswith('|'):
        content = content[:-1]
    return [cell.strip() for cell in content.split('|')]


def _separator_index(lines: list[str]) -> int | None:
    """Index of the first line containing '---', else None."""
    return next((i for i, line in enumerate(lines) if SEPARATOR_MARK in line), None)


def parse_table(lines: list[str]) -> RawTable:
    """Locate the header/separator boundary and split every row into raw cells.

    A single line cannot be told apart from stray text, so it degrades to a
    literal table with no headers and one cell. Column counts are not
    reconciled between rows.
    """
    if len(lines) < 2:
        logger.debug("table region of %d line(s) kept literal", len(lines))
        return RawTable(headers=[], rows=[['\n'.join(line.strip() for line in lines)]])

    sep = _separator_index(lines)
    if sep is None:
        header, body = lines[0], lines[1:]
    else:
        header = lines[sep - 1] if sep > 0 else lines[0]
        body = lines[sep + 1:]

    return RawTable(headers=split_cells(header), rows=[split_cells(row) for row in body])
