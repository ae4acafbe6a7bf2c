"""Export: serialize nodes to JSON/YAML and re-emit normalized markdown"""

import json
from typing import Any

import yaml

from mdnodes.core.models import (
    Blockquote,
    Bold,
    ContentNode,
    Emphasis,
    Heading,
    InlineSpan,
    Link,
    ListItem,
    Paragraph,
    Preformatted,
    Spacer,
    Table,
)
from mdnodes.core.segment import FENCE


OUTPUT_FORMATS = ('json', 'yaml')

# fence lines close a table region and are dropped by the segmenter
TABLE_BREAK = FENCE
TABLE_REGION_NODES = (Table, Preformatted)


def nodes_to_dicts(nodes: list[ContentNode]) -> list[dict[str, Any]]:
    """Return plain dicts for nodes, suitable for JSON or YAML dumping."""
    return [node.model_dump() for node in nodes]


def dump_nodes(nodes: list[ContentNode], fmt: str = 'json', indent: int = 2) -> str:
    """Serialize nodes to a JSON or YAML document string."""
    data = nodes_to_dicts(nodes)
    if fmt == 'json':
        return json.dumps(data, indent=indent or None, ensure_ascii=False)
    if fmt == 'yaml':
        return yaml.safe_dump(data, allow_unicode=True, sort_keys=False, indent=indent or None)
    raise ValueError(f"Unknown output format: {fmt!r} (expected one of {', '.join(OUTPUT_FORMATS)})")


def spans_to_markdown(spans: list[InlineSpan]) -> str:
    """Re-emit inline spans with their markdown markers."""
    parts = []
    for span in spans:
        if isinstance(span, Bold):
            parts.append(f"**{span.text}**")
        elif isinstance(span, Emphasis):
            parts.append(f"*{span.text}*")
        elif isinstance(span, Link):
            parts.append(f"[{span.label}]({span.url})")
        else:
            parts.append(span.text)
    return ''.join(parts)


def _row(cells: list[list[InlineSpan]]) -> str:
    return "| " + " | ".join(spans_to_markdown(c) for c in cells) + " |"


def _table_lines(table: Table) -> list[str]:
    lines = [_row(table.headers), "| " + " | ".join("---" for _ in table.headers) + " |"]
    lines.extend(_row(row) for row in table.rows)
    return lines


def node_to_markdown(node: ContentNode) -> str:
    """Render a single node back to one or more markdown lines."""
    if isinstance(node, Heading):
        return f"{'#' * node.level} {spans_to_markdown(node.spans)}"
    if isinstance(node, ListItem):
        marker = "-" if node.ordinal is None else f"{node.ordinal}."
        return f"{marker} {spans_to_markdown(node.spans)}"
    if isinstance(node, Blockquote):
        return f"> {spans_to_markdown(node.spans)}"
    if isinstance(node, Paragraph):
        return spans_to_markdown(node.spans)
    if isinstance(node, Table):
        return "\n".join(_table_lines(node))
    if isinstance(node, Preformatted):
        return node.text
    if isinstance(node, Spacer):
        return ""
    raise TypeError(f"Unsupported node type: {type(node).__name__}")


def nodes_to_markdown(nodes: list[ContentNode]) -> str:
    """Render nodes to normalized markdown, one node per line group.

    A fence line is written after a table region whenever the next node would
    otherwise be absorbed into it on re-parse (a blank line or another table).
    """
    lines = []
    for prev, node in zip([None, *nodes], nodes):
        if isinstance(prev, TABLE_REGION_NODES) and isinstance(node, (Spacer, *TABLE_REGION_NODES)):
            lines.append(TABLE_BREAK)
        lines.append(node_to_markdown(node))
    return "\n".join(lines)
