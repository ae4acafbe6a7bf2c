"""Unit tests for core/blocks.py"""

import pytest

from mdnodes.core.blocks import classify_line, segments_to_nodes, table_to_node
from mdnodes.core.models import (
    Blockquote,
    Bold,
    Emphasis,
    Heading,
    ListItem,
    Paragraph,
    PlainText,
    Preformatted,
    Spacer,
    Table,
    TableSegment,
    TextSegment,
)


@pytest.mark.parametrize("line,level", [
    ("# One",     1),
    ("## Two",    2),
    ("### Three", 3),
])
def test_heading_levels(line, level):
    """'#', '##', '###' prefixes map to heading levels 1-3."""
    node = classify_line(line)
    assert isinstance(node, Heading)
    assert node.level == level


def test_heading_title():
    """The marker and following space are stripped."""
    assert classify_line("### Title") == Heading(level=3, spans=[PlainText(text="Title")])


@pytest.mark.parametrize("line", ["#### Deep", "#NoSpace", "  # indented"])
def test_unrecognized_headings_are_paragraphs(line):
    """Deeper, unspaced, or indented '#' lines fall back to paragraphs."""
    assert isinstance(classify_line(line), Paragraph)


def test_ordered_list_item_keeps_literal_ordinal():
    """The printed number is kept, not recomputed."""
    assert classify_line("2. Second") == ListItem(ordinal=2, spans=[PlainText(text="Second")])
    assert classify_line("7. x").ordinal == 7


@pytest.mark.parametrize("line", ["- item", "* item", "• item", "   - item"])
def test_unordered_list_markers(line):
    """Dash, asterisk, and bullet markers produce ordinal-less list items."""
    assert classify_line(line) == ListItem(spans=[PlainText(text="item")])


def test_list_item_with_bold_key():
    """Inline spans are resolved after the marker is stripped."""
    node = classify_line("- **Key:** value")
    assert node.spans == [Bold(text="Key:"), PlainText(text=" value")]


def test_bold_line_is_not_a_list_item():
    """A line opening with '**' is not mistaken for an asterisk bullet."""
    node = classify_line("**Note** read this")
    assert isinstance(node, Paragraph)
    assert node.spans[0] == Bold(text="Note")


def test_blockquote():
    """'> ' prefix produces a Blockquote with the marker stripped."""
    assert classify_line("> *quoted*") == Blockquote(spans=[Emphasis(text="quoted")])


@pytest.mark.parametrize("line", ["", "   ", "\t"])
def test_blank_lines_are_spacers(line):
    """Whitespace-only lines become Spacer nodes."""
    assert classify_line(line) == Spacer()


def test_paragraph():
    """Unmarked text becomes a Paragraph."""
    assert classify_line("Hello there") == Paragraph(spans=[PlainText(text="Hello there")])


def test_table_to_node_resolves_cells():
    """Header and body cells are resolved into span lists."""
    node = table_to_node(["| **a** | b |", "|---|---|", "| 1 | |"])
    assert isinstance(node, Table)
    assert node.headers == [[Bold(text="a")], [PlainText(text="b")]]
    assert node.rows == [[[PlainText(text="1")], []]]


def test_short_table_region_is_preformatted():
    """A single-line region becomes a Preformatted literal."""
    assert table_to_node(["| only |"]) == Preformatted(text="| only |")


def test_segments_to_nodes_one_node_per_segment():
    """Each segment maps to exactly one node in order."""
    nodes = segments_to_nodes([
        TextSegment(line="# H"),
        TableSegment(lines=["| a |", "|---|"]),
        TextSegment(line=""),
    ])
    assert [type(n) for n in nodes] == [Heading, Table, Spacer]


def test_oversized_ordinal_is_paragraph():
    """An ordinal too long to convert to int falls back to a Paragraph."""
    line = "9" * 5000 + ". item"
    node = classify_line(line)
    assert node == Paragraph(spans=[PlainText(text=line)])


@pytest.mark.parametrize("line", ["٣. x", "３. x"])
def test_non_ascii_digits_are_not_ordinals(line):
    """Only ASCII digits mark an ordered list item."""
    assert classify_line(line) == Paragraph(spans=[PlainText(text=line)])
