"""Data models for segments, inline spans, and content nodes"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- inline spans ---

class PlainText(_Frozen):
    kind: Literal["text"] = "text"
    text: str


class Bold(_Frozen):
    kind: Literal["bold"] = "bold"
    text: str


class Emphasis(_Frozen):
    """Single-asterisk emphasis; renderers conventionally give it strong weight."""
    kind: Literal["emphasis"] = "emphasis"
    text: str


class Link(_Frozen):
    kind: Literal["link"] = "link"
    label: str
    url: str


InlineSpan = Annotated[Union[PlainText, Bold, Emphasis, Link], Field(discriminator="kind")]


# --- content nodes ---

class Heading(_Frozen):
    type:  Literal["heading"] = "heading"
    level: int = Field(..., ge=1, le=3)
    spans: list[InlineSpan] = []


class ListItem(_Frozen):
    """A list entry; ordinal is the literal printed number, None for bullets."""
    type:    Literal["list_item"] = "list_item"
    ordinal: Optional[int] = Field(default=None, ge=0)
    spans:   list[InlineSpan] = []


class Blockquote(_Frozen):
    type:  Literal["blockquote"] = "blockquote"
    spans: list[InlineSpan] = []


class Paragraph(_Frozen):
    type:  Literal["paragraph"] = "paragraph"
    spans: list[InlineSpan] = []


class Spacer(_Frozen):
    type: Literal["spacer"] = "spacer"


class Table(_Frozen):
    """Header cells and body rows, each cell a span list; rows may be ragged."""
    type:    Literal["table"] = "table"
    headers: list[list[InlineSpan]] = Field(..., min_length=1)
    rows:    list[list[list[InlineSpan]]] = []


class Preformatted(_Frozen):
    """Literal text block for table regions too short to decide their structure."""
    type: Literal["preformatted"] = "preformatted"
    text: str


ContentNode = Annotated[
    Union[Heading, ListItem, Blockquote, Paragraph, Spacer, Table, Preformatted],
    Field(discriminator="type"),
]


# --- transient segmenter / table parser output ---

@dataclass(frozen=True)
class TableSegment:
    """Raw lines of one table region; not persisted."""
    lines: list[str]


@dataclass(frozen=True)
class TextSegment:
    """A single non-table source line; not persisted."""
    line: str


Segment = Union[TableSegment, TextSegment]


@dataclass
class RawTable:
    """Table cells before inline resolution."""
    headers: list[str]
    rows:    list[list[str]] = field(default_factory=list)

    @property
    def is_literal(self) -> bool:
        """True when the region degraded to a single literal cell."""
        return not self.headers


@dataclass
class ParsedDoc:
    """Parse result for one source file; not persisted."""
    path:  Path
    slug:  str
    text:  str
    nodes: list[ContentNode]
