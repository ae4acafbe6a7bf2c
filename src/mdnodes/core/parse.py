"""Text parsing entry points and source file discovery"""

import logging
from pathlib import Path

from mdnodes.core.blocks import segments_to_nodes
from mdnodes.core.models import ContentNode, ParsedDoc
from mdnodes.core.segment import segment
from mdnodes.core.utils.slug import slugify


logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = {'.md', '.mdx', '.txt'}


def parse_text(text: str) -> list[ContentNode]:
    """Parse raw model output into an ordered list of ContentNodes."""
    return segments_to_nodes(segment(text))


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx/.txt files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in TEXT_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix in TEXT_EXTENSIONS)


def parse_file(path: Path) -> ParsedDoc:
    """Read a UTF-8 text file and parse it into a ParsedDoc."""
    text = path.read_text(encoding='utf-8')
    nodes = parse_text(text)
    logger.info("parsed %s into %d node(s)", path, len(nodes))
    return ParsedDoc(path=path, slug=slugify(path.stem), text=text, nodes=nodes)
