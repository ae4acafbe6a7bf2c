"""Pipeline step: parse source files and write node documents to an output dir"""

import logging
from pathlib import Path

from mdnodes.core.export import dump_nodes, nodes_to_markdown
from mdnodes.core.parse import discover_files, parse_file
from mdnodes.core.utils.slug import output_path


logger = logging.getLogger(__name__)


def _plan_outputs(sources: list[Path], root: Path, fmt: str) -> dict[Path, Path]:
    """Map each source to its relative output path; raise RuntimeError on collisions."""
    planned: dict[Path, Path] = {}
    claimed: dict[Path, Path] = {}
    for src in sources:
        rel = output_path(src, root, fmt)
        if rel in claimed:
            raise RuntimeError(f"Output name collision: {claimed[rel]} and {src} both map to {rel}")
        claimed[rel] = src
        planned[src] = rel
    return planned


def run_parse(
    path: str,
    output_dir: Path,
    fmt: str = 'json',
    indent: int = 2,
    emit_markdown: bool = False,
    ) -> list[tuple[Path, Path]]:
    """Parse path and write one <slug>.<fmt> per document. Returns (source_path, output_file) pairs.

    Output paths mirror the source directory structure under output_dir. Sources
    whose names map to the same output path are rejected before anything is
    written. With emit_markdown, a normalized <slug>.md is written beside each
    output file.
    """
    root = Path(path)
    planned = _plan_outputs(discover_files(root), root, fmt)
    output_dir.mkdir(parents=True, exist_ok=True)
    results = []
    for p, rel in planned.items():
        out_file = output_dir / rel
        try:
            doc = parse_file(p)
            out_file.parent.mkdir(parents=True, exist_ok=True)
            out_file.write_text(dump_nodes(doc.nodes, fmt, indent) + "\n", encoding='utf-8')
            if emit_markdown:
                md_file = out_file.with_suffix(".md")
                md_file.write_text(nodes_to_markdown(doc.nodes) + "\n", encoding='utf-8')
            results.append((p, out_file))
        except Exception as e:
            raise RuntimeError(f"Failed to parse {p}: {e}") from e
        logger.info("wrote %s", out_file)
    return results
