"""Output file names derived from source file names"""

import re
from pathlib import Path


DEFAULT_SLUG = "document"


def slugify(text: str, fallback: str = DEFAULT_SLUG) -> str:
    """Convert text to a lowercase, hyphen-separated slug; fallback if nothing survives."""
    text = re.sub(r'[^\w\s-]', '', text.lower())
    text = re.sub(r'[\s_-]+', '-', text).strip('-')
    return text or fallback


def output_path(source: Path, root: Path, suffix: str) -> Path:
    """Relative output path for source: its directory under root plus '<slug>.<suffix>'.

    Directory parts are slugified too, so the result never escapes the output dir
    and never starts with a dot.
    """
    rel = source.relative_to(root) if source != root else Path(source.name)
    parts = [slugify(part, fallback="_") for part in rel.parent.parts]
    return Path(*parts, f"{slugify(rel.stem)}.{suffix}")
