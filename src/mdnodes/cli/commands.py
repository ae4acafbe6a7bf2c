"""CLI command implementations"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdnodes.config import Settings, load_config
from mdnodes.core.export import dump_nodes, nodes_to_markdown
from mdnodes.core.inline import resolve
from mdnodes.core.models import TableSegment
from mdnodes.core.parse import parse_text
from mdnodes.core.pipeline import run_parse
from mdnodes.core.segment import segment


STDIN = "-"

SourceArg = Annotated[str, typer.Argument(help="Text file to read, or '-' for stdin")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(ctx: typer.Context, overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return settings


def _read_source(source: str) -> str:
    """Return text from a file path or stdin."""
    if source == STDIN:
        return typer.get_text_stream("stdin").read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {source}", e)


def parse_cmd(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="File or directory to parse")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="json or yaml")] = None,
    indent: Annotated[Optional[int], typer.Option("--indent", help="Indent width; 0 = compact")] = None,
    markdown: Annotated[Optional[bool], typer.Option("--markdown/--no-markdown", help="Also write normalized markdown")] = None,
    ):
    """Parse every .md/.mdx/.txt file under PATH and write node documents."""
    settings = _settings(ctx, overrides={
        "output_dir": out, "output_format": fmt, "indent": indent, "emit_markdown": markdown,
    })
    output_dir = Path(settings.output_dir)
    try:
        results = run_parse(path, output_dir, settings.output_format, settings.indent, settings.emit_markdown)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No .md/.mdx/.txt files found under {path}.")
        raise typer.Exit(1)
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Parsed {len(results)} document(s) to {output_dir}/")


def show_cmd(
    ctx: typer.Context,
    source: SourceArg = STDIN,
    fmt: Annotated[Optional[str], typer.Option("--format", help="json or yaml")] = None,
    ):
    """Print the content nodes for one file or stdin."""
    settings = _settings(ctx, overrides={"output_format": fmt})
    nodes = parse_text(_read_source(source))
    typer.echo(dump_nodes(nodes, settings.output_format, settings.indent))


def segments_cmd(
    ctx: typer.Context,
    source: SourceArg = STDIN,
    ):
    """Print the table/text segmentation of one file or stdin."""
    _settings(ctx)
    for seg in segment(_read_source(source)):
        if isinstance(seg, TableSegment):
            typer.echo(f"table ({len(seg.lines)} line(s))")
            for line in seg.lines:
                typer.echo(f"  {line}")
        else:
            typer.echo(f"text  {seg.line!r}")


def spans_cmd(
    ctx: typer.Context,
    text: Annotated[str, typer.Argument(help="Inline text to resolve")],
    ):
    """Print the inline spans resolved from TEXT."""
    settings = _settings(ctx)
    spans = [s.model_dump() for s in resolve(text)]
    typer.echo(json.dumps(spans, indent=settings.indent or None, ensure_ascii=False))


def normalize_cmd(
    ctx: typer.Context,
    source: SourceArg = STDIN,
    ):
    """Print normalized markdown for one file or stdin."""
    _settings(ctx)
    typer.echo(nodes_to_markdown(parse_text(_read_source(source))))
