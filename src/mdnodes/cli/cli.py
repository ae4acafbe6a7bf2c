"""CLI entrypoint: Typer app definition and command registration"""

from typing import Annotated

import typer

from mdnodes.cli.commands import normalize_cmd, parse_cmd, segments_cmd, show_cmd, spans_cmd


app = typer.Typer(name="mdnodes", no_args_is_help=True, help="Heuristic markdown-to-content-node parser")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Parse model-generated markdown into typed content nodes."""
    ctx.obj = {"verbose": verbose}


app.command(name="parse")(parse_cmd)
app.command(name="show")(show_cmd)
app.command(name="segments")(segments_cmd)
app.command(name="spans")(spans_cmd)
app.command(name="normalize")(normalize_cmd)
