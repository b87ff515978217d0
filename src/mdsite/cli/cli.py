"""CLI entrypoint: Typer app definition and command registration"""

from typing import Annotated, Optional

import typer

from mdsite.cli.commands import build_cmd, check_cmd, list_cmd, routes_cmd, show_cmd


app = typer.Typer(name="mdsite", no_args_is_help=True, help="Static site content pipeline")


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR")] = None,
    ):
    """Build statically-rendered pages from a markdown content tree."""
    ctx.obj = {"log_level": log_level}


app.command(name="build")(build_cmd)
app.command(name="check")(check_cmd)
app.command(name="routes")(routes_cmd)
app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
