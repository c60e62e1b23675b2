"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdsite.cli.commands import build_cmd, sync_cmd


app = typer.Typer(name="mdsite", no_args_is_help=True, help="Minimal markdown static-site generator")

app.command(name="build")(build_cmd)
app.command(name="sync")(sync_cmd)
