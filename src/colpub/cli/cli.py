"""CLI entrypoint: Typer app definition and command registration"""

import typer

from colpub.cli.commands import render_cmd, show_cmd, styles_cmd


app = typer.Typer(name="colpub", no_args_is_help=True, help="Render .col blog documents to sanitized HTML")

app.command(name="render")(render_cmd)
app.command(name="show")(show_cmd)
app.command(name="styles")(styles_cmd)
