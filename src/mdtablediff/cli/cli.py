"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdtablediff.cli.commands import diff_cmd, headers_cmd, tables_cmd


app = typer.Typer(name="mdtablediff", no_args_is_help=True, help="Row and column diffs for Markdown tables")

app.command(name="tables")(tables_cmd)
app.command(name="diff")(diff_cmd)
app.command(name="headers")(headers_cmd)
