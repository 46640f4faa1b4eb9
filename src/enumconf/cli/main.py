from __future__ import annotations

import typer

from enumconf import __version__
from enumconf.cli.doctor import doctor
from enumconf.cli.list_cmd import list_paths

app = typer.Typer(name="enumconf", help="Find the config files an application would load, least specific first")
app.command(name="list")(list_paths)
app.command(name="doctor")(doctor)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"enumconf {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", callback=_print_version, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


if __name__ == "__main__":
    app()
