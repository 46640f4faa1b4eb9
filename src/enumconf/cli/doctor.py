from __future__ import annotations

import os

import typer

from enumconf.platform_dirs import current_dir, user_config_dir
from enumconf.settings import EnumeratorSettings


def doctor(
    app_name: str = typer.Argument(..., help="Application name, used as a path segment"),
) -> None:
    """Show where config files for APP_NAME would be looked up."""
    settings = EnumeratorSettings(app_name=app_name)
    healthy = True

    typer.echo("System roots:")
    for root in settings.system_dirs:
        typer.echo(f"  - {os.path.join(root, settings.app_name, settings.config_name)}")

    user_dir = user_config_dir()
    if user_dir is None:
        typer.echo("User config dir: NOT RESOLVED")
        healthy = False
    else:
        typer.echo(f"User config dir: {os.path.join(user_dir, settings.app_name, settings.config_name)}")

    cwd = current_dir()
    if cwd is None:
        typer.echo("Working dir: NOT RESOLVED")
        healthy = False
    else:
        typer.echo(f"Working dir: {cwd} (looking for {settings.config_name_in_path})")

    if not healthy:
        raise typer.Exit(code=1)
