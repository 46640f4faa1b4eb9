from __future__ import annotations

import logging
from enum import Enum

import typer

from enumconf.enumerator import new


class Source(str, Enum):
    ALL = "all"
    SYSTEM = "system"
    USER = "user"
    PATH = "path"


def list_paths(
    app_name: str = typer.Argument(..., help="Application name, used as a path segment"),
    source: Source = typer.Option(Source.ALL, "--source", help="Restrict to one location kind"),
    include_missing: bool = typer.Option(False, "--include-missing", help="List candidates that do not exist"),
    config_name: str = typer.Option("", "--config-name", help="File name in system and user dirs (default: APP.conf)"),
    config_name_in_path: str = typer.Option("", "--config-name-in-path", help="File name along the working directory chain (default: .APP)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log skipped candidates to stderr"),
) -> None:
    """Print candidate config files for APP_NAME, least specific first."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    enumerator = new(app_name).include_missing(include_missing)
    if config_name:
        enumerator.config_name(config_name)
    if config_name_in_path:
        enumerator.config_name_in_path(config_name_in_path)

    if source is Source.SYSTEM:
        paths = enumerator.enumerate_system()
    elif source is Source.USER:
        paths = enumerator.enumerate_user()
    elif source is Source.PATH:
        paths = enumerator.enumerate_path()
    else:
        paths = enumerator.enumerate()

    for path in paths:
        typer.echo(path)
