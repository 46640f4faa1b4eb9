from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

logger = logging.getLogger(__name__)

SYSTEM_DIRS_ENV = "ENUMCONF_SYSTEM_DIRS"


def platform_system_dirs(
    platform: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> list[str]:
    """Conventional machine-wide configuration roots for ``platform``."""
    platform = platform or sys.platform
    environ = os.environ if environ is None else environ
    if platform == "win32":
        return [environ.get("ProgramData") or "C:\\ProgramData"]
    if platform == "darwin":
        return ["/etc", "/Library/Application Support"]
    return ["/etc", "/etc/xdg"]


def default_system_dirs(environ: Mapping[str, str] | None = None) -> list[str]:
    environ = os.environ if environ is None else environ
    override = environ.get(SYSTEM_DIRS_ENV, "")
    dirs = [d for d in override.split(os.pathsep) if d]
    if dirs:
        return dirs
    return platform_system_dirs(environ=environ)


def user_config_dir(
    environ: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> str | None:
    """Resolve the per-user configuration directory.

    Returns ``None`` when the environment does not provide one.
    """
    environ = os.environ if environ is None else environ
    platform = platform or sys.platform

    if platform == "win32":
        app_data = environ.get("AppData", "")
        if not app_data:
            logger.debug("AppData is not set; no user config directory")
            return None
        return app_data

    if platform == "darwin":
        home = environ.get("HOME", "")
        if not home:
            logger.debug("HOME is not set; no user config directory")
            return None
        return home + "/Library/Application Support"

    xdg = environ.get("XDG_CONFIG_HOME", "")
    if xdg:
        if not os.path.isabs(xdg):
            logger.debug("XDG_CONFIG_HOME is relative (%s); no user config directory", xdg)
            return None
        return xdg
    home = environ.get("HOME", "")
    if not home:
        logger.debug("neither XDG_CONFIG_HOME nor HOME is set; no user config directory")
        return None
    return home + "/.config"


def current_dir() -> str | None:
    try:
        return os.getcwd()
    except OSError as e:
        logger.debug("cannot determine working directory: %s", e)
        return None
