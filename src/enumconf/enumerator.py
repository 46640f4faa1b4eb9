from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from enumconf.filesystem import FileSystem, OSFileSystem
from enumconf.platform_dirs import current_dir, user_config_dir
from enumconf.settings import EnumeratorSettings

logger = logging.getLogger(__name__)


class Enumerator:
    """Lists candidate config file paths for one application.

    Results are ordered from least to most specific: system roots, the user
    config directory, then every directory from ``/`` down to the working
    directory. Callers that merge the files should let later entries win.
    """

    def __init__(self, settings: EnumeratorSettings, fs: FileSystem | None = None) -> None:
        self.settings = settings
        self.fs: FileSystem = fs or OSFileSystem()

    def _update(self, **changes: Any) -> Enumerator:
        # Re-validate so empty names fall back to the app-derived defaults.
        self.settings = EnumeratorSettings.model_validate({**self.settings.model_dump(), **changes})
        return self

    def config_name(self, name: str) -> Enumerator:
        """Override the ``<app>.conf`` file name used in system and user dirs."""
        return self._update(config_name=name)

    def config_name_in_path(self, name: str) -> Enumerator:
        """Override the ``.<app>`` file name used along the working directory chain."""
        return self._update(config_name_in_path=name)

    def include_missing(self, include: bool = True) -> Enumerator:
        return self._update(include_missing=include)

    def system_dirs(self, dirs: list[str]) -> Enumerator:
        return self._update(system_dirs=list(dirs))

    def with_file_system(self, fs: FileSystem) -> Enumerator:
        self.fs = fs
        return self

    def enumerate(self) -> list[str]:
        return self.enumerate_system() + self.enumerate_user() + self.enumerate_path()

    def enumerate_system(self) -> list[str]:
        s = self.settings
        candidates = [Path(root) / s.app_name / s.config_name for root in s.system_dirs]
        return self._filter(candidates)

    def enumerate_user(self) -> list[str]:
        base = user_config_dir()
        if base is None:
            return []
        return self._filter([Path(base) / self.settings.app_name / self.settings.config_name])

    def enumerate_path(self) -> list[str]:
        cwd = current_dir()
        if cwd is None:
            return []
        name = self.settings.config_name_in_path
        return self._filter([Path(d) / name for d in path_chain(cwd)])

    def _filter(self, candidates: list[Path]) -> list[str]:
        return [str(p) for p in candidates if self._wanted(str(p))]

    def _wanted(self, path: str) -> bool:
        if self.settings.include_missing:
            return True
        try:
            info = self.fs.stat(path)
        except Exception as e:
            logger.debug("skipping %s: %s", path, e)
            return False
        if info.is_dir:
            logger.debug("skipping %s: is a directory", path)
            return False
        return True


def path_chain(directory: str) -> list[str]:
    """Return ``directory`` and its ancestors, filesystem root first."""
    current = Path(directory)
    chain = [current]
    while True:
        parent = current.parent
        if parent == current:
            break
        chain.append(parent)
        current = parent
    chain.reverse()
    return [str(p) for p in chain]


def new(app_name: str) -> Enumerator:
    return Enumerator(EnumeratorSettings(app_name=app_name))
