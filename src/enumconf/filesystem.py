from __future__ import annotations

import errno
import os
import stat as stat_mod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class FileInfo:
    path: str
    is_dir: bool


@runtime_checkable
class FileSystem(Protocol):
    def stat(self, path: str) -> FileInfo:
        """Return info for ``path`` or raise ``OSError`` if it cannot be probed."""
        ...


class OSFileSystem:
    """The real filesystem, optionally re-rooted under ``root``.

    With a ``root`` set, absolute paths are resolved relative to it, so
    ``/etc/app/app.conf`` probes ``<root>/etc/app/app.conf``.
    """

    def __init__(self, root: str | os.PathLike[str] | None = None) -> None:
        self.root = os.fspath(root) if root is not None else None

    def _resolve(self, path: str) -> str:
        if self.root is None:
            return path
        _, tail = os.path.splitdrive(path)
        return os.path.join(self.root, tail.lstrip("\\/"))

    def stat(self, path: str) -> FileInfo:
        st = os.stat(self._resolve(path))
        return FileInfo(path=path, is_dir=stat_mod.S_ISDIR(st.st_mode))


class MemoryFileSystem:
    """In-memory filesystem for deterministic tests.

    Parent directories of every file are implied. ``errors`` maps a path to the
    exception raised when it is probed.
    """

    def __init__(
        self,
        files: Iterable[str] = (),
        dirs: Iterable[str] = (),
        errors: dict[str, OSError] | None = None,
    ) -> None:
        self.files: set[str] = set(files)
        self.dirs: set[str] = set(dirs)
        self.errors: dict[str, OSError] = dict(errors or {})
        for path in self.files | set(self.dirs):
            self._add_parents(path)

    def _add_parents(self, path: str) -> None:
        parent = os.path.dirname(path)
        while parent and parent not in self.dirs:
            self.dirs.add(parent)
            if os.path.dirname(parent) == parent:
                break
            parent = os.path.dirname(parent)

    def add_file(self, path: str) -> MemoryFileSystem:
        self.files.add(path)
        self._add_parents(path)
        return self

    def stat(self, path: str) -> FileInfo:
        if path in self.errors:
            raise self.errors[path]
        if path in self.files:
            return FileInfo(path=path, is_dir=False)
        if path in self.dirs:
            return FileInfo(path=path, is_dir=True)
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
