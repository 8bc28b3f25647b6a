"""\
Path information
================

Author: Akshay Mestry <xa@mes3.dev>
Created on: Monday, October 19 2026
Last updated on: Monday, October 19 2026

This module provides fixed-shape records describing files and
directories on disk. Each record is built from a single `stat` call on
the path and is immutable once created.

Invalid paths are reported by raising a `FilesystemError` rather than
returning an empty record.
"""

from __future__ import annotations

import os
import stat
import typing as t
from dataclasses import dataclass
from datetime import datetime

from fsutils.core.error import NotADirectoryError
from fsutils.core.error import NotAFileError
from fsutils.core.error import reraise

__all__: tuple[str, ...] = (
    "DirInfo",
    "FileInfo",
    "PathInfo",
    "dir_info",
    "file_info",
    "path_info",
)

_KB: t.Final[int] = 1024
_MB: t.Final[int] = 1024**2
_GB: t.Final[int] = 1024**3


class _Sized:
    """Mixin with human friendly size conversions."""

    __slots__ = ()
    size: int

    @property
    def size_kb(self) -> float:
        """Return size in kilobytes."""
        return self.size / _KB

    @property
    def size_mb(self) -> float:
        """Return size in megabytes."""
        return self.size / _MB

    @property
    def size_gb(self) -> float:
        """Return size in gigabytes."""
        return self.size / _GB


@dataclass(frozen=True, slots=True)
class PathInfo(_Sized):
    """Information about a file or a directory.

    :var name: Final component of the path.
    :var abs_path: Absolute path.
    :var is_dir: Whether the path is a directory.
    :var is_file: Whether the path is not a directory.
    :var is_executable: Whether any execute bit is set.
    :var is_hidden: Whether the name starts with a dot.
    :var size: Size in bytes as reported by `stat`.
    :var date_created: Creation time, or the modification time where
        the platform does not record one.
    :var date_modified: Last modification time.
    :var num_children: Number of immediate children, `0` for files.
    :var mode: Mode string like `drwxr-xr-x`.
    :var permissions: Permission string like `rwxr-xr-x`.
    """

    name: str
    abs_path: str
    is_dir: bool
    is_file: bool
    is_executable: bool
    is_hidden: bool
    size: int
    date_created: datetime
    date_modified: datetime
    num_children: int
    mode: str
    permissions: str


@dataclass(frozen=True, slots=True)
class FileInfo(_Sized):
    """Information about a single file.

    :var ext: Lowercase extension including the dot, empty if none.
    """

    name: str
    abs_path: str
    ext: str
    size: int
    date_created: datetime
    date_modified: datetime
    is_executable: bool
    is_hidden: bool
    mode: str
    permissions: str


@dataclass(frozen=True, slots=True)
class DirInfo(PathInfo):
    """Information about a directory along with child counts."""

    num_files: int
    num_dirs: int


def _created(st: os.stat_result) -> datetime:
    """Return birth time if recorded, else the modification time."""
    return datetime.fromtimestamp(getattr(st, "st_birthtime", st.st_mtime))


def _name(path: str | os.PathLike[str]) -> str:
    return os.path.basename(os.path.abspath(path))


def _common(
    path: str | os.PathLike[str],
    st: os.stat_result,
) -> dict[str, t.Any]:
    name = _name(path)
    mode = stat.filemode(st.st_mode)
    return {
        "name": name,
        "abs_path": os.path.abspath(path),
        "is_executable": bool(stat.S_IMODE(st.st_mode) & 0o111),
        "is_hidden": name.startswith("."),
        "size": st.st_size,
        "date_created": _created(st),
        "date_modified": datetime.fromtimestamp(st.st_mtime),
        "mode": mode,
        "permissions": mode[1:],
    }


def path_info(path: str | os.PathLike[str]) -> PathInfo:
    """Return information about a file or a directory.

    :param path: Path to describe.
    :return: Record describing the path.
    :raises NotFoundError: If the path does not exist.
    """
    with reraise(path):
        st = os.stat(path)
        is_dir = stat.S_ISDIR(st.st_mode)
        children = len(os.listdir(path)) if is_dir else 0
    return PathInfo(
        is_dir=is_dir,
        is_file=not is_dir,
        num_children=children,
        **_common(path, st),
    )


def file_info(path: str | os.PathLike[str]) -> FileInfo:
    """Return information about a file.

    :param path: Path of the file to describe.
    :return: Record describing the file.
    :raises NotFoundError: If the path does not exist.
    :raises NotAFileError: If the path is a directory.
    """
    with reraise(path):
        st = os.stat(path)
    if stat.S_ISDIR(st.st_mode):
        raise NotAFileError("path is a directory", path=path)
    _, ext = os.path.splitext(_name(path))
    return FileInfo(ext=ext.lower(), **_common(path, st))


def dir_info(path: str | os.PathLike[str]) -> DirInfo:
    """Return information about a directory and its immediate children.

    :param path: Path of the directory to describe.
    :return: Record describing the directory.
    :raises NotFoundError: If the path does not exist.
    :raises NotADirectoryError: If the path is not a directory.
    """
    with reraise(path):
        st = os.stat(path)
        if not stat.S_ISDIR(st.st_mode):
            raise NotADirectoryError("not a directory", path=path)
        num_files = num_dirs = 0
        with os.scandir(path) as entries:
            for entry in entries:
                if entry.is_dir():
                    num_dirs += 1
                else:
                    num_files += 1
    return DirInfo(
        is_dir=True,
        is_file=False,
        num_children=num_files + num_dirs,
        num_files=num_files,
        num_dirs=num_dirs,
        **_common(path, st),
    )
