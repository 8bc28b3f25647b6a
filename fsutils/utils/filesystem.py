"""\
Filesystem utility objects
==========================

Author: Akshay Mestry <xa@mes3.dev>
Created on: Wednesday, July 30 2025
Last updated on: Monday, October 19 2026

This module provides thin wrappers over single filesystem calls:
existence checks, listings, and creating, moving, copying and removing
files and directories. Failures are raised as `FilesystemError`
subclasses naming the offending path.
"""

from __future__ import annotations

import os
import shutil
import stat

from fsutils.core.config import _DEFAULT_BUFFER_SIZE
from fsutils.core.error import AlreadyExistsError
from fsutils.core.error import NotADirectoryError
from fsutils.core.error import NotAFileError
from fsutils.core.error import SameFileError
from fsutils.core.error import reraise

__all__: tuple[str, ...] = (
    "copy_file",
    "dir_exists",
    "file_exists",
    "get_dir_list",
    "get_file_list",
    "get_list",
    "mkdir",
    "move_dir",
    "move_file",
    "mv",
    "rmdir",
    "symlink",
    "touch",
)


def file_exists(path: str | os.PathLike[str]) -> bool:
    """Return `True` if path exists and is not a directory."""
    return os.path.exists(path) and not os.path.isdir(path)


def dir_exists(path: str | os.PathLike[str]) -> bool:
    """Return `True` if path exists and is a directory."""
    return os.path.isdir(path)


def _scan(path: str | os.PathLike[str]) -> list[os.DirEntry[str]]:
    with reraise(path), os.scandir(path) as entries:
        return sorted(entries, key=lambda entry: entry.name)


def get_file_list(path: str | os.PathLike[str]) -> list[str]:
    """Return sorted names of files directly inside a directory."""
    return [entry.name for entry in _scan(path) if not entry.is_dir()]


def get_dir_list(path: str | os.PathLike[str]) -> list[str]:
    """Return sorted names of directories directly inside a directory."""
    return [entry.name for entry in _scan(path) if entry.is_dir()]


def get_list(path: str | os.PathLike[str]) -> list[str]:
    """Return sorted names of all entries directly inside a directory."""
    return [entry.name for entry in _scan(path)]


def mkdir(
    path: str | os.PathLike[str],
    mode: int = 0o755,
) -> str | os.PathLike[str]:
    """Create a directory and its parents if they do not exist."""
    with reraise(path):
        os.makedirs(path, mode=mode, exist_ok=True)
    return path


def touch(path: str | os.PathLike[str]) -> str | os.PathLike[str]:
    """Create a file if it does not exist, else update its timestamps."""
    with reraise(path):
        with open(path, "a"):
            os.utime(path, None)
    return path


def rmdir(path: str | os.PathLike[str]) -> None:
    """Remove a directory and everything below it.

    A missing path is not an error.
    """
    if not os.path.lexists(path):
        return
    with reraise(path):
        shutil.rmtree(path)


def symlink(
    target: str | os.PathLike[str],
    link_name: str | os.PathLike[str],
) -> None:
    """Create a symbolic link at `link_name` pointing to `target`.

    :raises AlreadyExistsError: If `link_name` already exists.
    """
    if os.path.lexists(link_name):
        raise AlreadyExistsError("link already exists", path=link_name)
    with reraise(link_name):
        os.symlink(target, link_name)


def move_file(
    source: str | os.PathLike[str],
    destination: str | os.PathLike[str],
) -> None:
    """Move a file from `source` to `destination`.

    :raises NotFoundError: If `source` does not exist.
    :raises NotAFileError: If `source` is a directory, use `move_dir`
        or `mv` instead.
    """
    with reraise(source):
        st = os.stat(source)
    if stat.S_ISDIR(st.st_mode):
        raise NotAFileError("is a directory, use move_dir or mv", path=source)
    with reraise(destination):
        os.rename(source, destination)


def move_dir(
    source: str | os.PathLike[str],
    destination: str | os.PathLike[str],
) -> None:
    """Move a directory from `source` to `destination`.

    :raises NotFoundError: If `source` does not exist.
    :raises NotADirectoryError: If `source` is not a directory, use
        `move_file` or `mv` instead.
    """
    with reraise(source):
        st = os.stat(source)
    if not stat.S_ISDIR(st.st_mode):
        raise NotADirectoryError(
            "not a directory, use move_file or mv", path=source
        )
    with reraise(destination):
        os.rename(source, destination)


def mv(
    source: str | os.PathLike[str],
    destination: str | os.PathLike[str],
) -> None:
    """Move a file or a directory from `source` to `destination`."""
    with reraise(source):
        os.rename(source, destination)


def _same_file(st: os.stat_result, path: str | os.PathLike[str]) -> bool:
    try:
        other = os.stat(path)
    except OSError:
        return False
    return os.path.samestat(st, other)


def copy_file(
    source: str | os.PathLike[str],
    destination: str | os.PathLike[str],
    buffer_size: int = _DEFAULT_BUFFER_SIZE,
    preserve_mode: bool = True,
) -> None:
    """Copy the content of a file into `destination`.

    The destination is created or truncated. Source is opened first so
    a missing source never leaves an empty destination behind.

    :param source: File to copy from.
    :param destination: File to copy to.
    :param buffer_size: Chunk size used while copying, defaults to
        64 KiB.
    :param preserve_mode: Whether to copy permission bits as well,
        defaults to `True`.
    :raises NotFoundError: If `source` does not exist.
    :raises NotAFileError: If `source` is a directory, use `copy_tree`
        or `cp` instead.
    :raises SameFileError: If `destination` is `source`, possibly
        through a link.
    """
    with reraise(source), open(source, "rb") as reader:
        st = os.fstat(reader.fileno())
        if stat.S_ISDIR(st.st_mode):
            raise NotAFileError(
                "is a directory, use copy_tree or cp", path=source
            )
        if _same_file(st, destination):
            raise SameFileError(
                "source and destination are the same file", path=destination
            )
        with reraise(destination), open(destination, "wb") as writer:
            shutil.copyfileobj(reader, writer, buffer_size)
    if preserve_mode:
        with reraise(destination):
            os.chmod(destination, stat.S_IMODE(st.st_mode))
