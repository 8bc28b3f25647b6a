"""\
Tree copier
===========

Author: Akshay Mestry <xa@mes3.dev>
Created on: Monday, October 19 2026
Last updated on: Monday, October 19 2026

This module provides the recursive directory copier. A source tree is
walked depth-first, the entries of each directory in sorted name order,
and every entry is recreated at the same relative path below the
destination root together with its permission bits.

The copy aborts on the first failure. Whatever was written up to that
point is left in place and the error, naming the failing path, is
raised to the caller. There is no rollback and no resumption: a failed
copy has to be started again.

Symbolic links are followed by default, so a link to a file is copied as
a regular file and a link to a directory is descended into. With
`CopyConfig.symlinks` set, links are recreated as links instead.
"""

from __future__ import annotations

import enum
import os
import stat
import typing as t
from dataclasses import dataclass

from opentelemetry import trace

from fsutils.core.config import Config
from fsutils.core.config import CopyConfig
from fsutils.core.error import IOFailureError
from fsutils.core.error import NotADirectoryError
from fsutils.core.error import SameFileError
from fsutils.core.error import reraise
from fsutils.utils.filesystem import _same_file
from fsutils.utils.filesystem import copy_file
from fsutils.utils.filesystem import mkdir
from fsutils.utils.logging import get_logger
from fsutils.utils.logging import perf_logger

if t.TYPE_CHECKING:
    from collections.abc import Iterator

__all__: tuple[str, ...] = (
    "EntryKind",
    "TreeEntry",
    "copy_dir",
    "copy_tree",
    "cp",
    "walk",
)

logger = get_logger(__name__)
tracer = trace.get_tracer(__name__)


class EntryKind(enum.Enum):
    """Kind of an entry found while walking a tree."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


@dataclass(frozen=True, slots=True)
class TreeEntry:
    """An entry discovered while walking a tree.

    :var relative: Path relative to the walked root, `.` for the root.
    :var kind: Kind of the entry.
    :var mode: Permission bits of the entry.
    :var source: Path of the entry including the walked root.
    """

    relative: str
    kind: EntryKind
    mode: int
    source: str


def walk(
    source_root: str | os.PathLike[str],
    symlinks: bool = False,
) -> Iterator[TreeEntry]:
    """Walk a directory tree depth-first in sorted name order.

    The root itself is yielded first, followed by every directory and
    file below it. Symbolic links are followed unless `symlinks` is set,
    in which case they are yielded as `EntryKind.SYMLINK` entries
    without being descended into. The walk keeps its own stack, so the
    depth of the tree is not bound by the interpreter recursion limit.

    :param source_root: Directory to walk.
    :param symlinks: Whether to report symbolic links as links, defaults
        to `False`.
    :return: Iterator over the entries of the tree.
    :raises NotFoundError: If the root or an entry does not exist, which
        includes broken symbolic links being followed.
    :raises NotADirectoryError: If the root is not a directory.
    :raises IOFailureError: If a followed link leads back to one of its
        own ancestors, or an entry is neither a file nor a directory.
    """
    root = os.fspath(source_root)
    with reraise(root):
        st = os.stat(root)
    if not stat.S_ISDIR(st.st_mode):
        raise NotADirectoryError("not a directory", path=root)
    mode = stat.S_IMODE(st.st_mode)
    yield TreeEntry(os.curdir, EntryKind.DIRECTORY, mode, root)
    key = (st.st_dev, st.st_ino)
    # One sorted child iterator per directory on the current path.
    ancestors = {key}
    stack = [(key, _children(root))]
    while stack:
        key, children = stack[-1]
        child = next(children, None)
        if child is None:
            stack.pop()
            ancestors.discard(key)
            continue
        relative = os.path.relpath(child.path, root)
        with reraise(child.path):
            if symlinks and child.is_symlink():
                st = child.stat(follow_symlinks=False)
                kind = EntryKind.SYMLINK
            else:
                st = os.stat(child.path)
                kind = _kind(child.path, st)
        entry = TreeEntry(relative, kind, stat.S_IMODE(st.st_mode), child.path)
        if kind is not EntryKind.DIRECTORY:
            yield entry
            continue
        key = (st.st_dev, st.st_ino)
        if key in ancestors:
            raise IOFailureError("symbolic link loop", path=child.path)
        yield entry
        ancestors.add(key)
        stack.append((key, _children(child.path)))


def _children(directory: str) -> Iterator[os.DirEntry[str]]:
    with reraise(directory), os.scandir(directory) as entries:
        children = sorted(entries, key=lambda entry: entry.name)
    return iter(children)


def _kind(path: str, st: os.stat_result) -> EntryKind:
    if stat.S_ISDIR(st.st_mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(st.st_mode):
        return EntryKind.FILE
    raise IOFailureError("unsupported file type", path=path)


def _copy_link(source: str, target: str) -> None:
    with reraise(source):
        link = os.readlink(source)
    with reraise(target):
        if os.path.islink(target) or (
            os.path.lexists(target) and not os.path.isdir(target)
        ):
            os.unlink(target)
        os.symlink(link, target)


@perf_logger
def copy_tree(
    source_root: str | os.PathLike[str],
    destination_root: str | os.PathLike[str],
    config: CopyConfig | None = None,
) -> None:
    """Copy a directory tree recursively.

    The source tree is walked in full before anything is written, so
    nothing is created when the source root is missing, and copying a
    tree into one of its own subdirectories only copies what existed
    beforehand. Directories are created with all missing ancestors and
    existing ones are reused. Files are created or truncated and their
    content copied verbatim. Unrelated entries already present below the
    destination root are left alone.

    Directory permission bits are applied after their content has been
    copied, deepest first, so read-only source directories can still be
    reproduced.

    Example::

        .. code-block:: python

            copy_tree("a", "a-copy")

    :param source_root: Existing directory to copy from.
    :param destination_root: Directory to copy into, created if missing.
    :param config: Copier configuration, defaults to `Config.copy`.
    :raises NotFoundError: If the source root or an entry is missing.
    :raises NotADirectoryError: If the source root is not a directory.
    :raises SameFileError: If the destination root is the source root.
    :raises PermissionDeniedError: If reading or writing is not allowed.
    :raises IOFailureError: For any other input/output failure.
    """
    if config is None:
        config = Config.copy
    source = os.fspath(source_root)
    destination = os.fspath(destination_root)
    with tracer.start_as_current_span("fsutils.copy_tree") as span:
        span.set_attribute("fsutils.source", source)
        span.set_attribute("fsutils.destination", destination)
        entries = list(walk(source, symlinks=config.symlinks))
        with reraise(source):
            st = os.stat(source)
        if _same_file(st, destination):
            raise SameFileError(
                "cannot copy a tree onto itself", path=destination
            )
        span.set_attribute("fsutils.entries", len(entries))
        directories: list[tuple[str, int]] = []
        for entry in entries:
            target = os.path.join(destination, entry.relative)
            target = os.path.normpath(target)
            if entry.kind is EntryKind.DIRECTORY:
                mkdir(target, mode=entry.mode | stat.S_IRWXU)
                directories.append((target, entry.mode))
            elif entry.kind is EntryKind.FILE:
                copy_file(
                    entry.source,
                    target,
                    buffer_size=config.buffer_size,
                    preserve_mode=config.preserve_file_mode,
                )
            else:
                _copy_link(entry.source, target)
        for target, mode in reversed(directories):
            with reraise(target):
                os.chmod(target, mode)
    logger.debug(
        f"Copied {len(entries)} entries from {source!r} to {destination!r}",
        extra={"entries": len(entries)},
    )


copy_dir = copy_tree


def cp(
    source: str | os.PathLike[str],
    destination: str | os.PathLike[str],
    config: CopyConfig | None = None,
) -> None:
    """Copy a file or a directory.

    Directories are copied with `copy_tree`, anything else with
    `copy_file`.

    :param source: File or directory to copy from.
    :param destination: Path to copy to.
    :param config: Copier configuration, defaults to `Config.copy`.
    :raises NotFoundError: If `source` does not exist.
    """
    if config is None:
        config = Config.copy
    with reraise(source):
        st = os.stat(source)
    if stat.S_ISDIR(st.st_mode):
        copy_tree(source, destination, config)
    else:
        copy_file(
            source,
            destination,
            buffer_size=config.buffer_size,
            preserve_mode=config.preserve_file_mode,
        )
