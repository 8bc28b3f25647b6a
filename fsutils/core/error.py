"""\
Error and warnings
==================

Author: Akshay Mestry <xa@mes3.dev>
Created on: Saturday, August 02 2025
Last updated on: Monday, October 19 2026

This module provides the error classes raised throughout this library.
Every failing filesystem call surfaces as a subclass of
`FilesystemError` which names the failing path and chains the original
`OSError` as its cause. The filesystem errors also derive from the
matching built-in `OSError` subclass, so callers catching, say,
`FileNotFoundError` keep working.
"""

from __future__ import annotations

import builtins
import contextlib
import errno
import os
import typing as t

if t.TYPE_CHECKING:
    from collections.abc import Iterator

__all__: tuple[str, ...] = (
    "AlreadyExistsError",
    "BaseError",
    "ConfigValidationError",
    "FilesystemError",
    "IOFailureError",
    "NotADirectoryError",
    "NotAFileError",
    "NotFoundError",
    "PermissionDeniedError",
    "SameFileError",
    "reraise",
    "translate",
)

Error = Exception


class BaseError(Error):
    """Base error class for all exceptions."""


class ConfigValidationError(BaseError):
    """Errors related to configuration validation failure."""


class FilesystemError(BaseError):
    """Errors related to a failing filesystem operation.

    :param message: The error message to be displayed.
    :param path: The path the operation failed on, defaults to `None`.
    """

    def __init__(
        self,
        message: str,
        *args: t.Any,
        path: str | os.PathLike[str] | None = None,
    ) -> None:
        """Initialise the filesystem error with the failing path."""
        super().__init__(message, *args)
        self.path = os.fspath(path) if path is not None else None
        if self.path is not None:
            self.message = f"{message} (Path: {self.path!r})"
        else:
            self.message = message

    def __str__(self) -> str:
        """Return the message along with the failing path."""
        return self.message

    def __repr__(self) -> str:
        """Return a string representation of the error."""
        return f"<{type(self).__name__}(message={self.message!r})>"


class NotFoundError(FilesystemError, FileNotFoundError):
    """Errors related to a path that does not exist."""


class NotADirectoryError(FilesystemError, builtins.NotADirectoryError):
    """Errors related to a path that was expected to be a directory."""


class NotAFileError(FilesystemError, IsADirectoryError):
    """Errors related to a directory passed where a file was expected."""


class PermissionDeniedError(FilesystemError, PermissionError):
    """Errors related to insufficient permissions on a path."""


class AlreadyExistsError(FilesystemError, FileExistsError):
    """Errors related to creating a path that already exists."""


class IOFailureError(FilesystemError, OSError):
    """Errors related to any other input/output failure."""


class SameFileError(FilesystemError, OSError):
    """Errors related to copying a path onto itself."""


_ERRNO_MAP: t.Final[dict[int, type[FilesystemError]]] = {
    errno.ENOENT: NotFoundError,
    errno.ENOTDIR: NotADirectoryError,
    errno.EISDIR: NotAFileError,
    errno.EACCES: PermissionDeniedError,
    errno.EPERM: PermissionDeniedError,
    errno.EEXIST: AlreadyExistsError,
}


def translate(
    error: OSError,
    path: str | os.PathLike[str] | None = None,
) -> FilesystemError:
    """Translate an `OSError` into the matching library error.

    The class is picked from the error number. Anything without a
    dedicated class becomes an `IOFailureError`. The failing path
    defaults to the filename recorded on the original error, and the
    error number and reason are carried over.

    :param error: The original operating system error.
    :param path: The path the operation failed on, defaults to `None`.
    :return: The translated, not yet raised, library error.
    """
    if isinstance(error, FilesystemError):
        return error
    klass = _ERRNO_MAP.get(error.errno or 0, IOFailureError)
    if path is None:
        path = error.filename
    reason = error.strerror or str(error)
    translated = klass(reason, path=path)
    translated.errno = error.errno
    translated.strerror = error.strerror
    return translated


@contextlib.contextmanager
def reraise(path: str | os.PathLike[str] | None = None) -> Iterator[None]:
    """Re-raise any `OSError` from the wrapped block as a library error.

    Example::

        .. code-block:: python

            with reraise(path):
                os.rename(path, destination)

    :param path: The path the wrapped block operates on, defaults to
        `None`.
    :raises FilesystemError: If the wrapped block raises an `OSError`.
    """
    try:
        yield
    except FilesystemError:
        raise
    except OSError as error:
        raise translate(error, path) from error
