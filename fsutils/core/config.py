"""\
Configurations
=============

Author: Akshay Mestry <xa@mes3.dev>
Created on: Saturday, August 02 2025
Last updated on: Monday, October 19 2026

This module provides various configurations that are used throughout this
library, from the behaviour of the tree copier to logging and telemetry.
"""

from __future__ import annotations

import threading
import typing as t
from weakref import WeakKeyDictionary as WKDictionary

from fsutils.core.error import ConfigValidationError


if t.TYPE_CHECKING:
    from collections.abc import Iterable

__all__: tuple[str, ...] = (
    "Config",
    "ConsoleLoggerConfig",
    "CopyConfig",
    "FileLoggerConfig",
    "LoggerConfig",
    "TTYLoggerConfig",
    "TelemetryConfig",
    "config_property",
)

_ALLOWED_LOG_LEVELS: tuple[str, ...] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)
# NOTE(xames3): The default log format uses the special `qualName`
# attribute which is filled in by the `ColouredFormatter` with the
# logger name and the calling function.
_DEFAULT_LOG_FMT: t.Final[str] = (
    "%(asctime)s %(levelname)s %(qualName)s:%(lineno)d %(extra)s: %(message)s"
)
_DEFAULT_LOG_DATEFMT: t.Final[str] = "%Y-%m-%dT%H:%M:%SZ"
_DEFAULT_BUFFER_SIZE: t.Final[int] = 64 * 1024
_MAX_BUFFER_SIZE: t.Final[int] = 64 * 1024 * 1024

T = t.TypeVar("T")


class config_property(t.Generic[T]):  # noqa: N801
    """Descriptor for configuration properties.

    This descriptor class creates and provides functionalities like
    Python's built-in `property` object decorator, but with additional
    features for configuration management like default values, allowed
    values, numeric ranges, custom checks and immutability.

    Validation of a new value happens under a per-instance re-entrant
    lock, so a configuration object can be shared between threads.

    :param default: Default value of the property.
    :param frozen: Whether the property is read-only, defaults to
        `False`.
    :param description: Human readable description, defaults to `None`.
    :param allowed: Iterable of allowed values, defaults to `None`.
    :param check: Callable returning `True` for valid values, defaults
        to `None`.
    :param between: Inclusive `(minimum, maximum)` range, defaults to
        `None`.
    """

    __slots__: tuple[str, ...] = (
        "allowed",
        "between",
        "check",
        "default",
        "description",
        "frozen",
        "locks",
        "property",
        "validate",
    )

    _object_locks: WKDictionary[object, threading.RLock] = WKDictionary()
    _global_lock: threading.RLock = threading.RLock()

    def __init__(
        self,
        default: T,
        *,
        frozen: bool = False,
        description: str | None = None,
        allowed: Iterable[T] | None = None,
        check: t.Callable[[T], bool] | None = None,
        between: tuple[int | float, ...] | None = None,
    ) -> None:
        """Initialise configuration property."""
        self.default = default
        self.frozen = frozen
        self.description = description
        self.allowed = allowed
        self.check = check
        self.between = between
        self.property: str = ""
        self.validate: bool = any([self.between, self.check, self.allowed])
        self.locks: dict[int, threading.RLock] = {}

    def __set_name__(self, instance: type, value: str) -> None:
        """Configure and set the property value on the owner class.

        This method sets the name of the private attribute backing the
        property and validates the default value once, at class
        creation time.

        :param instance: The class where the property is being set.
        :param value: The name of the property to be set.
        :raises ConfigValidationError: If the default value is invalid.
        """
        self.property = f"_{value}"
        if self.default is not None and self.validate:
            try:
                self.__validate__(self.default)
            except ConfigValidationError as error:
                raise ConfigValidationError(
                    f"got invalid value for {value!r}: {error}"
                ) from error
        setattr(instance, self.property, self.default)

    @t.overload
    def __get__(self, instance: None, owner: type) -> config_property[T]: ...

    @t.overload
    def __get__(self, instance: object, owner: type) -> T: ...

    def __get__(
        self,
        instance: object | None,
        owner: type,
    ) -> config_property[T] | T:
        """Get and return the property value from the instance.

        :param instance: The class instance where the property is being
            accessed.
        :param owner: The owner class of the property (not used).
        :return: The value of the property from the instance.
        """
        if instance is None:
            return self
        return getattr(instance, self.property, self.default)

    def __set__(self, instance: object, value: T) -> None:
        """Set the property with validation & immutability checks.

        :param instance: The class instance where the property is being
            set.
        :param value: The value to be set for the property.
        :raises ConfigValidationError: If the property is frozen or the
            value is invalid.
        """
        if self.frozen:
            raise ConfigValidationError(
                f"cannot modify frozen property: {self.property[1:]!r}",
            )
        if self.validate:
            with self._acquire_lock(instance):
                self.__validate__(value)
        setattr(instance, self.property, value)

    def __validate__(self, value: t.Any) -> None:
        """Validate the property value based on constraints.

        This method performs validation checks on the property value
        based on the provided constraints such as `allowed`, `check`,
        and `between`.

        :param value: The value to be validated.
        :raises ConfigValidationError: If the value does not meet the
            validation criteria.
        """
        if self.allowed is not None and value not in self.allowed:
            raise ConfigValidationError(
                f"{value!r} is not one of the allowed values "
                f"({', '.join(str(item) for item in self.allowed)})"
            )
        if self.check is not None:
            try:
                if not self.check(value):
                    raise ConfigValidationError("property validation failed")
            except ConfigValidationError:
                raise
            except Exception as error:
                raise ConfigValidationError(
                    f"property validation failed for {value!r} with "
                    f"message: {error}"
                ) from error
        if self.between is not None and len(self.between) == 2:
            minimum, maximum = self.between
            if not all(
                isinstance(num, int | float) for num in (minimum, maximum)
            ):
                raise ConfigValidationError("must be a tuple of two numbers")
            if not (minimum <= value <= maximum):
                raise ConfigValidationError(
                    f"{value} is not between {minimum} and {maximum}"
                )

    def _acquire_lock(self, instance: object) -> threading.RLock:
        """Return the lock guarding validation for an instance.

        Instances supporting weak references get their lock from a
        shared weak dictionary, so the lock goes away with the instance.
        Others fall back to a per-descriptor dictionary keyed by `id`.

        :param instance: The class instance where the property is being
            set.
        :return: A re-entrant lock for the instance.
        """
        with self._global_lock:
            try:
                lock = self._object_locks.get(instance)
                if lock is None:
                    lock = self._object_locks[instance] = threading.RLock()
                return lock
            except TypeError:
                return self.locks.setdefault(id(instance), threading.RLock())


class CopyConfig:
    """Tree copier configuration.

    This class controls how `copy_tree` treats symbolic links, file
    permission bits and the chunk size used when copying file content.
    """

    symlinks: config_property[bool] = config_property(
        False,
        allowed=[True, False],
        description="Recreate symbolic links instead of following them.",
    )
    preserve_file_mode: config_property[bool] = config_property(
        True,
        allowed=[True, False],
        description="Copy permission bits of regular files.",
    )
    buffer_size: config_property[int] = config_property(
        _DEFAULT_BUFFER_SIZE,
        between=(1, _MAX_BUFFER_SIZE),
    )


class FileLoggerConfig:
    """File logger configuration.

    This class provides configuration options for logging to a file with
    options for log rotation and backup retention. File logging is off
    unless explicitly enabled.
    """

    enable: config_property[bool] = config_property(
        False,
        allowed=[True, False],
    )
    level: config_property[str] = config_property(
        "INFO",
        allowed=_ALLOWED_LOG_LEVELS,
    )
    fmt: config_property[str] = config_property(_DEFAULT_LOG_FMT)
    datefmt: config_property[str] = config_property(_DEFAULT_LOG_DATEFMT)
    path: config_property[str] = config_property(
        "logs",
        check=lambda x: bool(x),
    )
    output: config_property[str] = config_property("fsutils.log")
    encoding: config_property[str] = config_property("utf-8", frozen=True)
    max_bytes: config_property[int] = config_property(10485760)
    backups: config_property[int] = config_property(5, check=lambda x: x >= 0)


class ConsoleLoggerConfig:
    """Console logger configuration.

    This class provides configuration options for logging to the console
    or the tty.
    """

    enable: config_property[bool] = config_property(
        True,
        allowed=[True, False],
    )
    level: config_property[str] = config_property(
        "DEBUG",
        allowed=_ALLOWED_LOG_LEVELS,
    )
    fmt: config_property[str] = config_property(_DEFAULT_LOG_FMT)
    datefmt: config_property[str] = config_property(_DEFAULT_LOG_DATEFMT)
    colour: config_property[bool] = config_property(
        True,
        allowed=[True, False],
    )


TTYLoggerConfig = ConsoleLoggerConfig


class LoggerConfig:
    """Logger configuration.

    This class provides a unified configuration for logging. It combines
    the file and console logger configurations.
    """

    level: config_property[str] = config_property(
        "DEBUG",
        allowed=_ALLOWED_LOG_LEVELS,
    )
    fmt: config_property[str] = config_property(_DEFAULT_LOG_FMT)
    datefmt: config_property[str] = config_property(_DEFAULT_LOG_DATEFMT)
    as_json: config_property[bool] = config_property(
        False,
        allowed=[True, False],
    )
    file: FileLoggerConfig = FileLoggerConfig()
    tty: TTYLoggerConfig = TTYLoggerConfig()


class TelemetryConfig:
    """Telemetry configuration for OpenTelemetry tracing."""

    enable: config_property[bool] = config_property(
        False,
        allowed=[True, False],
    )
    name: config_property[str | None] = config_property(None)
    debug: config_property[bool] = config_property(
        False,
        allowed=[True, False],
    )


class Config:
    """Configuration.

    This class serves as the main configuration object for the library.
    It provides a centralised place to manage the copier, logging and
    telemetry settings.
    """

    name: config_property[str] = config_property("fsutils", frozen=True)
    version: config_property[str] = config_property("19.10.2026", frozen=True)
    copy: CopyConfig = CopyConfig()
    logger: LoggerConfig = LoggerConfig()
    telemetry: TelemetryConfig = TelemetryConfig()
