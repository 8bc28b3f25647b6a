"""\
Logging
=======

Author: Akshay Mestry <xa@mes3.dev>
Created on: Friday, July 04 2025
Last updated on: Monday, October 19 2026

This module provides logging utilities and configuration helpers for
fsutils. The library itself only ever logs at `DEBUG` level and never
installs handlers on import; applications decide where the records go
by calling `configure` with a `LoggerConfig`.

It includes custom formatters for coloured and JSON output with
automatic handling of `extra` fields, and a decorator which times
function calls.
"""

from __future__ import annotations

import functools
import json
import logging
import logging.handlers
import sys
import time
import typing as t
from pathlib import Path

if t.TYPE_CHECKING:
    from fsutils.core.config import LoggerConfig

__all__: list[str] = [
    "ColouredFormatter",
    "FSUtilsFormatter",
    "JSONFormatter",
    "configure",
    "get_logger",
    "perf_logger",
]


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    This formatter outputs log records in JSON format. It captures the
    timestamp, log level, logger name, message, module, function, line
    number, and any exception information.

    :param extras: Whether to include extra fields in output, defaults
        to `True`.
    """

    def __init__(self, extras: bool = True):
        """Initialise the JSON formatter instance."""
        super().__init__()
        self.extras = extras

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        :param record: The log record to format.
        :return: JSON-formatted log message.
        """
        payload = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        if self.extras:
            for key, value in record.__dict__.items():
                if (
                    key not in payload
                    and key not in FSUtilsFormatter.LOG_RECORD_ATTRS
                    and not key.startswith("_")
                ):
                    payload[key] = value
        return json.dumps(payload, default=str)


class FSUtilsFormatter(logging.Formatter):
    """Custom formatter that automatically includes extra fields.

    This formatter detects extra fields (those not part of the standard
    `LogRecord` attributes) and renders them into the `%(extra)s`
    placeholder of the format string.

    :param fmt: The format string for log messages, defaults to `None`.
    :param datefmt: The format string for timestamps, defaults to
        `None`.
    :param extra_format: Format string for individual extra fields.
    :param extra_separator: Separator between multiple extra fields,
        defaults to a single space.
    :param allow_empty_extra: Whether to allow the extra placeholder
        when no extra fields are present, defaults to `False`.
    :var LOG_RECORD_ATTRS: Set of standard `LogRecord` attributes.
    """

    LOG_RECORD_ATTRS = {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "getMessage",
        "exc_info",
        "exc_text",
        "stack_info",
        "message",
        "asctime",
        "taskName",
        "qualName",
        "extra",
    }

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        extra_format: str = "{key}: {value}",
        extra_separator: str = " ",
        allow_empty_extra: bool = False,
    ) -> None:
        """Initialise the custom formatter."""
        super().__init__(fmt, datefmt)
        self.extra = extra_format
        self.extra_separator = extra_separator
        self.allow_empty_extra = allow_empty_extra

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with automatic extra field handling.

        :param record: The log record to format.
        :return: Formatted log message with extra fields.
        """
        clone = logging.makeLogRecord(record.__dict__)
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in self.LOG_RECORD_ATTRS and not key.startswith("_")
        }
        if extras:
            entries = [
                self.extra.format(key=key, value=value)
                for key, value in sorted(extras.items())
            ]
            clone.extra = self.extra_separator.join(entries) + " "
        else:
            clone.extra = ""
        if not hasattr(clone, "qualName"):
            clone.qualName = record.name
        return super().format(clone)


class ColouredFormatter(FSUtilsFormatter):
    """Coloured formatter with qualified function names.

    Log lines carry `logger.function` as `%(qualName)s` with the level
    name right aligned. Colours are only applied when `is_tty` is set,
    so that log files remain free of ANSI escape sequences.

    :var COLORS: Dictionary mapping log levels to ANSI colour codes.
    """

    COLORS = {
        "DEBUG": "\x1b[38;5;14m",
        "INFO": "\x1b[38;5;41m",
        "WARNING": "\x1b[38;5;215m",
        "ERROR": "\x1b[38;5;204m",
        "CRITICAL": "\x1b[38;5;197m",
        "QUALNAME": "\x1b[38;5;140m",
        "RESET": "\x1b[0m",
    }

    is_tty: bool = False

    def make_qualname(self, record: logging.LogRecord) -> str:
        """Return `logger.function` for the record."""
        if record.funcName and record.funcName != "<module>":
            return f"{record.name}.{record.funcName}"
        return record.name

    def format(self, record: logging.LogRecord) -> str:
        """Format log record.

        :param record: The log record to format.
        :return: Formatted log message, with colours only for TTY
            output.
        """
        clone = logging.makeLogRecord(record.__dict__)
        qualname = self.make_qualname(record)
        if self.is_tty:
            colour = self.COLORS.get(record.levelname, self.COLORS["RESET"])
            clone.levelname = (
                f"{colour}{record.levelname:>8s}{self.COLORS['RESET']}"
            )
            clone.qualName = (
                f"{self.COLORS['QUALNAME']}{qualname}{self.COLORS['RESET']}"
            )
        else:
            clone.levelname = f"{record.levelname:>8s}"
            clone.qualName = qualname
        return super().format(clone)


def configure(config: LoggerConfig) -> None:
    """Configure logging based on provided configuration settings.

    This function replaces the handlers on the `fsutils` logger with a
    console handler and, if enabled, a rotating file handler. Records
    are formatted as JSON when `config.as_json` is set, otherwise with
    the `ColouredFormatter`.

    :param config: Logging configuration settings.
    """
    logger = logging.getLogger("fsutils")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(getattr(logging, config.level))
    if config.tty.enable:
        tty = logging.StreamHandler(sys.stdout)
        tty.setLevel(getattr(logging, config.tty.level))
        tty.setFormatter(
            _formatter(config, config.tty.fmt, config.tty.colour)
        )
        logger.addHandler(tty)
    if config.file.enable:
        directory = Path(config.file.path)
        directory.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            filename=directory / config.file.output,
            maxBytes=config.file.max_bytes,
            backupCount=config.file.backups,
            encoding=config.file.encoding,
        )
        handler.setLevel(getattr(logging, config.file.level))
        handler.setFormatter(_formatter(config, config.file.fmt, False))
        logger.addHandler(handler)


def _formatter(
    config: LoggerConfig,
    fmt: str,
    colour: bool,
) -> logging.Formatter:
    if config.as_json:
        return JSONFormatter()
    formatter = ColouredFormatter(
        fmt=fmt,
        datefmt=config.datefmt,
        extra_format="[{key}: {value}]",
        extra_separator=" ",
    )
    formatter.is_tty = colour
    return formatter


def get_logger(logger_name: str) -> logging.Logger:
    """Get a logger instance with the specified name.

    :param logger_name: Logger name.
    :return: Logger instance.
    """
    return logging.getLogger(logger_name)


def perf_logger(func: t.Callable[..., t.Any]) -> t.Callable[..., t.Any]:
    """Decorator to log function execution time.

    This decorator logs, at `DEBUG` level, how long the wrapped function
    took to complete. A failing call is logged with the error before
    the exception is re-raised unchanged to the caller.

    :param func: Function to wrap.
    :return: Wrapped function with performance logging.
    """

    @functools.wraps(func)
    def wrapper(*args: t.Any, **kwargs: t.Any) -> t.Any:
        """Wrapper function to log execution time."""
        logger = get_logger(func.__module__)
        started = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as exc:
            elapsed = time.perf_counter() - started
            logger.debug(
                f"Function {func.__qualname__!r} failed after "
                f"{elapsed:.4f}s: {exc}",
                extra={
                    "function": func.__qualname__,
                    "error": type(exc).__name__,
                    "elapsed": round(elapsed, 4),
                },
            )
            raise
        elapsed = time.perf_counter() - started
        logger.debug(
            f"Function {func.__qualname__!r} completed in {elapsed:.4f}s",
            extra={
                "function": func.__qualname__,
                "elapsed": round(elapsed, 4),
            },
        )
        return result

    return wrapper
