# topmark:header:start
#
#   project      : structcheck
#   file         : logging.py
#   file_relpath : src/structcheck/core/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for structcheck: a TRACE level below DEBUG and colored output.

The library itself never installs handlers on import; applications (and the test
suite) call [`setup_logging`][structcheck.core.logging.setup_logging] explicitly.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "STRUCTCHECK_LOG_LEVEL"


class StructcheckLogger(logging.Logger):
    """Logger class with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    # Expose TRACE_LEVEL as logging.TRACE
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(StructcheckLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Formatter that outputs log records with chalk-colored formatting based on severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message as a string.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        # Fallback color for lower-than-TRACE levels
        return chalk.dim.red(message)


def resolve_env_log_level() -> int | None:
    """Return a logging level from environment or None if unset.

    Honors ``STRUCTCHECK_LOG_LEVEL`` (e.g., "TRACE", "DEBUG", "INFO", numeric "10").

    Returns:
        int | None: The resolved level, or ``None`` when unset or unrecognized.
    """
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    name_to_level = {
        "TRACE": TRACE_LEVEL,
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
        "FATAL": logging.CRITICAL,
        "NOTSET": logging.NOTSET,
    }
    return name_to_level.get(v)


def setup_logging(level: int | None = None) -> None:
    """Configure the ``structcheck`` logger with a log level and colored output.

    If ``level`` is None, the environment is consulted via
    [`resolve_env_log_level`][structcheck.core.logging.resolve_env_log_level].
    Default is CRITICAL when unspecified. Records stop at the ``structcheck``
    logger and do not propagate to the root logger.

    Args:
        level (int | None): Explicit logging level, or ``None`` to use the environment.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    pkg_logger = logging.getLogger("structcheck")
    pkg_logger.setLevel(level)

    # Remove existing handlers to prevent duplicate log messages
    for handler in pkg_logger.handlers[:]:
        pkg_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    # Use the detailed format below INFO
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False


def get_logger(name: str) -> StructcheckLogger:
    """Retrieve a StructcheckLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        StructcheckLogger: A StructcheckLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("StructcheckLogger", logger)
