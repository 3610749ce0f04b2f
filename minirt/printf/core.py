"""Formatted output built on the conversion parser and printers."""

from __future__ import annotations

import enum
import sys
from typing import TextIO

from .printers import render_spec
from .spec import parse_spec


class LogLevel(enum.IntEnum):
    """Severity of a log message; NO_LOG silences everything."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4
    NO_LOG = 5


_LEVEL_PREFIXES = {
    LogLevel.DEBUG: "[DEBUG] ",
    LogLevel.INFO: "[INFO] ",
    LogLevel.WARNING: "[WARNING] ",
    LogLevel.ERROR: "[ERROR] ",
    LogLevel.CRITICAL: "[CRITICAL] ",
}

DEFAULT_LOG_LEVEL = LogLevel.NO_LOG


def sprintf(fmt: str, *args: object) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Supports the ``c s p d i u x X %`` conversions with the ``- 0 . # + space``
    flags, width, precision and ``*``. Raises ValueError for a malformed or
    unknown conversion and TypeError when arguments run out.
    """
    arg_iter = iter(args)
    parts: list[str] = []
    pos = 0
    length = len(fmt)
    while pos < length:
        percent = fmt.find("%", pos)
        if percent < 0:
            parts.append(fmt[pos:])
            break
        parts.append(fmt[pos:percent])
        spec, consumed = parse_spec(fmt, percent)
        parts.append(render_spec(spec, arg_iter))
        pos = percent + consumed
    return "".join(parts)


def printf_to(stream: TextIO, fmt: str, *args: object) -> int:
    """Write formatted text to ``stream`` and return the number of characters written."""
    text = sprintf(fmt, *args)
    stream.write(text)
    return len(text)


def printf(fmt: str, *args: object) -> int:
    """Write formatted text to standard output and return its length."""
    return printf_to(sys.stdout, fmt, *args)


def log_to(
    level: LogLevel,
    stream: TextIO,
    fmt: str,
    *args: object,
    threshold: LogLevel = DEFAULT_LOG_LEVEL,
) -> int:
    """Write a level-prefixed message if ``level`` reaches ``threshold``.

    Returns the number of characters written, 0 when the message is filtered.
    """
    level = LogLevel(level)
    if level < threshold:
        return 0
    text = _LEVEL_PREFIXES.get(level, "") + sprintf(fmt, *args)
    stream.write(text)
    return len(text)