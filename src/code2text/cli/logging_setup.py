"""Structured log output for the code2text CLI.

Records are rendered as a single line of ``key=value`` pairs, starting with the
time, level and message, followed by any fields passed through ``extra=``:

    time=2024-05-01T12:00:00 level=WARNING msg="Error reading file, skipping" path=/src/a.go error="..."
"""

import json
import logging
import sys
from typing import Optional, TextIO

# Attributes every LogRecord carries; anything else came in through extra=
_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}

_HANDLER_NAME = "code2text-cli"


def _format_value(value: object) -> str:
    """Render a field value, quoting it when it would be ambiguous.

    Example:
        >>> _format_value(3)
        '3'
        >>> _format_value("/tmp/a.py")
        '/tmp/a.py'
        >>> _format_value("permission denied")
        '"permission denied"'
        >>> _format_value("")
        '""'
    """
    text = str(value)
    if not text or any(char.isspace() or char in '"=' for char in text):
        return json.dumps(text, ensure_ascii=False)
    return text


class KeyValueFormatter(logging.Formatter):
    """Formats log records as ``key=value`` pairs on one line.

    Example:
        >>> record = logging.makeLogRecord(
        ...     {"msg": "Output saved", "levelname": "INFO", "path": "/tmp/out.txt"}
        ... )
        >>> KeyValueFormatter().format(record).split(" ", 1)[1]
        'level=INFO msg="Output saved" path=/tmp/out.txt'
    """

    def __init__(self) -> None:
        super().__init__(datefmt="%Y-%m-%dT%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        parts = [
            f"time={self.formatTime(record, self.datefmt)}",
            f"level={record.levelname}",
            f"msg={_format_value(record.getMessage())}",
        ]
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                parts.append(f"{key}={_format_value(value)}")

        line = " ".join(parts)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class _CLIStreamHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Stream handler that re-raises BrokenPipeError instead of reporting it on stderr."""

    def handleError(self, record: logging.LogRecord) -> None:
        if isinstance(sys.exc_info()[1], BrokenPipeError):
            raise
        super().handleError(record)


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Logger:
    """Send code2text log records to stdout (or ``stream``) in key=value form.

    Calling this again replaces the handler installed by a previous call.

    Args:
        level: Minimum level to emit. Defaults to INFO.
        stream: Destination stream. Defaults to the current sys.stdout.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("code2text")
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = _CLIStreamHandler(stream if stream is not None else sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(KeyValueFormatter())
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
