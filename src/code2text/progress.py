"""Transient progress line shown while files are being collected."""

import sys
from typing import Optional, TextIO


class ProgressReporter:
    """Prints ``Processed: N, Skipped: M`` and overwrites it on every update.

    Attributes:
        stream: Destination stream; the current sys.stdout by default.
        enabled: When False, updates are ignored.

    Example:
        >>> import io
        >>> stream = io.StringIO()
        >>> reporter = ProgressReporter(stream)
        >>> reporter.update(1, 0)
        >>> reporter.update(2, 5)
        >>> reporter.finish()
        >>> stream.getvalue()
        '\\rProcessed: 1, Skipped: 0\\rProcessed: 2, Skipped: 5\\n'
    """

    def __init__(self, stream: Optional[TextIO] = None, enabled: bool = True) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.enabled = enabled
        self._shown = False

    def update(self, processed: int, skipped: int) -> None:
        if not self.enabled:
            return
        self.stream.write(f"\rProcessed: {processed}, Skipped: {skipped}")
        self.stream.flush()
        self._shown = True

    def finish(self) -> None:
        """End the progress line so following output starts on a fresh line."""
        if self._shown:
            self.stream.write("\n")
            self.stream.flush()
            self._shown = False
