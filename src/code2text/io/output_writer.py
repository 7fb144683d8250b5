"""Output file writing for code2text.

This module provides a small writer that turns every failure to create or write the
output file into an OutputWriteError, the fatal error class the CLI reports.
"""

import types
from pathlib import Path
from typing import BinaryIO, Optional, Type

from code2text.exceptions import OutputWriteError
from code2text.types import PathType


class OutputWriter:
    """Writes the concatenated output to a file, creating or truncating it.

    Attributes:
        path: Path of the output file.

    Example:
        >>> with OutputWriter("code_output.txt") as writer:  # doctest: +SKIP
        ...     writer.write(b"...")
    """

    def __init__(self, path: PathType) -> None:
        """Open the output file for writing.

        Args:
            path: Output file path. An existing file is overwritten.

        Raises:
            OutputWriteError: If the file cannot be created.
        """
        self.path = Path(path)
        self._closed = False
        try:
            self._file_obj: BinaryIO = self.path.open("wb")
        except OSError as e:
            raise OutputWriteError(str(self.path), f"error creating output file ({e})") from e

    def write(self, data: bytes) -> None:
        """Write data to the output file.

        Args:
            data: Bytes to write.

        Raises:
            OutputWriteError: If an I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed OutputWriter")

        try:
            self._file_obj.write(data)
        except OSError as e:
            raise OutputWriteError(str(self.path), f"error writing to output file ({e})") from e

    def close(self) -> None:
        """Flush and close the output file.

        Raises:
            OutputWriteError: If buffered data cannot be flushed.
        """
        if self._closed:
            return

        self._closed = True
        try:
            self._file_obj.close()
        except OSError as e:
            raise OutputWriteError(str(self.path), f"error writing to output file ({e})") from e

    def __enter__(self) -> "OutputWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the file when leaving the with block.

        If closing fails while another exception is already propagating, the original
        exception wins.
        """
        try:
            self.close()
        except OutputWriteError:
            if exc_type is None:
                raise
