"""Banner-wrapped records making up the concatenated output."""

import os
from dataclasses import dataclass

SEPARATOR = "=" * 80


@dataclass(frozen=True)
class OutputRecord:
    """One included file as it appears in the output.

    The record is rendered as a blank line, a separator line of 80 ``=`` characters,
    a ``File: <relative path>`` line, another separator line, a blank line, the raw
    file content and a trailing newline. The content is passed through byte-for-byte;
    only the banner is encoded, using the filesystem encoding so that any filename
    round-trips.

    Attributes:
        relative_path: Path of the file relative to the scanned root.
        content: Raw file content.

    Example:
        >>> record = OutputRecord("main.go", b"package main\\n")
        >>> lines = record.render().split(b"\\n")
        >>> lines[1] == SEPARATOR.encode() and lines[3] == SEPARATOR.encode()
        True
        >>> lines[2]
        b'File: main.go'
        >>> lines[5]
        b'package main'
    """

    relative_path: str
    content: bytes

    def render(self) -> bytes:
        header = f"\n{SEPARATOR}\nFile: {self.relative_path}\n{SEPARATOR}\n\n"
        return os.fsencode(header) + self.content + b"\n"
