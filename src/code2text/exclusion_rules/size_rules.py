"""Size-based exclusion rules for filtering files by size."""

import os
from pathlib import Path
from typing import Union

from humanfriendly import format_size, parse_size

from .base_rules import BaseExclusionRules

BYTES_PER_MEBIBYTE = 1024 * 1024


def parse_file_size(size_str: str) -> int:
    """Parse human-readable file size to bytes.

    Args:
        size_str: Size string like '1GB', '500MB', '2.5K', '1MiB', or just '1024'

    Returns:
        Size in bytes

    Raises:
        ValueError: If size_str is not a valid size format

    Example:
        >>> parse_file_size("1MiB")
        1048576
        >>> parse_file_size("2KB")
        2000
    """
    try:
        return int(parse_size(size_str))
    except Exception as e:
        raise ValueError(f"Invalid size format '{size_str}': {e}")


def mebibytes_to_bytes(size_mb: float) -> int:
    """Convert a size in mebibytes to whole bytes, truncating any fraction.

    Example:
        >>> mebibytes_to_bytes(0.5)
        524288
        >>> mebibytes_to_bytes(-1)
        -1048576
    """
    return int(size_mb * BYTES_PER_MEBIBYTE)


class SizeExclusionRules(BaseExclusionRules):
    """Exclusion rules based on file size limits.

    Files strictly larger than the limit are excluded; a file exactly at the limit is
    kept. A limit of zero or less disables size filtering altogether, so nothing is
    excluded. The limit can be given as raw bytes, as a human-readable string
    ('512KiB', '1MB'), or in mebibytes through :meth:`from_mebibytes`.

    For symbolic links the target's size is checked, since the target's content is
    what ends up in the output.

    Attributes:
        max_size_bytes (int): Maximum allowed file size in bytes; non-positive when disabled.

    Example:
        >>> rules = SizeExclusionRules.from_mebibytes(0.5)
        >>> rules.max_size_bytes
        524288
        >>> rules.exceeds_limit(524288), rules.exceeds_limit(524289)
        (False, True)
        >>> SizeExclusionRules(0).has_rules()
        False
    """

    def __init__(self, max_size: Union[str, int]):
        """Initialize size exclusion rules.

        Args:
            max_size: Maximum file size. Can be:
                - String in human-readable format ('1GB', '500MB', '2.5K', '1MiB')
                - Integer representing bytes; zero or negative disables the limit

        Raises:
            ValueError: If max_size format is invalid
        """
        if isinstance(max_size, bool):
            raise ValueError(f"max_size must be string or int, got {type(max_size)}")
        if isinstance(max_size, str):
            self.max_size_bytes = parse_file_size(max_size)
        elif isinstance(max_size, int):
            self.max_size_bytes = max_size
        else:
            raise ValueError(f"max_size must be string or int, got {type(max_size)}")

    @classmethod
    def from_mebibytes(cls, size_mb: float) -> "SizeExclusionRules":
        """Create rules from a limit expressed in mebibytes.

        Args:
            size_mb: Limit in MiB. Zero or negative disables the limit.

        Returns:
            A SizeExclusionRules instance with the limit converted to bytes.
        """
        return cls(mebibytes_to_bytes(size_mb))

    def exceeds_limit(self, size_bytes: int) -> bool:
        """Check a known file size against the limit.

        Args:
            size_bytes: File size in bytes.

        Returns:
            True if the limit is enabled and the size is above it.
        """
        return self.has_rules() and size_bytes > self.max_size_bytes

    def exclude(self, path: str) -> bool:
        """Check if a file should be excluded based on size.

        Args:
            path: File path to check (can be relative or absolute).

        Returns:
            True if the file exceeds the size limit and should be excluded,
            False otherwise.

        Note:
            - Returns False for directories (directories don't have meaningful size)
            - Returns False if file size cannot be determined (permission errors, etc.)
        """
        if not self.has_rules():
            return False

        try:
            path_obj = Path(path)
            if not path_obj.is_file():
                return False
            return self.exceeds_limit(os.stat(path_obj).st_size)
        except OSError:
            return False

    def has_rules(self) -> bool:
        """Check if a size limit is in effect.

        Returns:
            True if the limit is positive, False if size filtering is disabled.
        """
        return self.max_size_bytes > 0

    def describe(self) -> str:
        """Render the limit for log messages.

        Example:
            >>> SizeExclusionRules(1048576).describe()
            '1 MiB'
            >>> SizeExclusionRules(-5).describe()
            'disabled'
        """
        if not self.has_rules():
            return "disabled"
        return format_size(self.max_size_bytes, binary=True)
