"""Source tree to single text file concatenation utilities.

This package provides tools for scanning a directory tree, selecting text and
code files by name, size and content, and concatenating them into a single
annotated document suitable for review or for feeding to other tools.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("code2text")
except PackageNotFoundError:
    __version__ = "unknown"
