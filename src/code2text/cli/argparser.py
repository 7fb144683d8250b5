"""Command-line argument parsing for code2text.

This module defines the command-line interface for code2text,
handling argument parsing, validation and translation into a ScanConfig.
"""

import argparse
import logging
import math
from pathlib import Path

from code2text import __version__
from code2text.config import DEFAULT_OUTPUT_FILE, DEFAULT_THRESHOLD_MB, ScanConfig, parse_comma_list


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with code2text's options.
    """
    description = """
    code2text: Concatenates code files into a single text file.

    Scans a directory (the current directory by default) and its subdirectories,
    applying filters for file type, size, and binary content, then concatenates the
    results into a single text file. Each file is preceded by a banner naming its
    path relative to the scanned directory.

    Filtering:
    - Well-known build, dependency, cache and VCS directories are never walked
    - Files are selected by extension (.go, .py, ...) or exact name (Dockerfile, Makefile)
    - Files above the size threshold are skipped
    - Files that look binary are skipped
    - The output file itself is never included, even on repeated runs
    """

    epilog = """
    Examples:
      # Concatenate the current directory into code_output.txt
      code2text

      # Choose the output file
      code2text -o project_src.txt

      # Raise the size threshold to 1 MiB and add extensions
      code2text -t 1 --extensions .config,script

      # Disable the size threshold
      code2text -t 0

      # Exclude more directories by name
      code2text --exclude-dirs test_data,temp_files

      # Exclude paths with gitignore-style patterns
      code2text -i "*.min.js" -i "docs/generated/"

      # Scan another directory, logging every skipped file
      code2text -v /path/to/project

      # Display version information and exit
      code2text --version
    """

    parser = argparse.ArgumentParser(
        prog="code2text",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"code2text {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=None,
        help="The directory to scan (default: current directory). Paths in the output are relative to it.",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        default=DEFAULT_OUTPUT_FILE,
        help=f"Specify output file path (default: {DEFAULT_OUTPUT_FILE}).",
    )
    parser.add_argument(
        "-t",
        "--threshold",
        type=float,
        metavar="MB",
        default=DEFAULT_THRESHOLD_MB,
        help=f"Set file size threshold in MB (0 or negative to disable, default: {DEFAULT_THRESHOLD_MB}).",
    )
    parser.add_argument(
        "--extensions",
        metavar="LIST",
        default="",
        help="Comma-separated list of additional code file extensions to include (e.g., .txt,.log).",
    )
    parser.add_argument(
        "--exclude-dirs",
        metavar="LIST",
        default="",
        help="Comma-separated list of directories to exclude (e.g., my_build,custom_assets).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="PATTERN",
        action="append",
        default=[],
        help=(
            "Gitignore-style pattern matched against paths relative to the scanned directory. "
            "Can be specified multiple times; later patterns override earlier ones."
        ),
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Do not print the running processed/skipped counter.",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every skipped file and pruned directory.",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log warnings and errors.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if not math.isfinite(args.threshold):
        raise ValueError(f"--threshold must be a finite number, got {args.threshold}")

    if not args.output.strip():
        raise ValueError("--output must not be empty")


def get_log_level(args: argparse.Namespace) -> int:
    """Map the verbosity flags to a logging level."""
    if args.verbose:
        return logging.DEBUG
    if args.quiet:
        return logging.WARNING
    return logging.INFO


def build_config(args: argparse.Namespace) -> ScanConfig:
    """Translate parsed arguments into a run configuration.

    Args:
        args: Parsed and validated command-line arguments.

    Returns:
        A ScanConfig for the run.
    """
    return ScanConfig(
        output_path=args.output,
        threshold_mb=args.threshold,
        extra_extensions=parse_comma_list(args.extensions),
        extra_exclude_dirs=parse_comma_list(args.exclude_dirs),
        ignore_patterns=list(args.ignore),
    )
