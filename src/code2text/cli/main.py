"""Command-line interface for code2text.

This module provides the command-line entry point. It parses arguments, configures
logging, runs the concatenation and maps failures to exit codes.

Exit Codes:
    0: Successful completion, including runs that generated no content
    1: Fatal error (working directory or output path unavailable, output not writable)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe on stdout

Example:
    # Concatenate the current directory into code_output.txt
    $ code2text

    # Custom output, no size threshold, extra extensions
    $ code2text -o all.txt -t 0 --extensions txt,log
"""

import os
import sys

from code2text.cli.argparser import build_config, create_parser, get_log_level, validate_args
from code2text.cli.logging_setup import configure_logging
from code2text.code2text import CodeConcatenator
from code2text.progress import ProgressReporter


def _silence_stdout() -> None:
    # Keep the interpreter from complaining about the closed pipe at shutdown
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main() -> None:
    """Main entry point for the code2text command-line interface.

    Per-file problems are logged and counted as skips; they never change the exit
    code. Only fatal setup and output errors exit with 1.
    """
    parser = create_parser()
    args = parser.parse_args()

    try:
        validate_args(args)
        configure_logging(get_log_level(args))

        progress = ProgressReporter(enabled=not args.no_progress)
        concatenator = CodeConcatenator(args.directory, build_config(args), progress=progress)
        concatenator.run()

    except KeyboardInterrupt:
        sys.exit(130)
    except BrokenPipeError:
        _silence_stdout()
        sys.exit(141)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
