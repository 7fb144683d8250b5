class Code2TextError(Exception):
    """Base class for errors raised by code2text.

    Example:
        >>> issubclass(SetupError, Code2TextError)
        True
        >>> issubclass(OutputWriteError, Code2TextError)
        True
    """


class SetupError(Code2TextError):
    """
    Exception raised when a run cannot be prepared.

    This covers failures that happen before the directory walk begins, such as being
    unable to determine the current working directory, resolve the output path, or
    use the requested root as a directory. These errors are fatal to the run.

    Example:
        >>> error = SetupError("error getting current directory: gone")
        >>> str(error)
        'error getting current directory: gone'
    """

    pass


class OutputWriteError(Code2TextError):
    """
    Exception raised when the output file cannot be created or written.

    Attributes:
        output_path (str): Path of the output file that could not be written.

    Example:
        >>> error = OutputWriteError("/tmp/out.txt", "error creating output file")
        >>> error.output_path
        '/tmp/out.txt'
        >>> str(error)
        "error creating output file '/tmp/out.txt'"
    """

    def __init__(self, output_path: str, message: str = "error writing to output file") -> None:
        """
        Initialize the exception with the output path and a short description.

        Args:
            output_path (str): Path of the output file that could not be written.
            message (str, optional): What went wrong. The quoted path is appended.
                Defaults to "error writing to output file".
        """
        self.output_path = output_path
        super().__init__(f"{message} '{output_path}'")


class ClassificationError(Code2TextError):
    """
    Exception raised when a file's leading bytes cannot be read for binary detection.

    The underlying OSError is chained as ``__cause__``. Callers treat this as a reason
    to skip the file, never as a reason to abort the whole run.

    Attributes:
        file_path (str): Path to the file that could not be classified.

    Example:
        >>> error = ClassificationError("/path/to/locked.py")
        >>> error.file_path
        '/path/to/locked.py'
        >>> str(error)
        'Could not classify file: /path/to/locked.py'
    """

    def __init__(self, file_path: str) -> None:
        """
        Initialize the exception with the path to the unreadable file.

        Args:
            file_path (str): Path to the file that could not be classified.
        """
        self.file_path = file_path
        super().__init__(f"Could not classify file: {file_path}")
