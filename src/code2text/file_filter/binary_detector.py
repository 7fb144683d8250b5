"""Binary file detection utilities."""

from pathlib import Path

from code2text.exceptions import ClassificationError
from code2text.types import Classification, PathType

# Number of leading bytes inspected per file
SAMPLE_SIZE = 1024

# Share of suspicious bytes above which a non-UTF-8 sample is considered binary
SUSPICIOUS_RATIO = 0.30

# Control characters that are common in text files: tab, newline, carriage return
_TEXT_CONTROL_BYTES = frozenset({9, 10, 13})


def _is_valid_utf8(sample: bytes) -> bool:
    # A multi-byte sequence cut at the end of the sample counts as invalid
    try:
        sample.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


def _is_suspicious(byte: int) -> bool:
    return (byte < 32 and byte not in _TEXT_CONTROL_BYTES) or byte > 127


def classify_sample(sample: bytes) -> Classification:
    """Classify a byte sample as text or binary.

    The heuristic works in a single pass over at most a few kilobytes:
    1. An empty sample is text.
    2. Any null byte makes the sample binary.
    3. A sample that is valid UTF-8 is text.
    4. Otherwise the sample is binary when more than 30% of its bytes are
       suspicious, i.e. control characters other than tab, newline and carriage
       return, or bytes above the 7-bit ASCII range.

    Args:
        sample: Leading bytes of a file.

    Returns:
        Classification.TEXT or Classification.BINARY.

    Example:
        >>> classify_sample(b"")
        <Classification.TEXT: 'text'>
        >>> classify_sample(b"print('hello')\\n")
        <Classification.TEXT: 'text'>
        >>> classify_sample(b"ELF\\x00\\x01")
        <Classification.BINARY: 'binary'>
        >>> classify_sample("naïve café".encode("latin-1"))
        <Classification.TEXT: 'text'>
        >>> classify_sample(bytes(range(128, 256)))
        <Classification.BINARY: 'binary'>
    """
    if not sample:
        return Classification.TEXT

    if b"\0" in sample:
        return Classification.BINARY

    if _is_valid_utf8(sample):
        return Classification.TEXT

    suspicious = sum(1 for byte in sample if _is_suspicious(byte))
    if suspicious / len(sample) > SUSPICIOUS_RATIO:
        return Classification.BINARY

    return Classification.TEXT


def is_binary_file(file_path: PathType, sample_size: int = SAMPLE_SIZE) -> bool:
    """Detect if a file is binary by inspecting its leading bytes.

    Reads at most ``sample_size`` bytes and hands them to :func:`classify_sample`.
    The file handle is closed before returning.

    Args:
        file_path: Path to the file to analyze. Can be any path-like object.
        sample_size: Number of bytes to inspect. Defaults to 1024.

    Returns:
        True if the file appears to be binary, False if it appears to be text.

    Raises:
        ClassificationError: If the file cannot be opened or read. The original
            OSError is chained as the cause.

    Example:
        >>> is_binary_file("README.md")  # doctest: +SKIP
        False
        >>> is_binary_file("logo.png")  # doctest: +SKIP
        True
    """
    path_obj = Path(file_path)
    try:
        with open(path_obj, "rb") as file:
            sample = file.read(sample_size)
    except OSError as e:
        raise ClassificationError(str(path_obj)) from e

    return classify_sample(sample) is Classification.BINARY
