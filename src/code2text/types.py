from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class Classification(Enum):
    """Result of inspecting a file's leading bytes.

    Attributes:
        TEXT: The sample looks like text.
        BINARY: The sample looks like binary data.
    """

    TEXT = "text"
    BINARY = "binary"


class Decision(Enum):
    """Outcome of running a filesystem entry through the filter pipeline.

    Files resolve to INCLUDE or SKIP. Directories resolve to DESCEND or PRUNE,
    except for the output file guard, which yields SKIP for any entry type.

    Attributes:
        INCLUDE: The file's content goes into the output.
        SKIP: The entry is left out and counted as skipped.
        DESCEND: The directory is walked.
        PRUNE: The directory and everything beneath it is left out; counted as one skip.
    """

    INCLUDE = "include"
    SKIP = "skip"
    DESCEND = "descend"
    PRUNE = "prune"
