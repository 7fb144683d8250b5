"""Directory traversal and aggregation for code2text.

This module walks a directory tree, runs every entry through the filter pipeline and
collects the included files into a single annotated document, which is written to the
output file once the walk has finished.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from humanfriendly import format_size

from code2text.config import ScanConfig
from code2text.exceptions import SetupError
from code2text.file_filter.filter_pipeline import FilterPipeline
from code2text.io.output_writer import OutputWriter
from code2text.output_record import OutputRecord
from code2text.progress import ProgressReporter
from code2text.types import Decision, PathType

logger = logging.getLogger(__name__)


@dataclass
class TraversalState:
    """Counters and output buffer for a single run.

    Attributes:
        processed_count: Number of files whose content was added to the buffer.
        skipped_count: Number of entries that were left out, for any reason.
        buffer: The concatenated records so far.

    Example:
        >>> state = TraversalState()
        >>> state.add_record(OutputRecord("a.py", b"x = 1"))
        >>> state.record_skip()
        >>> state.processed_count, state.skipped_count, state.has_content()
        (1, 1, True)
    """

    processed_count: int = 0
    skipped_count: int = 0
    buffer: bytearray = field(default_factory=bytearray)

    def record_skip(self) -> None:
        self.skipped_count += 1

    def add_record(self, record: OutputRecord) -> None:
        self.buffer += record.render()
        self.processed_count += 1

    def has_content(self) -> bool:
        return len(self.buffer) > 0


@dataclass(frozen=True)
class ConcatenationResult:
    """Outcome of a completed run.

    Attributes:
        processed_count: Number of files included in the output.
        skipped_count: Number of entries left out.
        output_path: Absolute path of the output file.
        written: False when no content was generated and no file was written.
        output_size: Number of bytes written.
    """

    processed_count: int
    skipped_count: int
    output_path: str
    written: bool
    output_size: int = 0


class CodeConcatenator:
    """Concatenates the text files of a directory tree into a single output file.

    The walk is depth-first and pre-order, visiting siblings in lexical order of their
    names. Directories are descended unless excluded, and an excluded directory counts as
    one skip. Symbolic links are never followed as directories. Errors on individual entries are logged and counted as
    skips, so a single unreadable file or directory never aborts the run.

    Attributes:
        root_dir (Optional[PathType]): Directory to scan; None means the current
            working directory at the time run() is called.
        config (ScanConfig): Run configuration.
        progress (Optional[ProgressReporter]): Updated with the running counts after
            each included file and finished once the walk is over.

    Example:
        >>> concatenator = CodeConcatenator(config=ScanConfig(output_path="src.txt"))  # doctest: +SKIP
        >>> result = concatenator.run()  # doctest: +SKIP
        >>> result.processed_count, result.written  # doctest: +SKIP
        (42, True)
    """

    def __init__(
        self,
        root_dir: Optional[PathType] = None,
        config: Optional[ScanConfig] = None,
        progress: Optional[ProgressReporter] = None,
    ) -> None:
        """Initialize the concatenator.

        Args:
            root_dir: Directory to scan. Defaults to the current working directory.
            config: Run configuration. Defaults to ScanConfig().
            progress: Optional progress line updated after each included file.
        """
        self.root_dir = root_dir
        self.config = config if config is not None else ScanConfig()
        self.progress = progress

    def _resolve_root(self) -> str:
        try:
            root = os.getcwd() if self.root_dir is None else os.path.abspath(self.root_dir)
        except OSError as e:
            raise SetupError(f"error getting current directory: {e}") from e

        if not os.path.isdir(root):
            raise SetupError(f"'{root}' is not a valid directory")
        return root

    def _resolve_output(self) -> str:
        try:
            return os.path.abspath(self.config.output_path)
        except OSError as e:
            raise SetupError(f"error resolving output file path: {e}") from e

    def run(self) -> ConcatenationResult:
        """Walk the tree, collect included files and write the output file.

        Returns:
            A ConcatenationResult with the final counts. When nothing was included, no
            output file is created or touched and ``written`` is False.

        Raises:
            SetupError: If the root directory or output path cannot be resolved.
            OutputWriteError: If the output file cannot be created or written.
        """
        root = self._resolve_root()
        output_path = self._resolve_output()
        pipeline = FilterPipeline.from_config(root, output_path, self.config)
        state = TraversalState()

        logger.debug(
            "Starting scan",
            extra={"root": root, "output": output_path, "threshold": pipeline.size_rules.describe()},
        )
        try:
            self._walk_directory(root, pipeline, state)
        finally:
            if self.progress is not None:
                self.progress.finish()

        if not state.has_content():
            logger.info("No content was generated.")
            logger.info(
                "File processing summary",
                extra={"processed": state.processed_count, "skipped": state.skipped_count},
            )
            if state.skipped_count > 0:
                logger.info("Try adjusting filters or checking file permissions.")
            return ConcatenationResult(state.processed_count, state.skipped_count, output_path, written=False)

        with OutputWriter(output_path) as writer:
            writer.write(bytes(state.buffer))

        logger.info(
            "Processing complete",
            extra={"processed": state.processed_count, "skipped": state.skipped_count},
        )
        logger.info("Output saved", extra={"path": output_path, "size": format_size(len(state.buffer))})
        return ConcatenationResult(
            state.processed_count,
            state.skipped_count,
            output_path,
            written=True,
            output_size=len(state.buffer),
        )

    def _list_directory(self, directory: str) -> Optional[List["os.DirEntry[str]"]]:
        try:
            with os.scandir(directory) as iterator:
                return sorted(iterator, key=lambda entry: entry.name)
        except OSError as e:
            logger.warning("Error accessing path, skipping", extra={"path": directory, "error": str(e)})
            return None

    def _walk_directory(self, root: str, pipeline: FilterPipeline, state: TraversalState) -> None:
        """Process every entry beneath root, depth-first and pre-order.

        Open directory listings are kept on an explicit stack, so the depth of the
        tree is not limited by the interpreter recursion limit.
        """
        root_entries = self._list_directory(root)
        # The root itself is never counted
        if root_entries is None:
            return

        stack: List[Iterator["os.DirEntry[str]"]] = [iter(root_entries)]
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                logger.warning("Error accessing path, skipping", extra={"path": entry.path, "error": str(e)})
                state.record_skip()
                continue

            decision = pipeline.should_include(entry.path, is_dir=is_dir)

            if decision is Decision.DESCEND:
                children = self._list_directory(entry.path)
                if children is None:
                    state.record_skip()
                else:
                    stack.append(iter(children))
            elif decision is Decision.INCLUDE:
                self._include_file(entry.path, root, state)
            else:
                # SKIP and PRUNE both leave the entry out
                state.record_skip()

    def _include_file(self, path: str, root: str, state: TraversalState) -> None:
        try:
            with open(path, "rb") as file:
                content = file.read()
        except OSError as e:
            logger.warning("Error reading file, skipping", extra={"path": path, "error": str(e)})
            state.record_skip()
            return

        state.add_record(OutputRecord(os.path.relpath(path, root), content))
        if self.progress is not None:
            self.progress.update(state.processed_count, state.skipped_count)
