"""Per-entry filter pipeline deciding what goes into the concatenated output.

Checks run cheapest and most decisive first and stop at the first one that rejects
the entry:

1. The output file itself is always skipped.
2. Directories are pruned by base name or by ignore pattern, otherwise descended.
3. Files must match the inclusion set by exact name or by extension.
4. Files must not match an ignore pattern.
5. Files must be within the size limit, if one is set.
6. Files must look like text to the binary detector.

Recoverable problems (unreadable metadata, unreadable sample) are logged as warnings
and turn into a skip. They never propagate to the caller.
"""

import logging
import os
from typing import Optional

from code2text.config import ScanConfig
from code2text.exceptions import ClassificationError
from code2text.exclusion_rules.directory_rules import DirectoryExclusionRules
from code2text.exclusion_rules.extension_rules import ExtensionRules
from code2text.exclusion_rules.git_rules import GitIgnoreExclusionRules
from code2text.exclusion_rules.size_rules import SizeExclusionRules
from code2text.file_filter.binary_detector import SAMPLE_SIZE, is_binary_file
from code2text.types import Decision, PathType

logger = logging.getLogger(__name__)


class FilterPipeline:
    """Decides for each filesystem entry whether it is included, skipped or pruned.

    The pipeline holds no counters; the caller tallies the decisions. It is safe to
    reuse a pipeline for any number of entries under the same root.

    Attributes:
        root_path (str): Absolute path of the directory being scanned.
        output_path (str): Absolute path of the output file, never included.
        extension_rules (ExtensionRules): Inclusion set of extensions and filenames.
        directory_rules (DirectoryExclusionRules): Directory names that are pruned.
        size_rules (SizeExclusionRules): Size limit for files.
        ignore_rules (GitIgnoreExclusionRules): Gitignore-style patterns on relative paths.
        sample_size (int): Number of leading bytes handed to the binary detector.

    Example:
        >>> pipeline = FilterPipeline.from_config("/project", "/project/out.txt", ScanConfig())
        >>> pipeline.should_include("/project/out.txt", is_dir=False)
        <Decision.SKIP: 'skip'>
        >>> pipeline.should_include("/project/node_modules", is_dir=True)
        <Decision.PRUNE: 'prune'>
        >>> pipeline.should_include("/project/src", is_dir=True)
        <Decision.DESCEND: 'descend'>
        >>> pipeline.should_include("/project/photo.jpg", is_dir=False)
        <Decision.SKIP: 'skip'>
    """

    def __init__(
        self,
        root_path: PathType,
        output_path: PathType,
        extension_rules: ExtensionRules,
        directory_rules: DirectoryExclusionRules,
        size_rules: SizeExclusionRules,
        ignore_rules: Optional[GitIgnoreExclusionRules] = None,
        sample_size: int = SAMPLE_SIZE,
    ) -> None:
        """Initialize the pipeline.

        Args:
            root_path: Directory being scanned; relative paths are made absolute.
            output_path: Output file path; relative paths are made absolute.
            extension_rules: Inclusion set of extensions and exact filenames.
            directory_rules: Excluded directory names.
            size_rules: Size limit; a non-positive limit disables the size check.
            ignore_rules: Optional gitignore-style patterns. Defaults to none.
            sample_size: Bytes inspected by the binary detector. Defaults to 1024.
        """
        self.root_path = os.path.abspath(root_path)
        self.output_path = os.path.abspath(output_path)
        self.extension_rules = extension_rules
        self.directory_rules = directory_rules
        self.size_rules = size_rules
        self.ignore_rules = ignore_rules if ignore_rules is not None else GitIgnoreExclusionRules()
        self.sample_size = sample_size

    @classmethod
    def from_config(cls, root_path: PathType, output_path: PathType, config: ScanConfig) -> "FilterPipeline":
        """Build a pipeline with fresh rule objects from a run configuration.

        Args:
            root_path: Directory being scanned.
            output_path: Resolved output file path.
            config: Run configuration supplying the rule sets and size limit.

        Returns:
            A new FilterPipeline.
        """
        return cls(
            root_path,
            output_path,
            extension_rules=config.build_extension_rules(),
            directory_rules=config.build_directory_rules(),
            size_rules=config.build_size_rules(),
            ignore_rules=config.build_ignore_rules(),
        )

    def _relative_pattern_path(self, abs_path: str, is_dir: bool) -> str:
        relative = os.path.relpath(abs_path, self.root_path).replace(os.sep, "/")
        return relative + "/" if is_dir else relative

    def should_include(self, path: PathType, is_dir: Optional[bool] = None) -> Decision:
        """Run one filesystem entry through the pipeline.

        Args:
            path: Path to the entry.
            is_dir: Whether the entry is a directory. Symbolic links should be passed as
                False so they are never descended. When None, it is determined with
                lstat semantics.

        Returns:
            SKIP or INCLUDE for files; PRUNE or DESCEND for directories. SKIP is also
            returned for any entry that is the output file itself.
        """
        try:
            abs_path = os.path.abspath(path)
        except OSError as e:
            logger.warning("Could not get absolute path, skipping", extra={"path": str(path), "error": str(e)})
            return Decision.SKIP

        if abs_path == self.output_path:
            logger.debug("Skipping output file", extra={"path": abs_path})
            return Decision.SKIP

        if is_dir is None:
            is_dir = os.path.isdir(abs_path) and not os.path.islink(abs_path)

        if is_dir:
            return self._check_directory(abs_path)
        return self._check_file(abs_path)

    def _check_directory(self, abs_path: str) -> Decision:
        if self.directory_rules.is_excluded_name(os.path.basename(abs_path)):
            logger.debug("Pruning excluded directory", extra={"path": abs_path})
            return Decision.PRUNE

        if abs_path != self.root_path and self.ignore_rules.exclude(self._relative_pattern_path(abs_path, True)):
            logger.debug("Pruning ignored directory", extra={"path": abs_path})
            return Decision.PRUNE

        return Decision.DESCEND

    def _check_file(self, abs_path: str) -> Decision:
        if not self.extension_rules.matches(abs_path):
            logger.debug("Skipping file", extra={"path": abs_path, "reason": "extension"})
            return Decision.SKIP

        if self.ignore_rules.exclude(self._relative_pattern_path(abs_path, False)):
            logger.debug("Skipping file", extra={"path": abs_path, "reason": "ignore pattern"})
            return Decision.SKIP

        if self.size_rules.has_rules():
            try:
                size_bytes = os.stat(abs_path).st_size
            except OSError as e:
                logger.warning("Error getting file info, skipping", extra={"path": abs_path, "error": str(e)})
                return Decision.SKIP

            if self.size_rules.exceeds_limit(size_bytes):
                logger.debug(
                    "Skipping file",
                    extra={"path": abs_path, "reason": "size", "size": size_bytes, "limit": self.size_rules.describe()},
                )
                return Decision.SKIP

        try:
            binary = is_binary_file(abs_path, sample_size=self.sample_size)
        except ClassificationError as e:
            logger.warning(
                "Could not check if file is binary, skipping",
                extra={"path": abs_path, "error": str(e.__cause__ or e)},
            )
            return Decision.SKIP

        if binary:
            logger.debug("Skipping file", extra={"path": abs_path, "reason": "binary"})
            return Decision.SKIP

        return Decision.INCLUDE
