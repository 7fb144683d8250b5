"""Run configuration for code2text.

Everything is configured from command-line flags (or directly by library callers);
there are no configuration files.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from code2text.exclusion_rules.directory_rules import DirectoryExclusionRules
from code2text.exclusion_rules.extension_rules import ExtensionRules
from code2text.exclusion_rules.git_rules import GitIgnoreExclusionRules
from code2text.exclusion_rules.size_rules import SizeExclusionRules

DEFAULT_OUTPUT_FILE = "code_output.txt"
DEFAULT_THRESHOLD_MB = 0.5


def parse_comma_list(value: Optional[str]) -> List[str]:
    """Split a comma-separated option value into trimmed, non-empty items.

    Example:
        >>> parse_comma_list(" go, .txt,,rs ")
        ['go', '.txt', 'rs']
        >>> parse_comma_list("")
        []
        >>> parse_comma_list(None)
        []
    """
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class ScanConfig:
    """Options for a single concatenation run.

    Each call to one of the ``build_*`` methods returns a fresh rule object seeded
    from the built-in defaults, so nothing carries over between runs.

    Attributes:
        output_path: Where the concatenated output is written. Relative paths are
            resolved against the current working directory.
        threshold_mb: Size limit in mebibytes; zero or negative disables it.
        extra_extensions: Extensions or filenames added to the inclusion set.
        extra_exclude_dirs: Directory names added to the exclusion set.
        ignore_patterns: Gitignore-style patterns matched against root-relative paths.

    Example:
        >>> config = ScanConfig(extra_extensions=["txt"], threshold_mb=1)
        >>> config.build_extension_rules().matches("notes.txt")
        True
        >>> config.build_size_rules().max_size_bytes
        1048576
    """

    output_path: str = DEFAULT_OUTPUT_FILE
    threshold_mb: float = DEFAULT_THRESHOLD_MB
    extra_extensions: List[str] = field(default_factory=list)
    extra_exclude_dirs: List[str] = field(default_factory=list)
    ignore_patterns: List[str] = field(default_factory=list)

    def build_extension_rules(self) -> ExtensionRules:
        return ExtensionRules(extra_entries=self.extra_extensions)

    def build_directory_rules(self) -> DirectoryExclusionRules:
        return DirectoryExclusionRules(extra_names=self.extra_exclude_dirs)

    def build_size_rules(self) -> SizeExclusionRules:
        return SizeExclusionRules.from_mebibytes(self.threshold_mb)

    def build_ignore_rules(self) -> GitIgnoreExclusionRules:
        return GitIgnoreExclusionRules(self.ignore_patterns)
