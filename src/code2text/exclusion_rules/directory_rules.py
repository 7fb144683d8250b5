"""Directory-name exclusion rules for pruning whole subtrees."""

import os
from typing import AbstractSet, Iterable, Optional

from .base_rules import BaseExclusionRules

# Directory base names that are never walked by default
DEFAULT_EXCLUDE_DIRS = frozenset(
    {
        # Version control
        ".git",
        ".svn",
        ".hg",
        "CVS",
        # Dependencies
        "node_modules",
        "vendor",
        "jspm_packages",
        "bower_components",
        "web_modules",
        ".venv",
        "venv",
        "env",
        ".env",
        # Editors and OS metadata
        ".vscode",
        ".idea",
        ".DS_Store",
        # Build output
        "build",
        "dist",
        "target",
        "bin",
        "obj",
        "out",
        "site",
        "public",
        ".next",
        ".nuxt",
        ".svelte-kit",
        ".terraform",
        ".serverless",
        # Caches
        "__pycache__",
        ".cache",
        ".pytest_cache",
        ".mypy_cache",
        ".tox",
        "coverage",
        # Scratch, logs and generated assets
        "tmp",
        "temp",
        "logs",
        "log",
        "assets",
        "static",
        "migrations",
    }
)


class DirectoryExclusionRules(BaseExclusionRules):
    """Exclusion rules matching a directory's base name against a set of names.

    Only the last component of the path is compared, and the comparison is an exact,
    case-sensitive string match. A directory named ``node_modules`` is excluded
    wherever it appears in the tree. Names are plain strings, not patterns.

    The built-in defaults are copied into a per-instance working set, so adding names
    to one instance never affects another or the module-level constant.

    Attributes:
        names (Set[str]): The working set of excluded directory names.

    Example:
        >>> rules = DirectoryExclusionRules(extra_names=["fixtures"])
        >>> rules.exclude("project/node_modules")
        True
        >>> rules.exclude("tests/fixtures")
        True
        >>> rules.exclude("src")
        False
        >>> "fixtures" in DEFAULT_EXCLUDE_DIRS
        False
    """

    def __init__(self, extra_names: Optional[Iterable[str]] = None, include_defaults: bool = True) -> None:
        """Initialize directory exclusion rules.

        Args:
            extra_names: Additional directory names to exclude. Surrounding whitespace is
                trimmed and empty names are ignored.
            include_defaults: Whether to start from DEFAULT_EXCLUDE_DIRS. Defaults to True.
        """
        self.names = set(DEFAULT_EXCLUDE_DIRS) if include_defaults else set()
        for name in extra_names or ():
            self.add_rule(name)

    def exclude(self, path: str) -> bool:
        """Check if a directory should be pruned based on its base name.

        Args:
            path: Directory path (relative, absolute, or just the name).

        Returns:
            True if the directory's base name is in the working set.
        """
        return self.is_excluded_name(os.path.basename(os.path.normpath(path)))

    def is_excluded_name(self, name: str) -> bool:
        """Check a bare directory name against the working set."""
        return name in self.names

    def add_rule(self, rule: str) -> None:
        """Add a directory name to the working set.

        Args:
            rule: Directory base name to exclude. Whitespace-only names are ignored.
        """
        name = rule.strip()
        if name:
            self.names.add(name)

    def has_rules(self) -> bool:
        return bool(self.names)

    def get_names(self) -> AbstractSet[str]:
        """Get a read-only snapshot of the working set."""
        return frozenset(self.names)
