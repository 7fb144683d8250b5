"""Implementation of exclusion rules using .gitignore pattern syntax."""

from typing import Iterable, List, Optional

from pathspec import GitIgnoreSpec

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    This class matches root-relative paths against gitignore-style patterns using the
    pathspec library, the same way Git does. Patterns come from the command line one
    at a time; there is no loading of pattern files.

    The rules support all standard .gitignore syntax including:
    - Basic globs (*, ?, [abc], [0-9], etc.)
    - Directory-specific patterns (ending in /)
    - Negation patterns (starting with !)
    - Double-asterisk matching (**)

    Patterns are evaluated in the order they were added, with later patterns
    potentially overriding earlier ones (particularly negations with !).

    Attributes:
        spec (GitIgnoreSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GitIgnoreExclusionRules(["*.min.js", "docs/"])
        >>> rules.exclude("static/app.min.js")
        True
        >>> rules.exclude("docs/")
        True
        >>> rules.exclude("src/app.js")
        False

    Note:
        The paths provided to exclude() should use forward slashes (/) as path separators,
        even on Windows systems, and directories should carry a trailing slash so that
        directory-only patterns apply to them.
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None):
        """Initialize GitIgnoreExclusionRules with an optional list of patterns.

        Args:
            patterns: Gitignore-style patterns, in evaluation order.
        """
        self._lines: List[str] = []
        self.spec = GitIgnoreSpec.from_lines(self._lines)

        for pattern in patterns or ():
            self.add_rule(pattern)

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded based on the configured patterns.

        Args:
            path: Root-relative path using forward slashes. Directories should end in "/".

        Returns:
            bool: True if the path matches any non-negated pattern that isn't
                overridden by a later negation, False otherwise.

        Example:
            >>> rules = GitIgnoreExclusionRules(["*.pyc", "!keep.pyc"])
            >>> rules.exclude("pkg/module.pyc")
            True
            >>> rules.exclude("keep.pyc")
            False
        """
        if not self._lines:
            return False
        return self.spec.match_file(path)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern directly.

        Blank patterns are ignored.

        Args:
            rule: A single .gitignore pattern to add (e.g., "*.pyc", "fixtures/",
                 "!important.txt").

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("*.snap")
            >>> rules.exclude("tests/__snapshots__/view.snap")
            True
        """
        if not rule.strip():
            return
        self._lines.append(rule)
        self.spec = GitIgnoreSpec.from_lines(self._lines)

    def has_rules(self) -> bool:
        return bool(self._lines)
