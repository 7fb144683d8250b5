"""Inclusion rules selecting files by extension or exact filename."""

import os
from typing import AbstractSet, Iterable, Optional

from .base_rules import BaseExclusionRules

# Extensions (with the leading dot) and exact filenames eligible for concatenation
DEFAULT_EXTENSIONS = frozenset(
    {
        # Systems and application languages
        ".go",
        ".py",
        ".js",
        ".ts",
        ".java",
        ".c",
        ".cpp",
        ".h",
        ".hpp",
        ".rs",
        ".rb",
        ".php",
        ".swift",
        ".kt",
        ".kts",
        ".pl",
        ".pm",
        ".lua",
        ".sql",
        ".r",
        ".dart",
        ".pas",
        ".dfm",
        ".cs",
        ".fs",
        ".vb",
        ".vbs",
        ".scala",
        ".clj",
        ".cljs",
        ".edn",
        ".erl",
        ".hrl",
        ".ex",
        ".exs",
        ".elm",
        ".hs",
        ".lhs",
        # Web
        ".html",
        ".xhtml",
        ".phtml",
        ".css",
        ".scss",
        ".less",
        ".jsx",
        ".tsx",
        ".vue",
        ".svelte",
        ".graphql",
        ".gql",
        ".tpl",
        # Shell
        ".sh",
        ".bash",
        ".zsh",
        # Data, config and docs
        ".json",
        ".xml",
        ".yaml",
        ".yml",
        ".yaml-tml",
        ".json-tml",
        ".md",
        ".ini",
        ".toml",
        ".cfg",
        ".conf",
        ".properties",
        ".env",
        ".example",
        ".feature",
        # Build and infrastructure
        ".gradle",
        ".tf",
        ".tfvars",
        ".hcl",
        ".mod",
        ".sum",
        ".csproj",
        ".sln",
        ".dockerfile",
        "Dockerfile",
        "Makefile",
    }
)


def get_extension(file_name: str) -> str:
    """Return the part of a filename from its last dot, or an empty string.

    Unlike :func:`os.path.splitext`, a leading dot counts, so dotfiles such as
    ``.env`` have themselves as extension.

    Example:
        >>> get_extension("main.go")
        '.go'
        >>> get_extension("archive.tar.gz")
        '.gz'
        >>> get_extension(".env")
        '.env'
        >>> get_extension("Makefile")
        ''
    """
    index = file_name.rfind(".")
    if index == -1:
        return ""
    return file_name[index:]


class ExtensionRules(BaseExclusionRules):
    """Rules selecting files whose name or extension is in a working set.

    A file matches when its full name is in the set (e.g. ``Dockerfile``) or,
    failing that, when its extension is (e.g. ``.go``). Matching is exact and
    case-sensitive. Everything that doesn't match is excluded.

    User-supplied entries are normalized: an entry without a leading dot and without
    a path separator gets one prepended, so ``go`` and ``.go`` are equivalent. An
    entry already present in the working set is kept as-is, which is how exact
    filenames such as ``Makefile`` survive normalization.

    Attributes:
        entries (Set[str]): The working set of extensions and exact filenames.

    Example:
        >>> rules = ExtensionRules(extra_entries=["txt"])
        >>> rules.matches("notes.txt")
        True
        >>> rules.matches("cmd/main.go")
        True
        >>> rules.matches("Makefile")
        True
        >>> rules.exclude("image.bin")
        True
    """

    def __init__(self, extra_entries: Optional[Iterable[str]] = None, include_defaults: bool = True) -> None:
        """Initialize extension rules.

        Args:
            extra_entries: Additional extensions or filenames to include, normalized as
                described above. Empty entries are ignored.
            include_defaults: Whether to start from DEFAULT_EXTENSIONS. Defaults to True.
        """
        self.entries = set(DEFAULT_EXTENSIONS) if include_defaults else set()
        for entry in extra_entries or ():
            self.add_rule(entry)

    def matches(self, path: str) -> bool:
        """Check whether a file is eligible by name or extension.

        Args:
            path: File path; only the base name is considered.

        Returns:
            True if the base name or its extension is in the working set.
        """
        file_name = os.path.basename(path)
        if file_name in self.entries:
            return True
        extension = get_extension(file_name)
        return bool(extension) and extension in self.entries

    def exclude(self, path: str) -> bool:
        return not self.matches(path)

    def add_rule(self, rule: str) -> None:
        """Add an extension or exact filename to the working set.

        Args:
            rule: Entry such as ``.txt``, ``txt`` or ``Makefile``.

        Example:
            >>> rules = ExtensionRules(include_defaults=False)
            >>> rules.add_rule(" log ")
            >>> sorted(rules.entries)
            ['.log']
        """
        entry = normalize_extension(rule, self.entries)
        if entry:
            self.entries.add(entry)

    def has_rules(self) -> bool:
        return bool(self.entries)

    def get_entries(self) -> AbstractSet[str]:
        """Get a read-only snapshot of the working set."""
        return frozenset(self.entries)


def normalize_extension(entry: str, known: AbstractSet[str] = frozenset()) -> str:
    """Normalize a user-supplied extension entry.

    Args:
        entry: Raw entry; surrounding whitespace is trimmed.
        known: Entries already in the working set; these are returned unchanged.

    Returns:
        The normalized entry, or an empty string for a blank entry.

    Example:
        >>> normalize_extension("go")
        '.go'
        >>> normalize_extension(".go")
        '.go'
        >>> normalize_extension("Makefile", DEFAULT_EXTENSIONS)
        'Makefile'
        >>> normalize_extension("config/app")
        'config/app'
    """
    entry = entry.strip()
    if not entry:
        return ""
    if entry.startswith(".") or "/" in entry or os.sep in entry:
        return entry
    if entry in known:
        return entry
    return "." + entry
