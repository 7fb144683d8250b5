from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    This class serves as a contract for the rule types that decide which entries are
    left out of the concatenated output (e.g., excluded directory names, size limits,
    gitignore-style patterns). All implementations must provide logic for checking
    if a given path should be excluded and whether any rules are configured.
    Individual rule addition is optional and depends on the rule type.

    Example:
        >>> from code2text.exclusion_rules.directory_rules import DirectoryExclusionRules
        >>> rules = DirectoryExclusionRules(include_defaults=False)
        >>> rules.add_rule("fixtures")
        >>> rules.exclude("tests/fixtures")
        True
        >>> rules.exclude("tests")
        False
        >>>
        >>> # Size rules are configured through the constructor only
        >>> from code2text.exclusion_rules.size_rules import SizeExclusionRules
        >>> size_rules = SizeExclusionRules("1KiB")
        >>> size_rules.max_size_bytes
        1024
        >>> # size_rules.add_rule("2KiB")  # Would raise NotImplementedError
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded based on the configured rules.

        Args:
            path (str): The file or directory path to check. What part of the path is
                significant depends on the rule type.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    @abstractmethod
    def has_rules(self) -> bool:
        """
        Check whether this rule object would ever exclude anything.

        Returns:
            bool: True if at least one rule is configured.
        """
        pass

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Rule types that don't support individual rule addition (e.g., size-based
        rules) use the default implementation which raises NotImplementedError.

        Args:
            rule (str): The exclusion rule to add. The format depends on the specific
                implementation (e.g., a directory name or a gitignore pattern).

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
