from .base_rules import BaseExclusionRules
from .directory_rules import DEFAULT_EXCLUDE_DIRS, DirectoryExclusionRules
from .extension_rules import DEFAULT_EXTENSIONS, ExtensionRules
from .git_rules import GitIgnoreExclusionRules
from .size_rules import SizeExclusionRules

__all__ = [
    "BaseExclusionRules",
    "DEFAULT_EXCLUDE_DIRS",
    "DEFAULT_EXTENSIONS",
    "DirectoryExclusionRules",
    "ExtensionRules",
    "GitIgnoreExclusionRules",
    "SizeExclusionRules",
]
