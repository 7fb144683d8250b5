"""Unit tests for directory-name exclusion rules."""

import os

from code2text.exclusion_rules.directory_rules import DEFAULT_EXCLUDE_DIRS, DirectoryExclusionRules


class TestDirectoryExclusionRules:
    """Test the DirectoryExclusionRules class."""

    def test_defaults(self):
        rules = DirectoryExclusionRules()
        for name in [".git", "node_modules", "vendor", "__pycache__", ".venv", "dist"]:
            assert rules.is_excluded_name(name), name

    def test_base_name_matched_at_any_depth(self):
        rules = DirectoryExclusionRules()
        assert rules.exclude("node_modules")
        assert rules.exclude(os.path.join("web", "frontend", "node_modules"))
        assert rules.exclude("/abs/path/.git/")

    def test_only_base_name_is_compared(self):
        """A parent directory with an excluded name is not the directory's own name."""
        rules = DirectoryExclusionRules()
        assert not rules.exclude(os.path.join("node_modules", "left-pad"))
        assert not rules.exclude("src")

    def test_exact_match_only(self):
        rules = DirectoryExclusionRules()
        assert not rules.is_excluded_name("Build")
        assert not rules.is_excluded_name("node_modules_backup")

    def test_extra_names(self):
        rules = DirectoryExclusionRules(extra_names=[" test_data ", "", "custom_assets"])
        assert rules.is_excluded_name("test_data")
        assert rules.is_excluded_name("custom_assets")
        assert "" not in rules.get_names()

    def test_extras_do_not_leak_into_defaults(self):
        DirectoryExclusionRules(extra_names=["generated"])
        assert "generated" not in DEFAULT_EXCLUDE_DIRS
        assert not DirectoryExclusionRules().is_excluded_name("generated")

    def test_without_defaults(self):
        rules = DirectoryExclusionRules(include_defaults=False)
        assert not rules.has_rules()
        assert not rules.exclude("node_modules")
