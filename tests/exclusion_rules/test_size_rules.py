"""Unit tests for size-based exclusion rules."""

import tempfile
from pathlib import Path

import pytest

from code2text.exclusion_rules.size_rules import SizeExclusionRules, mebibytes_to_bytes, parse_file_size


class TestParseFileSize:
    """Test the parse_file_size utility function."""

    def test_parse_bytes_only(self):
        """Test parsing raw byte values."""
        assert parse_file_size("1024") == 1024
        assert parse_file_size("0") == 0

    def test_parse_human_readable_decimal(self):
        """Test parsing decimal units (KB, MB)."""
        assert parse_file_size("1KB") == 1000
        assert parse_file_size("1MB") == 1000000
        assert parse_file_size("2.5MB") == 2500000

    def test_parse_human_readable_binary(self):
        """Test parsing binary units (KiB, MiB)."""
        assert parse_file_size("1KiB") == 1024
        assert parse_file_size("1MiB") == 1048576

    def test_parse_invalid_format(self):
        """Test that invalid formats raise ValueError."""
        with pytest.raises(ValueError, match="Invalid size format"):
            parse_file_size("invalid")

        with pytest.raises(ValueError, match="Invalid size format"):
            parse_file_size("")


class TestMebibytesToBytes:
    def test_conversion(self):
        assert mebibytes_to_bytes(1) == 1048576
        assert mebibytes_to_bytes(0.5) == 524288
        assert mebibytes_to_bytes(0) == 0

    def test_fraction_is_truncated(self):
        assert mebibytes_to_bytes(0.0000001) == 0


class TestSizeExclusionRules:
    """Test the SizeExclusionRules class."""

    def test_init_with_string(self):
        rules = SizeExclusionRules("1MiB")
        assert rules.max_size_bytes == 1048576

    def test_init_with_int(self):
        rules = SizeExclusionRules(2048)
        assert rules.max_size_bytes == 2048

    def test_init_with_invalid_type(self):
        with pytest.raises(ValueError, match="max_size must be string or int"):
            SizeExclusionRules(1.5)

        with pytest.raises(ValueError, match="max_size must be string or int"):
            SizeExclusionRules(None)

    def test_from_mebibytes(self):
        assert SizeExclusionRules.from_mebibytes(0.5).max_size_bytes == 524288

    @pytest.mark.parametrize("threshold_mb", [0, -1, -0.5, 0.0000001])
    def test_non_positive_limit_disables_filtering(self, threshold_mb):
        rules = SizeExclusionRules.from_mebibytes(threshold_mb)
        assert not rules.has_rules()
        assert not rules.exceeds_limit(100 * 1024 * 1024)
        assert rules.describe() == "disabled"

    def test_exceeds_limit_is_strict(self):
        rules = SizeExclusionRules(100)
        assert not rules.exceeds_limit(99)
        assert not rules.exceeds_limit(100)
        assert rules.exceeds_limit(101)

    def test_exclude_file_within_limit(self):
        rules = SizeExclusionRules(1000)

        with tempfile.NamedTemporaryFile(delete=False) as f:
            f.write(b"small content")
            temp_path = f.name

        try:
            assert not rules.exclude(temp_path)
        finally:
            Path(temp_path).unlink()

    def test_exclude_file_exceeds_limit(self):
        rules = SizeExclusionRules(10)

        with tempfile.NamedTemporaryFile(delete=False) as f:
            f.write(b"this content is longer than 10 bytes")
            temp_path = f.name

        try:
            assert rules.exclude(temp_path)
        finally:
            Path(temp_path).unlink()

    def test_exclude_directory(self):
        """Directories are never excluded by size."""
        rules = SizeExclusionRules(1)
        with tempfile.TemporaryDirectory() as tmpdir:
            assert not rules.exclude(tmpdir)

    def test_exclude_missing_file(self):
        rules = SizeExclusionRules(1)
        assert not rules.exclude("/path/that/does/not/exist.py")

    def test_add_rule_not_supported(self):
        with pytest.raises(NotImplementedError):
            SizeExclusionRules(1).add_rule("2KiB")

    def test_describe(self):
        assert SizeExclusionRules(1048576).describe() == "1 MiB"
