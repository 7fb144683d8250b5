"""Tests for command-line argument parsing."""

import logging
import math
from pathlib import Path

import pytest

from code2text.cli.argparser import build_config, create_parser, get_log_level, validate_args


@pytest.fixture
def parser():
    return create_parser()


def test_defaults(parser):
    args = parser.parse_args([])
    assert args.directory is None
    assert args.output == "code_output.txt"
    assert args.threshold == 0.5
    assert args.extensions == ""
    assert args.exclude_dirs == ""
    assert args.ignore == []
    assert not args.no_progress
    assert not args.verbose
    assert not args.quiet


def test_short_options(parser):
    args = parser.parse_args(["-o", "out.txt", "-t", "1", "-i", "*.min.js", "-v", "src"])
    assert args.output == "out.txt"
    assert args.threshold == 1.0
    assert args.ignore == ["*.min.js"]
    assert args.verbose
    assert args.directory == Path("src")


def test_long_options(parser):
    args = parser.parse_args(
        [
            "--output",
            "out.txt",
            "--threshold",
            "-1",
            "--extensions",
            "txt,.log",
            "--exclude-dirs",
            "fixtures, data",
            "--ignore",
            "a/",
            "--ignore",
            "!a/keep.py",
            "--no-progress",
            "--quiet",
        ]
    )
    assert args.threshold == -1.0
    assert args.extensions == "txt,.log"
    assert args.exclude_dirs == "fixtures, data"
    assert args.ignore == ["a/", "!a/keep.py"]
    assert args.no_progress
    assert args.quiet


def test_threshold_must_be_a_number(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-t", "large"])
    assert excinfo.value.code == 2
    assert "invalid float value" in capsys.readouterr().err


def test_verbose_and_quiet_are_exclusive(parser):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-v", "-q"])
    assert excinfo.value.code == 2


def test_version(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("code2text ")


def test_help_mentions_examples(parser):
    help_text = parser.format_help()
    assert "--exclude-dirs" in help_text
    assert "code2text -o project_src.txt" in help_text


class TestValidateArgs:
    def test_valid_arguments(self, parser):
        validate_args(parser.parse_args(["-t", "0"]))

    @pytest.mark.parametrize("threshold", ["nan", "inf", "-inf"])
    def test_non_finite_threshold(self, parser, threshold):
        args = parser.parse_args([f"--threshold={threshold}"])
        assert not math.isfinite(args.threshold)
        with pytest.raises(ValueError, match="finite"):
            validate_args(args)

    @pytest.mark.parametrize("output", ["", "   "])
    def test_empty_output(self, parser, output):
        args = parser.parse_args([f"--output={output}"])
        with pytest.raises(ValueError, match="--output"):
            validate_args(args)


class TestLogLevel:
    def test_default(self, parser):
        assert get_log_level(parser.parse_args([])) == logging.INFO

    def test_verbose(self, parser):
        assert get_log_level(parser.parse_args(["-v"])) == logging.DEBUG

    def test_quiet(self, parser):
        assert get_log_level(parser.parse_args(["-q"])) == logging.WARNING


class TestBuildConfig:
    def test_defaults(self, parser):
        config = build_config(parser.parse_args([]))
        assert config.output_path == "code_output.txt"
        assert config.threshold_mb == 0.5
        assert config.extra_extensions == []
        assert config.extra_exclude_dirs == []
        assert config.ignore_patterns == []

    def test_lists_are_split_and_trimmed(self, parser):
        args = parser.parse_args(["--extensions", " txt, .log ,", "--exclude-dirs", "fixtures,,data "])
        config = build_config(args)
        assert config.extra_extensions == ["txt", ".log"]
        assert config.extra_exclude_dirs == ["fixtures", "data"]

    def test_extension_with_and_without_dot(self, parser):
        without_dot = build_config(parser.parse_args(["--extensions", "go"])).build_extension_rules()
        with_dot = build_config(parser.parse_args(["--extensions", ".go"])).build_extension_rules()
        assert without_dot.get_entries() == with_dot.get_entries()

    def test_ignore_patterns_keep_order(self, parser):
        config = build_config(parser.parse_args(["-i", "*.py", "-i", "!keep.py"]))
        assert config.ignore_patterns == ["*.py", "!keep.py"]
