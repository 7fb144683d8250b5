"""Test configuration and fixtures for code2text."""

import logging
import tempfile
from pathlib import Path

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def temp_project():
    """Create a temporary project directory with a mix of files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        base_dir = Path(tmpdir)

        # Create directories
        (base_dir / "cmd").mkdir()
        (base_dir / "src" / "utils").mkdir(parents=True)
        (base_dir / "node_modules" / "left-pad").mkdir(parents=True)
        (base_dir / "docs").mkdir()

        # Create test files
        (base_dir / "cmd" / "main.go").write_text('package main\n\nfunc main() {\n\tprintln("hi")\n}\n')
        (base_dir / "src" / "app.py").write_text("def main():\n    print('Hello')\n")
        (base_dir / "src" / "utils" / "helpers.py").write_text("def helper():\n    pass\n")
        (base_dir / "node_modules" / "left-pad" / "index.js").write_text("module.exports = {}\n")
        (base_dir / "docs" / "README.md").write_text("# Test Project\n")
        (base_dir / "docs" / "notes.txt").write_text("not included by default\n")
        (base_dir / "Makefile").write_text("all:\n\tgo build ./...\n")
        (base_dir / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR")
        (base_dir / "data.json").write_bytes(b'{"blob": "\x00\x01\x02"}')

        yield base_dir


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handler and level changes made by configure_logging()."""
    logger = logging.getLogger("code2text")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)
