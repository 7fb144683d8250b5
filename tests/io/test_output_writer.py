"""Tests for the output file writer."""

import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from code2text.exceptions import OutputWriteError
from code2text.io.output_writer import OutputWriter


@pytest.fixture
def temp_directory():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


def test_write_creates_file(temp_directory):
    path = temp_directory / "out.txt"
    with OutputWriter(path) as writer:
        writer.write(b"hello\n")
        writer.write(b"world\n")
    assert path.read_bytes() == b"hello\nworld\n"


def test_existing_file_is_truncated(temp_directory):
    path = temp_directory / "out.txt"
    path.write_bytes(b"x" * 1000)
    with OutputWriter(path) as writer:
        writer.write(b"short")
    assert path.read_bytes() == b"short"


def test_accepts_string_path(temp_directory):
    path = str(temp_directory / "out.txt")
    with OutputWriter(path) as writer:
        writer.write(b"data")
    assert Path(path).read_bytes() == b"data"


def test_create_failure(temp_directory):
    path = temp_directory / "no_such_dir" / "out.txt"
    with pytest.raises(OutputWriteError) as excinfo:
        OutputWriter(path)
    assert "error creating output file" in str(excinfo.value)
    assert excinfo.value.output_path == str(path)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_output_path_is_directory(temp_directory):
    with pytest.raises(OutputWriteError):
        OutputWriter(temp_directory)


def test_write_failure(temp_directory):
    writer = OutputWriter(temp_directory / "out.txt")
    real_file = writer._file_obj
    writer._file_obj = MagicMock()
    writer._file_obj.write.side_effect = OSError(28, "No space left on device")

    with pytest.raises(OutputWriteError, match="error writing to output file"):
        writer.write(b"data")
    real_file.close()


def test_close_failure(temp_directory):
    writer = OutputWriter(temp_directory / "out.txt")
    real_file = writer._file_obj
    writer._file_obj = MagicMock()
    writer._file_obj.close.side_effect = OSError(5, "Input/output error")

    with pytest.raises(OutputWriteError):
        writer.close()
    real_file.close()


def test_write_after_close(temp_directory):
    writer = OutputWriter(temp_directory / "out.txt")
    writer.close()
    with pytest.raises(ValueError, match="closed"):
        writer.write(b"data")


def test_close_is_idempotent(temp_directory):
    writer = OutputWriter(temp_directory / "out.txt")
    writer.close()
    writer.close()


def test_close_error_does_not_mask_original(temp_directory):
    writer = OutputWriter(temp_directory / "out.txt")
    real_file = writer._file_obj
    writer._file_obj = MagicMock()
    writer._file_obj.close.side_effect = OSError(5, "Input/output error")

    with pytest.raises(RuntimeError, match="original"):
        with writer:
            raise RuntimeError("original")
    real_file.close()
