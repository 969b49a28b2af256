"""Tests for the file container model"""

import os
from pathlib import Path

import pytest
from pydantic import ValidationError
from structlog.testing import capture_logs

from fskit.core.exceptions import DecodeFailureError, NotFoundError
from fskit.core.models import FileContainer


class TestFileContainerFields:
    """Test accessors"""

    def test_created_empty(self):
        """A new container has no location and no data"""
        container = FileContainer()
        assert container.path == ""
        assert container.filename == ""
        assert container.data == b""
        assert container.text == ""

    def test_set_and_get(self):
        """Fields round-trip through their accessors"""
        container = FileContainer()
        container.path = "some/dir"
        container.filename = "file.txt"
        container.data = b"payload"

        assert container.path == os.path.join("some", "dir")
        assert container.filename == "file.txt"
        assert container.data == b"payload"
        assert container.full_path == os.path.join("some", "dir", "file.txt")

    def test_text_and_bytes_share_one_buffer(self):
        """The text view is an encoding of data, not a separate value"""
        container = FileContainer()
        container.text = "grüße"
        assert container.data == "grüße".encode("utf-8")

        container.data = b"plain"
        assert container.text == "plain"

    def test_invalid_utf8_view(self):
        """Non-UTF-8 bytes are kept but cannot be viewed as text"""
        container = FileContainer(path="d", filename="f.bin", data=b"\xff\xfe")
        assert container.data == b"\xff\xfe"

        with pytest.raises(DecodeFailureError):
            container.text

    def test_buffer_is_owned(self):
        """Mutating the assigned buffer afterwards does not change the container"""
        buffer = bytearray(b"abc")
        container = FileContainer(data=buffer)
        buffer[0] = ord("z")

        assert container.data == b"abc"
        assert isinstance(container.data, bytes)

    def test_rejects_non_bytes(self):
        """Assignments are validated"""
        container = FileContainer()
        with pytest.raises(ValidationError):
            container.data = 42

    def test_pathlike_path(self, tmp_path: Path):
        """Path objects are accepted for the directory"""
        container = FileContainer(path=tmp_path)
        assert container.path == str(tmp_path)


class TestFileContainerIO:
    """Test read and write"""

    def test_write_then_read_round_trip(self, tmp_path: Path):
        """Data written by one container is read back byte-for-byte by another"""
        payload = bytes(range(256)) * 4
        directory = str(tmp_path / "out" / "deeper")

        writer = FileContainer(path=directory, filename="blob.bin", data=payload)
        writer.write()

        reader = FileContainer(path=directory, filename="blob.bin")
        reader.read()

        assert reader.data == payload
        assert reader == writer

    def test_write_overwrites(self, tmp_path: Path):
        """Writing replaces previous content"""
        container = FileContainer(path=str(tmp_path), filename="note.txt")
        container.text = "first, longer content"
        container.write()
        container.text = "second"
        container.write()

        assert (tmp_path / "note.txt").read_text() == "second"

    def test_read_with_trailing_separator(self, test_resources: Path):
        """A path that already ends with a separator is used as is"""
        container = FileContainer(
            path=str(test_resources / "text") + "/", filename="hello.txt"
        )
        container.read()
        assert container.text == "hello world"

    def test_read_empty_file_warns(self, test_resources: Path):
        """Reading an empty file warns and leaves empty data"""
        container = FileContainer(path=str(test_resources / "text"), filename="empty.txt")
        container.data = b"stale"

        with capture_logs() as logs:
            container.read()

        assert container.data == b""
        assert any(log["event"] == "empty_file" for log in logs)

    def test_read_missing_file(self, tmp_path: Path):
        """A missing file is reported and data is left untouched"""
        container = FileContainer(path=str(tmp_path), filename="missing.txt", data=b"keep")

        with pytest.raises(NotFoundError):
            container.read()
        assert container.data == b"keep"

    def test_round_trip_in_working_directory(self, tmp_path: Path, monkeypatch):
        """A container with only a filename writes and reads next to the process"""
        monkeypatch.chdir(tmp_path)

        FileContainer(filename="x.txt", data=b"hi").write()
        assert (tmp_path / "x.txt").read_bytes() == b"hi"

        container = FileContainer(filename="x.txt")
        container.read()
        assert container.data == b"hi"
