"""Unit tests for the file-backed adapters."""

from pathlib import Path

import pytest

from customer_db.adapters.outbound import (
    FileLineSource,
    FileSnapshotWriter,
    MemorySnapshotSink,
    StaticLineSource,
)
from customer_db.ports.outbound import (
    OutputOpenError,
    OutputWriteError,
    SourceUnavailableError,
)


@pytest.mark.unit
class TestFileLineSource:
    """Tests for FileLineSource."""

    def test_reads_lines_with_terminators(self, temp_dir: Path) -> None:
        path = temp_dir / "commands.txt"
        path.write_bytes(b"first\r\nsecond\nthird")

        lines = list(FileLineSource(path).read_lines())

        assert lines == ["first\r\n", "second\n", "third"]

    def test_lone_carriage_return_does_not_split(self, temp_dir: Path) -> None:
        path = temp_dir / "commands.txt"
        path.write_bytes(b"INSERT INTO CUSTOMER (A)\rINSERT INTO CUSTOMER (B)\n")

        lines = list(FileLineSource(path).read_lines())

        assert lines == ["INSERT INTO CUSTOMER (A)\rINSERT INTO CUSTOMER (B)\n"]

    def test_missing_file(self, temp_dir: Path) -> None:
        source = FileLineSource(temp_dir / "absent.txt")
        with pytest.raises(SourceUnavailableError):
            source.read_lines()

    def test_name(self, temp_dir: Path) -> None:
        path = temp_dir / "input.txt"
        assert FileLineSource(path).name == str(path)

    def test_static_source_is_rereadable(self) -> None:
        source = StaticLineSource(["a\n", "b\n"], name="mem")
        assert list(source.read_lines()) == ["a\n", "b\n"]
        assert list(source.read_lines()) == ["a\n", "b\n"]
        assert source.name == "mem"


@pytest.mark.unit
class TestFileSnapshotWriter:
    """Tests for FileSnapshotWriter."""

    def test_open_truncates(self, temp_dir: Path) -> None:
        path = temp_dir / "output.txt"
        path.write_text("stale\n")

        writer = FileSnapshotWriter(path)
        writer.open()
        writer.close()

        assert path.read_text() == ""

    def test_write_lines_flushes(self, temp_dir: Path) -> None:
        path = temp_dir / "output.txt"
        writer = FileSnapshotWriter(path)
        writer.open()
        try:
            writer.write_lines(["----------", "Alice,a@x.com,BACKEND_DEVELOPER,false,00.00.0000"])
            assert path.read_text() == (
                "----------\nAlice,a@x.com,BACKEND_DEVELOPER,false,00.00.0000\n"
            )
        finally:
            writer.close()
        assert not writer.is_open

    def test_open_in_missing_directory(self, temp_dir: Path) -> None:
        writer = FileSnapshotWriter(temp_dir / "missing" / "output.txt")
        with pytest.raises(OutputOpenError):
            writer.open()

    def test_write_before_open(self, temp_dir: Path) -> None:
        writer = FileSnapshotWriter(temp_dir / "output.txt")
        with pytest.raises(OutputWriteError):
            writer.write_lines(["x"])

    def test_close_is_idempotent(self, temp_dir: Path) -> None:
        writer = FileSnapshotWriter(temp_dir / "output.txt")
        writer.open()
        writer.close()
        writer.close()


@pytest.mark.unit
class TestMemorySnapshotSink:
    """Tests for MemorySnapshotSink."""

    def test_collects_lines(self) -> None:
        sink = MemorySnapshotSink()
        sink.open()
        sink.write_lines(["a", "b"])
        sink.close()

        assert sink.lines == ["a", "b"]
        assert sink.text() == "a\nb\n"
        assert sink.closed

    def test_open_resets(self) -> None:
        sink = MemorySnapshotSink()
        sink.write_lines(["old"])
        sink.open()
        assert sink.lines == []
