"""Snapshot sinks.

FileSnapshotWriter truncates the output file when opened and keeps the
handle for the rest of the run, flushing after every block so the log on
disk is complete up to the last processed command.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, TextIO

from customer_db.ports.outbound import OutputOpenError, OutputWriteError

logger = logging.getLogger(__name__)


class FileSnapshotWriter:
    """SnapshotSink implementation writing to a text file."""

    def __init__(self, path: str | Path, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._encoding = encoding
        self._file: TextIO | None = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def open(self) -> None:
        """Create or truncate the output file.

        Raises:
            OutputOpenError: If the file cannot be opened for writing.
        """
        if self._file is not None:
            self.close()
        try:
            self._file = open(self._path, "w", encoding=self._encoding, newline="\n")
        except OSError as e:
            raise OutputOpenError(f"Cannot open {self._path} for writing: {e}") from e
        logger.debug("Opened snapshot log %s", self._path)

    def write_lines(self, lines: Iterable[str]) -> None:
        """Append lines, each followed by a newline, and flush."""
        if self._file is None:
            raise OutputWriteError(f"Snapshot log {self._path} is not open")
        try:
            for line in lines:
                self._file.write(line)
                self._file.write("\n")
            self._file.flush()
        except OSError as e:
            raise OutputWriteError(f"Failed to write to {self._path}: {e}") from e

    def close(self) -> None:
        if self._file is None:
            return
        try:
            self._file.close()
        finally:
            self._file = None


class MemorySnapshotSink:
    """SnapshotSink that keeps the log in a list of lines."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.closed = False

    def open(self) -> None:
        self.lines = []
        self.closed = False

    def write_lines(self, lines: Iterable[str]) -> None:
        self.lines.extend(lines)

    def close(self) -> None:
        self.closed = True

    def text(self) -> str:
        """Return the log as it would appear on disk."""
        return "".join(f"{line}\n" for line in self.lines)
