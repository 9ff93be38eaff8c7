"""Line I/O ports for seed data, commands and the snapshot log.

The core never touches files directly. Seed and command text arrive through
a LineSource; rendered snapshot lines leave through a SnapshotSink.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Iterable, Iterator, Protocol


class CustomerDbError(Exception):
    """Base exception for the customer database."""


class SourceUnavailableError(CustomerDbError):
    """Raised when a line source cannot be opened."""


class OutputOpenError(CustomerDbError):
    """Raised when the snapshot sink cannot be opened for writing."""


class OutputWriteError(CustomerDbError):
    """Raised when appending to an open snapshot sink fails."""


class LineSource(Protocol):
    """Protocol for a sequential source of text lines."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the source, used in log events."""
        ...

    @abstractmethod
    def read_lines(self) -> Iterator[str]:
        """Yield lines in order, line terminators included.

        Raises:
            SourceUnavailableError: If the source cannot be opened.
        """
        ...


class SnapshotSink(Protocol):
    """Protocol for the append-only snapshot log.

    open() starts a fresh log, discarding anything written by an earlier
    run. Lines are written without terminators; the sink adds them.
    """

    @abstractmethod
    def open(self) -> None:
        """Start a fresh, empty log.

        Raises:
            OutputOpenError: If the log cannot be created.
        """
        ...

    @abstractmethod
    def write_lines(self, lines: Iterable[str]) -> None:
        """Append lines to the log.

        Raises:
            OutputWriteError: If the write fails.
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Flush and release the log."""
        ...
