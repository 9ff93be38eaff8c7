"""File-backed line source.

Used for both the seed file and the command file. The file is opened when
read_lines() is called, so an unreadable path is reported up front rather
than on the first iteration.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, TextIO

from customer_db.ports.outbound import SourceUnavailableError

logger = logging.getLogger(__name__)


class FileLineSource:
    """LineSource implementation over a text file.

    Attributes:
        path: Path of the file to read.
    """

    def __init__(self, path: str | Path, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    @property
    def name(self) -> str:
        return str(self._path)

    def read_lines(self) -> Iterator[str]:
        """Open the file and return an iterator over its lines.

        Raises:
            SourceUnavailableError: If the file cannot be opened.
        """
        try:
            # Split on LF only; CR stays in the line for the parsers to cut at.
            handle = open(
                self._path, "r", encoding=self._encoding, errors="replace", newline="\n"
            )
        except OSError as e:
            raise SourceUnavailableError(f"Cannot open {self._path}: {e}") from e

        logger.debug("Opened line source %s", self._path)
        return self._iter_lines(handle)

    @staticmethod
    def _iter_lines(handle: TextIO) -> Iterator[str]:
        with handle:
            yield from handle


class StaticLineSource:
    """LineSource over an in-memory sequence of lines."""

    def __init__(self, lines: list[str] | tuple[str, ...], name: str = "<memory>") -> None:
        self._lines = list(lines)
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def read_lines(self) -> Iterator[str]:
        return iter(list(self._lines))
