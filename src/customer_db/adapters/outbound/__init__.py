"""Outbound adapters for the customer database.

Exports:
    - FileLineSource: Reads seed or command lines from a file
    - StaticLineSource: Serves lines from memory
    - FileSnapshotWriter: Writes the snapshot log to a file
    - MemorySnapshotSink: Collects the snapshot log in memory
"""

from customer_db.adapters.outbound.file_line_source import FileLineSource, StaticLineSource
from customer_db.adapters.outbound.file_snapshot_writer import (
    FileSnapshotWriter,
    MemorySnapshotSink,
)

__all__ = [
    "FileLineSource",
    "StaticLineSource",
    "FileSnapshotWriter",
    "MemorySnapshotSink",
]
