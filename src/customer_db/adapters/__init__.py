"""Adapters layer - concrete implementations of port interfaces.

Adapters provide the actual implementations:
- Inbound adapters: Parse command and seed text into domain operations
- Outbound adapters: Read lines from and write snapshots to files or memory
"""

from customer_db.adapters.outbound import (
    FileLineSource,
    FileSnapshotWriter,
    MemorySnapshotSink,
    StaticLineSource,
)

__all__ = [
    # Outbound adapters
    "FileLineSource",
    "StaticLineSource",
    "FileSnapshotWriter",
    "MemorySnapshotSink",
]
