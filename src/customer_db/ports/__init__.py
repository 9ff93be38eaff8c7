"""Ports layer - interface definitions following Hexagonal Architecture.

Ports are abstract interfaces (protocols) that define contracts:
- Outbound ports: Dependencies on external systems (line sources, snapshot sink)

Adapters implement these ports with concrete functionality.
"""

from customer_db.ports.outbound import (
    CustomerDbError,
    LineSource,
    OutputOpenError,
    OutputWriteError,
    SnapshotSink,
    SourceUnavailableError,
)

__all__ = [
    "LineSource",
    "SnapshotSink",
    "CustomerDbError",
    "SourceUnavailableError",
    "OutputOpenError",
    "OutputWriteError",
]
