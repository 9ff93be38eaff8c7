"""Outbound ports - interfaces for external dependencies.

Outbound ports define the contracts for where seed data and commands come
from and where snapshots go.
"""

from customer_db.ports.outbound.line_io import (
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
