"""Application layer for the customer database.

The application layer orchestrates parsing, execution and snapshot output.

Exports:
    CustomerDatabase:
        - CustomerDatabase: Owns the table and runs a command batch
        - RunSummary: Counters for one batch run
    Executor:
        - CommandExecutor: Dispatches plans to their handlers
        - ExecutionResult: Result of executing one plan
        - Outcome: APPLIED / IGNORED / ERROR
    Snapshot:
        - SnapshotRenderer: Renders table blocks for the output log
    Bootstrap:
        - build_container: Registers all components for a Config
"""

from customer_db.application.bootstrap import build_container, command_source, seed_source
from customer_db.application.customer_database import CustomerDatabase, RunSummary
from customer_db.application.executor import (
    CommandExecutor,
    ExecutionResult,
    Outcome,
    apply_assignment,
)
from customer_db.application.snapshot import (
    DEFAULT_ERROR_MARKER,
    DEFAULT_SEPARATOR,
    SnapshotRenderer,
)

__all__ = [
    "CustomerDatabase",
    "RunSummary",
    "CommandExecutor",
    "ExecutionResult",
    "Outcome",
    "apply_assignment",
    "SnapshotRenderer",
    "DEFAULT_SEPARATOR",
    "DEFAULT_ERROR_MARKER",
    "build_container",
    "seed_source",
    "command_source",
]
