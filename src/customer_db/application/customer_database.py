"""Customer Database - unified entry point for a batch run.

This module provides the CustomerDatabase class that owns the customer table
and drives the seed → initial snapshot → command loop pipeline.

Usage:
    from customer_db.application import CustomerDatabase

    db = CustomerDatabase(sink=FileSnapshotWriter("output.txt"))
    with db:
        db.load_seed(FileLineSource("input.txt"))
        db.write_initial_snapshot()
        db.run_commands(FileLineSource("commands.txt"))

Failure handling:
    - Seed source unavailable: logged, the table starts empty.
    - Sink cannot be opened: OutputOpenError propagates from start().
    - Command source unavailable: logged, command processing is skipped and
      the initial snapshot is left as written.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from customer_db.adapters.inbound.command_parser import CommandParser
from customer_db.adapters.inbound.seed_parser import parse_seed_line
from customer_db.adapters.outbound import MemorySnapshotSink
from customer_db.application.executor import CommandExecutor, ExecutionResult, Outcome
from customer_db.application.snapshot import SnapshotRenderer
from customer_db.domain.services import CustomerTable, CustomerTableView
from customer_db.infrastructure.logging import get_logger
from customer_db.infrastructure.metrics import MetricsRegistry
from customer_db.infrastructure.tracing import trace_span
from customer_db.ports.outbound import LineSource, SnapshotSink, SourceUnavailableError

logger = get_logger(__name__)


@dataclass
class RunSummary:
    """Counters for one batch run.

    Only failed results are kept; applied and ignored commands are counted.
    """

    seed_records: int = 0
    commands: int = 0
    applied: int = 0
    ignored: int = 0
    errors: int = 0
    seed_missing: bool = False
    commands_aborted: bool = False
    failures: list[ExecutionResult] = field(default_factory=list)

    def record(self, result: ExecutionResult) -> None:
        self.commands += 1
        if result.outcome is Outcome.APPLIED:
            self.applied += 1
        elif result.outcome is Outcome.IGNORED:
            self.ignored += 1
        else:
            self.errors += 1
            self.failures.append(result)


class CustomerDatabase:
    """Owns the customer table and processes a command batch against it.

    Every non-blank command line appends exactly one snapshot block to the
    sink. Blank and comment-only lines are skipped without output.
    """

    def __init__(
        self,
        table: CustomerTable | None = None,
        sink: SnapshotSink | None = None,
        parser: CommandParser | None = None,
        renderer: SnapshotRenderer | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        """Initialize the database.

        Args:
            table: Customer table to operate on. A fresh one if None.
            sink: Destination of the snapshot log. In-memory if None.
            parser: Command parser. Default parser if None.
            renderer: Snapshot renderer. Default separator/marker if None.
            metrics: Optional metrics registry to record into.
        """
        self._table = table if table is not None else CustomerTable()
        self._sink = sink if sink is not None else MemorySnapshotSink()
        self._parser = parser or CommandParser()
        self._renderer = renderer or SnapshotRenderer()
        self._executor = CommandExecutor(self._table)
        self._metrics = metrics
        self._started = False

    @property
    def table(self) -> CustomerTable:
        return self._table

    @property
    def sink(self) -> SnapshotSink:
        return self._sink

    @property
    def is_started(self) -> bool:
        return self._started

    def start(self) -> None:
        """Open the snapshot sink with a fresh, empty log.

        Raises:
            RuntimeError: If already started.
            OutputOpenError: If the sink cannot be opened.
        """
        if self._started:
            raise RuntimeError("Customer database already started")
        self._sink.open()
        self._started = True

    def stop(self) -> None:
        """Close the sink and release every record."""
        if not self._started:
            raise RuntimeError("Customer database not started")
        try:
            self._sink.close()
        finally:
            self._table.clear()
            self._update_table_gauges()
            self._started = False

    def snapshot(self) -> CustomerTableView:
        """Return a lazy view of the current records."""
        return self._table.snapshot()

    def load_seed(self, source: LineSource) -> int:
        """Append one record per seed line.

        Args:
            source: Seed data lines.

        Returns:
            Number of records loaded; 0 if the source is unavailable.
        """
        return self._load_seed(source) or 0

    def _load_seed(self, source: LineSource) -> int | None:
        try:
            lines = source.read_lines()
        except SourceUnavailableError as e:
            logger.warning("seed_file_unavailable", source=source.name, error=str(e))
            return None

        count = 0
        for line in lines:
            self._table.create_customer(parse_seed_line(line))
            count += 1

        if self._metrics is not None:
            self._metrics.seed_records_total.inc(count)
        self._update_table_gauges()
        logger.info("seed_loaded", source=source.name, records=count)
        return count

    def write_initial_snapshot(self) -> None:
        """Write the table as loaded, without a separator."""
        self._require_started()
        self._sink.write_lines(self._renderer.render_initial(self._table.snapshot()))
        self._count_block("initial")

    def execute(self, raw_line: str) -> ExecutionResult | None:
        """Execute one command line and append its snapshot block.

        Args:
            raw_line: Line as read from the command source.

        Returns:
            The execution result, or None for a blank line (nothing written).
        """
        self._require_started()

        plan = self._parser.parse(raw_line)
        if plan is None:
            return None

        verb = plan.statement_type.value
        with trace_span("customer_db.command", verb=verb):
            start = time.perf_counter()
            result = self._executor.execute(plan)
            elapsed = time.perf_counter() - start

            self._sink.write_lines(self._renderer.render_block(self._table.snapshot(), result))

        if self._metrics is not None:
            self._metrics.commands_total.labels(verb=verb, outcome=result.outcome.value).inc()
            self._metrics.command_latency_seconds.labels(verb=verb).observe(elapsed)
        self._count_block("error" if result.is_error else "table")
        self._update_table_gauges()

        if result.is_error:
            logger.warning("command_failed", verb=verb, reason=result.message)
        else:
            logger.debug(
                "command_executed",
                verb=verb,
                outcome=result.outcome.value,
                affected_rows=result.affected_rows,
            )
        return result

    def run_commands(self, source: LineSource, summary: RunSummary | None = None) -> RunSummary:
        """Execute every line of a command source in order.

        Args:
            source: Command lines.
            summary: Summary to accumulate into. A new one if None.

        Returns:
            The run summary; commands_aborted is set when the source could
            not be opened.
        """
        summary = summary if summary is not None else RunSummary()
        try:
            lines = source.read_lines()
        except SourceUnavailableError as e:
            logger.error("command_file_unavailable", source=source.name, error=str(e))
            summary.commands_aborted = True
            return summary

        for line in lines:
            result = self.execute(line)
            if result is not None:
                summary.record(result)
        return summary

    def run(self, seed: LineSource, commands: LineSource) -> RunSummary:
        """Run the whole pipeline: seed, initial dump, then the command batch.

        The database must already be started.
        """
        self._require_started()
        with trace_span("customer_db.run", seed=seed.name, commands=commands.name):
            summary = RunSummary()
            loaded = self._load_seed(seed)
            summary.seed_records = loaded or 0
            summary.seed_missing = loaded is None
            self.write_initial_snapshot()
            self.run_commands(commands, summary)

        logger.info(
            "batch_completed",
            commands=summary.commands,
            applied=summary.applied,
            ignored=summary.ignored,
            errors=summary.errors,
            records=self._table.size,
        )
        return summary

    def get_stats(self) -> dict:
        """Get table statistics."""
        return {
            "started": self._started,
            "records": self._table.size,
            "capacity": self._table.capacity,
            "next_id": self._table.next_id,
        }

    def _require_started(self) -> None:
        if not self._started:
            raise RuntimeError("Customer database not started")

    def _count_block(self, kind: str) -> None:
        if self._metrics is not None:
            self._metrics.snapshot_blocks_total.labels(kind=kind).inc()

    def _update_table_gauges(self) -> None:
        if self._metrics is not None:
            self._metrics.records.set(self._table.size)
            self._metrics.table_capacity.set(self._table.capacity)

    def __enter__(self) -> "CustomerDatabase":
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.stop()
