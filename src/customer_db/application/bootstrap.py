"""Wiring of the customer database components.

build_container() registers every component against a Container so that
the CLI and tests resolve the same object graph from a single Config. The
snapshot sink is registered under the SnapshotSink port.
"""

from __future__ import annotations

from customer_db.adapters.inbound.command_parser import CommandParser
from customer_db.adapters.outbound import FileLineSource, FileSnapshotWriter
from customer_db.application.customer_database import CustomerDatabase
from customer_db.application.snapshot import SnapshotRenderer
from customer_db.domain.services import CustomerTable
from customer_db.infrastructure.config import Config
from customer_db.infrastructure.container import Container
from customer_db.infrastructure.metrics import MetricsRegistry, get_metrics
from customer_db.ports.outbound import SnapshotSink


def build_container(
    config: Config,
    container: Container | None = None,
    metrics: MetricsRegistry | None = None,
) -> Container:
    """Register all components for the given configuration.

    Args:
        config: Run configuration.
        container: Container to populate. A new one if None.
        metrics: Metrics registry to use. The process registry if None.

    Returns:
        The populated container.
    """
    c = container if container is not None else Container()

    c.register_singleton(Config, config)
    c.register_factory(MetricsRegistry, lambda _: metrics if metrics is not None else get_metrics())
    c.register_factory(
        CustomerTable,
        lambda c: CustomerTable(
            initial_capacity=c.resolve(Config).storage.initial_capacity,
            growth_factor=c.resolve(Config).storage.growth_factor,
        ),
    )
    c.register_factory(CommandParser, lambda _: CommandParser())
    c.register_factory(
        SnapshotRenderer,
        lambda c: SnapshotRenderer(
            separator=c.resolve(Config).output.separator,
            error_marker=c.resolve(Config).output.error_marker,
        ),
    )
    c.register_factory(
        SnapshotSink,
        lambda c: FileSnapshotWriter(
            c.resolve(Config).files.output_path,
            encoding=c.resolve(Config).files.encoding,
        ),
    )
    c.register_factory(
        CustomerDatabase,
        lambda c: CustomerDatabase(
            table=c.resolve(CustomerTable),
            sink=c.resolve(SnapshotSink),
            parser=c.resolve(CommandParser),
            renderer=c.resolve(SnapshotRenderer),
            metrics=c.resolve(MetricsRegistry),
        ),
    )
    return c


def seed_source(config: Config) -> FileLineSource:
    """Line source for the configured seed file."""
    return FileLineSource(config.files.input_path, encoding=config.files.encoding)


def command_source(config: Config) -> FileLineSource:
    """Line source for the configured command file."""
    return FileLineSource(config.files.commands_path, encoding=config.files.encoding)
