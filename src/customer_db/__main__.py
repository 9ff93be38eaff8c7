"""Command-line entry point.

Runs one batch: loads the seed file, writes the initial snapshot, then
replays the command file, appending a snapshot block per command.

Exit status:
    0  batch completed (including a missing seed or command file)
    1  output log could not be opened or written, or memory was exhausted
"""

from __future__ import annotations

import argparse
from pathlib import Path

from customer_db.application import (
    CustomerDatabase,
    build_container,
    command_source,
    seed_source,
)
from customer_db.infrastructure import (
    Config,
    bind_run_context,
    get_config,
    get_logger,
    setup_logging,
    setup_metrics,
    setup_tracing,
)
from customer_db.ports.outbound import CustomerDbError, OutputOpenError


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="customer-db",
        description="Replay customer commands against seed data and log table snapshots.",
    )
    p.add_argument("--input", type=Path, help="Seed data file (default: input.txt)")
    p.add_argument("--commands", type=Path, help="Command file (default: commands.txt)")
    p.add_argument("--output", type=Path, help="Snapshot log file (default: output.txt)")
    p.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default from CUSTOMER_DB_OBSERVABILITY__LOG_LEVEL or INFO)",
    )
    p.add_argument("--log-format", choices=["json", "console"], help="Log format")
    return p


def load_config(args: argparse.Namespace) -> Config:
    """Build the run configuration from the environment plus CLI overrides."""
    config = get_config()

    files = {
        key: value
        for key, value in (
            ("input_path", args.input),
            ("commands_path", args.commands),
            ("output_path", args.output),
        )
        if value is not None
    }
    observability = {
        key: value
        for key, value in (("log_level", args.log_level), ("log_format", args.log_format))
        if value is not None
    }

    return config.model_copy(
        update={
            "files": config.files.model_copy(update=files),
            "observability": config.observability.model_copy(update=observability),
        }
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args)

    obs = config.observability
    setup_logging(level=obs.log_level, log_format=obs.log_format)
    bind_run_context(
        input=str(config.files.input_path),
        commands=str(config.files.commands_path),
        output=str(config.files.output_path),
    )
    if obs.metrics_port is not None:
        setup_metrics(port=obs.metrics_port)
    setup_tracing(obs)

    logger = get_logger("customer_db")
    database = build_container(config).resolve(CustomerDatabase)

    try:
        database.start()
    except OutputOpenError as e:
        logger.error("output_unavailable", path=str(config.files.output_path), error=str(e))
        return 1

    try:
        database.run(seed_source(config), command_source(config))
    except MemoryError:
        logger.critical("memory_exhausted", records=database.table.size)
        return 1
    except CustomerDbError as e:
        logger.error("batch_failed", error=str(e))
        return 1
    finally:
        database.stop()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
