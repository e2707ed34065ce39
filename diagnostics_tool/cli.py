"""Click CLI for Diagnostics Tool.

Commands:
- levels: List log levels
- collect: Record log lines from a file or stdin and export them
- stress: Concurrent append stress test
"""

import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.table import Table

from diagnostics_tool import __version__
from diagnostics_tool.app import build_diagnostics
from diagnostics_tool.config import DiagnosticsConfig
from diagnostics_tool.logs import LogCollector, LogLevel, setup_logging
from diagnostics_tool.utils.errors import InvalidInputError

console = Console(stderr=True)
logger = logging.getLogger(__name__)


def parse_line(line: str) -> Tuple[LogLevel, str]:
    """Split "LEVEL message" into its parts.

    Lines without a recognizable level prefix are recorded as INFO.
    """
    head, _, rest = line.strip().partition(" ")
    try:
        level = LogLevel.parse(head.rstrip(":"))
    except InvalidInputError:
        return LogLevel.INFO, line.strip()
    return level, rest


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging",
)
@click.option(
    "--max-entries",
    envvar="DIAGNOSTICS_MAX_ENTRIES",
    type=click.IntRange(min=1),
    default=None,
    help="Keep at most this many log entries",
)
@click.pass_context
def cli(ctx, debug: bool, max_entries: Optional[int]):
    """Diagnostics Tool - collect and export leveled logs."""
    ctx.ensure_object(dict)

    # Exported entries go to stdout, so don't echo them to stderr as well
    overrides = {"mirror_to_logging": False}
    if debug:
        overrides["log_level"] = "DEBUG"
    if max_entries is not None:
        overrides["max_entries"] = max_entries
    config = DiagnosticsConfig.from_env().model_copy(update=overrides)
    ctx.obj["config"] = config

    setup_logging(level=config.log_level)


def _collector(ctx) -> LogCollector:
    return build_diagnostics(ctx.obj["config"]).collector


@cli.command()
def levels():
    """List log levels."""
    table = Table(title="Log Levels")
    table.add_column("Label")
    table.add_column("Value")
    table.add_column("Python level", justify="right")

    for level in LogLevel:
        table.add_row(level.label, level.value, str(level.python_level))

    console.print(table)


@cli.command()
@click.argument("input_file", type=click.File("r"), default="-")
@click.option("--days", type=int, default=None, help="Only export the last N days")
@click.option("--json", "as_json", is_flag=True, help="Export entries as JSON")
@click.pass_context
def collect(ctx, input_file, days: Optional[int], as_json: bool):
    """Record "LEVEL message" lines from INPUT_FILE (or stdin) and export them."""
    collector = _collector(ctx)
    rejected = 0

    for line in input_file:
        level, message = parse_line(line)
        try:
            collector.log(message, level)
        except InvalidInputError as e:
            rejected += 1
            logger.debug(f"Rejected line {line!r}: {e}")

    if as_json:
        click.echo(collector.get_entries_json())
    elif days is not None:
        click.echo(collector.get_logs_from_last_days(days), nl=False)
    else:
        click.echo(collector.get_all_logs_formatted(), nl=False)

    recorded = len(collector.store)
    if rejected:
        console.print(f"[yellow]Recorded {recorded} entries, rejected {rejected} blank lines[/]")
    else:
        console.print(f"[green]Recorded {recorded} entries[/]")


@cli.command()
@click.option("--workers", type=click.IntRange(min=1), default=10, help="Concurrent writers")
@click.option("--per-worker", type=click.IntRange(min=1), default=10, help="Appends per writer")
@click.pass_context
def stress(ctx, workers: int, per_worker: int):
    """Append from many threads at once and verify the result."""
    collector = _collector(ctx)

    def _write(worker: int) -> None:
        for i in range(per_worker):
            collector.debug(f"worker-{worker}-{i}")

    with ThreadPoolExecutor(max_workers=workers) as pool:
        list(pool.map(_write, range(workers)))

    entries = collector.get_entries()
    expected = workers * per_worker
    messages = [e.message for e in entries]
    duplicates = len(messages) - len(set(messages))
    out_of_order = sum(
        1 for a, b in zip(entries, entries[1:]) if b.timestamp < a.timestamp
    )
    # Each writer's own appends are sequential, so they must keep their order
    per_worker_order_ok = all(
        [m for m in messages if m.startswith(f"worker-{w}-")]
        == [f"worker-{w}-{i}" for i in range(per_worker)]
        for w in range(workers)
    )

    table = Table(title="Stress Test")
    table.add_column("Check")
    table.add_column("Result", justify="right")
    table.add_row("Entries", f"{len(entries)}/{expected}")
    table.add_row("Duplicates", str(duplicates))
    table.add_row("Timestamp regressions", str(out_of_order))
    table.add_row("Per-writer order", "ok" if per_worker_order_ok else "broken")
    console.print(table)

    if len(entries) != expected or duplicates or out_of_order or not per_worker_order_ok:
        console.print("[red]FAILED[/]")
        sys.exit(1)
    console.print("[green]PASSED[/]")


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
