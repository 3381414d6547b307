"""
Command-line interface for pcbench.

Runs the synchronization strategies against each other and prints the
mean run time and first error of each.
"""

import logging

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
import typer

from pcbench.config import DEFAULT_SEED
from pcbench.config import BenchmarkSettings
from pcbench.errors import ErrorKind
from pcbench.errors import error_kind
from pcbench.helpers import logging_observer
from pcbench.strategies import STRATEGIES
from pcbench.types import AggregateResult

app = typer.Typer(help="Benchmark lock-based and queue-based producer-consumer strategies.")
console = Console()


def _configure_logging(verbose: bool) -> None:
  logging.basicConfig(
    level=logging.DEBUG if verbose else logging.WARNING,
    format="%(message)s",
    handlers=[RichHandler(console=console, show_path=False)],
    force=True,
  )


_KIND_STYLES = {
  ErrorKind.VALIDATION_MISMATCH: "yellow",
  ErrorKind.RUN_FAULT: "red",
}


def _error_cell(error: str | None) -> str:
  kind = error_kind(error)
  if kind is None:
    return "[green]ok[/green]"
  style = _KIND_STYLES[kind]
  return f"[{style}]{escape(error)}[/{style}]"


def _results_table(results: list[tuple[str, AggregateResult]]) -> Table:
  table = Table(title="Strategy results")
  table.add_column("Strategy", style="bold")
  table.add_column("Runs", justify="right")
  table.add_column("Mean elapsed (ms)", justify="right")
  table.add_column("Error")
  for name, result in results:
    table.add_row(
      name,
      str(result.execution_count),
      str(result.elapsed_millis),
      _error_cell(result.error),
    )
  return table


@app.command()
def run(
  data_count: int = typer.Option(100, "--data-count", "-n", help="Work items per run."),
  execution_count: int = typer.Option(10, "--execution-count", "-r", help="Runs per strategy."),
  min_delay: int = typer.Option(100, "--min-delay", help="Lower bound of simulated work, in ms."),
  max_delay: int = typer.Option(1000, "--max-delay", help="Upper bound (exclusive) of simulated work, in ms."),
  max_workers: int | None = typer.Option(None, "--max-workers", "-w", help="Producer pool size."),
  seed: int | None = typer.Option(DEFAULT_SEED, "--seed", help="Seed of the random delays."),
  strategy: list[str] | None = typer.Option(
    None,
    "--strategy",
    "-s",
    help=f"Strategy to run, repeatable. One of: {', '.join(STRATEGIES)}.",
  ),
  verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every produced and consumed item."),
) -> None:
  """Run every selected strategy and report its aggregate result."""
  _configure_logging(verbose)
  try:
    settings = BenchmarkSettings(
      data_count=data_count,
      execution_count=execution_count,
      min_delay_millis=min_delay,
      max_delay_millis=max_delay,
      max_workers=max_workers,
      seed=seed,
      strategies=strategy or list(STRATEGIES),
    )
  except ValidationError as e:
    raise typer.BadParameter(str(e)) from e

  executor = settings.build_executor(observer=logging_observer() if verbose else None)
  results = []
  for selected in settings.build_strategies():
    with console.status(f"Running {selected.name} strategy..."):
      result = executor.execute_many(selected, settings.data_count, settings.execution_count)
    results.append((selected.name, result))

  console.print(_results_table(results))


@app.command()
def strategies() -> None:
  """List the registered strategies."""
  for name, strategy_class in STRATEGIES.items():
    summary = (strategy_class.__doc__ or "").strip().splitlines()[0]
    typer.echo(f"{name}: {summary}")


def main() -> None:
  app()
