"""Runs strategies over fresh run contexts, times them and aggregates the results."""

from collections.abc import Callable
from collections.abc import Sequence
import logging
import time

from pcbench.context import IRunContext
from pcbench.context import RunContext
from pcbench.errors import run_fault
from pcbench.strategies.types import SynchronizationStrategy
from pcbench.types import AggregateResult
from pcbench.types import ExecutionResult

logger = logging.getLogger(__name__)

type ContextFactory = Callable[[int], IRunContext]


def aggregate(results: Sequence[ExecutionResult]) -> AggregateResult:
  """Combine the results of a batch of runs.

  Args:
      results: Per-run results, in execution order.

  Returns:
      The truncated mean elapsed time and the first error any run reported.
  """
  error = next((r.error for r in results if r.error), None)
  elapsed_millis = sum(r.elapsed_millis for r in results) // len(results) if results else 0
  return AggregateResult(error=error, elapsed_millis=elapsed_millis, execution_count=len(results))


class StrategyExecutor:
  """Executes a strategy once or many times.

  The executor only knows the `SynchronizationStrategy` interface, so any
  strategy can be measured. Each run gets its own context from the context
  factory; nothing carries over between runs.
  """

  def __init__(
    self,
    context_factory: ContextFactory | None = None,
    clock: Callable[[], float] = time.perf_counter,
  ) -> None:
    """Initialize the executor.

    Args:
        context_factory: Builds the context of a run from its data count.
                         Defaults to a `RunContext` with random sleeps.
        clock: Monotonic clock returning seconds.
    """
    self.context_factory: ContextFactory = context_factory or RunContext
    self.clock = clock

  def execute_once(self, strategy: SynchronizationStrategy, data_count: int) -> ExecutionResult:
    """Run a strategy over a fresh context and validate the outcome.

    A strategy that raises aborts only this run; the failure is logged and
    reported as a RunFault error.

    Args:
        strategy: The strategy to run.
        data_count: Number of work items in the run.

    Returns:
        The run's error, if any, and its elapsed wall-clock milliseconds.
    """
    context = self.context_factory(data_count)
    logger.debug("Executing %r over %d items", strategy, data_count)

    started = self.clock()
    try:
      strategy.execute(context)
    except Exception as e:
      elapsed_millis = self._millis_since(started)
      logger.exception("Run of %r aborted after %d ms", strategy, elapsed_millis)
      return ExecutionResult(error=run_fault(e), elapsed_millis=elapsed_millis)
    elapsed_millis = self._millis_since(started)

    error = context.validate()
    if error:
      logger.warning("Run of %r failed validation: %s", strategy, error)
    else:
      logger.debug("Run of %r finished in %d ms", strategy, elapsed_millis)
    return ExecutionResult(error=error, elapsed_millis=elapsed_millis)

  def execute_many(self, strategy: SynchronizationStrategy, data_count: int, execution_count: int) -> AggregateResult:
    """Run a strategy `execution_count` times and aggregate the results.

    Every run executes, even after an earlier one failed.

    Args:
        strategy: The strategy to run.
        data_count: Number of work items in each run.
        execution_count: Number of runs.

    Returns:
        The aggregate of all runs.
    """
    if execution_count < 0:
      raise ValueError("execution_count must not be negative")

    results = [self.execute_once(strategy, data_count) for _ in range(execution_count)]
    result = aggregate(results)
    logger.info("%r: %s", strategy, result)
    return result

  def _millis_since(self, started: float) -> int:
    return int((self.clock() - started) * 1000)
