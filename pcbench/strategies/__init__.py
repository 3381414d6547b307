"""Synchronization strategies and the registry used to select them by name."""

from pcbench.strategies.locking import ConsumeGuard
from pcbench.strategies.locking import LockStrategy
from pcbench.strategies.queueing import QueueStrategy
from pcbench.strategies.types import SynchronizationStrategy
from pcbench.strategies.types import default_max_workers

STRATEGIES: dict[str, type[SynchronizationStrategy]] = {
  LockStrategy.name: LockStrategy,
  QueueStrategy.name: QueueStrategy,
}


def create_strategy(name: str, max_workers: int | None = None) -> SynchronizationStrategy:
  """Instantiate a registered strategy.

  Args:
      name: Registry name, e.g. "lock" or "queue".
      max_workers: Size of the strategy's thread pool.

  Returns:
      A new strategy instance.

  Raises:
      KeyError: If no strategy is registered under that name.
  """
  try:
    strategy_class = STRATEGIES[name]
  except KeyError:
    raise KeyError(f"Unknown strategy {name!r}, expected one of: {', '.join(STRATEGIES)}") from None
  return strategy_class(max_workers=max_workers)


__all__ = [
  "STRATEGIES",
  "ConsumeGuard",
  "LockStrategy",
  "QueueStrategy",
  "SynchronizationStrategy",
  "create_strategy",
  "default_max_workers",
]
