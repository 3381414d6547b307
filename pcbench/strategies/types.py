from abc import ABC
from abc import abstractmethod

from loky import cpu_count

from pcbench.context.types import IRunContext


def default_max_workers() -> int:
  """Size of a strategy's worker pool when none is given: the usable CPU count."""
  return max(1, cpu_count())


class SynchronizationStrategy(ABC):
  """Abstract base class for synchronization strategies.

  A strategy decides how the producers and consumers of a run are scheduled
  and how consumption is kept exclusive. It does not decide what producing
  or consuming means; that belongs to the run context.
  """

  name: str = "strategy"

  def __init__(self, max_workers: int | None = None) -> None:
    """Initialize the strategy.

    Args:
        max_workers: Size of the producer thread pool. Defaults to the
                     number of usable CPUs.
    """
    if max_workers is not None and max_workers < 1:
      raise ValueError("max_workers must be at least 1")
    self.max_workers = max_workers or default_max_workers()

  @abstractmethod
  def execute(self, context: IRunContext) -> None:
    """Drive every work item of the context through produce and consume.

    Must not return before every `consume` call has completed.

    Args:
        context: The run to execute.
    """
    ...

  def __repr__(self) -> str:
    return f"{type(self).__name__}(max_workers={self.max_workers})"
