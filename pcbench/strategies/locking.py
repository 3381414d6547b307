from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
import threading

from pcbench.context.types import IRunContext
from pcbench.strategies.types import SynchronizationStrategy
from pcbench.types import WorkItemId


class ConsumeGuard:
  """An exclusive-access guard around the consume step of one run.

  Used as a `with` block: entering acquires the lock, leaving releases it,
  whether the block finished or raised.
  """

  def __init__(self) -> None:
    self._lock = threading.Lock()

  def __enter__(self) -> "ConsumeGuard":
    """Blocks until no other consume call holds the guard."""
    self._lock.acquire()
    return self

  def __exit__(self, exc_type, exc_val, exc_tb) -> None:
    """Lets the next waiting consume call in, also when this one raised."""
    self._lock.release()

  def locked(self) -> bool:
    return self._lock.locked()


class LockStrategy(SynchronizationStrategy):
  """Produce in parallel, consume under a single lock.

  Every work item is one task on a thread pool. A task produces its item
  without any synchronization and then consumes it while holding the run's
  guard, so consumption (simulated work included) is fully serialized.
  """

  name = "lock"

  def __init__(
    self,
    max_workers: int | None = None,
    guard_factory: Callable[[], ConsumeGuard] = ConsumeGuard,
  ) -> None:
    """Initialize the lock strategy.

    Args:
        max_workers: Size of the thread pool.
        guard_factory: Creates the guard for each run.
    """
    super().__init__(max_workers)
    self.guard_factory = guard_factory

  def execute(self, context: IRunContext) -> None:
    """Run one task per work item and wait for all of them.

    Args:
        context: The run to execute.

    Raises:
        Exception: The first failure raised by a task, once every task has
                   finished.
    """
    guard = self.guard_factory()

    def produce_then_consume(work_item_id: WorkItemId) -> None:
      item = context.produce(work_item_id)
      with guard:
        context.consume(item)

    with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="lock-producer") as executor:
      futures = [executor.submit(produce_then_consume, i) for i in context.get_work_item_ids()]

    for future in futures:
      future.result()
