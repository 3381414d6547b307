"""
The in-process run context used by every benchmark run.
"""

from pcbench.context.types import IRunContext
from pcbench.delay import RandomSleep
from pcbench.errors import validation_mismatch
from pcbench.types import DataItem
from pcbench.types import DelayFunction
from pcbench.types import Observer
from pcbench.types import RunEvent
from pcbench.types import WorkItemId

DEFAULT_MIN_DELAY_MILLIS = 100
DEFAULT_MAX_DELAY_MILLIS = 1000


class RunContext(IRunContext):
  """
  A run context backed by a plain list.

  Both steps simulate variable-cost work by calling the injected delay
  function with the configured range. The consumed log is an ordinary list
  and is not protected by any lock; serializing `consume` is the active
  strategy's job.
  """

  def __init__(
    self,
    data_count: int,
    delay: DelayFunction | None = None,
    min_delay_millis: int = DEFAULT_MIN_DELAY_MILLIS,
    max_delay_millis: int = DEFAULT_MAX_DELAY_MILLIS,
    observer: Observer | None = None,
  ) -> None:
    """
    Initializes the context for one run.

    Args:
        data_count: Number of work items; ids run from 1 to data_count.
        delay: The delay function simulating work. Defaults to an unseeded
               `RandomSleep`.
        min_delay_millis: Lower bound passed to the delay function.
        max_delay_millis: Upper bound passed to the delay function.
        observer: Optional callback notified after every produce and consume.
    """
    if data_count < 0:
      raise ValueError("data_count must not be negative")
    self.data_count = data_count
    self._work_item_ids = list(range(1, data_count + 1))
    self._consumed: list[DataItem] = []
    self._delay = delay or RandomSleep()
    self._min_delay_millis = min_delay_millis
    self._max_delay_millis = max_delay_millis
    self._observer = observer

  @property
  def consumed_items(self) -> tuple[DataItem, ...]:
    """A snapshot of the consumed log, in consumption order."""
    return tuple(self._consumed)

  def get_work_item_ids(self) -> list[WorkItemId]:
    return self._work_item_ids

  def produce(self, work_item_id: WorkItemId) -> DataItem:
    millis = self._delay(self._min_delay_millis, self._max_delay_millis)
    item = DataItem(id=work_item_id, payload=f"I've been sleeping for {millis} millis !")
    self._notify(RunEvent.PRODUCED, item, millis)
    return item

  def consume(self, item: DataItem) -> None:
    millis = self._delay(self._min_delay_millis, self._max_delay_millis)
    self._notify(RunEvent.CONSUMED, item, millis)
    self._consumed.append(item)

  def validate(self) -> str | None:
    consumed_ids = sorted(item.id for item in self._consumed)
    if consumed_ids == self._work_item_ids:
      return None
    return validation_mismatch(self._work_item_ids, consumed_ids)

  def _notify(self, event: RunEvent, item: DataItem, millis: int) -> None:
    if self._observer is not None:
      self._observer(event, item, millis)
