"""
Defines the abstract base class for run contexts.

A run context owns everything that belongs to one run: the work item ids,
the produce and consume steps, and the log of consumed items that the
post-run validation inspects.
"""

from abc import ABC
from abc import abstractmethod

from pcbench.types import DataItem
from pcbench.types import WorkItemId


class IRunContext(ABC):
  """
  Abstract base class for the state of a single run.

  Strategies only ever talk to a run through this interface: they read the
  ids, call `produce` for each of them and hand every produced item to
  `consume`. The executor calls `validate` once the strategy has returned.
  """

  @abstractmethod
  def get_work_item_ids(self) -> list[WorkItemId]:
    """
    Returns the ids to process, in ascending order.

    The returned list is never mutated by the context and may be read
    concurrently by producers.
    """
    raise NotImplementedError

  @abstractmethod
  def produce(self, work_item_id: WorkItemId) -> DataItem:
    """
    Turns one id into a data item.

    Safe to call from several threads at once; it touches no shared
    mutable state.

    Args:
        work_item_id: The id to produce an item for.

    Returns:
        The produced item.
    """
    raise NotImplementedError

  @abstractmethod
  def consume(self, item: DataItem) -> None:
    """
    Records an item as consumed.

    Not internally synchronized. Callers must make sure at most one
    `consume` call runs at a time.

    Args:
        item: The item to consume.
    """
    raise NotImplementedError

  @abstractmethod
  def validate(self) -> str | None:
    """
    Checks that every id was consumed exactly once.

    Returns:
        None on success, otherwise a ValidationMismatch description.
    """
    raise NotImplementedError
