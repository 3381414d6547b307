import logging

from pcbench.types import DataItem
from pcbench.types import Observer
from pcbench.types import RunEvent

_trace_logger = logging.getLogger("pcbench.trace")


def logging_observer(logger: logging.Logger | None = None, level: int = logging.DEBUG) -> Observer:
  """Build an observer that logs every produce and consume event.

  Args:
      logger: Where to log. Defaults to the "pcbench.trace" logger.
      level: Level of the emitted records.

  Returns:
      An observer logging lines like "Produced Data Id: 3 SomeString: ...".
  """
  target = logger or _trace_logger

  def observe(event: RunEvent, item: DataItem, millis: int) -> None:
    target.log(level, "%s %s", event, item)

  return observe


def compose_observers(*observers: Observer) -> Observer:
  """Fan every event out to several observers, in the given order."""

  def observe(event: RunEvent, item: DataItem, millis: int) -> None:
    for observer in observers:
      observer(event, item, millis)

  return observe
